from __future__ import annotations


class ContractViolation(IndexError):
    """Raised when a caller passes an index or range outside the list bounds."""
