from .clone import clone
from .equality import equal, equal_func
from .errors import ContractViolation
from .mutate import delete, insert
from .ordering import sort
from .search import NOT_FOUND, contains, index, index_func

__all__ = [
    "equal",
    "equal_func",
    "index",
    "index_func",
    "contains",
    "NOT_FOUND",
    "clone",
    "sort",
    "insert",
    "delete",
    "ContractViolation",
]
