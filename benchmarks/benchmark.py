import random
from pyinstrument import Profiler
from slicekit import delete, insert, sort

def make_input(size, seed=1):
    rnd = random.Random(seed)
    return [rnd.randint(0, size) for _ in range(size)]

def benchmark_large(*, iterations=10, size=100_000, html=None):
    print(f"Generated {size} values per iteration")

    profiler = Profiler()
    profiler.start()

    print(f"Starting computation ({iterations} iterations)...")
    for _ in range(iterations):
        s = make_input(size)
        sort(s, lambda a, b: a < b)
        for i in range(0, 1000):
            s = insert(s, i * 7, -i)
        s = delete(s, len(s) // 4, len(s) // 2)
    print("Computation finished.")

    profiler.stop()

    profiler.print()

    # Optional: save to HTML
    if html is not None:
        with open(html, "w") as f:
            f.write(profiler.output_html())

if __name__ == "__main__":
    benchmark_large(html="slicekit_profile.html")
