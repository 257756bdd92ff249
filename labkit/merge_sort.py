"""Merge sort with simple time and memory measurements."""

from __future__ import annotations

import argparse
import random
import time
import tracemalloc
from collections.abc import Sequence

DEFAULT_SIZES = (100, 1000, 5000, 10000)
MAX_RANDOM_VALUE = 10000


def merge(left: Sequence[int], right: Sequence[int]) -> list[int]:
    """Merge two sorted sequences into one sorted list, keeping left items first on ties."""
    result: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            result.append(left[i])
            i += 1
        else:
            result.append(right[j])
            j += 1
    result.extend(left[i:])
    result.extend(right[j:])
    return result


def merge_sort(arr: Sequence[int]) -> list[int]:
    """Return a sorted copy of ``arr``."""
    if len(arr) < 2:
        return list(arr)
    mid = len(arr) // 2
    return merge(merge_sort(arr[:mid]), merge_sort(arr[mid:]))


def generate_random_array(size: int, rng: random.Random | None = None) -> list[int]:
    """Return ``size`` random integers in ``[0, 10000)``."""
    rng = rng or random.Random()
    return [rng.randrange(MAX_RANDOM_VALUE) for _ in range(size)]


def measure_time(size: int) -> float:
    """Sort a random array of ``size`` items and return the elapsed seconds."""
    arr = generate_random_array(size)
    start = time.perf_counter()
    merge_sort(arr)
    return time.perf_counter() - start


def measure_memory(size: int) -> int:
    """Sort a random array of ``size`` items and return peak allocation in KB."""
    arr = generate_random_array(size)
    was_tracing = tracemalloc.is_tracing()
    if not was_tracing:
        tracemalloc.start()
    try:
        tracemalloc.reset_peak()
        baseline, _ = tracemalloc.get_traced_memory()
        merge_sort(arr)
        _, peak = tracemalloc.get_traced_memory()
    finally:
        if not was_tracing:
            tracemalloc.stop()
    return max(peak - baseline, 0) // 1024


def main(argv: Sequence[str] | None = None) -> int:
    """Report sorting time and memory for each array size."""
    parser = argparse.ArgumentParser(description="Benchmark merge sort.")
    parser.add_argument("sizes", nargs="*", type=int, default=list(DEFAULT_SIZES))
    args = parser.parse_args(argv)

    for size in args.sizes:
        elapsed = measure_time(size)
        print(f"Размер: {size}, Время: {elapsed * 1000:.3f}ms")
        print(f"Память: {measure_memory(size)} KB")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())