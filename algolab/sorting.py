"""Simple comparison sorts and a command that times one on random data."""

from __future__ import annotations

import argparse
import random
import time
from collections.abc import Iterable, Sequence
from typing import TypeVar

T = TypeVar("T")

RAND_MAX = 2**31 - 1
DEFAULT_COUNT = 1000


def bubble_sort(values: Iterable[T]) -> list[T]:
    """Return a sorted copy using the classic fixed-pass bubble sort."""
    items = list(values)
    n = len(items)
    for done in range(n - 1):
        for j in range(n - done - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def bubble_sort_early_exit(values: Iterable[T]) -> list[T]:
    """Return a sorted copy; stops as soon as a pass makes no swap."""
    items = list(values)
    limit = len(items)
    swapped = True
    while swapped:
        swapped = False
        limit -= 1
        for i in range(limit):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
                swapped = True
    return items


def insertion_sort(values: Iterable[T]) -> list[T]:
    """Return a sorted copy using insertion sort."""
    items = list(values)
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key
    return items


_ALGORITHMS = {
    "bubble": bubble_sort,
    "bubble-early-exit": bubble_sort_early_exit,
    "insertion": insertion_sort,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Sort random integers, print them and the time taken."""
    parser = argparse.ArgumentParser(description="Time a simple sort on random data.")
    parser.add_argument("count", nargs="?", type=int, default=DEFAULT_COUNT,
                        help="number of elements to sort")
    parser.add_argument("--algorithm", choices=sorted(_ALGORITHMS), default="bubble")
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)
    if args.count < 0:
        parser.error("count must not be negative")

    rng = random.Random(args.seed)
    data = [rng.randint(0, RAND_MAX) for _ in range(args.count)]

    start = time.perf_counter()
    result = _ALGORITHMS[args.algorithm](data)
    elapsed = time.perf_counter() - start

    print(" ".join(map(str, result)))
    print(f"Time taken: {elapsed} seconds")
    return 0