"""Classic sorting algorithms; each returns a new sorted list."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from typing import Any, Callable, Optional


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Bubble sort, stopping early once a pass makes no swap."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        swapped = False
        for j in range(end):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


def counting_sort(values: Iterable[int], max_key: Optional[int] = None) -> list[int]:
    """Counting sort of integers in ``0..max_key``.

    ``max_key`` defaults to the largest value given.
    """
    items = list(values)
    if max_key is None:
        max_key = max(items, default=0)
    if max_key < 0:
        raise ValueError("max_key must not be negative")
    counts = [0] * (max_key + 1)
    for value in items:
        if not 0 <= value <= max_key:
            raise ValueError(f"{value} is outside the range 0..{max_key}")
        counts[value] += 1
    return [key for key, count in enumerate(counts) for _ in range(count)]


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Insertion sort."""
    items = list(values)
    for i in range(1, len(items)):
        current = items[i]
        j = i - 1
        while j >= 0 and items[j] > current:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = current
    return items


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Stable top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) + 1) // 2
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _partition(items: list[Any], lo: int, hi: int) -> int:
    pivot = items[lo]
    start, end = lo, hi
    while start < end:
        while start < hi and items[start] <= pivot:
            start += 1
        while items[end] > pivot:
            end -= 1
        if start < end:
            items[start], items[end] = items[end], items[start]
    items[lo], items[end] = items[end], items[lo]
    return end


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Quicksort with the first element of each range as pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        lo, hi = pending.pop()
        if lo >= hi:
            continue
        pivot_index = _partition(items, lo, hi)
        pending.append((lo, pivot_index - 1))
        pending.append((pivot_index + 1, hi))
    return items


def radix_sort(values: Iterable[int]) -> list[int]:
    """Least-significant-digit radix sort of non-negative integers."""
    items = list(values)
    if any(value < 0 for value in items):
        raise ValueError("radix sort needs non-negative integers")
    if not items:
        return items
    largest = max(items)
    exp = 1
    while largest // exp > 0:
        buckets: list[list[int]] = [[] for _ in range(10)]
        for value in items:
            buckets[(value // exp) % 10].append(value)
        items = [value for bucket in buckets for value in bucket]
        exp *= 10
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Selection sort, swapping only when a smaller element is found."""
    items = list(values)
    for i in range(len(items) - 1):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        if smallest != i:
            items[i], items[smallest] = items[smallest], items[i]
    return items


_ALGORITHMS: dict[str, Callable[[list[int]], list[int]]] = {
    "bubble": bubble_sort,
    "counting": counting_sort,
    "insertion": insertion_sort,
    "merge": merge_sort,
    "quick": quick_sort,
    "radix": radix_sort,
    "selection": selection_sort,
}


def _read_ints(count: int, prompt: str) -> list[int]:
    numbers: list[int] = []
    while len(numbers) < count:
        numbers.extend(int(token) for token in input(prompt).split())
        prompt = ""
    return numbers[:count]


def _format(values: Iterable[int]) -> str:
    return " ".join(str(value) for value in values)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Sort integers given on the command line or typed in."""
    parser = argparse.ArgumentParser(description="Sort integers.")
    parser.add_argument("algorithm", choices=sorted(_ALGORITHMS))
    parser.add_argument("values", nargs="*", type=int)
    parser.add_argument("--max-key", type=int, default=None, help="highest key for counting sort")
    args = parser.parse_args(argv)

    try:
        values = args.values
        if not values:
            count = int(input("Enter the number of elements: ").strip())
            values = _read_ints(count, "Enter the elements: ")
        if args.algorithm == "counting":
            result = counting_sort(values, args.max_key)
        else:
            if args.algorithm == "merge":
                print("Given array: " + _format(values))
            result = _ALGORITHMS[args.algorithm](values)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    except EOFError:
        print()
        return 1

    print("Sorted array: " + _format(result))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())