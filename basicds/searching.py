"""Linear and binary search over sequences."""

from __future__ import annotations

import argparse
import bisect
from collections.abc import Iterable, Sequence
from typing import Any, Optional


def binary_search(values: Sequence[Any], target: Any) -> Optional[int]:
    """Return an index of ``target`` in the sorted ``values``, or None if absent."""
    index = bisect.bisect_left(values, target)
    if index < len(values) and values[index] == target:
        return index
    return None


def linear_search(values: Iterable[Any], target: Any) -> Optional[int]:
    """Return the index of the first occurrence of ``target``, or None if absent."""
    for index, value in enumerate(values):
        if value == target:
            return index
    return None


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Search a list of integers for a target given on the command line."""
    parser = argparse.ArgumentParser(description="Search integers.")
    parser.add_argument("method", choices=["binary", "linear"])
    parser.add_argument("target", type=int)
    parser.add_argument("values", nargs="*", type=int)
    args = parser.parse_args(argv)

    if args.method == "binary":
        found = binary_search(args.values, args.target)
        if found is None:
            print("Element not found")
        else:
            print(f"Element found at index {found}")
    else:
        found = linear_search(args.values, args.target)
        if found is None:
            print(f"{args.target} is not present in the array.")
        else:
            print(f"{args.target} is present at index {found}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())