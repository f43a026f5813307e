"""Fixed-capacity double-ended queue on a circular array."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Optional, TypeVar

from basicds.array_queue import (
    DEFAULT_CAPACITY,
    _make_parser,
    _Ring,
    _run_menu,
    _show,
    _value_action,
)

T = TypeVar("T")

_MENU = (
    "\nEnter:\n1. Enqueue Front\n2. Enqueue Rear\n3. Dequeue Front\n"
    "4. Dequeue Rear\n5. Get Front\n6. Get Rear\n7. Display\n8. EXIT\n"
)


class ArrayDeque(_Ring[T]):
    """Deque holding up to ``capacity`` items in a circular buffer."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        super().__init__(capacity)

    def push_front(self, value: T) -> None:
        """Add ``value`` before the front."""
        self._require_room()
        self._head = self._slot(-1)
        self._slots[self._head] = value
        self._size += 1

    def push_back(self, value: T) -> None:
        """Add ``value`` after the rear."""
        self._push_back(value)

    def pop_front(self) -> T:
        """Remove and return the front value."""
        return self._pop_front()

    def pop_back(self) -> T:
        """Remove and return the rear value."""
        self._require_items()
        return self._take(self._slot(self._size - 1))

    def front(self) -> T:
        """Return the front value."""
        return self._first()

    def back(self) -> T:
        """Return the rear value."""
        self._require_items()
        return self._slots[self._slot(self._size - 1)]  # type: ignore[return-value]

    def __len__(self) -> int:
        return super().__len__()

    def __iter__(self) -> Iterator[T]:
        return super().__iter__()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the interactive deque menu."""
    args = _make_parser("Interactive array deque.").parse_args(argv)
    deque: ArrayDeque[int] = ArrayDeque(args.capacity)

    def push_front(value: int) -> None:
        deque.push_front(value)
        print(f"Element {value} is enqueued at front.")

    def push_back(value: int) -> None:
        deque.push_back(value)
        print(f"Element {value} is enqueued at rear.")

    actions = {
        1: _value_action("Enter data: ", push_front),
        2: _value_action("Enter data: ", push_back),
        3: lambda: print(f"Element {deque.pop_front()} is dequeued from front."),
        4: lambda: print(f"Element {deque.pop_back()} is dequeued from rear."),
        5: lambda: print(f"Front element is: {deque.front()}"),
        6: lambda: print(f"Rear element is: {deque.back()}"),
        7: lambda: _show(deque, "QUEUE is EMPTY!!", prefix="Deque elements are: "),
    }
    return _run_menu(_MENU, actions, exit_choice=8, farewell="Exiting...")


if __name__ == "__main__":
    raise SystemExit(main())