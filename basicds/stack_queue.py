"""Queue built from two bounded stacks."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Generic, Optional, TypeVar

from basicds.array_queue import (
    DEFAULT_CAPACITY,
    QueueEmptyError,
    QueueFullError,
    _check_capacity,
    _Listing,
    _make_parser,
    _run_menu,
    _value_action,
)

T = TypeVar("T")

_MENU = "\nEnter 1.ENQUEUE  2.DEQUEUE  3.DISPLAY  4.EXIT: "


class TwoStackQueue(_Listing, Generic[T]):
    """Queue whose items live on one stack, reversed through a second on dequeue."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self.capacity = _check_capacity(capacity)
        self._inbox: list[T] = []
        self._outbox: list[T] = []

    def enqueue(self, value: T) -> None:
        """Push ``value`` onto the input stack."""
        if len(self._inbox) == self.capacity:
            raise QueueFullError("QUEUE OVERFLOW!!")
        self._inbox.append(value)

    def dequeue(self) -> T:
        """Remove and return the oldest value."""
        if not self._inbox:
            raise QueueEmptyError("QUEUE UNDERFLOW!!")
        while self._inbox:
            self._outbox.append(self._inbox.pop())
        value = self._outbox.pop()
        while self._outbox:
            self._inbox.append(self._outbox.pop())
        return value

    def __len__(self) -> int:
        return len(self._inbox)

    def __iter__(self) -> Iterator[T]:
        yield from list(self._inbox)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the interactive two-stack queue menu."""
    args = _make_parser("Interactive queue built from two stacks.").parse_args(argv)
    queue: TwoStackQueue[int] = TwoStackQueue(args.capacity)

    def display() -> None:
        if not queue:
            print("QUEUE UNDERFLOW!!")
        print("Queue elements: " + " ".join(str(item) for item in queue))

    actions = {
        1: _value_action("Enter the data for the QUEUE: ", queue.enqueue),
        2: lambda: print(f"{queue.dequeue()} is dequeued"),
        3: display,
    }
    return _run_menu(
        _MENU, actions, exit_choice=4, farewell="EXITING...", invalid="Enter a VALID choice!"
    )


if __name__ == "__main__":
    raise SystemExit(main())