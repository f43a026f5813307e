"""Fixed-capacity queues backed by arrays, and the pieces the queue menus share."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Iterator, Mapping, Sequence
from typing import Generic, Optional, TypeVar

T = TypeVar("T")

DEFAULT_CAPACITY = 5

_MENU = "\nenter 1.ENQUEUE  2.DEQUEUE  3.PEEK  4.DISPLAY  5.EXIT : "


class QueueEmptyError(IndexError):
    """Raised when removing from or inspecting an empty queue."""


class QueueFullError(OverflowError):
    """Raised when adding to a queue that has no free slot."""


def _check_capacity(capacity: int) -> int:
    if capacity < 1:
        raise ValueError("capacity must be at least 1")
    return capacity


class _Listing:
    """Mixin giving an iterable container a repr of its items."""

    def __repr__(self) -> str:
        items = list(self)  # type: ignore[call-overload]
        capacity = getattr(self, "capacity", None)
        suffix = "" if capacity is None else f", capacity={capacity}"
        return f"{type(self).__name__}({items!r}{suffix})"


class _Ring(_Listing, Generic[T]):
    """Circular buffer of fixed capacity."""

    def __init__(self, capacity: int) -> None:
        self.capacity = _check_capacity(capacity)
        self._slots: list[Optional[T]] = [None] * self.capacity
        self._head = 0
        self._size = 0

    def _slot(self, offset: int) -> int:
        return (self._head + offset) % self.capacity

    def _require_room(self) -> None:
        if self._size == self.capacity:
            raise QueueFullError("QUEUE is FULL!!")

    def _require_items(self) -> None:
        if not self._size:
            raise QueueEmptyError("QUEUE is EMPTY!!")

    def _take(self, index: int) -> T:
        value = self._slots[index]
        self._slots[index] = None
        self._size -= 1
        return value  # type: ignore[return-value]

    def _push_back(self, value: T) -> None:
        self._require_room()
        self._slots[self._slot(self._size)] = value
        self._size += 1

    def _pop_front(self) -> T:
        self._require_items()
        index = self._head
        self._head = self._slot(1)
        return self._take(index)

    def _first(self) -> T:
        self._require_items()
        return self._slots[self._head]  # type: ignore[return-value]

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        for offset in range(self._size):
            yield self._slots[self._slot(offset)]  # type: ignore[misc]


class ArrayQueue(_Listing, Generic[T]):
    """Linear array queue.

    Slots freed by ``dequeue`` are not reused until the queue becomes empty,
    so the queue may report itself full while holding fewer than
    ``capacity`` items.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self.capacity = _check_capacity(capacity)
        self._slots: list[T] = []
        self._head = 0

    def enqueue(self, value: T) -> None:
        """Add ``value`` at the rear."""
        if len(self._slots) == self.capacity:
            raise QueueFullError("QUEUE OVERFLOW!!")
        self._slots.append(value)

    def dequeue(self) -> T:
        """Remove and return the front value."""
        if not self:
            raise QueueEmptyError("QUEUE UNDERFLOW!!")
        value = self._slots[self._head]
        self._head += 1
        if self._head == len(self._slots):
            self._slots.clear()
            self._head = 0
        return value

    def peek(self) -> T:
        """Return the front value without removing it."""
        if not self:
            raise QueueEmptyError("QUEUE is EMPTY!!")
        return self._slots[self._head]

    def __len__(self) -> int:
        return len(self._slots) - self._head

    def __iter__(self) -> Iterator[T]:
        yield from self._slots[self._head:]


class CircularArrayQueue(_Ring[T]):
    """Circular array queue holding up to ``capacity`` items."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        super().__init__(capacity)

    def enqueue(self, value: T) -> None:
        """Add ``value`` at the rear."""
        self._push_back(value)

    def dequeue(self) -> T:
        """Remove and return the front value."""
        return self._pop_front()

    def peek(self) -> T:
        """Return the front value without removing it."""
        return self._first()

    def __len__(self) -> int:
        return super().__len__()

    def __iter__(self) -> Iterator[T]:
        return super().__iter__()


def _ask_int(prompt: str) -> Optional[int]:
    """Read an integer from standard input; None if the line is not one."""
    try:
        return int(input(prompt).strip())
    except ValueError:
        return None


def _value_action(prompt: str, handler: Callable[[int], None]) -> Callable[[], None]:
    """Menu action that reads an integer and hands it to ``handler``."""

    def action() -> None:
        value = _ask_int(prompt)
        if value is None:
            print("Invalid data!!")
        else:
            handler(value)

    return action


def _show(items: object, empty_message: str, prefix: str = "", sep: str = "  ") -> None:
    """Print the items of a container, or ``empty_message`` if it has none."""
    if items:
        print(prefix + sep.join(str(item) for item in items))  # type: ignore[attr-defined]
    else:
        print(empty_message)


def _make_parser(description: str, *, capacity: bool = True) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=description)
    if capacity:
        parser.add_argument("--capacity", type=int, default=DEFAULT_CAPACITY)
    return parser


def _run_menu(
    prompt: str,
    actions: Mapping[int, Callable[[], None]],
    exit_choice: int,
    farewell: str,
    invalid: str = "Invalid choice!!",
) -> int:
    """Run a numbered menu until the exit choice or the end of input."""
    while True:
        try:
            choice = _ask_int(prompt)
            if choice == exit_choice:
                print(farewell)
                return 0
            action = actions.get(choice) if choice is not None else None
            if action is None:
                print(invalid)
                continue
            try:
                action()
            except (QueueEmptyError, QueueFullError) as exc:
                print(exc)
        except EOFError:
            print()
            return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the interactive queue menu."""
    parser = _make_parser("Interactive array-backed queue.")
    parser.add_argument("--circular", action="store_true", help="use the circular queue")
    args = parser.parse_args(argv)

    queue: ArrayQueue[int] | CircularArrayQueue[int]
    if args.circular:
        queue = CircularArrayQueue(args.capacity)
        added, removed = "is enqueued", "is dequeued"
    else:
        queue = ArrayQueue(args.capacity)
        added, removed = "is added to the queue", "is removed from the queue"

    def enqueue(value: int) -> None:
        queue.enqueue(value)
        print(f"{value} {added}")

    actions = {
        1: _value_action("enter the data for the queue: ", enqueue),
        2: lambda: print(f"{queue.dequeue()} {removed}"),
        3: lambda: print(f"{queue.peek()} is the front element"),
        4: lambda: _show(queue, "QUEUE is EMPTY!!"),
    }
    return _run_menu(_MENU, actions, exit_choice=5, farewell="EXITING.... ")


if __name__ == "__main__":
    raise SystemExit(main())