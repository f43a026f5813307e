"""Unbounded queues built from singly linked nodes."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

from basicds.array_queue import (
    QueueEmptyError,
    _Listing,
    _make_parser,
    _run_menu,
    _show,
    _value_action,
)

T = TypeVar("T")

_MENU = "\nEnter 1.ENQUEUE  2.DEQUEUE  3.PEEK  4.DISPLAY  5.EXIT: "


@dataclass(eq=False)
class _Node:
    data: Any
    next: Optional["_Node"] = None


class _Chain(_Listing):
    """Counting base shared by the linked queues."""

    def __init__(self) -> None:
        self._size = 0

    def _require_items(self, node: Optional[_Node]) -> _Node:
        if node is None:
            raise QueueEmptyError("QUEUE is EMPTY!!")
        return node

    def __len__(self) -> int:
        return self._size


class LinkedQueue(_Chain, Generic[T]):
    """Queue holding references to both its front and rear nodes."""

    def __init__(self) -> None:
        super().__init__()
        self._front: Optional[_Node] = None
        self._rear: Optional[_Node] = None

    def enqueue(self, value: T) -> None:
        """Add ``value`` at the rear."""
        node = _Node(value)
        if self._rear is None:
            self._front = node
        else:
            self._rear.next = node
        self._rear = node
        self._size += 1

    def dequeue(self) -> T:
        """Remove and return the front value."""
        node = self._require_items(self._front)
        self._front = node.next
        if self._front is None:
            self._rear = None
        self._size -= 1
        return node.data

    def peek(self) -> T:
        """Return the front value without removing it."""
        return self._require_items(self._front).data

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self._front
        while node is not None:
            yield node.data
            node = node.next


class CircularLinkedQueue(_Chain, Generic[T]):
    """Queue whose rear node links back to the front node."""

    def __init__(self) -> None:
        super().__init__()
        self._rear: Optional[_Node] = None

    def enqueue(self, value: T) -> None:
        """Add ``value`` at the rear."""
        node = _Node(value)
        if self._rear is None:
            node.next = node
        else:
            node.next = self._rear.next
            self._rear.next = node
        self._rear = node
        self._size += 1

    def dequeue(self) -> T:
        """Remove and return the front value."""
        rear = self._require_items(self._rear)
        front = rear.next
        assert front is not None
        if front is rear:
            self._rear = None
        else:
            rear.next = front.next
        self._size -= 1
        return front.data

    def peek(self) -> T:
        """Return the front value without removing it."""
        front = self._require_items(self._rear).next
        assert front is not None
        return front.data

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self._rear.next if self._rear is not None else None
        for _ in range(self._size):
            assert node is not None
            yield node.data
            node = node.next


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the interactive linked queue menu."""
    parser = _make_parser("Interactive linked-list queue.", capacity=False)
    parser.add_argument("--circular", action="store_true", help="use the circular queue")
    args = parser.parse_args(argv)

    queue: LinkedQueue[int] | CircularLinkedQueue[int]
    queue = CircularLinkedQueue() if args.circular else LinkedQueue()

    def enqueue(value: int) -> None:
        queue.enqueue(value)
        if args.circular:
            print(f"{value} is enqueued")

    actions = {
        1: _value_action("Enter the data for the queue: ", enqueue),
        2: lambda: print(f"{queue.dequeue()} is dequeued"),
        3: lambda: print(f"{queue.peek()} is the front element"),
        4: lambda: _show(queue, "QUEUE is EMPTY!!"),
    }
    return _run_menu(_MENU, actions, exit_choice=5, farewell="EXITING....")


if __name__ == "__main__":
    raise SystemExit(main())