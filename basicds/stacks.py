"""Stacks: an unbounded linked stack and a fixed-capacity array stack."""

from __future__ import annotations

import argparse
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")

DEFAULT_CAPACITY = 100

_MENU = "Enter 1.push  2.pop  3.peek  4.display  5.exit: "


class StackEmptyError(IndexError):
    """Raised when popping from or inspecting an empty stack."""


class StackFullError(OverflowError):
    """Raised when pushing onto a stack that has no free slot."""


@dataclass(eq=False)
class _Node:
    data: Any
    link: Optional["_Node"] = None


class LinkedStack(Generic[T]):
    """Unbounded stack of linked nodes; iteration runs from top to bottom."""

    def __init__(self) -> None:
        self._top: Optional[_Node] = None
        self._size = 0

    def push(self, value: T) -> None:
        """Put ``value`` on top."""
        self._top = _Node(value, self._top)
        self._size += 1

    def pop(self) -> T:
        """Remove and return the top value."""
        if self._top is None:
            raise StackEmptyError("stack is empty!!")
        node = self._top
        self._top = node.link
        self._size -= 1
        return node.data

    def peek(self) -> T:
        """Return the top value without removing it."""
        if self._top is None:
            raise StackEmptyError("stack is empty!!")
        return self._top.data

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self._top
        while node is not None:
            yield node.data
            node = node.link

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class ArrayStack(Generic[T]):
    """Stack holding up to ``capacity`` items; iteration runs from top to bottom."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._items: list[T] = []

    def push(self, value: T) -> None:
        """Put ``value`` on top."""
        if len(self._items) >= self.capacity:
            raise StackFullError("Stack Overflow")
        self._items.append(value)

    def pop(self) -> T:
        """Remove and return the top value."""
        if not self._items:
            raise StackEmptyError("Stack Underflow")
        return self._items.pop()

    def peek(self) -> T:
        """Return the top value without removing it."""
        if not self._items:
            raise StackEmptyError("Stack Underflow")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        yield from reversed(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r}, capacity={self.capacity})"


def _ask_int(prompt: str) -> Optional[int]:
    text = input(prompt)
    try:
        return int(text.strip())
    except ValueError:
        return None


def _run_linked() -> int:
    stack: LinkedStack[int] = LinkedStack()
    try:
        while True:
            value = _ask_int("enter the value you want to push in stack: ")
            if value is None:
                print("Invalid data!!")
                continue
            stack.push(value)
            if _ask_int("do you wish to continue(0,1)? ") == 0:
                break
    except EOFError:
        print()

    try:
        print(f"{stack.pop()} popped out of stack")
    except StackEmptyError as exc:
        print(exc)
    try:
        print(f"{stack.peek()} is the top element of the stack")
    except StackEmptyError as exc:
        print(exc)
    if stack:
        print("stack: " + "  ".join(str(item) for item in stack))
    else:
        print("stack: stack is empty!!")
    return 0


def _run_array(capacity: int) -> int:
    stack: ArrayStack[int] = ArrayStack(capacity)
    while True:
        try:
            choice = _ask_int(_MENU)
            if choice == 1:
                value = _ask_int("Enter the value to be pushed: ")
                if value is None:
                    print("Invalid data!!")
                    continue
                try:
                    stack.push(value)
                except StackFullError as exc:
                    print(exc)
                else:
                    print(f"{value} pushed to stack")
            elif choice == 2:
                try:
                    print(f"{stack.pop()} popped from stack")
                except StackEmptyError as exc:
                    print(exc)
            elif choice == 3:
                try:
                    print(f"Top element is {stack.peek()}")
                except StackEmptyError as exc:
                    print(exc)
            elif choice == 4:
                if stack:
                    print("Stack elements are: " + " ".join(str(item) for item in stack))
                else:
                    print("Stack is empty")
            elif choice == 5:
                print("Exiting...")
                return 0
            else:
                print("Invalid choice")
        except EOFError:
            print()
            return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the interactive stack program."""
    parser = argparse.ArgumentParser(description="Interactive stack.")
    parser.add_argument("--linked", action="store_true", help="use the linked stack")
    parser.add_argument("--capacity", type=int, default=DEFAULT_CAPACITY)
    args = parser.parse_args(argv)
    if args.linked:
        return _run_linked()
    return _run_array(args.capacity)


if __name__ == "__main__":
    raise SystemExit(main())