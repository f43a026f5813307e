"""Queues, a deque, stacks, sorting and searching algorithms, with small command-line programs."""

__version__ = "0.1.0"