# basicds

Textbook data structures and algorithms as plain Python classes and
functions:

- **Queues** (`basicds.array_queue`, `basicds.linked_queue`,
  `basicds.stack_queue`): a linear array queue (`ArrayQueue`), a circular
  array queue (`CircularArrayQueue`), a singly linked queue (`LinkedQueue`),
  a circular linked queue (`CircularLinkedQueue`), and a queue built from
  two stacks (`TwoStackQueue`).
- **A double-ended queue** on a circular array (`basicds.deque.ArrayDeque`).
- **Stacks** (`basicds.stacks`): a linked stack (`LinkedStack`) and a
  fixed-capacity array stack (`ArrayStack`).
- **Sorting** (`basicds.sorting`): `bubble_sort`, `counting_sort`,
  `insertion_sort`, `merge_sort`, `quick_sort`, `radix_sort`,
  `selection_sort`.
- **Searching** (`basicds.searching`): `binary_search`, `linear_search`.

It needs Python 3.10 or later and nothing outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Containers

Every container supports `len()` and iteration: front to back for queues
and the deque, top to bottom for stacks.

```python
from basicds.array_queue import CircularArrayQueue

queue = CircularArrayQueue(5)
for value in (10, 20, 30):
    queue.enqueue(value)

queue.peek()        # 10
queue.dequeue()     # 10
list(queue)         # [20, 30]
len(queue)          # 2
```

Bounded containers (`ArrayQueue`, `CircularArrayQueue`, `TwoStackQueue`,
`ArrayDeque`, `ArrayStack`) take a capacity, which must be at least 1
(otherwise `ValueError`). The queues and the deque default to 5, the array
stack to 100. Queue and deque operations raise `QueueEmptyError` (an
`IndexError`) when empty and `QueueFullError` (an `OverflowError`) when
full; both are defined in `basicds.array_queue`. The stacks raise
`StackEmptyError` and `StackFullError` from `basicds.stacks`.

`ArrayQueue` does not reuse slots freed by `dequeue` until it has been
emptied completely, so it can report itself full while holding fewer than
`capacity` items. `CircularArrayQueue` always holds up to `capacity`.

```python
from basicds.stacks import ArrayStack, StackFullError

stack = ArrayStack(2)
stack.push(1)
stack.push(2)
try:
    stack.push(3)
except StackFullError:
    print("stack is full")
```

The deque works at both ends:

```python
from basicds.deque import ArrayDeque

deque = ArrayDeque(5)
deque.push_back(2)
deque.push_front(1)
deque.front()       # 1
deque.back()        # 2
deque.pop_back()    # 2
```

`TwoStackQueue` offers `enqueue` and `dequeue` only; it has no `peek`.

## Sorting and searching

Each sort takes any iterable and returns a new sorted list, leaving the
input untouched.

```python
from basicds.sorting import merge_sort, counting_sort, radix_sort
from basicds.searching import binary_search, linear_search

merge_sort([5, 3, 9, 1])             # [1, 3, 5, 9]
counting_sort([3, 0, 2, 3], 3)       # [0, 2, 3, 3]
radix_sort([170, 45, 75, 802])       # [45, 75, 170, 802]

linear_search([4, 8, 15], 8)         # 1
binary_search([4, 8, 15], 15)        # 2
binary_search([4, 8, 15], 5)         # None
```

`counting_sort(values, max_key)` sorts integers in `0..max_key`; `max_key`
defaults to the largest value given, and a value outside that range raises
`ValueError`. `radix_sort` accepts only non-negative integers and raises
`ValueError` otherwise. Both searches return `None` when the target is
absent. `binary_search` expects sorted input; `linear_search` returns the
first matching index.

## Command-line programs

| Command                | Options                               | What it does                                   |
|------------------------|---------------------------------------|------------------------------------------------|
| `basicds-array-queue`  | `--capacity N`, `--circular`          | menu for `ArrayQueue` or `CircularArrayQueue`  |
| `basicds-linked-queue` | `--circular`                          | menu for `LinkedQueue` or `CircularLinkedQueue`|
| `basicds-deque`        | `--capacity N`                        | menu for `ArrayDeque`                          |
| `basicds-stack-queue`  | `--capacity N`                        | menu for `TwoStackQueue`                       |
| `basicds-stack`        | `--capacity N`, `--linked`            | menu for `ArrayStack`, or the linked-stack run |
| `basicds-sort`         | `ALGORITHM [VALUES...]`, `--max-key K`| sorts integers and prints them                 |
| `basicds-search`       | `METHOD TARGET [VALUES...]`           | searches integers with `binary` or `linear`    |

The menu programs read numbered choices from standard input and run until
the exit choice or the end of input. Errors such as a full or empty
container are printed and the menu carries on.

With `basicds-stack --linked`, the program keeps asking for values to push
until you answer `0` to "continue", then pops once, shows the top and
prints the stack.

`basicds-sort` takes one of `bubble`, `counting`, `insertion`, `merge`,
`quick`, `radix`, `selection`. If no values are given on the command line
it asks for a count and then the numbers. It exits with status 1 on bad
input. For example:

```
basicds-sort quick 5 3 9 1
Sorted array: 1 3 5 9
basicds-search linear 8 4 8 15
8 is present at index 1
```

## Limits

The containers live in memory only: the command-line programs start with
an empty container every time and keep nothing once they exit. None of the
containers is safe to share between threads without your own locking.