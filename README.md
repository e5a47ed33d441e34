# dsakit

Small, readable implementations of classic data structures and sorting
algorithms: positional insertion and deletion on lists, binary heaps, a
bounded queue and stack, a singly linked list, and five comparison sorts.

## Installation

```
pip install dsakit
```

To run the test suite:

```
pip install "dsakit[test]"
pytest
```

## Arrays (`dsakit.arrays`)

Positions are 1-based. `insert_at` and `delete_at` leave their input alone
and return a new list.

```python
from dsakit.arrays import insert_at, delete_at, format_items

values = insert_at([10, 20, 30], 2, 15)   # [10, 15, 20, 30]
values = delete_at(values, 1)             # [15, 20, 30]
print(format_items(values))               # "15 20 30"
```

`insert_at` accepts positions 1 to `len(items) + 1`; `delete_at` accepts
1 to `len(items)`. Any other position raises `IndexError`.

## Heaps (`dsakit.heap`)

The whole list is the heap. Heap positions are 1-based: position `i` is
`values[i - 1]`, its children are at `left(i)` and `right(i)` and its parent
at `parent(i)`.

```python
from dsakit.heap import build_max_heap, build_min_heap, is_max_heap, is_min_heap, heap_sort

heap = [19, 7, 12, 3, 5, 17, 10, 1, 2]
build_max_heap(heap)          # in place
assert is_max_heap(heap)

build_min_heap(heap)          # in place
assert is_min_heap(heap)

heap_sort(heap)               # in place, ascending
assert heap == [1, 2, 3, 5, 7, 10, 12, 17, 19]
```

`max_heapify(values, size, i)` and `min_heapify(values, size, i)` sink
position `i` within the first `size` elements. A `size` outside
`0..len(values)` or a position below 1 raises `ValueError`.

## Sorting (`dsakit.sorting`)

Every sort takes any iterable and returns a new ascending list.

```python
from dsakit.sorting import (
    bubble_sort, insertion_sort, selection_sort, merge_sort, heapsort, merge,
)

data = [5, 2, 9, 1]
print(bubble_sort(data))      # [1, 2, 5, 9]; data is unchanged
print(merge_sort([3, 1, 2]))  # [1, 2, 3]
print(heapsort((4, 3, 8)))    # [3, 4, 8]
print(merge([1, 4], [2, 3]))  # [1, 2, 3, 4]
```

`merge` combines two already ascending sequences.

## Queue (`dsakit.queue_array`)

`ArrayQueue(capacity=10)` is a linear, non-circular queue. Each enqueue uses
the next free slot, and dequeued slots are only freed once the queue has been
emptied completely, so `capacity` enqueues without emptying the queue in
between overflow even if values were dequeued meanwhile.

```python
from dsakit.queue_array import ArrayQueue, QueueOverflowError, QueueUnderflowError

queue = ArrayQueue(10)
queue.enqueue(1)
queue.enqueue(2)
queue.dequeue()               # 1
print(list(queue), len(queue))  # [2] 1
```

Enqueuing with no free slot raises `QueueOverflowError`; dequeuing from an
empty queue raises `QueueUnderflowError`. A capacity below 1 raises
`ValueError`.

## Stack (`dsakit.stack_array`)

```python
from dsakit.stack_array import ArrayStack, StackOverflowError, StackUnderflowError

stack = ArrayStack(10)
stack.push(1)
stack.push(2)
stack.push(3)
stack.pop()                   # 3
print(list(stack))            # [2, 1], top of the stack first
```

Pushing onto a full stack raises `StackOverflowError`; popping an empty one
raises `StackUnderflowError`. A capacity below 1 raises `ValueError`.

## Singly linked list (`dsakit.linked_list`)

Positions are 1-based.

```python
from dsakit.linked_list import SinglyLinkedList

items = SinglyLinkedList([1, 2, 3])
items.append(4)               # [1, 2, 3, 4]
items.prepend(0)              # [0, 1, 2, 3, 4]
items.insert_at(3, 99)        # [0, 1, 99, 2, 3, 4]
items.delete_first()          # returns 0
items.delete_last()           # returns 4
items.delete_at(2)            # returns 99
items.reverse()
print(list(items), len(items))  # [3, 2, 1] 3
```

`insert_at` and `delete_at` accept positions 1 to the current length; to add
at the end, use `append`. Other positions, and deleting from an empty list,
raise `IndexError`. The list's nodes are `Node` objects with `value` and
`next`, reachable from `head`.

## What it does not do

`dsakit` is a library only. It has no command-line program and no interactive
prompts; all input and output goes through the functions and classes above.