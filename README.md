# hwkit

A small collection of classic data structures and algorithms in plain Python.
It has no third-party dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Contents

| Module | Contents |
| --- | --- |
| `hwkit.palindrome` | `strip_spaces`, `is_palindrome`: a palindrome check that ignores spaces |
| `hwkit.binary` | `binary_to_decimal`, `BinaryFormatError`: turns a binary digit string into a decimal string |
| `hwkit.stack` | `Stack`: a LIFO stack with `push`, `pop`, `is_empty` and `len()` |
| `hwkit.two_stack_queue` | `TwoStackQueue`: a FIFO queue built from two stacks, with `enqueue`, `dequeue`, `is_empty` and `len()` |
| `hwkit.linked_list` | `LinkedList`, `Position`, `delete_odd_indexes`, `only_odd_values` |
| `hwkit.tree` | `Node`: a binary tree node with `left`, `right` and in-order traversal (`in_order`) |
| `hwkit.tree_sort` | `insert_into_search_tree`, `tree_sort`, `is_sorted` |
| `hwkit.partition` | `Partition`, `partition_numbers`, `partition_file` |
| `hwkit.graph` | `Graph`, `GraphError`: a directed graph that can report the vertices from which every vertex is reachable |

## Examples

```python
from hwkit.palindrome import is_palindrome
from hwkit.binary import binary_to_decimal
from hwkit.stack import Stack
from hwkit.two_stack_queue import TwoStackQueue
from hwkit.tree_sort import tree_sort

is_palindrome("never odd or even")     # True
binary_to_decimal("10100")             # "20"

stack = Stack()
stack.push(1)
stack.push(2)
stack.pop()                            # 2

queue = TwoStackQueue()
queue.enqueue(1)
queue.enqueue(2)
queue.dequeue()                        # 1

tree_sort([1, -2, 94, 94, 0, 5])       # [-2, 0, 1, 5, 94, 94]
```

`binary_to_decimal` accepts at most 31 digits, and only the characters `0` and `1`.

### Linked list

A `LinkedList` has a sentinel head. You insert and remove values *after* a
position, and `head()` returns the sentinel, which addresses the front of the list.

```python
from hwkit.linked_list import LinkedList, delete_odd_indexes, only_odd_values

items = LinkedList([1, 2, 3, 4, 5])
items.insert_after(items.head(), 0)    # list is now 0, 1, 2, 3, 4, 5
items.remove_after(items.head())       # 0
delete_odd_indexes(items)
list(items)                            # [1, 3, 5]
only_odd_values(items)                 # True
```

### Graphs

A graph can be built from an adjacency matrix written as text. The first
integer is the vertex count, and the row-major matrix entries follow it. A
non-zero entry in row `r`, column `c` is an edge from `c` to `r`. Reading stops
at the first token that is not an integer.

```python
from hwkit.graph import Graph

graph = Graph.from_matrix_text("2\n0 1\n0 0\n")
print(graph.format_matrix())
graph.good_vertices()                  # [False, True]
```

To read the same format from a file, use `Graph.from_matrix_file(path)`.
Graphs can also be built by hand with `Graph(initial_size)`, `add_vertex(key)`
and `connect(key1, key2)`. Adding a vertex with a key beyond the current size
makes the graph grow.

### Partitioning

`partition_numbers` splits integers into three groups: those below `a`, those
in `[a, b]` and those above `b`. Each group keeps the input order.

```python
from hwkit.partition import partition_numbers

parts = partition_numbers([1, 7, 12, 5, 10], 5, 10)
parts.less, parts.between, parts.greater   # [1], [7, 5, 10], [12]
list(parts)                                # [1, 7, 5, 10, 12]
```

`partition_file(path, a, b)` does the same for whitespace-separated integers
read from a file.

## Errors

Errors are raised as exceptions:

- `BinaryFormatError` (a `ValueError`) for bad binary input.
- `GraphError` for invalid graph operations or malformed matrix text.
- `IndexError` when popping from an empty stack, dequeuing from an empty queue, or removing past the end of a linked list.
- `OSError` when a file cannot be read.

## What it does not do

This is a library only. It has no command-line program, and it stores nothing
between calls. Files are only read, by `partition_file` and
`Graph.from_matrix_file`.