# dsakit

A small collection of classic data structures and algorithms in plain Python,
with no third-party dependencies.

## What is inside

| Module               | Contents                                                                          |
|----------------------|-----------------------------------------------------------------------------------|
| `dsakit.sorting`     | `bubble_sort`, `insertion_sort`, `selection_sort`, `merge_sort`, `quick_sort`, `heap_sort`, `merge_sorted` |
| `dsakit.searching`   | `linear_search`, `binary_search`, `report`                                        |
| `dsakit.arrays`      | `replace_at`, `insert_at`, `delete_at`, `delete_value`                            |
| `dsakit.bst`         | `Node`, `BinarySearchTree`, `is_bst`, `inorder_iterative`, `preorder_iterative`, `postorder_iterative` |
| `dsakit.graph`       | `Graph` with `bfs` and `dfs`                                                      |
| `dsakit.linkedlist`  | `SinglyLinkedList`, `DoublyLinkedList`, `DoublyNode`                              |
| `dsakit.queues`      | `CircularQueue`, `QueueFullError`, `QueueEmptyError`                              |
| `dsakit.stack`       | `Stack`, `StackOverflowError`, `StackUnderflowError`, `parentheses_balanced`, `brackets_balanced` |
| `dsakit.mathfuncs`   | `is_armstrong`, `factorial`, `fibonacci`, `fibonacci_series`, `power`, `is_prime`, `multiplication_row`, `odd_elements` |
| `dsakit.text`        | `CharClass`, `classify_char`, `characters`, `reverse`, `length`                   |
| `dsakit.calculator`  | `Operation`, `calculate`, `swap`                                                  |
| `dsakit.arraystats`  | `smallest_and_largest`, `reversed_values`, `sum_and_average`                      |

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Using the library

### Sorting and searching

Every sort returns a new sorted list and leaves its input alone.

```python
from dsakit.sorting import heap_sort, merge_sorted
from dsakit.searching import binary_search, linear_search

heap_sort([12, 11, 13, 5, 6, 7])    # [5, 6, 7, 11, 12, 13]
merge_sorted([1, 3, 5], [2, 4, 6])  # [1, 2, 3, 4, 5, 6]

linear_search([4, 7, 4], 4)         # [0, 2]  every matching index
binary_search([1, 2, 3, 4, 5], 9)   # []      not found
```

`binary_search` expects a sorted sequence and returns each index at which it
found the target while narrowing the range; the last index is the leftmost
occurrence.

### Editing arrays

The functions in `dsakit.arrays` return edited copies. An index outside the
array raises `IndexError`; `insert_at` only accepts an existing position.
`delete_value` removes every occurrence and raises `ValueError` if there is
none.

```python
from dsakit.arrays import delete_value, insert_at

insert_at([7, 14, 28, 35], 1, 10)   # [7, 10, 14, 28, 35]
delete_value([1, 2, 1, 3], 1)       # [2, 3]
```

### Binary search trees

```python
from dsakit.bst import BinarySearchTree, is_bst

tree = BinarySearchTree([50, 30, 20, 40, 70, 60, 80])
tree.delete(20)
40 in tree          # True
tree.inorder()      # [30, 40, 50, 60, 70, 80]
tree.min_value()    # 30
is_bst(tree.root)   # True
```

Duplicate values are ignored on insertion. `inorder_iterative`,
`preorder_iterative` and `postorder_iterative` walk any tree of `Node`
objects without recursion.

### Graphs

```python
from dsakit.graph import Graph

graph = Graph(4)
graph.add_edge(0, 1)
graph.add_edge(0, 2)
graph.add_edge(1, 3)
graph.bfs(0)   # [0, 1, 2, 3]
graph.dfs(0)   # [0, 1, 3, 2]
```

Edges are undirected; neighbours are visited in ascending order. Vertices out
of range raise `IndexError`.

### Linked lists, queues and stacks

Bounded containers raise instead of silently dropping values.

```python
from dsakit.linkedlist import DoublyLinkedList, SinglyLinkedList
from dsakit.queues import CircularQueue
from dsakit.stack import Stack, brackets_balanced

items = SinglyLinkedList([1, 2, 3])
items.insert_at(1, 9)
list(items)           # [1, 9, 2, 3]

doubly = DoublyLinkedList([10, 20, 30])
doubly.insert_after(doubly.search(20), 25)
list(doubly)          # [10, 20, 25, 30]

queue = CircularQueue(5)
queue.enqueue(10)
queue.dequeue()       # 10  (QueueEmptyError when empty)

stack = Stack(3)
stack.push(1)
stack.pop()           # 1   (StackUnderflowError when empty)

brackets_balanced("{[()]}")  # True
brackets_balanced("([)]")    # False
```

### Small helpers

```python
from dsakit.calculator import calculate
from dsakit.mathfuncs import fibonacci_series, is_prime
from dsakit.text import CharClass, classify_char

calculate(-7, 2, 4)         # -3  division truncates toward zero
fibonacci_series(5)         # [0, 1, 1, 2, 3]
is_prime(13)                # True
classify_char("a")          # CharClass.SMALL
```

## Command-line programs

The commands take their input as command-line arguments; each has `--help`.

```
dsakit-sort -a heap 12 11 13 5 6 7
dsakit-search 4 1 2 3 4 5
dsakit-array insert 1 10 7 14 28 35
dsakit-array delete-value 1 1 2 1 3
dsakit-bst 50 30 20 40 70 60 80 -d 20 -d 30
dsakit-graph 4 0 -e 0 1 -e 0 2 -e 1 3 -t both
dsakit-linkedlist insert 1 9 3 2 1
dsakit-linkedlist doubly
dsakit-queue -c 5 10 20 dequeue show
dsakit-stack stack 3 1 2 3 -p 1 -k 1
dsakit-stack match "{[()]}" -a
dsakit-calc calc 7 2 4
dsakit-calc swap 1 2
```

- `dsakit-sort` chooses the algorithm with `-a` (`bubble` by default).
- `dsakit-array` has the sub-commands `replace`, `insert`, `delete`,
  `delete-value`, `search` and `show`.
- `dsakit-bst` with no values runs a demonstration tree and deletions.
- `dsakit-linkedlist` has `push-front`, `insert`, `delete`, `count` and
  `doubly`; values given to the singly linked list commands are each pushed
  to the front, so the list holds them in reverse order.
- `dsakit-queue` takes integers to enqueue and the words `dequeue` and
  `show`; with no operations it runs a demonstration.
- `dsakit-stack match` checks round parentheses only unless `-a` is given.
- `dsakit-calc calc` takes the choice 1 add, 2 subtract, 3 multiply,
  4 divide, 5 modulo.

A command exits with status 1 when the operation it was asked for fails (an
invalid index, an unknown choice, unbalanced brackets).

## What it does not do

The containers live in memory only; nothing is saved between runs. The
helpers in `dsakit.mathfuncs`, `dsakit.text` and `dsakit.arraystats` are
library functions only and have no commands of their own.