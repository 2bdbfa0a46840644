# dsakit

A small collection of classic data structures and algorithms written in
plain Python with no third-party dependencies.

## Installation

```
pip install dsakit
```

## What is inside

### `dsakit.sorting`

`bubble_sort`, `count_sort`, `insertion_sort`, `merge_sort`, `quick_sort` and
`selection_sort`. Each takes any iterable, leaves it untouched and returns a
new sorted list. `bubble_sort` stops early after a pass with no swap.
`count_sort` handles non-negative integers only and raises `ValueError` for a
negative value.

### `dsakit.stack`

- `ArrayStack(size)`: a stack with a fixed capacity. `push` raises
  `OverflowError_` when it is full; `pop`, `top` and `bottom` raise
  `UnderflowError` when it is empty.
- `LinkedStack()`: a stack with no fixed capacity. Iterating yields values
  from top to bottom.

Both offer `push`, `pop`, `peek(position)`, `top`, `bottom`, `is_empty` and
`len()`; `ArrayStack` also has `is_full`. `peek` counts positions from 1 at
the top and raises `IndexError` for a position outside the stack.

### `dsakit.expressions`

- `infix_to_postfix(infix)`: converts an expression of single-character
  operands and the operators `+ - * /` to postfix.
- `precedence(ch)` and `is_operator(ch)`: the helpers it uses.
- `parentheses_balanced(expression)`: checks round brackets only.
- `brackets_balanced(expression)`: checks `()`, `[]` and `{}`, including
  correct nesting.

### `dsakit.linked_list`

- `Node`: a node with `data` and `next`.
- `LinkedList(values=())`: a singly linked list with `insert_first`,
  `insert_at(index, value)`, `append`, `insert_after(node, value)`,
  `delete_first`, `delete_at(index)`, `delete_last`, `delete_after(node)`,
  `remove(value)` and `node_at(index)`. Indexes start at 0. Inserts return the
  new node; deletes return the removed value. A bad index raises `IndexError`,
  a node not in the list or a missing value raises `ValueError`, and deleting
  from an empty list raises `UnderflowError`.
- `CircularLinkedList(values=())`: a list whose last node links back to the
  head, with `insert_first`. Iterating visits each value once.

### `dsakit.queues`

- `ArrayQueue(size)`: a linear queue over a fixed array; slots freed by
  `dequeue` are not reused, so it is full once `size` values have been
  enqueued in total.
- `CircularQueue(size)`: a ring buffer holding at most `size - 1` values
  (`size` must be at least 2).
- `DoubleEndedQueue(size)`: `enqueue_rear`, `enqueue_front`, `dequeue_front`
  and `dequeue_rear`; the front only has room where values were dequeued from
  the front.
- `LinkedQueue()`: an unbounded queue with `len()`.

All offer `is_empty` and iterate from front to rear; the bounded ones also
have `is_full`. Adding to a full queue raises `OverflowError_`; taking from an
empty queue raises `UnderflowError`.

### `dsakit.tree`

`TreeNode(data, left=None, right=None)` together with `preorder`,
`postorder` and `inorder` (each returns a list), `is_bst`, `search` and
`search_recursive` (each returns the node or `None`), `insert(root, key)`
(returns the root and raises `ValueError` for a key already present),
`inorder_predecessor(node)` and `delete(root, value)` (returns the new root).

### `dsakit.errors`

`OverflowError_` (a subclass of `OverflowError`) and `UnderflowError` (a
subclass of `IndexError`).

## Examples

```python
from dsakit.sorting import quick_sort
from dsakit.expressions import infix_to_postfix, brackets_balanced
from dsakit.stack import ArrayStack
from dsakit.errors import OverflowError_
from dsakit.tree import TreeNode, insert, inorder, search

quick_sort([8, 1, 7, 10, 5, 14, 5, 15, 1])
# [1, 1, 5, 5, 7, 8, 10, 14, 15]

infix_to_postfix("a-b+t/6")
# 'ab-t6/+'

brackets_balanced("{1*[4+(14-5)]}")
# True

stack = ArrayStack(2)
stack.push(1)
stack.push(2)
try:
    stack.push(3)
except OverflowError_:
    print("stack is full")

root = TreeNode(17)
for key in (10, 20, 5, 11, 9):
    insert(root, key)
inorder(root)
# [5, 9, 10, 11, 17, 20]
search(root, 11).data
# 11
```

## What it does not do

dsakit is a library only: it has no command-line program, and its structures
live in memory with no saving to or loading from disk.

## Running the tests

```
pip install -e ".[test]"
pytest
```