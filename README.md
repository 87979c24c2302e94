# dsakit

Compact, dependency-free implementations of classic data structures and
algorithms: stacks, queues, a max-heap, binary search trees, AVL trees,
tree traversals, palindrome and bracket checks.

## Installation

```
pip install dsakit
```

## Modules

- `dsakit.algo`: `second_max(values)` returns the second largest value of an
  iterable (a repeated maximum counts twice); it raises `ValueError` for
  fewer than two values.
- `dsakit.queues`: `TwoStackQueue`, a FIFO queue kept in two stacks, and
  `BoundedQueue(capacity=100)`, a queue over a fixed number of slots. Slots
  are reclaimed only once the queue has been emptied completely, so a queue
  that has used every slot stays full until it is drained.
- `dsakit.stacks`: `BoundedStack(capacity=100)` and `QueueStack`, a stack kept
  in a queue whose front is always the newest item.
- `dsakit.palindrome`: `is_palindrome(text)` and `is_palindrome_two_stacks(text)`,
  plus the `dsakit-palindrome` command.
- `dsakit.brackets`: checks for `()`, `[]`, `{}` and `<>`.
  `is_balanced(text)` returns a bool; `check_balanced(text)` returns the
  matched `(opening, closing)` pairs in the order they were closed and raises
  `BracketMismatch` (with `opening`, `closing` and `index`) at the first fault;
  `is_mirror_balanced(text)` accepts only texts whose first half is opening
  brackets mirrored by their closers, such as `"{([])}"`.
- `dsakit.heap`: `MaxHeap` with `insert`, `get_max`, `remove_max`, `is_empty`
  and `drain()`, which yields values from largest to smallest.
- `dsakit.avl`: `AVLTree` of unique integer keys (inserting a present key does
  nothing), with `insert`, `inorder`, `height`, iteration, `len` and `in`.
- `dsakit.bst`: `BinarySearchTree` (equal keys go right) with `insert`,
  `delete`, `min`, `inorder`, iteration, `len` and `in`.
- `dsakit.binary_tree`: `TreeNode` and the generators `preorder`, `inorder`
  and `postorder`.

## Usage

```python
from dsakit.algo import second_max
from dsakit.queues import TwoStackQueue, BoundedQueue
from dsakit.stacks import QueueStack
from dsakit.brackets import is_balanced, check_balanced
from dsakit.heap import MaxHeap
from dsakit.avl import AVLTree
from dsakit.bst import BinarySearchTree
from dsakit.binary_tree import TreeNode, preorder, inorder, postorder

second_max([3, 4, 6, 8, 1])   # 6

queue = TwoStackQueue()
queue.enqueue(1)
queue.enqueue(2)
queue.dequeue()               # 1

bounded = BoundedQueue(capacity=2)
bounded.enqueue(10)
bounded.peek()                # 10

stack = QueueStack()
stack.push(1)
stack.push(2)
stack.top()                   # 2

is_balanced("{([ ])}")        # True
check_balanced("([])")        # [('[', ']'), ('(', ')')]

heap = MaxHeap()
for value in (10, 5, 7, 3, 12):
    heap.insert(value)
list(heap.drain())            # [12, 10, 7, 5, 3]

tree = AVLTree()
for key in (9, 5, 10, 0, 6, 11, -1, 1, 2):
    tree.insert(key)
tree.inorder()                # [-1, 0, 1, 2, 5, 6, 9, 10, 11]

bst = BinarySearchTree()
for key in (8, 3, 1, 6, 7, 10, 14, 4):
    bst.insert(key)
bst.delete(10)
list(bst)                     # [1, 3, 4, 6, 7, 8, 14]

root = TreeNode(1, TreeNode(2, TreeNode(4)), TreeNode(3))
list(preorder(root))          # [1, 2, 4, 3]
list(inorder(root))           # [4, 2, 1, 3]
list(postorder(root))         # [4, 2, 3, 1]
```

Empty or full containers raise `QueueEmptyError`, `QueueFullError`,
`StackEmptyError` or `StackFullError` (subclasses of `IndexError` and
`OverflowError`) rather than returning sentinel values. `MaxHeap.get_max`
raises `IndexError` on an empty heap, while `remove_max` then does nothing.

## Command line

Check whether a string is a palindrome:

```
dsakit-palindrome racecar
```

It prints `Palindrome` or `Not Palindrome`. With no string given it prints
a usage message and exits with status 1.

The palindrome check is the only command; everything else is used from
Python.

## Running the tests

```
pip install "dsakit[test]"
pytest
```