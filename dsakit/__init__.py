"""Classic data structures and algorithms: stacks, queues, a max-heap, search trees, traversals, palindrome and bracket checks."""

__version__ = "0.1.0"