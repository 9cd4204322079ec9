"""Classic data structures and algorithms: graph traversal, search trees, heap sort, KMP and linked lists."""

__version__ = "0.1.0"