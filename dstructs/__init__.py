"""Classic data structures and algorithms: lists, stacks, queues, strings, recursion and sorting."""

__version__ = "0.1.0"