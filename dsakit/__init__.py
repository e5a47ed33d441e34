"""Classic data structures and sorting algorithms: list helpers, heaps, sorts,
a bounded queue and stack, and a singly linked list."""

__version__ = "0.1.0"
__all__ = ["arrays", "heap", "sorting", "queue_array", "stack_array", "linked_list"]