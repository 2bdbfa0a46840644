"""Classic data structures and algorithms: sorting, stacks, queues, linked lists and trees."""

__version__ = "0.1.0"

__all__ = [
    "errors",
    "sorting",
    "stack",
    "expressions",
    "linked_list",
    "queues",
    "tree",
]