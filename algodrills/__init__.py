"""Classic algorithm exercises over lists, strings, intervals and singly linked lists."""

__version__ = "0.1.0"

__all__ = [
    "hashing",
    "integers",
    "intervals",
    "linked_list",
    "searching",
    "sliding_window",
    "stacks",
    "subarrays",
    "text",
    "two_pointers",
]