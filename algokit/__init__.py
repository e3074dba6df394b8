"""Classic algorithms and data structures in plain Python."""

__version__ = "0.1.0"

__all__ = [
    "assignment",
    "geometry",
    "heaps",
    "linked_list",
    "minqueue",
    "number_theory",
    "rangequery",
    "sorting",
]