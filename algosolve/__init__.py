"""Classic algorithm problems with plain Python solutions."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "backtracking",
    "linked_lists",
    "numbers",
    "searching",
    "strings",
    "structures",
    "trees",
]