"""Practice drills: text patterns, recursion exercises, classic sorts and small algorithm helpers."""

__version__ = "0.1.0"
__all__ = ["patterns", "recursion", "sorting", "toolkit"]