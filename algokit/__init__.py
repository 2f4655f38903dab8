"""Classic dynamic programming, recursion, sequence and searching algorithms."""

__version__ = "0.1.0"
__all__ = ["dp", "recursion", "searching", "sequences"]