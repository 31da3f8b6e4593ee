"""Series-based math functions and small cat and grep command-line tools."""

__version__ = "0.1.0"
__all__ = ["mathfuncs", "cat", "grep"]