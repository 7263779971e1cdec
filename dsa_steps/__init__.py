"""Classic algorithm exercises: patterns, maths, recursion, hashing, binary search and arrays."""

__version__ = "0.1.0"