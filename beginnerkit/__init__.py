"""Classic beginner exercises: numbers, sequences, conversions, matrices and linked lists."""

__version__ = "0.1.0"