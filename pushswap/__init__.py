"""Two-stack integer sorting with push, swap and rotate moves, and small text, list and line-reading helpers."""

__version__ = "0.1.0"