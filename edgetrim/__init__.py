"""Trim a chosen set of characters from both ends of a string (see edgetrim.trim)."""

__version__ = "0.1.0"
__all__ = ["__version__"]