"""LMS Admin - terminal console for library borrowing policies."""

__version__ = "0.1.0"

__all__ = ["__version__"]
