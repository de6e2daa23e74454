"""Character tests, byte-buffer helpers, NUL-terminated string routines, fd output and a linked list."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "cstring", "text", "output", "linked"]