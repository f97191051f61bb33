"""C-style standard library routines: integer parsing, arithmetic, error codes, random numbers, byte buffers, C strings, searching and sorting."""

__version__ = "0.1.0"

__all__ = [
    "arith",
    "cstring",
    "errors",
    "memory",
    "rand",
    "search",
    "strconv",
    "strsearch",
]