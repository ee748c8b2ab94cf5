"""Bit-by-bit messaging between processes over SIGUSR1 and SIGUSR2, with helper modules."""

__version__ = "1.0.0"
__all__ = [
    "chars",
    "client",
    "linkedlist",
    "memory",
    "numbers",
    "output",
    "printf",
    "protocol",
    "server",
    "strings",
]