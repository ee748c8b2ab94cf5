"""Write characters, strings and numbers to a text stream."""

import sys
from typing import Optional, TextIO, Union

from minitalk.numbers import itoa


def _stream(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(char: Union[str, int], stream: Optional[TextIO] = None) -> None:
    """Write one character; an int is taken as a byte code."""
    if isinstance(char, int):
        char = chr(char & 0xFF)
    elif len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    _stream(stream).write(char)


def put_str(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``text``; None writes nothing."""
    if text is None:
        return
    _stream(stream).write(text)


def put_endl(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``text`` and a newline; None writes nothing at all."""
    if text is None:
        return
    _stream(stream).write(text + "\n")


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write a 32-bit signed int in decimal."""
    _stream(stream).write(itoa(n))