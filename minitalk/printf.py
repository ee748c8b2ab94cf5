"""A small printf: %c %s %p %d %i %u %x %X and %%.

Any other character after ``%`` is written without the ``%``. A ``%`` at
the very end of the format writes nothing. Integers are taken as 32-bit C
ints, so out-of-range values wrap the way the C conversions would.
"""

import sys
from typing import Any, Callable, Dict, Iterator, Optional, TextIO

_U32 = 2**32
_U64_MASK = 2**64 - 1
_INT_MAX = 2**31 - 1


def _require_int(value: Any, spec: str) -> int:
    if not isinstance(value, int):
        raise TypeError(f"%{spec} expects an int, got {type(value).__name__}")
    return value


def _wrap_signed(value: int) -> int:
    value %= _U32
    return value - _U32 if value > _INT_MAX else value


def _character(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_require_int(value, "c") & 0xFF)


def _string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a str, got {type(value).__name__}")
    return value


def _address(value: Any) -> str:
    if value is None:
        number = 0
    elif isinstance(value, int):
        number = value
    else:
        number = id(value)
    return "0x" + format(number & _U64_MASK, "x")


def _signed(value: Any) -> str:
    return str(_wrap_signed(_require_int(value, "d")))


def _unsigned(value: Any) -> str:
    return str(_require_int(value, "u") % _U32)


def _hex_lower(value: Any) -> str:
    return format(_require_int(value, "x") % _U32, "x")


def _hex_upper(value: Any) -> str:
    return format(_require_int(value, "X") % _U32, "X")


_CONVERTERS: Dict[str, Callable[[Any], str]] = {
    "c": _character,
    "s": _string,
    "p": _address,
    "d": _signed,
    "i": _signed,
    "u": _unsigned,
    "x": _hex_lower,
    "X": _hex_upper,
}


def _next_arg(values: Iterator[Any], spec: str) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None


def format_string(fmt: Optional[str], *args: Any) -> str:
    """Return the text that ``printf`` would write for ``fmt`` and ``args``.

    A format of None gives an empty string. Missing arguments raise
    ``TypeError``; surplus arguments are ignored.
    """
    if fmt is None:
        return ""
    values = iter(args)
    chars = iter(fmt)
    pieces = []
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        converter = _CONVERTERS.get(spec)
        if converter is not None:
            pieces.append(converter(_next_arg(values, spec)))
        else:
            pieces.append(spec)
    return "".join(pieces)


def printf(fmt: Optional[str], *args: Any, file: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``file`` (stdout by default); return its length."""
    text = format_string(fmt, *args)
    stream = sys.stdout if file is None else file
    stream.write(text)
    return len(text)