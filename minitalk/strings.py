"""String helpers with the semantics of the classic C string routines.

Positions are returned as indices (or ``None`` where nothing is found) and
new strings are returned instead of being written into caller buffers.
"""

from typing import Callable, List, Optional, Tuple, Union

CharLike = Union[int, str]


def _char(char: CharLike) -> str:
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        return char
    if isinstance(char, int):
        return chr(char & 0xFF)
    raise TypeError(f"expected an int or a one-character str, got {type(char).__name__}")


def _check_size(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def strlen(text: str) -> int:
    """Number of characters in ``text``."""
    return len(text)


def strchr(text: str, char: CharLike) -> Optional[int]:
    """Index of the first ``char`` in ``text``, or None.

    Searching for the NUL character finds the terminator at ``len(text)``.
    """
    wanted = _char(char)
    if wanted == "\0":
        return len(text)
    index = text.find(wanted)
    return None if index < 0 else index


def strrchr(text: str, char: CharLike) -> Optional[int]:
    """Index of the last ``char`` in ``text``, or None.

    Searching for the NUL character finds the terminator at ``len(text)``.
    """
    wanted = _char(char)
    if wanted == "\0":
        return len(text)
    index = text.rfind(wanted)
    return None if index < 0 else index


def strncmp(first: str, second: str, length: int) -> int:
    """Compare at most ``length`` characters.

    Returns the code difference at the first mismatch (the end of a string
    counts as code 0), or 0 when the compared parts are equal.
    """
    _check_size(length, "length")
    a = first[:length]
    b = second[:length]
    width = max(len(a), len(b))
    for x, y in zip(a.ljust(width, "\0"), b.ljust(width, "\0")):
        if x != y:
            return ord(x) - ord(y)
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``length`` characters.

    An empty needle is found at index 0.
    """
    _check_size(length, "length")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots, one kept for the terminator.

    Returns the copied text and ``len(src)``; a result length shorter than
    the returned count means the copy was truncated. With ``size`` 0 nothing
    is copied.
    """
    _check_size(size, "size")
    copied = src[: size - 1] if size else ""
    return copied, len(src)


def strlcat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` slots.

    Returns the resulting text and the length it tried to create. Where
    ``size`` does not exceed ``len(dest)``, ``dest`` is left as it is and the
    count is ``size + len(src)``.
    """
    _check_size(size, "size")
    if size <= len(dest):
        return dest, size + len(src)
    room = size - len(dest) - 1
    return dest + src[:room], len(dest) + len(src)


def strdup(text: str) -> str:
    """A copy of ``text``."""
    return "".join(text)


def substr(text: str, start: int, length: int) -> str:
    """Up to ``length`` characters of ``text`` from ``start``.

    A start at or past the end gives an empty string.
    """
    _check_size(start, "start")
    _check_size(length, "length")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strjoin(first: str, second: str) -> str:
    """``first`` followed by ``second``."""
    return first + second


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``.

    An empty charset removes nothing.
    """
    if not charset:
        return text
    return text.strip(charset)


def split(text: str, sep: CharLike) -> List[str]:
    """The non-empty pieces of ``text`` between occurrences of ``sep``."""
    separator = _char(sep)
    return [word for word in text.split(separator) if word]


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """A new string built from ``func(index, char)`` for each character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(chars: List[str], func: Callable[[int, str], Optional[str]]) -> None:
    """Call ``func(index, char)`` for each character of the list ``chars``.

    Where ``func`` returns a character, it replaces the one at that index;
    where it returns None, the character stays as it was.
    """
    for index in range(len(chars)):
        replacement = func(index, chars[index])
        if replacement is not None:
            chars[index] = replacement