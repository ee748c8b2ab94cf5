"""Conversions between decimal text and C ``int`` values."""

_WHITESPACE = " \t\n\v\f\r"
_LLONG_MAX = 2**63 - 1
_U64_MASK = 2**64 - 1
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def _to_int32(value: int) -> int:
    value %= 2**32
    return value - 2**32 if value > INT_MAX else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way the C library routine does.

    Leading whitespace is skipped, one optional sign is read, then digits up
    to the first non-digit. Nothing parsable gives 0. Once the magnitude
    reaches ``LLONG_MAX`` the result is 0 for a negative number and -1 for a
    positive one; otherwise it wraps to a 32-bit signed int.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    result = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        result = (result * 10 + ord(ch) - ord("0")) & _U64_MASK
        if result >= _LLONG_MAX:
            return 0 if sign == -1 else -1
    return _to_int32(result * sign)


def itoa(n: int) -> str:
    """Decimal text of a 32-bit signed int."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit int")
    return str(n)