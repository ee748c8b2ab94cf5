"""The bit protocol: each byte travels as eight signals, most significant bit first.

A 1 bit is sent as SIGUSR1 and a 0 bit as SIGUSR2. The sender treats bytes
as signed chars, so a byte with its high bit set goes out as eight zero
bits.
"""

from typing import Iterable, List, Optional, Tuple, Union

BITS_PER_BYTE = 8

Message = Union[str, bytes, bytearray]


def encode_byte(value: int) -> Tuple[int, ...]:
    """The eight bits of ``value``, most significant first.

    Values that are not positive encode as all zeros. Values outside the
    range of a char raise ``ValueError``.
    """
    if not -128 <= value <= 255:
        raise ValueError(f"{value} does not fit in a byte")
    if value <= 0:
        return (0,) * BITS_PER_BYTE
    return tuple((value >> shift) & 1 for shift in reversed(range(BITS_PER_BYTE)))


def _as_bytes(message: Message) -> bytes:
    if isinstance(message, str):
        return message.encode("utf-8")
    return bytes(message)


def encode_message(message: Message) -> List[int]:
    """The bit sequence for a whole message; text is sent as UTF-8."""
    return [
        bit
        for byte in _as_bytes(message)
        for bit in encode_byte(byte - 256 if byte > 127 else byte)
    ]


class BitDecoder:
    """Collects bits and hands back a byte after every eighth one."""

    def __init__(self) -> None:
        self._byte = 0
        self._count = 0

    @property
    def pending(self) -> int:
        """Bits received towards the next byte."""
        return self._count

    def feed(self, bit: int) -> Optional[int]:
        """Take one bit; return the completed byte, or None while one is pending."""
        if bit not in (0, 1):
            raise ValueError(f"a bit must be 0 or 1, got {bit!r}")
        self._byte = ((self._byte << 1) | bit) & 0xFF
        self._count += 1
        if self._count < BITS_PER_BYTE:
            return None
        byte = self._byte
        self._byte = 0
        self._count = 0
        return byte


def decode_bits(bits: Iterable[int]) -> bytes:
    """The bytes carried by ``bits``; an incomplete final byte is dropped."""
    decoder = BitDecoder()
    decoded = (decoder.feed(bit) for bit in bits)
    return bytes(byte for byte in decoded if byte is not None)