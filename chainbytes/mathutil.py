"""Arbitrary-precision integer helpers for two's complement and byte conversion."""

from __future__ import annotations


def _mask(width: int) -> int:
    if width < 0:
        raise ValueError("width must not be negative")
    return (1 << width) - 1


def power(base: int, exponent: int) -> int:
    """Return ``base ** exponent``; non-positive exponents give 1."""
    if exponent <= 0:
        return 1
    return base**exponent


def inotn(value: int, width: int) -> int:
    """Invert the lowest ``width`` bits of the magnitude of ``value``."""
    return ~abs(value) & _mask(width)


def from_twos(value: int, width: int) -> int:
    """Interpret ``value`` as a ``width``-bit two's complement pattern of a negative number."""
    return -(inotn(value, width) + 1)


def to_twos(value: int, width: int) -> int:
    """Encode ``value`` as a ``width``-bit two's complement pattern.

    Non-negative values are returned unchanged.
    """
    if value < 0:
        return iaddn(inotn(absolute(value), width), 1)
    return clone(value)


def absolute(value: int) -> int:
    """Return the magnitude of ``value``."""
    return abs(value)


def clone(value: int) -> int:
    """Return a copy of ``value``."""
    return int(value)


def iaddn(value: int, num: int) -> int:
    """Return ``value + num``."""
    return value + num


def andln(value: int, num: int) -> int:
    """AND the magnitude of ``value`` with ``num``."""
    return abs(value) & num


def iushrn(value: int, bits: int, hint: int = -1, extended: bool = False) -> int:
    """Shift the magnitude of ``value`` right by ``bits``.

    ``hint`` and ``extended`` do not alter the result; the shifted-out bits
    are discarded.
    """
    if bits < 0:
        raise ValueError("shift must not be negative")
    return abs(value) >> bits


def bit_len(value: int) -> int:
    """Return the number of bits in the magnitude of ``value``."""
    return abs(value).bit_length()


def count_bits(word: int) -> int:
    """Return the number of significant bits in a non-negative word."""
    if word < 0:
        raise ValueError("word must not be negative")
    return word.bit_length()


def to_uint8_slice(value: int, is_little_endian: bool = False, length: int = -1) -> bytes:
    """Serialise the magnitude of ``value`` to bytes.

    A positive ``length`` fixes the output size; otherwise the minimal size
    (at least one byte) is used.
    """
    magnitude = abs(value)
    byte_length = (bit_len(magnitude) + 7) // 8
    required = length if length > 0 else max(1, byte_length)
    if byte_length > required:
        raise ValueError("byte array longer than desired length")
    return magnitude.to_bytes(required, "little" if is_little_endian else "big")