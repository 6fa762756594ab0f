"""Helpers for ``0x``-prefixed hexadecimal strings."""

from __future__ import annotations

import re

from chainbytes.mathutil import from_twos

PREFIX = "0x"

_VALID_HEX = re.compile(r"(0x)?[0-9a-fA-F]*")
_HEX_DIGITS = re.compile(r"[0-9a-fA-F]+")


class InvalidHexError(ValueError):
    """Raised when a string is not valid hexadecimal."""


def has_prefix(hex_str: str) -> bool:
    """Return True if ``hex_str`` starts with ``0x``."""
    return hex_str.startswith(PREFIX)


def valid_hex(hex_str: str) -> bool:
    """Return True for a non-empty hex string, with or without ``0x``."""
    return bool(hex_str) and _VALID_HEX.fullmatch(hex_str) is not None


def add_prefix(hex_str: str) -> str:
    """Add ``0x`` (padding odd lengths with a leading zero) unless already prefixed."""
    if has_prefix(hex_str):
        return hex_str
    if len(hex_str) % 2 == 1:
        hex_str = "0" + hex_str
    return PREFIX + hex_str


def strip_prefix(hex_str: str) -> str:
    """Remove a leading ``0x`` if present."""
    return hex_str.removeprefix(PREFIX)


def hex_fix_length(hex_str: str, bit_length: int = -1, with_padding: bool = False) -> str:
    """Trim or optionally left-pad ``hex_str`` to ``bit_length`` bits.

    A ``bit_length`` of -1 disables length checking.
    """
    str_len = -(-bit_length // 4)
    hex_len = str_len + 2

    if bit_length == -1 or len(hex_str) == hex_len or (not with_padding and len(hex_str) < hex_len):
        return add_prefix(hex_str)

    stripped = strip_prefix(hex_str)
    if len(hex_str) > hex_len:
        return add_prefix(stripped[len(stripped) - str_len:])

    padded = "0" * str_len + stripped
    return add_prefix(padded[len(padded) - str_len:])


def reverse(hex_str: str) -> str:
    """Reverse the byte order of a hex string, dropping any prefix."""
    digits = strip_prefix(hex_str)
    pairs = [digits[start:start + 2] for start in range(0, len(digits), 2)]
    return "".join(reversed(pairs))


def to_bn(hex_str: str, is_little_endian: bool = False, is_negative: bool = False) -> int:
    """Parse a hex string into an integer.

    With ``is_negative`` the value is read as two's complement over its own
    bit length.
    """
    digits = strip_prefix(hex_str)
    if not digits:
        return 0
    if is_little_endian:
        digits = reverse(digits)
    if _HEX_DIGITS.fullmatch(digits) is None:
        raise InvalidHexError("could not decode to integer")
    number = int(digits, 16)
    if is_negative:
        return from_twos(number, number.bit_length())
    return number


def to_uint8_slice(hex_str: str, bit_length: int = -1) -> bytes:
    """Convert a hex string to bytes.

    With a ``bit_length`` other than -1 the result has that many bits worth
    of bytes: shorter input is left-padded with zeros, longer input keeps its
    leading bytes.
    """
    if not hex_str:
        return b""
    if not valid_hex(hex_str):
        raise InvalidHexError("invalid hex")

    digits = strip_prefix(hex_str)
    value_length = len(digits) // 2
    buffer_length = value_length if bit_length == -1 else -(-bit_length // 8)

    pairs = bytes(int(digits[start:start + 2], 16) for start in range(0, value_length * 2, 2))
    offset = max(0, buffer_length - value_length)
    return bytes(offset) + pairs[:buffer_length]