"""Helpers for byte sequences."""

from __future__ import annotations

import binascii
from collections.abc import Iterable

from chainbytes.hexutil import InvalidHexError, strip_prefix

BytesLike = bytes | bytearray | Iterable[int]


def concat(*args: BytesLike) -> bytes:
    """Join byte sequences into one."""
    return b"".join(bytes(part) for part in args)


def fix_length(value: BytesLike, bit_length: int = -1, at_start: bool = False) -> bytes:
    """Trim or zero-pad ``value`` to ``bit_length`` bits.

    Longer input keeps its leading bytes; shorter input is padded at the end
    when ``at_start`` is set and at the front otherwise. A ``bit_length`` of
    -1 disables length checking.
    """
    data = bytes(value)
    byte_length = -(-bit_length // 8)

    if bit_length == -1 or len(data) == byte_length:
        return data
    if len(data) > byte_length:
        return data[:byte_length]

    padding = bytes(byte_length - len(data))
    return data + padding if at_start else padding + data


def to_string(value: BytesLike) -> str:
    """Decode bytes as UTF-8, replacing invalid sequences."""
    return bytes(value).decode("utf-8", errors="replace")


def to_hex(value: BytesLike, bit_length: int = -1, is_prefixed: bool = True) -> str:
    """Render bytes as hex.

    When the data is longer than ``bit_length`` bits, the middle is elided
    with an ellipsis.
    """
    data = bytes(value)
    byte_length = -(-bit_length // 8)

    if byte_length > 0 and len(data) > byte_length:
        half = -(-byte_length // 2)
        head = to_hex(data[:half], -1, is_prefixed)
        tail = to_hex(data[len(data) - half:], -1, False)
        return f"{head}…{tail}"

    return ("0x" if is_prefixed else "") + data.hex()


def from_hex(hex_str: str) -> bytes:
    """Decode a hex string, with or without ``0x``, into bytes."""
    try:
        return binascii.unhexlify(strip_prefix(hex_str))
    except ValueError as exc:
        raise InvalidHexError("Invalid hex string") from exc


def to_bn(value: BytesLike, is_little_endian: bool = False) -> int:
    """Interpret bytes as an unsigned integer."""
    return int.from_bytes(bytes(value), "little" if is_little_endian else "big")