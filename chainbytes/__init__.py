"""Hex string, byte sequence and big-integer helpers."""

__version__ = "0.1.0"
__all__ = ["hexutil", "mathutil", "u8util"]