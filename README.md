# chainbytes

Small helpers for moving between hex strings, byte sequences and
arbitrary-precision integers, as used when building and inspecting
blockchain transactions.

The package has no runtime dependencies and needs Python 3.10 or later.
It is a library only: it has no command-line tool, and it does not talk to
any network or node.

## `chainbytes.hexutil`

Work on hex strings, with or without a `0x` prefix.

```python
from chainbytes import hexutil

hexutil.has_prefix("0x12")                 # True
hexutil.valid_hex("0x12")                  # True
hexutil.valid_hex("")                      # False
hexutil.add_prefix("123")                  # "0x0123"
hexutil.strip_prefix("0x123")              # "123"
hexutil.hex_fix_length("0x12", 16, True)   # "0x0012"
hexutil.hex_fix_length("0x0012", 8)        # "0x12"
hexutil.reverse("0x1234")                  # "3412"
hexutil.to_bn("0x14")                      # 20
hexutil.to_bn("0x2efb", True, True)        # -1234
hexutil.to_uint8_slice("0x80001f")         # b"\x80\x00\x1f"
hexutil.to_uint8_slice("0x80001f", 32)     # b"\x00\x80\x00\x1f"
```

- A bit length of `-1` (the default) means no fixed length.
- `hex_fix_length` keeps the trailing digits when the input is too long and
  left-pads with zeros only when `with_padding` is true.
- `to_bn` reads little-endian input when asked, and with `is_negative` reads
  the value as two's complement over its own bit length. An empty string or
  a bare `0x` gives `0`.
- `to_uint8_slice` left-pads short input with zero bytes and keeps the
  leading bytes of long input.
- `to_bn` and `to_uint8_slice` raise `hexutil.InvalidHexError` (a
  `ValueError`) for input that is not hex.

## `chainbytes.u8util`

Work on byte sequences. Functions accept `bytes`, `bytearray` or any
iterable of ints and return `bytes`.

```python
from chainbytes import u8util

u8util.concat(b"\x01\x02\x03", b"\x04\x05")               # b"\x01\x02\x03\x04\x05"
u8util.fix_length(b"\x12\x34", 32)                        # b"\x00\x00\x12\x34"
u8util.fix_length(b"\x12\x34", 32, True)                  # b"\x12\x34\x00\x00"
u8util.fix_length(b"\x12\x34\x56\x78", 16)                # b"\x12\x34"
u8util.to_string(b"hello")                                # "hello"
u8util.to_hex(b"\x68\x65\x6c\x6c\x0f")                    # "0x68656c6c0f"
u8util.to_hex(b"", -1, False)                             # ""
u8util.to_hex(bytes([128, 0, 10, 11, 12, 13]), 32, True)  # "0x8000…0c0d"
u8util.from_hex("0x68656c6c0f")                           # b"hell\x0f"
u8util.to_bn(b"\x12\x34")                                 # 4660
u8util.to_bn(b"\x12\x34", True)                           # 13330
```

- `to_string` decodes UTF-8, replacing invalid sequences.
- `to_hex` shortens values longer than the given bit length, joining the
  leading and trailing halves with an ellipsis.
- `from_hex` raises `hexutil.InvalidHexError` for input that is not an
  even-length hex string.

## `chainbytes.mathutil`

Integer helpers for two's complement and byte conversion. Where a function
takes a magnitude, the sign of a negative argument is ignored.

```python
from chainbytes import mathutil

mathutil.power(16, 2)                    # 256
mathutil.from_twos(0xFB2E, 16)           # -1234
mathutil.to_twos(-1234, 16)              # 64302
mathutil.inotn(0xFB2E, 16)               # 1233
mathutil.to_uint8_slice(-1234)           # b"\x04\xd2"
mathutil.to_uint8_slice(-1234, True)     # b"\xd2\x04"
mathutil.to_uint8_slice(1, False, 4)     # b"\x00\x00\x00\x01"
mathutil.bit_len(255)                    # 8
mathutil.count_bits(0x1000)              # 13
```

Also available: `absolute`, `clone`, `iaddn` (addition), `andln` (AND with
the magnitude) and `iushrn` (right shift of the magnitude; its `hint` and
`extended` arguments do not change the result).

- `power` returns `1` for a non-positive exponent.
- `to_uint8_slice` raises `ValueError` when the value does not fit in the
  requested length.

## Running the tests

```
pip install -e ".[test]"
pytest
```