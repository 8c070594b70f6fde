"""
Unsigned varint codec.

Each byte carries 7 data bits, least-significant group first; the high
bit is set on every byte except the last. Codes and lengths never need
more than 32 bits, so decoding rejects anything larger.
"""

from __future__ import annotations

from typing import BinaryIO

from ..core.exceptions import InvalidArgumentError, VarintError

MAX_VALUE = 0xFFFFFFFF
# ceil(32 / 7)
MAX_LENGTH = 5


def encode(value: int) -> bytes:
    """
    Encode a non-negative integer as a varint.

    Args:
        value: Integer in the range 0..MAX_VALUE

    Returns:
        Encoded bytes (at least one byte)

    Raises:
        InvalidArgumentError: If value is negative or too large
    """
    if value < 0 or value > MAX_VALUE:
        raise InvalidArgumentError(
            "Varint value out of range", argument="value", context={"value": value}
        )

    out = bytearray()
    while True:
        group = value & 0x7F
        value >>= 7
        if value:
            out.append(group | 0x80)
        else:
            out.append(group)
            return bytes(out)


def read(stream: BinaryIO) -> int:
    """
    Read one varint from a binary stream.

    Non-minimal encodings (redundant trailing zero groups) are accepted.

    Raises:
        VarintError: If the stream ends mid-sequence or the value
            does not fit in 32 bits
    """
    result = 0
    shift = 0
    for _ in range(MAX_LENGTH):
        chunk = stream.read(1)
        if not chunk:
            if shift == 0:
                raise VarintError("Unexpected end of data, expected a varint")
            raise VarintError("Unterminated varint", context={"bytes_read": shift // 7})
        byte = chunk[0]
        result |= (byte & 0x7F) << shift
        if result > MAX_VALUE:
            raise VarintError("Varint exceeds 32-bit range")
        if not byte & 0x80:
            return result
        shift += 7

    raise VarintError("Varint is too long", context={"max_length": MAX_LENGTH})


def decode(data: bytes, offset: int = 0) -> tuple[int, int]:
    """
    Decode one varint from a buffer.

    Args:
        data: Source buffer
        offset: Position of the first varint byte

    Returns:
        Tuple of (value, offset just past the varint)
    """
    result = 0
    shift = 0
    pos = offset
    while pos < len(data) and pos - offset < MAX_LENGTH:
        byte = data[pos]
        pos += 1
        result |= (byte & 0x7F) << shift
        if result > MAX_VALUE:
            raise VarintError("Varint exceeds 32-bit range")
        if not byte & 0x80:
            return result, pos
        shift += 7

    if pos - offset >= MAX_LENGTH:
        raise VarintError("Varint is too long", context={"max_length": MAX_LENGTH})
    if pos == offset:
        raise VarintError("Unexpected end of data, expected a varint")
    raise VarintError("Unterminated varint", context={"bytes_read": pos - offset})
