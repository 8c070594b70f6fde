"""
Textual transcodings of binary multihash values.

Base-58 (Bitcoin alphabet) is the canonical string form. Base-32 is the
lowercase RFC 4648 alphabet without ``=`` padding.
"""

from __future__ import annotations

import base64

import base58

from ..core.exceptions import InvalidArgumentError, MalformedDataError


def to_base58(data: bytes) -> str:
    """Encode bytes with the Bitcoin base-58 alphabet."""
    return base58.b58encode(data).decode("ascii")


def from_base58(text: str) -> bytes:
    """
    Decode a base-58 string.

    Raises:
        InvalidArgumentError: If text is None or empty
        MalformedDataError: If text contains characters outside the alphabet
    """
    if not text:
        raise InvalidArgumentError("Base-58 text must not be empty", argument="text")
    try:
        return base58.b58decode(text)
    except ValueError as e:
        raise MalformedDataError("Invalid base-58 text", context={"text": text}, cause=e) from e


def to_base32(data: bytes) -> str:
    """Encode bytes as lowercase, unpadded base-32."""
    return base64.b32encode(data).decode("ascii").lower().rstrip("=")


def from_base32(text: str) -> bytes:
    """
    Decode lowercase or uppercase base-32, with or without padding.

    Raises:
        InvalidArgumentError: If text is None or empty
        MalformedDataError: If text is not valid base-32
    """
    if not text:
        raise InvalidArgumentError("Base-32 text must not be empty", argument="text")
    stripped = text.rstrip("=").upper()
    padded = stripped + "=" * (-len(stripped) % 8)
    try:
        return base64.b32decode(padded)
    except ValueError as e:
        raise MalformedDataError("Invalid base-32 text", context={"text": text}, cause=e) from e
