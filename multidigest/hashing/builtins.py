"""
Built-in algorithm table.

Codes follow the multiformats multihash table.
"""

from __future__ import annotations

import hashlib
from collections.abc import Callable, Iterator

from .engines import (
    DigestEngine,
    DoubleSha256Engine,
    IdentityEngine,
    hashlib_factory,
    keccak_factory,
    shake_factory,
)

IDENTITY_CODE = 0x00
BLAKE2B_BASE_CODE = 0xB200
BLAKE2S_BASE_CODE = 0xB240

# (name, code, digest size in bytes or None for variable, engine factory)
BuiltinEntry = tuple[str, int, "int | None", "Callable[[], DigestEngine] | None"]

_FIXED: list[BuiltinEntry] = [
    ("identity", IDENTITY_CODE, None, IdentityEngine),
    ("sha1", 0x11, 20, hashlib_factory("sha1")),
    ("sha2-256", 0x12, 32, hashlib_factory("sha256")),
    ("sha2-512", 0x13, 64, hashlib_factory("sha512")),
    ("sha3-512", 0x14, 64, hashlib_factory("sha3_512")),
    ("sha3-384", 0x15, 48, hashlib_factory("sha3_384")),
    ("sha3-256", 0x16, 32, hashlib_factory("sha3_256")),
    ("sha3-224", 0x17, 28, hashlib_factory("sha3_224")),
    ("shake-128", 0x18, 16, shake_factory("shake_128", 16)),
    ("shake-256", 0x19, 32, shake_factory("shake_256", 32)),
    ("keccak-224", 0x1A, 28, keccak_factory(224)),
    ("keccak-256", 0x1B, 32, keccak_factory(256)),
    ("keccak-384", 0x1C, 48, keccak_factory(384)),
    ("keccak-512", 0x1D, 64, keccak_factory(512)),
    ("dbl-sha2-256", 0x56, 32, DoubleSha256Engine),
]

BUILTIN_ALIASES: dict[str, str] = {
    "id": "identity",
}


def _blake2_entries() -> Iterator[BuiltinEntry]:
    """blake2b-8 .. blake2b-512 and blake2s-8 .. blake2s-256, one per byte of output."""
    for size in range(1, hashlib.blake2b.MAX_DIGEST_SIZE + 1):
        yield (
            f"blake2b-{size * 8}",
            BLAKE2B_BASE_CODE + size,
            size,
            hashlib_factory("blake2b", digest_size=size),
        )
    for size in range(1, hashlib.blake2s.MAX_DIGEST_SIZE + 1):
        yield (
            f"blake2s-{size * 8}",
            BLAKE2S_BASE_CODE + size,
            size,
            hashlib_factory("blake2s", digest_size=size),
        )


def builtin_algorithms() -> list[BuiltinEntry]:
    """Return the full built-in table."""
    return [*_FIXED, *_blake2_entries()]
