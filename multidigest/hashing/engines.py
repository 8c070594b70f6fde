"""
Digest engine implementations.

Each engine wraps one concrete hash primitive behind the same narrow
``reset`` / ``update`` / ``finish`` capability, following the Strategy
pattern so the registry never depends on a specific provider.
"""

from __future__ import annotations

import hashlib
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, BinaryIO

from Crypto.Hash import keccak

CHUNK_SIZE = 64 * 1024


class DigestEngine(ABC):
    """
    Abstract base class for digest engines.

    Implementations must provide:
    - reset(): Discard any buffered input
    - update(): Add data to the running digest
    - finish(): Return the final digest bytes
    """

    @abstractmethod
    def reset(self) -> None:
        """Return the engine to its initial state."""
        pass

    @abstractmethod
    def update(self, data: bytes) -> None:
        """Feed bytes into the engine."""
        pass

    @abstractmethod
    def finish(self) -> bytes:
        """Return the digest of everything fed since the last reset."""
        pass

    def update_from_stream(self, stream: BinaryIO, chunk_size: int = CHUNK_SIZE) -> None:
        """Feed a readable stream into the engine until EOF."""
        for chunk in iter(lambda: stream.read(chunk_size), b""):
            self.update(chunk)

    def compute(self, data: bytes) -> bytes:
        """One-shot digest of an in-memory buffer."""
        self.reset()
        self.update(data)
        return self.finish()


class HashlibEngine(DigestEngine):
    """Engine backed by a hashlib constructor (sha1, sha2, sha3, blake2)."""

    def __init__(self, constructor: Callable[[], Any]):
        self._constructor = constructor
        self._hasher = constructor()

    def reset(self) -> None:
        self._hasher = self._constructor()

    def update(self, data: bytes) -> None:
        self._hasher.update(data)

    def finish(self) -> bytes:
        return self._hasher.digest()


class ShakeEngine(HashlibEngine):
    """SHAKE extendable-output function truncated to a fixed length."""

    def __init__(self, constructor: Callable[[], Any], length: int):
        super().__init__(constructor)
        self._length = length

    def finish(self) -> bytes:
        return self._hasher.digest(self._length)


class KeccakEngine(DigestEngine):
    """Original Keccak (pre-FIPS 202 padding), provided by pycryptodome."""

    def __init__(self, digest_bits: int):
        self._digest_bits = digest_bits
        self._hasher = keccak.new(digest_bits=digest_bits)

    def reset(self) -> None:
        self._hasher = keccak.new(digest_bits=self._digest_bits)

    def update(self, data: bytes) -> None:
        self._hasher.update(data)

    def finish(self) -> bytes:
        return self._hasher.digest()


class DoubleSha256Engine(HashlibEngine):
    """SHA-256 applied twice, as used by Bitcoin."""

    def __init__(self):
        super().__init__(hashlib.sha256)

    def finish(self) -> bytes:
        return hashlib.sha256(self._hasher.digest()).digest()


class IdentityEngine(DigestEngine):
    """Echoes its input as the digest."""

    def __init__(self):
        self._buffer = bytearray()

    def reset(self) -> None:
        self._buffer = bytearray()

    def update(self, data: bytes) -> None:
        self._buffer.extend(data)

    def finish(self) -> bytes:
        return bytes(self._buffer)


# -------------------------------------------------------------------------
# Engine factories, one per algorithm family
# -------------------------------------------------------------------------


def hashlib_factory(name: str, **kwargs: Any) -> Callable[[], DigestEngine]:
    """Factory producing hashlib-backed engines, e.g. ``hashlib_factory("sha256")``."""
    constructor = getattr(hashlib, name)
    if kwargs:
        return lambda: HashlibEngine(lambda: constructor(**kwargs))
    return lambda: HashlibEngine(constructor)


def shake_factory(name: str, length: int) -> Callable[[], DigestEngine]:
    constructor = getattr(hashlib, name)
    return lambda: ShakeEngine(constructor, length)


def keccak_factory(digest_bits: int) -> Callable[[], DigestEngine]:
    return lambda: KeccakEngine(digest_bits)
