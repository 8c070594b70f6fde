"""
Self-describing hash values.

Binary layout::

    <varint code><varint digest length><digest bytes>

The canonical string form is the base-58 encoding of that layout; base-32
is offered as an alternative. Values are immutable and compare equal when
their codes and digests are equal.
"""

from __future__ import annotations

import io
from typing import Any, BinaryIO

from .core.exceptions import (
    DigestSizeMismatchError,
    InvalidArgumentError,
    MalformedDataError,
    TruncatedDataError,
)
from .encoding import text, varint
from .events import UnknownAlgorithmEvent, unknown_algorithm
from .hashing.builtins import IDENTITY_CODE
from .hashing.engines import CHUNK_SIZE
from .hashing.registry import (
    DEFAULT_ALGORITHM_NAME,
    AlgorithmDescriptor,
    HashingAlgorithmRegistry,
    get_default_registry,
)

PLACEHOLDER_PREFIX = "ipfs-"

BytesLike = bytes | bytearray | memoryview


def placeholder_name(code: int) -> str:
    """Name given to an unregistered algorithm code, e.g. ``ipfs-1``."""
    return f"{PLACEHOLDER_PREFIX}{code}"


def _registry(registry: HashingAlgorithmRegistry | None) -> HashingAlgorithmRegistry:
    return registry if registry is not None else get_default_registry()


def _read_exact(stream: BinaryIO, length: int) -> bytes:
    """
    Read exactly length bytes, or fewer only at EOF.

    Reads at most CHUNK_SIZE bytes per call; length is taken from the
    input being parsed and may far exceed what the stream holds.
    """
    chunks = []
    remaining = length
    while remaining > 0:
        chunk = stream.read(min(remaining, CHUNK_SIZE))
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


def _check_data(data: Any) -> None:
    """Input to hash must be bytes-like or a readable stream."""
    if data is None:
        raise InvalidArgumentError("Data must not be None", argument="data")
    if not isinstance(data, (bytes, bytearray, memoryview)) and not hasattr(data, "read"):
        raise InvalidArgumentError(
            "Data must be bytes or a readable binary stream",
            argument="data",
            context={"type": type(data).__name__},
        )


def _check_digest_size(algorithm: AlgorithmDescriptor, digest: bytes) -> None:
    if algorithm.digest_size is not None and len(digest) != algorithm.digest_size:
        raise DigestSizeMismatchError(
            f"The digest size for '{algorithm.name}' is {algorithm.digest_size} bytes, "
            f"not {len(digest)}",
            name=algorithm.name,
            expected=algorithm.digest_size,
            actual=len(digest),
        )


class MultiHash:
    """
    A digest tagged with the algorithm that produced it.

    Construct from an algorithm name and digest bytes, or use one of the
    named constructors: from_bytes(), from_stream(), from_string(),
    from_base58(), from_base32() and compute_hash().

    Example:
        mh = MultiHash.compute_hash(b"hello world")
        str(mh)             # 'QmaozNR7DZHQK1ZcU9p7QdrshMvXqWK6gpu5rmrkPdT3L4'
        mh.matches(b"hello world")  # True
    """

    __slots__ = ("_algorithm", "_digest")

    def __init__(
        self,
        algorithm: str,
        digest: BytesLike,
        *,
        registry: HashingAlgorithmRegistry | None = None,
    ) -> None:
        """
        Create a value from an algorithm name and digest bytes.

        Args:
            algorithm: Registered algorithm name or alias
            digest: Digest bytes
            registry: Registry to resolve the name in (default registry if None)

        Raises:
            InvalidArgumentError: If the name or digest is None or empty
            AlgorithmNotFoundError: If the name is not registered
            DigestSizeMismatchError: If digest length differs from the
                algorithm's fixed size
        """
        if algorithm is None or algorithm == "":
            raise InvalidArgumentError("Algorithm name must not be empty", argument="algorithm")
        if digest is None:
            raise InvalidArgumentError("Digest must not be None", argument="digest")
        if not isinstance(digest, (bytes, bytearray, memoryview)):
            raise InvalidArgumentError(
                "Digest must be bytes",
                argument="digest",
                context={"type": type(digest).__name__},
            )
        if len(digest) == 0:
            raise InvalidArgumentError("Digest must not be empty", argument="digest")

        descriptor = _registry(registry).by_name(algorithm)
        digest = bytes(digest)
        _check_digest_size(descriptor, digest)
        self._algorithm = descriptor
        self._digest = digest

    @classmethod
    def _create(cls, algorithm: AlgorithmDescriptor, digest: bytes) -> MultiHash:
        """Build from an already-resolved descriptor."""
        _check_digest_size(algorithm, digest)
        instance = cls.__new__(cls)
        instance._algorithm = algorithm
        instance._digest = digest
        return instance

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    @classmethod
    def from_stream(
        cls,
        stream: BinaryIO,
        *,
        registry: HashingAlgorithmRegistry | None = None,
        notifier: UnknownAlgorithmEvent | None = None,
    ) -> MultiHash:
        """
        Read one multihash from a binary stream.

        The stream is left positioned just after the digest.
        Unregistered codes yield a placeholder algorithm named
        ``ipfs-<code>`` and are published to the notifier.

        Raises:
            InvalidArgumentError: If stream is None
            VarintError: If the code or length varint is malformed
            DigestSizeMismatchError: If a known fixed-size algorithm
                declares a different length
            TruncatedDataError: If fewer digest bytes remain than declared
        """
        if stream is None:
            raise InvalidArgumentError("Stream must not be None", argument="stream")

        code = varint.read(stream)
        length = varint.read(stream)

        algorithm = _registry(registry).get_by_code(code)
        if algorithm is None:
            if length == 0:
                raise MalformedDataError(
                    "Empty digest for an unknown hash algorithm", context={"code": code}
                )
            algorithm = AlgorithmDescriptor(placeholder_name(code), code, length)
            (notifier if notifier is not None else unknown_algorithm).publish(algorithm)
        elif algorithm.digest_size is not None and algorithm.digest_size != length:
            raise DigestSizeMismatchError(
                f"The digest size for '{algorithm.name}' is {algorithm.digest_size} bytes, "
                f"not {length}",
                name=algorithm.name,
                expected=algorithm.digest_size,
                actual=length,
            )

        digest = _read_exact(stream, length)
        if len(digest) != length:
            raise TruncatedDataError(
                "Digest is truncated", expected=length, actual=len(digest)
            )
        return cls._create(algorithm, digest)

    @classmethod
    def from_bytes(
        cls,
        data: BytesLike,
        *,
        registry: HashingAlgorithmRegistry | None = None,
        notifier: UnknownAlgorithmEvent | None = None,
    ) -> MultiHash:
        """
        Parse a complete binary multihash.

        Unlike from_stream(), trailing bytes after the digest are an error.

        Raises:
            MalformedDataError: On trailing data, plus everything from_stream() raises
        """
        if data is None:
            raise InvalidArgumentError("Data must not be None", argument="data")
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise InvalidArgumentError(
                "Data must be bytes", argument="data", context={"type": type(data).__name__}
            )
        buffer = io.BytesIO(bytes(data))
        mh = cls.from_stream(buffer, registry=registry, notifier=notifier)
        trailing = len(buffer.getbuffer()) - buffer.tell()
        if trailing:
            raise MalformedDataError(
                "Unexpected data after digest", context={"trailing_bytes": trailing}
            )
        return mh

    @classmethod
    def from_base58(
        cls,
        value: str,
        *,
        registry: HashingAlgorithmRegistry | None = None,
        notifier: UnknownAlgorithmEvent | None = None,
    ) -> MultiHash:
        """Parse the base-58 string form."""
        return cls.from_bytes(text.from_base58(value), registry=registry, notifier=notifier)

    @classmethod
    def from_base32(
        cls,
        value: str,
        *,
        registry: HashingAlgorithmRegistry | None = None,
        notifier: UnknownAlgorithmEvent | None = None,
    ) -> MultiHash:
        """Parse the base-32 string form."""
        return cls.from_bytes(text.from_base32(value), registry=registry, notifier=notifier)

    # Canonical string form
    from_string = from_base58

    # ------------------------------------------------------------------
    # Computing
    # ------------------------------------------------------------------

    @classmethod
    def compute_hash(
        cls,
        data: BytesLike | BinaryIO,
        algorithm: str = DEFAULT_ALGORITHM_NAME,
        *,
        registry: HashingAlgorithmRegistry | None = None,
    ) -> MultiHash:
        """
        Hash data with the named algorithm.

        Args:
            data: Bytes, or a readable binary stream consumed to EOF
            algorithm: Algorithm name or alias (default "sha2-256")
            registry: Registry to resolve the name in

        Raises:
            AlgorithmNotFoundError: If the algorithm is not registered
            AlgorithmNotImplementedError: If it has no engine
        """
        _check_data(data)
        descriptor = _registry(registry).by_name(algorithm)
        return cls._create(descriptor, _digest_of(descriptor, data))

    def matches(self, data: BytesLike | BinaryIO) -> bool:
        """
        Check whether data hashes to this value with the same algorithm.

        Raises:
            AlgorithmNotImplementedError: If the algorithm has no engine
        """
        _check_data(data)
        return _digest_of(self._algorithm, data) == self._digest

    # ------------------------------------------------------------------
    # Writing
    # ------------------------------------------------------------------

    def write(self, sink: BinaryIO) -> None:
        """
        Write the binary form to a writable binary stream.

        Raises:
            InvalidArgumentError: If sink is None
        """
        if sink is None:
            raise InvalidArgumentError("Output stream must not be None", argument="sink")
        sink.write(varint.encode(self._algorithm.code))
        sink.write(varint.encode(len(self._digest)))
        sink.write(self._digest)

    def to_bytes(self) -> bytes:
        buffer = io.BytesIO()
        self.write(buffer)
        return buffer.getvalue()

    def to_base58(self) -> str:
        return text.to_base58(self.to_bytes())

    def to_base32(self) -> str:
        return text.to_base32(self.to_bytes())

    def hex(self) -> str:
        """Hex of the full binary form, including the code and length prefix."""
        return self.to_bytes().hex()

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def algorithm(self) -> AlgorithmDescriptor:
        return self._algorithm

    @property
    def digest(self) -> bytes:
        return self._digest

    @property
    def code(self) -> int:
        return self._algorithm.code

    @property
    def name(self) -> str:
        return self._algorithm.name

    @property
    def is_identity_hash(self) -> bool:
        """True if the digest is the content itself."""
        return self._algorithm.code == IDENTITY_CODE

    # ------------------------------------------------------------------
    # Value semantics
    # ------------------------------------------------------------------

    def __eq__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._algorithm.code == other._algorithm.code and self._digest == other._digest

    def __hash__(self) -> int:
        return hash((self._algorithm.code, self._digest))

    def __bytes__(self) -> bytes:
        return self.to_bytes()

    def __str__(self) -> str:
        return self.to_base58()

    def __repr__(self) -> str:
        return f"MultiHash({self._algorithm.name!r}, {self._digest.hex()!r})"


def _digest_of(algorithm: AlgorithmDescriptor, data: BytesLike | BinaryIO) -> bytes:
    engine = algorithm.create_engine()
    if hasattr(data, "read"):
        engine.update_from_stream(data)  # type: ignore[arg-type]
    else:
        engine.update(bytes(data))  # type: ignore[arg-type]
    return engine.finish()


# -------------------------------------------------------------------------
# Module-level convenience functions
# -------------------------------------------------------------------------


def compute_hash(
    data: BytesLike | BinaryIO,
    algorithm: str = DEFAULT_ALGORITHM_NAME,
    *,
    registry: HashingAlgorithmRegistry | None = None,
) -> MultiHash:
    """Hash data with the named algorithm. See MultiHash.compute_hash()."""
    return MultiHash.compute_hash(data, algorithm, registry=registry)


def get_algorithm(
    name: str = DEFAULT_ALGORITHM_NAME,
    *,
    registry: HashingAlgorithmRegistry | None = None,
) -> AlgorithmDescriptor:
    """Look up an algorithm descriptor by name (default "sha2-256")."""
    return _registry(registry).by_name(name)


def get_algorithm_name(
    code: int,
    *,
    registry: HashingAlgorithmRegistry | None = None,
) -> str:
    """Name of the algorithm registered under code."""
    return _registry(registry).get_name(code)
