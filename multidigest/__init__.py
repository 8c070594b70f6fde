"""
multidigest: self-describing hash values.

A multihash is ``<varint code><varint length><digest>``: the digest tagged
with the algorithm that produced it, so hashes can be stored and compared
without out-of-band knowledge of the algorithm.

Example:
    from multidigest import MultiHash

    mh = MultiHash.compute_hash(b"hello world", "sha2-256")
    str(mh)                          # base-58 form
    MultiHash.from_string(str(mh)) == mh
"""

from .core.bootstrap import bootstrap, reset
from .core.exceptions import (
    AlgorithmConflictError,
    AlgorithmNotFoundError,
    AlgorithmNotImplementedError,
    DigestSizeMismatchError,
    InvalidArgumentError,
    MalformedDataError,
    MultidigestException,
    RegistryError,
    TruncatedDataError,
    VarintError,
)
from .events import UnknownAlgorithmEvent, unknown_algorithm
from .hashing import (
    DEFAULT_ALGORITHM_NAME,
    AlgorithmDescriptor,
    DigestEngine,
    HashingAlgorithmRegistry,
    get_default_registry,
)
from .multihash import (
    MultiHash,
    compute_hash,
    get_algorithm,
    get_algorithm_name,
    placeholder_name,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_ALGORITHM_NAME",
    "AlgorithmConflictError",
    "AlgorithmDescriptor",
    "AlgorithmNotFoundError",
    "AlgorithmNotImplementedError",
    "DigestEngine",
    "DigestSizeMismatchError",
    "HashingAlgorithmRegistry",
    "InvalidArgumentError",
    "MalformedDataError",
    "MultiHash",
    "MultidigestException",
    "RegistryError",
    "TruncatedDataError",
    "UnknownAlgorithmEvent",
    "VarintError",
    "bootstrap",
    "compute_hash",
    "get_algorithm",
    "get_algorithm_name",
    "get_default_registry",
    "placeholder_name",
    "reset",
    "unknown_algorithm",
]
