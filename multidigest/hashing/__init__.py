"""
Hash algorithm engines and registry.

This module implements the Strategy pattern for digest engines and a
registry keyed by both algorithm name and multihash code, so new
algorithms can be added without modifying existing code.
"""

from .engines import (
    DigestEngine,
    DoubleSha256Engine,
    HashlibEngine,
    IdentityEngine,
    KeccakEngine,
    ShakeEngine,
)
from .registry import (
    DEFAULT_ALGORITHM_NAME,
    AlgorithmDescriptor,
    HashingAlgorithmRegistry,
    get_default_registry,
    reset_default_registry,
)

__all__ = [
    "DEFAULT_ALGORITHM_NAME",
    "AlgorithmDescriptor",
    "DigestEngine",
    "DoubleSha256Engine",
    "HashingAlgorithmRegistry",
    "HashlibEngine",
    "IdentityEngine",
    "KeccakEngine",
    "ShakeEngine",
    "get_default_registry",
    "reset_default_registry",
]
