"""
Core infrastructure for multidigest.

This module provides:
- ServiceContainer: DI container using dependency-injector
- Application bootstrap for initialization
- Custom exception hierarchy
"""

from .bootstrap import bootstrap, is_initialized, reset
from .container import ServiceContainer, get_container, try_resolve
from .exceptions import (
    AlgorithmConflictError,
    AlgorithmNotFoundError,
    AlgorithmNotImplementedError,
    ConfigValidationError,
    DigestSizeMismatchError,
    InvalidArgumentError,
    MalformedDataError,
    MultidigestException,
    RegistryError,
    TruncatedDataError,
    VarintError,
)

__all__ = [
    "AlgorithmConflictError",
    "AlgorithmNotFoundError",
    "AlgorithmNotImplementedError",
    "ConfigValidationError",
    "DigestSizeMismatchError",
    "InvalidArgumentError",
    "MalformedDataError",
    "MultidigestException",
    "RegistryError",
    "ServiceContainer",
    "TruncatedDataError",
    "VarintError",
    "bootstrap",
    "get_container",
    "is_initialized",
    "reset",
    "try_resolve",
]
