"""
Hash algorithm registry.

Maps algorithm names and numeric multihash codes to descriptors, so new
algorithms can be added at runtime without modifying existing code
(Open/Closed Principle).
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from dataclasses import dataclass, field

from ..core.container import try_resolve
from ..core.di import get_logger
from ..core.exceptions import (
    AlgorithmConflictError,
    AlgorithmNotFoundError,
    AlgorithmNotImplementedError,
    InvalidArgumentError,
)
from ..encoding.varint import MAX_VALUE
from ..utils.locks import ReadWriteLock
from .builtins import BUILTIN_ALIASES, builtin_algorithms
from .engines import DigestEngine, IdentityEngine

DEFAULT_ALGORITHM_NAME = "sha2-256"


@dataclass(frozen=True)
class AlgorithmDescriptor:
    """
    Metadata for one hashing algorithm.

    Attributes:
        name: Unique, case-sensitive algorithm name
        code: Multihash code, unique within a registry
        digest_size: Digest length in bytes, or None for variable length
        engine_factory: Creates a fresh DigestEngine; None when the
            algorithm is only known by metadata
    """

    name: str
    code: int
    digest_size: int | None
    engine_factory: Callable[[], DigestEngine] | None = field(
        default=None, compare=False, repr=False
    )

    @property
    def is_variable_length(self) -> bool:
        return self.digest_size is None

    @property
    def is_implemented(self) -> bool:
        """True if hashes of this algorithm can be computed locally."""
        return self.engine_factory is not None or self.is_variable_length

    def create_engine(self) -> DigestEngine:
        """
        Create a fresh digest engine.

        Variable-length algorithms without a factory echo their input.

        Raises:
            AlgorithmNotImplementedError: If no engine is available
        """
        if self.engine_factory is not None:
            return self.engine_factory()
        if self.is_variable_length:
            return IdentityEngine()
        raise AlgorithmNotImplementedError(
            f"Hash algorithm '{self.name}' is not implemented", name=self.name
        )

    def __str__(self) -> str:
        return self.name


class HashingAlgorithmRegistry:
    """
    Registry of hash algorithm descriptors.

    Lookups take a shared read lock; register/deregister take the
    exclusive write lock, so the name and code tables never disagree.

    Example:
        registry = HashingAlgorithmRegistry()

        # Built-in algorithms
        sha = registry.by_name("sha2-256")

        # Metadata-only algorithm: parseable, not computable
        registry.register("my-hash", 0x300001, 32)
    """

    def __init__(self, register_defaults: bool = True):
        """
        Initialize the registry.

        Args:
            register_defaults: If True, register built-in algorithms
        """
        self._by_name: dict[str, AlgorithmDescriptor] = {}
        self._by_code: dict[int, AlgorithmDescriptor] = {}
        self._aliases: dict[str, str] = {}
        self._lock = ReadWriteLock()
        if register_defaults:
            self._register_defaults()

    def _register_defaults(self) -> None:
        """Register built-in hash algorithms."""
        entries = builtin_algorithms()
        with self._lock.write():
            for name, code, digest_size, factory in entries:
                self._insert(AlgorithmDescriptor(name, code, digest_size, factory))
            for alias, target in BUILTIN_ALIASES.items():
                self._aliases[alias] = target
        get_logger().debug("Registered %d built-in hash algorithms", len(entries))

    def _insert(self, descriptor: AlgorithmDescriptor) -> None:
        """Insert with conflict checks. Caller must hold the write lock."""
        if descriptor.name in self._by_name or descriptor.name in self._aliases:
            raise AlgorithmConflictError(
                f"The hash algorithm name '{descriptor.name}' is already defined",
                name=descriptor.name,
            )
        if descriptor.code in self._by_code:
            raise AlgorithmConflictError(
                f"The hash algorithm code 0x{descriptor.code:x} is already defined",
                code=descriptor.code,
                context={"existing": self._by_code[descriptor.code].name},
            )
        self._by_name[descriptor.name] = descriptor
        self._by_code[descriptor.code] = descriptor

    def register(
        self,
        name: str,
        code: int,
        digest_size: int | None,
        engine_factory: Callable[[], DigestEngine] | None = None,
    ) -> AlgorithmDescriptor:
        """
        Register a hash algorithm.

        Args:
            name: Unique algorithm name
            code: Unique multihash code
            digest_size: Digest length in bytes, None for variable length
            engine_factory: Optional factory for DigestEngine instances

        Returns:
            The new descriptor

        Raises:
            InvalidArgumentError: If name, code or digest_size is invalid
            AlgorithmConflictError: If name or code is already registered
        """
        if not name or not isinstance(name, str):
            raise InvalidArgumentError("Algorithm name must not be empty", argument="name")
        if not isinstance(code, int) or code < 0 or code > MAX_VALUE:
            raise InvalidArgumentError(
                "Algorithm code must be a 32-bit unsigned integer",
                argument="code",
                context={"code": code},
            )
        if digest_size is not None and (digest_size <= 0 or digest_size > MAX_VALUE):
            raise InvalidArgumentError(
                "Digest size must be positive",
                argument="digest_size",
                context={"digest_size": digest_size},
            )

        descriptor = AlgorithmDescriptor(name, code, digest_size, engine_factory)
        with self._lock.write():
            self._insert(descriptor)
        get_logger().debug(
            "Registered hash algorithm %s (code=0x%x, digest_size=%s)", name, code, digest_size
        )
        return descriptor

    def register_alias(self, alias: str, target: str) -> AlgorithmDescriptor:
        """
        Register an alternative name for an existing algorithm.

        Returns:
            The target descriptor

        Raises:
            AlgorithmConflictError: If alias is already a name or alias
            AlgorithmNotFoundError: If target is not registered
        """
        if not alias:
            raise InvalidArgumentError("Alias must not be empty", argument="alias")
        with self._lock.write():
            if alias in self._by_name or alias in self._aliases:
                raise AlgorithmConflictError(
                    f"The hash algorithm name '{alias}' is already defined", name=alias
                )
            descriptor = self._by_name.get(self._aliases.get(target, target))
            if descriptor is None:
                raise AlgorithmNotFoundError(
                    f"Hash algorithm '{target}' is not registered", name=target
                )
            self._aliases[alias] = descriptor.name
        get_logger().debug("Registered alias %s for %s", alias, descriptor.name)
        return descriptor

    def deregister(self, algorithm: AlgorithmDescriptor | str | int) -> None:
        """
        Remove an algorithm.

        Accepts the exact registered descriptor, a name, an alias or a code.
        Removing an algorithm also drops its aliases; removing an alias
        leaves the algorithm in place.

        Raises:
            AlgorithmNotFoundError: If nothing matching is registered
        """
        with self._lock.write():
            if isinstance(algorithm, str) and algorithm in self._aliases:
                del self._aliases[algorithm]
                removed = f"alias {algorithm}"
            else:
                descriptor = self._find_locked(algorithm)
                del self._by_name[descriptor.name]
                del self._by_code[descriptor.code]
                for alias in [a for a, t in self._aliases.items() if t == descriptor.name]:
                    del self._aliases[alias]
                removed = descriptor.name
        get_logger().debug("Deregistered hash algorithm %s", removed)

    def _find_locked(self, algorithm: AlgorithmDescriptor | str | int) -> AlgorithmDescriptor:
        if isinstance(algorithm, AlgorithmDescriptor):
            found = self._by_name.get(algorithm.name)
            if found is not algorithm:
                raise AlgorithmNotFoundError(
                    f"Hash algorithm '{algorithm.name}' is not registered",
                    name=algorithm.name,
                    code=algorithm.code,
                )
            return found
        if isinstance(algorithm, str):
            found = self._by_name.get(algorithm)
            if found is None:
                raise AlgorithmNotFoundError(
                    f"Hash algorithm '{algorithm}' is not registered", name=algorithm
                )
            return found
        found = self._by_code.get(algorithm)
        if found is None:
            raise AlgorithmNotFoundError(
                f"Hash algorithm code 0x{algorithm:x} is not registered", code=algorithm
            )
        return found

    def by_name(self, name: str) -> AlgorithmDescriptor:
        """
        Get descriptor by algorithm name or alias.

        Raises:
            InvalidArgumentError: If name is None or empty
            AlgorithmNotFoundError: If name is not registered
        """
        if not name:
            raise InvalidArgumentError("Algorithm name must not be empty", argument="name")
        with self._lock.read():
            descriptor = self._by_name.get(self._aliases.get(name, name))
        if descriptor is None:
            raise AlgorithmNotFoundError(f"Hash algorithm '{name}' is not registered", name=name)
        return descriptor

    def by_code(self, code: int) -> AlgorithmDescriptor:
        """
        Get descriptor by multihash code.

        Raises:
            AlgorithmNotFoundError: If code is not registered
        """
        with self._lock.read():
            descriptor = self._by_code.get(code)
        if descriptor is None:
            raise AlgorithmNotFoundError(
                f"Hash algorithm code 0x{code:x} is not registered", code=code
            )
        return descriptor

    def get(self, name: str) -> AlgorithmDescriptor | None:
        """Get descriptor by name, or None if not found."""
        with self._lock.read():
            return self._by_name.get(self._aliases.get(name, name))

    def get_by_code(self, code: int) -> AlgorithmDescriptor | None:
        """Get descriptor by code, or None if not found. Used on the parse path."""
        with self._lock.read():
            return self._by_code.get(code)

    def get_name(self, code: int) -> str:
        """Name of the algorithm registered under code."""
        return self.by_code(code).name

    def all(self) -> list[AlgorithmDescriptor]:
        """Snapshot of all registered descriptors, ordered by code."""
        with self._lock.read():
            return sorted(self._by_code.values(), key=lambda d: d.code)

    def create_engine(self, name: str) -> DigestEngine:
        """
        Create a digest engine for the given algorithm.

        Raises:
            AlgorithmNotFoundError: If algorithm not registered
            AlgorithmNotImplementedError: If it has no engine
        """
        return self.by_name(name).create_engine()

    def compute_digest(self, name: str, data: bytes) -> bytes:
        """Raw digest of data (no multihash prefix)."""
        return self.create_engine(name).compute(data)

    @property
    def available_algorithms(self) -> list[str]:
        """Names of algorithms that can be computed locally."""
        return [d.name for d in self.all() if d.is_implemented]

    @property
    def aliases(self) -> dict[str, str]:
        with self._lock.read():
            return dict(self._aliases)

    def __contains__(self, name: object) -> bool:
        """Check if a name or alias is registered."""
        with self._lock.read():
            return name in self._by_name or name in self._aliases

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._by_code)


# -------------------------------------------------------------------------
# Process-wide default registry
# -------------------------------------------------------------------------

_default_registry: HashingAlgorithmRegistry | None = None
_default_lock = threading.Lock()


def get_default_registry() -> HashingAlgorithmRegistry:
    """
    Return the registry used when none is passed explicitly.

    A registry registered in the ServiceContainer takes precedence;
    otherwise a module-level instance with the built-ins is created on
    first use.
    """
    registry = try_resolve(HashingAlgorithmRegistry)
    if registry is not None:
        return registry

    global _default_registry
    if _default_registry is None:
        with _default_lock:
            if _default_registry is None:
                _default_registry = HashingAlgorithmRegistry()
    return _default_registry


def reset_default_registry() -> None:
    """Discard the module-level default registry (for testing)."""
    global _default_registry
    with _default_lock:
        _default_registry = None
