"""
Dependency injection helpers for multidigest.

Provides lazy resolution patterns that fall back to default
implementations when nothing has been bootstrapped.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable

T = TypeVar("T")


def resolve_or_default(
    interface: type[T],
    default_factory: Callable[[], T],
) -> T:
    """Resolve a service from the container or create a default.

    Args:
        interface: The interface/protocol type to resolve
        default_factory: Callable that creates the default implementation

    Returns:
        Resolved service instance or default

    Example:
        >>> from multidigest.core.interfaces.logger import ILogger
        >>> from multidigest.services.logging import NullLogger
        >>> logger = resolve_or_default(ILogger, NullLogger)
    """
    try:
        from .container import get_container

        instance = get_container().try_resolve(interface)
        if instance is not None:
            return instance
    except Exception:
        # Container not bootstrapped or resolution failed
        pass

    return default_factory()


def get_logger():
    """Return the bootstrapped ILogger, or a NullLogger."""
    from ..services.logging import NullLogger
    from .interfaces.logger import ILogger

    return resolve_or_default(ILogger, NullLogger)  # type: ignore[type-abstract]
