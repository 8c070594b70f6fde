"""
Application bootstrap for multidigest.

Initializes the DI container from settings. Calling it is optional: without
it the library uses a NullLogger and a default registry of built-ins.
"""

from __future__ import annotations

from pathlib import Path

from .container import ServiceContainer, get_container
from .interfaces.logger import ILogger

_initialized = False


def bootstrap(
    config_path: Path | None = None,
    start_dir: str | None = None,
) -> ServiceContainer:
    """
    Bootstrap multidigest.

    Initializes the DI container with:
    - ILogger configured from the [logging] section
    - The default HashingAlgorithmRegistry, with the [registry] section applied

    Args:
        config_path: Explicit path to a config file
        start_dir: Directory to start searching for a config file from

    Returns:
        Initialized ServiceContainer
    """
    global _initialized

    container = get_container()

    if _initialized:
        return container

    from .settings import load_settings

    settings = load_settings(config_path=config_path, start_dir=start_dir)

    _register_logger(container, settings)
    _register_registry(container, settings)

    if settings.config_error:
        container.resolve(ILogger).warning("%s", settings.config_error)  # type: ignore[type-abstract]

    _initialized = True
    return container


def _register_logger(container: ServiceContainer, settings) -> None:
    """Register the logger described by the [logging] section."""
    from ..services.logging import MultidigestLogger

    def create_logger() -> ILogger:
        return MultidigestLogger(
            level=settings.logging.level,
            console=settings.logging.console,
            log_file=settings.logging.file,
        )

    container.register_singleton(ILogger, factory=create_logger)  # type: ignore[type-abstract]


def _register_registry(container: ServiceContainer, settings) -> None:
    """Build the default registry and add configured metadata-only algorithms."""
    from ..hashing.registry import HashingAlgorithmRegistry

    registry = HashingAlgorithmRegistry(register_defaults=settings.registry.builtins)
    for extra in settings.registry.extra:
        registry.register(extra.name, extra.code, extra.digest_size)

    container.register_singleton(HashingAlgorithmRegistry, implementation=registry)


def reset() -> None:
    """
    Reset the application state.

    Useful for testing to ensure clean state between tests.
    """
    global _initialized
    from ..hashing.registry import reset_default_registry

    ServiceContainer.reset()
    reset_default_registry()
    _initialized = False


def is_initialized() -> bool:
    """Check if multidigest has been bootstrapped."""
    return _initialized
