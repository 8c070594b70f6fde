"""
Unknown-algorithm notification.

Parsing a multihash whose code is not registered does not fail: a
placeholder descriptor is synthesized and every subscribed observer is
called with it, synchronously, before the value is built. Observers can
log it, register the real algorithm, or ignore it.
"""

from __future__ import annotations

import contextlib
import threading
from collections.abc import Callable
from typing import TYPE_CHECKING

from .core.di import get_logger

if TYPE_CHECKING:
    from .hashing.registry import AlgorithmDescriptor

UnknownAlgorithmHandler = Callable[["AlgorithmDescriptor"], None]


class UnknownAlgorithmEvent:
    """
    Synchronous observer list for unknown algorithm codes.

    Handlers run in subscription order. A handler that raises is logged
    and skipped; it never aborts the parse or the remaining handlers.

    Example:
        seen = []
        unknown_algorithm.subscribe(seen.append)
        try:
            MultiHash.from_bytes(bytes([0x01, 0x02, 0x0A, 0x0B]))
        finally:
            unknown_algorithm.unsubscribe(seen.append)
    """

    def __init__(self) -> None:
        self._handlers: list[UnknownAlgorithmHandler] = []
        self._lock = threading.Lock()

    def subscribe(self, handler: UnknownAlgorithmHandler) -> UnknownAlgorithmHandler:
        """Attach a handler. Returns it, so this works as a decorator."""
        with self._lock:
            self._handlers.append(handler)
        return handler

    def unsubscribe(self, handler: UnknownAlgorithmHandler) -> None:
        """Detach a handler. Unknown handlers are ignored."""
        with self._lock, contextlib.suppress(ValueError):
            self._handlers.remove(handler)

    def clear(self) -> None:
        with self._lock:
            self._handlers.clear()

    @property
    def handlers(self) -> list[UnknownAlgorithmHandler]:
        with self._lock:
            return list(self._handlers)

    def publish(self, algorithm: AlgorithmDescriptor) -> None:
        """Call every handler with the placeholder descriptor."""
        logger = get_logger()
        logger.info(
            "Unknown hash algorithm code 0x%x, using placeholder %s",
            algorithm.code,
            algorithm.name,
        )
        for handler in self.handlers:
            try:
                handler(algorithm)
            except Exception as e:
                logger.warning(
                    "Unknown-algorithm handler %r failed for %s: %s", handler, algorithm.name, e
                )

    def __len__(self) -> int:
        with self._lock:
            return len(self._handlers)


# Process-wide default, used by MultiHash parsing unless another is passed
unknown_algorithm = UnknownAlgorithmEvent()
