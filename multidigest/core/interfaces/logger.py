"""
Logger interface for internal diagnostic output.

Library code never prints; diagnostics go through ILogger so embedding
applications decide whether anything is emitted at all.
"""

from abc import ABC, abstractmethod
from typing import Any


class ILogger(ABC):
    """
    Diagnostic sink for registry changes and unknown codes seen while parsing.

    Messages use %-style placeholders with lazy ``args``, as in stdlib logging.
    """

    @abstractmethod
    def debug(self, message: str, *args: Any, **kwargs: Any) -> None: ...

    @abstractmethod
    def info(self, message: str, *args: Any, **kwargs: Any) -> None: ...

    @abstractmethod
    def warning(self, message: str, *args: Any, **kwargs: Any) -> None: ...

    @abstractmethod
    def error(self, message: str, *args: Any, **kwargs: Any) -> None: ...

    @abstractmethod
    def set_level(self, level: str) -> None:
        """Set the threshold: 'debug', 'info', 'warning' or 'error'."""
