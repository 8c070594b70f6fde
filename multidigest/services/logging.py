"""
stdlib-backed ILogger implementations.

Output is opt-in: a fresh MultidigestLogger has no handlers until stderr
or a log file is enabled, so importing the library never writes anything.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, ClassVar

from ..core.interfaces.logger import ILogger


class MultidigestLogger(ILogger):
    """
    ILogger over a named stdlib logger.

    Handlers own the level, the underlying logger passes everything.
    The log file rotates at MAX_FILE_SIZE, keeping BACKUP_COUNT old files.
    """

    MAX_FILE_SIZE = 10 * 1024 * 1024
    BACKUP_COUNT = 3
    FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

    LEVEL_MAP: ClassVar[dict[str, int]] = {
        "debug": logging.DEBUG,
        "info": logging.INFO,
        "warning": logging.WARNING,
        "error": logging.ERROR,
    }

    def __init__(
        self,
        name: str = "multidigest",
        level: str = "warning",
        console: bool = False,
        log_file: str | Path | None = None,
    ) -> None:
        """
        Args:
            name: stdlib logger name; handlers previously attached to it are replaced
            level: debug, info, warning or error (unknown names mean warning)
            console: Write to stderr
            log_file: Write to this rotating file; parent directories are created
        """
        self._logger = logging.getLogger(name)
        self._logger.setLevel(logging.DEBUG)
        self._logger.propagate = False
        self.close()

        formatter = logging.Formatter(self.FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
        handlers: list[logging.Handler] = []
        if console:
            handlers.append(logging.StreamHandler(sys.stderr))
        if log_file is not None:
            path = Path(log_file).expanduser()
            path.parent.mkdir(parents=True, exist_ok=True)
            handlers.append(
                RotatingFileHandler(
                    path, maxBytes=self.MAX_FILE_SIZE, backupCount=self.BACKUP_COUNT
                )
            )

        for handler in handlers:
            handler.setFormatter(formatter)
            self._logger.addHandler(handler)
        self.set_level(level)

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.debug(message, *args, **kwargs)

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.info(message, *args, **kwargs)

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.warning(message, *args, **kwargs)

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.error(message, *args, **kwargs)

    def set_level(self, level: str) -> None:
        threshold = self.LEVEL_MAP.get(level.lower(), logging.WARNING)
        for handler in self._logger.handlers:
            handler.setLevel(threshold)

    def close(self) -> None:
        """Detach and close every handler on the underlying logger."""
        for handler in list(self._logger.handlers):
            self._logger.removeHandler(handler)
            handler.close()


class NullLogger(ILogger):
    """Discards everything. Used until bootstrap() registers a real logger."""

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def set_level(self, level: str) -> None:
        pass
