"""
Service implementations for multidigest.
"""

from .logging import MultidigestLogger, NullLogger

__all__ = ["MultidigestLogger", "NullLogger"]
