"""
Interface definitions for multidigest's pluggable services.
"""

from .logger import ILogger

__all__ = ["ILogger"]
