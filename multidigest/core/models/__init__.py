"""
Pydantic models for multidigest configuration.
"""

from .config import ExtraAlgorithmConfig, LoggingConfig, RegistryConfig

__all__ = [
    "ExtraAlgorithmConfig",
    "LoggingConfig",
    "RegistryConfig",
]
