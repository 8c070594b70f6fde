"""
Configuration models.

Provides Pydantic models for multidigest configuration with validation.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

LogLevel = Literal["debug", "info", "warning", "error"]

# Codes and lengths travel as 32-bit varints
MAX_CODE = 0xFFFFFFFF


class ConfigBaseModel(BaseModel):
    """Base model for config sections with relaxed strict mode for TOML loading."""

    model_config = ConfigDict(
        strict=False,  # Allow coercion from TOML and env var types
        validate_assignment=True,
        extra="ignore",
        populate_by_name=True,
    )


class LoggingConfig(ConfigBaseModel):
    """Logging configuration section."""

    level: LogLevel = "warning"
    console: bool = False
    # Rotating log file; no file output when unset
    file: str | None = None

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> Any:
        """Accept level names in any case."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("file", mode="before")
    @classmethod
    def empty_file_is_none(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v


class ExtraAlgorithmConfig(ConfigBaseModel):
    """A metadata-only algorithm to register at bootstrap."""

    name: Annotated[str, Field(min_length=1)]
    code: Annotated[int, Field(ge=0, le=MAX_CODE)]
    digest_size: Annotated[int, Field(gt=0, le=MAX_CODE)]


class RegistryConfig(ConfigBaseModel):
    """Algorithm registry configuration section."""

    builtins: bool = True
    extra: list[ExtraAlgorithmConfig] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_unique(self) -> RegistryConfig:
        """Reject duplicate names or codes among the extra algorithms."""
        names = [a.name for a in self.extra]
        codes = [a.code for a in self.extra]
        if len(set(names)) != len(names):
            raise ValueError("registry.extra contains duplicate names")
        if len(set(codes)) != len(codes):
            raise ValueError("registry.extra contains duplicate codes")
        return self
