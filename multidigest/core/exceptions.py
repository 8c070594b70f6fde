"""
Custom exception hierarchy for multidigest.

Provides a structured exception hierarchy so callers can tell apart
argument mistakes, registry lookups, corrupt data and missing engines.
Each class also derives from the closest builtin so plain ``except ValueError``
style handling keeps working.
"""

from __future__ import annotations


class MultidigestException(Exception):
    """
    Base exception for all multidigest errors.

    Attributes:
        message: Human-readable error description
        context: Additional debugging context (names, codes, sizes, etc.)
    """

    def __init__(
        self,
        message: str,
        *,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.message = message
        self.context = context or {}
        if cause is not None:
            self.__cause__ = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


# =============================================================================
# Argument Errors
# =============================================================================


class InvalidArgumentError(MultidigestException, ValueError):
    """
    Missing or empty function parameter.

    Raised for a None/empty algorithm name, None/empty digest bytes
    or a None output sink.
    """

    def __init__(
        self,
        message: str,
        *,
        argument: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if argument:
            ctx["argument"] = argument
        super().__init__(message, context=ctx, cause=cause)


# =============================================================================
# Registry Errors
# =============================================================================


class RegistryError(MultidigestException):
    """Base class for algorithm registry errors."""

    pass


class AlgorithmNotFoundError(RegistryError, KeyError):
    """
    Requested algorithm is not registered.

    Raised when a name or numeric code is absent from the registry
    at lookup time.
    """

    def __init__(
        self,
        message: str,
        *,
        name: str | None = None,
        code: int | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if name is not None:
            ctx["name"] = name
        if code is not None:
            ctx["code"] = code
        super().__init__(message, context=ctx, cause=cause)


class AlgorithmConflictError(RegistryError, ValueError):
    """
    Algorithm name or code is already registered.

    The registry is left unchanged when this is raised.
    """

    def __init__(
        self,
        message: str,
        *,
        name: str | None = None,
        code: int | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if name is not None:
            ctx["name"] = name
        if code is not None:
            ctx["code"] = code
        super().__init__(message, context=ctx, cause=cause)


class AlgorithmNotImplementedError(RegistryError, NotImplementedError):
    """
    Algorithm is known by metadata only.

    Hashes naming such an algorithm can be parsed and written, but
    not computed or verified.
    """

    def __init__(
        self,
        message: str,
        *,
        name: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if name is not None:
            ctx["name"] = name
        super().__init__(message, context=ctx, cause=cause)


# =============================================================================
# Data Errors
# =============================================================================


class DigestSizeMismatchError(MultidigestException, ValueError):
    """
    Digest length does not match a fixed-size algorithm.

    Raised both when constructing a value and when parsing binary data
    that names a known algorithm with the wrong length.
    """

    def __init__(
        self,
        message: str,
        *,
        name: str | None = None,
        expected: int | None = None,
        actual: int | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if name is not None:
            ctx["name"] = name
        if expected is not None:
            ctx["expected"] = expected
        if actual is not None:
            ctx["actual"] = actual
        super().__init__(message, context=ctx, cause=cause)


class MalformedDataError(MultidigestException, ValueError):
    """Binary or textual input cannot be decoded."""

    pass


class VarintError(MalformedDataError):
    """
    Varint decoding failed.

    Raised for an unterminated sequence or a value outside the
    32-bit unsigned range used for codes and lengths.
    """

    pass


class TruncatedDataError(MalformedDataError):
    """
    Fewer digest bytes are available than the declared length.
    """

    def __init__(
        self,
        message: str,
        *,
        expected: int | None = None,
        actual: int | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if expected is not None:
            ctx["expected"] = expected
        if actual is not None:
            ctx["actual"] = actual
        super().__init__(message, context=ctx, cause=cause)


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigValidationError(MultidigestException, ValueError):
    """
    Invalid or missing configuration value.
    """

    def __init__(
        self,
        message: str,
        *,
        key: str | None = None,
        value: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if key:
            ctx["key"] = key
        if value is not None:
            ctx["value"] = value
        super().__init__(message, context=ctx, cause=cause)
