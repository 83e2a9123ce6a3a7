"""
Custom exception hierarchy for filehash.

Every error raised by the library derives from FilehashException, so callers
can tell "digest not computed" apart from programming errors with a single
except clause while still branching on the concrete type.
"""

from __future__ import annotations

from collections.abc import Iterable


class FilehashException(Exception):
    """
    Base exception for all filehash errors.

    Attributes:
        message: Human-readable error description
        context: Additional debugging context (offsets, names, URLs, etc.)
        exit_code: Suggested exit code for CLI (default: 1)
        recoverable: Whether retry/recovery may be possible
    """

    exit_code: int = 1
    recoverable: bool = True

    def __init__(
        self,
        message: str,
        *,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.message = message
        self.context = dict(context or {})
        if cause is not None:
            self.__cause__ = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


# =============================================================================
# Hashing Errors
# =============================================================================


class FilehashHashingError(FilehashException):
    """Base class for errors raised while computing a digest."""

    pass


class AlgorithmNotSupportedError(FilehashHashingError, LookupError):
    """
    The requested algorithm name is not registered.

    Carries every registered name so the caller can pick a supported one.
    """

    recoverable: bool = False

    def __init__(
        self,
        requested_name: str,
        supported_names: Iterable[str],
        *,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.requested_name = requested_name
        self.supported_names = sorted(supported_names)
        ctx = dict(context or {})
        ctx["expected"] = ", ".join(self.supported_names)
        super().__init__(
            f"Invalid hash function name: {requested_name}",
            context=ctx,
            cause=cause,
        )


class SourceReadError(FilehashHashingError):
    """
    Reading from the data source failed.

    Raised for I/O errors and for sources that end before the requested
    range does. No partial digest is produced.
    """

    def __init__(
        self,
        message: str,
        *,
        offset: int,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.offset = offset
        ctx = dict(context or {})
        ctx["offset"] = offset
        super().__init__(message, context=ctx, cause=cause)


class RegistryFrozenError(FilehashHashingError):
    """Attempt to register an algorithm into a frozen registry."""

    recoverable: bool = False

    def __init__(
        self,
        message: str,
        *,
        algorithm: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = dict(context or {})
        if algorithm:
            ctx["algorithm"] = algorithm
        super().__init__(message, context=ctx, cause=cause)


# =============================================================================
# Validation Errors
# =============================================================================


class FilehashValidationError(FilehashException, ValueError):
    """
    Base class for input validation errors.

    Inherits from ValueError so generic argument checks still catch it.
    """

    recoverable: bool = False


class InvalidRangeError(FilehashValidationError):
    """A byte range with a negative begin or an end before its begin."""

    def __init__(
        self,
        message: str,
        *,
        begin: int | None = None,
        end: int | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = dict(context or {})
        if begin is not None:
            ctx["begin"] = begin
        if end is not None:
            ctx["end"] = end
        super().__init__(message, context=ctx, cause=cause)


# =============================================================================
# Configuration Errors
# =============================================================================


class FilehashConfigError(FilehashException):
    """Base class for configuration-related errors."""

    pass


class ConfigFileError(FilehashConfigError):
    """
    Error reading or parsing a configuration file.

    Raised for TOML parsing errors, permission errors, etc.
    """

    def __init__(
        self,
        message: str,
        *,
        file_path: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = dict(context or {})
        if file_path:
            ctx["file_path"] = file_path
        super().__init__(message, context=ctx, cause=cause)


class ConfigValidationError(FilehashConfigError, ValueError):
    """Invalid or unknown configuration key or value."""

    def __init__(
        self,
        message: str,
        *,
        key: str | None = None,
        value: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = dict(context or {})
        if key:
            ctx["key"] = key
        if value is not None:
            ctx["value"] = value
        super().__init__(message, context=ctx, cause=cause)


# =============================================================================
# Network Errors (real IP lookup)
# =============================================================================


class RealIPError(FilehashException):
    """Base class for public address discovery errors."""

    pass


class UnknownAddressFamilyError(RealIPError, ValueError):
    """The address family is neither AF_INET nor AF_INET6."""

    recoverable: bool = False

    def __init__(
        self,
        message: str = "Unknown address family",
        *,
        family: int | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = dict(context or {})
        if family is not None:
            ctx["family"] = family
        super().__init__(message, context=ctx, cause=cause)


class IPNotFoundError(RealIPError):
    """No address of the requested family was found."""

    def __init__(
        self,
        message: str = "IP not found",
        *,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, context=context, cause=cause)


class RealIPRequestError(RealIPError):
    """
    The address lookup service could not be reached or answered badly.

    Raised for connection failures, timeouts and HTTP errors.
    """

    def __init__(
        self,
        message: str,
        *,
        url: str | None = None,
        timeout: float | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = dict(context or {})
        if url:
            ctx["url"] = url
        if timeout is not None:
            ctx["timeout"] = timeout
        super().__init__(message, context=ctx, cause=cause)
