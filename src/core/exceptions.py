"""Exception hierarchy for consistent error handling.

Every error the service raises on purpose derives from ``SolarSystemError``.
The API layer maps each subclass to an HTTP status code and returns the
``message`` as a plain-text body, so messages here are written for the client.

Key components:
- **ErrorCode enum**: Standardized error identifiers for logging
- **Severity enum**: Error classification for log levels
- **SolarSystemError**: Base exception carrying code, message and severity
- **Specialized exceptions**: Validation, not-found, store and asset errors
"""

from enum import Enum
from typing import Any


class ErrorCode(Enum):
    """Standardized error codes for the service."""

    INTERNAL_ERROR = "INTERNAL_ERROR"
    """An unexpected internal error occurred in the system."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    """Input validation failed due to invalid or malformed data."""

    NOT_FOUND = "NOT_FOUND"
    """The requested resource could not be found."""

    STORE_UNAVAILABLE = "STORE_UNAVAILABLE"
    """The document store could not answer the query."""

    ASSET_UNAVAILABLE = "ASSET_UNAVAILABLE"
    """A file served from disk is missing or unreadable."""


class Severity(Enum):
    """Severity levels used to pick the log level of a handled error."""

    LOW = "LOW"
    """Expected errors caused by client input."""

    MEDIUM = "MEDIUM"
    """Errors that affect a single feature."""

    HIGH = "HIGH"
    """Failures of a collaborator (store, disk) the service depends on."""


class SolarSystemError(Exception):
    """Base exception class for all service exceptions.

    Args:
        error_code: Unique identifier for the error type (string or ErrorCode enum)
        message: Client-facing error message
        severity: Severity level of the error (defaults to MEDIUM)
        context: Additional context information for logs
        cause: The original exception that caused this error
    """

    def __init__(
        self,
        error_code: str | ErrorCode,
        message: str,
        severity: Severity = Severity.MEDIUM,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.error_code = (
            error_code.value if isinstance(error_code, ErrorCode) else error_code
        )
        self.message = message
        self.severity = severity
        self.context = context or {}
        self.cause = cause

        super().__init__(message)
        if cause:
            self.__cause__ = cause

    @property
    def is_expected(self) -> bool:
        """Whether the error comes from normal operation (LOW or MEDIUM)."""
        return self.severity in (Severity.LOW, Severity.MEDIUM)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"

    def __repr__(self) -> str:
        class_name = self.__class__.__name__
        context_str = f", context={self.context}" if self.context else ""
        return (
            f"{class_name}(error_code='{self.error_code}', "
            f"message='{self.message}', severity={self.severity.value}{context_str})"
        )


class ValidationError(SolarSystemError):
    """Raised when request input does not meet the expected shape."""

    def __init__(
        self,
        message: str,
        error_code: str | ErrorCode = ErrorCode.VALIDATION_ERROR,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(error_code, message, Severity.LOW, context, cause)


class NotFoundError(SolarSystemError):
    """Raised when a requested record does not exist."""

    def __init__(
        self,
        message: str,
        error_code: str | ErrorCode = ErrorCode.NOT_FOUND,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(error_code, message, Severity.LOW, context, cause)


class StoreError(SolarSystemError):
    """Raised when a document store query fails.

    Wraps driver exceptions (connection refused, server selection timeout,
    authentication failure) so the API layer never sees driver types.
    """

    def __init__(
        self,
        message: str,
        error_code: str | ErrorCode = ErrorCode.STORE_UNAVAILABLE,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(error_code, message, Severity.HIGH, context, cause)


class AssetReadError(SolarSystemError):
    """Raised when a file served from disk is missing or cannot be parsed."""

    def __init__(
        self,
        message: str,
        error_code: str | ErrorCode = ErrorCode.ASSET_UNAVAILABLE,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(error_code, message, Severity.HIGH, context, cause)
