"""
Smapp SDK Exceptions

This module contains exception classes raised by Smapp SDK clients.
Every call either returns a fully decoded result or raises one of these.
"""

from typing import Optional

ERROR_PREFIX = "smapp reverse geo-code: "


class SmappError(Exception):
    """Base exception class for all Smapp SDK errors, dood!

    Attributes:
        message: Human-readable error message
        cause: Underlying exception (if any)
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause is not None:
            return f"{self.message}: {self.cause}"
        return self.message


class ConfigurationError(SmappError):
    """Raised when SDK configuration can't be loaded or is incomplete."""


class ContextError(SmappError):
    """Base class for reasons a Context is done."""


class ContextCanceled(ContextError):
    """Context was cancelled by its owner (or by its parent)."""

    def __init__(self, message: str = "context canceled") -> None:
        super().__init__(message)


class ContextDeadlineExceeded(ContextError):
    """Context deadline has passed."""

    def __init__(self, message: str = "context deadline exceeded") -> None:
        super().__init__(message)


class RequestConstructionError(SmappError):
    """Raised when HTTP request can't be built (malformed URL and so on).

    This is a configuration problem, retrying won't help.
    """

    def __init__(self, cause: BaseException) -> None:
        super().__init__(ERROR_PREFIX + "could not create request", cause)


class InvalidKeySourceError(SmappError):
    """Raised when API key source is neither header nor query param.

    Raised before any network activity.
    """

    def __init__(self, keySource: str) -> None:
        super().__init__(ERROR_PREFIX + f"invalid api key source: {keySource}")
        self.keySource = keySource


class TransportError(SmappError):
    """Raised when request could not be made.

    This includes connection errors, timeouts and context cancellation.
    In the latter case `cause` is a ContextError.
    """

    def __init__(self, cause: BaseException) -> None:
        super().__init__(ERROR_PREFIX + "could not make a request due to this error", cause)


class UnexpectedStatusError(SmappError):
    """Raised when HTTP status of response is not 200."""

    def __init__(self, statusCode: int) -> None:
        super().__init__(ERROR_PREFIX + f"non 200 status: {statusCode}")
        self.statusCode = statusCode


class DecodeError(SmappError):
    """Raised when response body doesn't match expected JSON envelope."""

    def __init__(self, reason: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(ERROR_PREFIX + f"could not serialize response due to: {reason}", cause)


class ApplicationStatusError(SmappError):
    """Raised when HTTP succeeded but envelope status is not OK."""

    def __init__(self, status: str) -> None:
        super().__init__(ERROR_PREFIX + "status of request is not OK")
        self.status = status
