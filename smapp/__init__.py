"""
Smapp SDK

Python async SDK for Smapp map services.
"""

from .context import Context
from .exceptions import (
    ApplicationStatusError,
    ConfigurationError,
    ContextCanceled,
    ContextDeadlineExceeded,
    ContextError,
    DecodeError,
    InvalidKeySourceError,
    RequestConstructionError,
    SmappError,
    TransportError,
    UnexpectedStatusError,
)
from .version import VERSION, getUserAgent

__all__ = [
    "VERSION",
    "getUserAgent",
    "Context",
    "SmappError",
    "ConfigurationError",
    "ContextError",
    "ContextCanceled",
    "ContextDeadlineExceeded",
    "RequestConstructionError",
    "InvalidKeySourceError",
    "TransportError",
    "UnexpectedStatusError",
    "DecodeError",
    "ApplicationStatusError",
]
