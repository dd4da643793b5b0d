"""
Exception classes for itc-reporter-client.
"""

from typing import Optional


class ReporterError(Exception):
    """Base exception class for iTunes Connect Reporter errors."""

    pass


class ConfigError(ReporterError):
    """Raised when the client configuration is invalid."""

    pass


class ValidationError(ReporterError):
    """Raised when request arguments fail validation."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class TransportError(ReporterError):
    """Raised when the HTTP request could not be completed."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class RemoteError(ReporterError):
    """Raised when the Reporter service answers with a non-success status.

    The message is the response body verbatim.
    """

    def __init__(self, body: bytes, status_code: int):
        super().__init__(body.decode("utf-8", errors="replace"))
        self.body = body
        self.status_code = status_code


class NotSupportedError(ReporterError):
    """Raised for remote operations this client does not implement."""

    pass
