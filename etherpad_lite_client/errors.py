# errors.py - exception hierarchy raised by the client
from typing import Any, Optional


class EPLiteError(Exception):
    """Base class for every error raised by this library."""


class ConfigurationError(EPLiteError):
    """Invalid client-side setup: bad base URL, empty key, unsupported verb."""


class TransportError(EPLiteError):
    """The HTTP exchange could not be completed (DNS, refused, timeout)."""


class ProtocolError(EPLiteError):
    """The response body is not a valid API envelope."""

    def __init__(self, message: str, body: Optional[str] = None):
        super().__init__(message)
        self.body = body


class RemoteError(EPLiteError):
    """The service answered with a failure status code."""

    def __init__(self, code: Any, message: Optional[str] = None):
        super().__init__(message or "")
        self.code = code
        self.message = message or ""

    def __str__(self):
        return self.message


class InvalidParametersError(RemoteError):
    pass


class InternalServerError(RemoteError):
    pass


class InvalidMethodError(RemoteError):
    pass


class InvalidApiKeyError(RemoteError):
    pass
