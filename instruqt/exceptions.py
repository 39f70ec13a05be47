"""Errors raised by the Instruqt client."""

from typing import Any


class InstruqtError(Exception):
    """Base exception for everything the client raises."""


class TransportError(InstruqtError):
    """Raised when the HTTP round trip fails or returns a non-2xx status."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class GraphQLError(InstruqtError):
    """Raised when the GraphQL response contains errors."""

    def __init__(self, message: str, errors: list[dict[str, Any]]) -> None:
        super().__init__(message)
        self.errors = errors


class ResponseDecodeError(InstruqtError):
    """Raised when a response is not JSON or does not fit the expected shape."""


class PIIEncryptionError(InstruqtError):
    """Raised when PII cannot be encrypted with the team public key."""
