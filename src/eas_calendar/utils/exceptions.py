"""Custom exceptions for the EAS calendar client."""

from typing import Optional


class EASError(Exception):
    """Base exception for EAS client errors."""


class ConfigError(EASError):
    """Raised when the configuration file is missing, unreadable or malformed."""


class NetworkError(EASError):
    """Raised when a request to the server fails at the transport level."""


class ParseError(EASError):
    """Raised when a server response or stored document cannot be parsed."""


class PersistenceError(EASError):
    """Raised when the folder list cannot be written or read back."""


class CreationFailure(EASError):
    """Raised when the server rejects an event creation request."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status
