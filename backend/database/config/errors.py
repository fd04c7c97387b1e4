"""
Typed errors raised while bootstrapping configuration and the database.

- BootstrapError: common base class
- ConfigurationError: missing/invalid settings, unknown timezone or driver
- DatabaseConnectionError: the database could not be reached or refused the credentials
"""

from typing import Optional, Sequence


class BootstrapError(Exception):
    """Base class for every error raised during application bootstrap."""


class ConfigurationError(BootstrapError):
    """Raised when settings are missing, malformed or unusable."""

    def __init__(self, message: str, fields: Optional[Sequence[str]] = None):
        super().__init__(message)
        self.fields = list(fields or [])


class DatabaseConnectionError(BootstrapError):
    """
    Raised when a connection to the database cannot be established.

    Attributes
    ----------
    url : str
        Connection URL with the password masked.
    """

    def __init__(self, message: str, url: str):
        super().__init__(message)
        self.url = url
