"""Custom exceptions raised while loading connector credentials."""

from __future__ import annotations


class ConnectorAuthError(Exception):
    """Base error raised for any connector authentication loading issue."""


class ConnectorAuthConfigError(ConnectorAuthError):
    """Raised when the authentication file path setting is missing."""


class ConnectorAuthFileError(ConnectorAuthError):
    """Raised when the authentication file cannot be read."""


class ConnectorAuthParseError(ConnectorAuthError):
    """Raised when the authentication file is not a valid TOML table."""


class ConnectorAuthSchemaError(ConnectorAuthError):
    """Raised when a connector entry does not match its expected key shape."""


__all__ = [
    "ConnectorAuthConfigError",
    "ConnectorAuthError",
    "ConnectorAuthFileError",
    "ConnectorAuthParseError",
    "ConnectorAuthSchemaError",
]
