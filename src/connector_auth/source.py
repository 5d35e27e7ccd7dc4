"""Reads the raw connector authentication table from disk."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import tomli

from .config import FILE_PATH_ENV_VAR, ConnectorAuthSettings
from .exceptions import (
    ConnectorAuthConfigError,
    ConnectorAuthFileError,
    ConnectorAuthParseError,
)

logger = logging.getLogger(__name__)


def resolve_auth_file_path(settings: ConnectorAuthSettings) -> Path:
    """Return the configured auth file path or fail before touching disk."""

    if settings.file_path is None:
        raise ConnectorAuthConfigError(
            f"Connector authentication file path not set. Export {FILE_PATH_ENV_VAR} "
            "pointing at the connector auth TOML file."
        )
    return settings.file_path


def read_auth_file(path: Path) -> str:
    """Return the auth file contents decoded as UTF-8."""

    logger.debug("Reading connector authentication file", extra={"path": str(path)})
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConnectorAuthFileError(
            f"Failed to read connector authentication file at {path}: {exc.strerror or exc}"
        ) from exc
    except UnicodeDecodeError:
        # The decode error quotes the offending bytes.
        raise ConnectorAuthFileError(
            f"Connector authentication file at {path} is not valid UTF-8"
        ) from None


def parse_auth_table(text: str, source: Path | str = "<string>") -> dict[str, Any]:
    """Parse TOML content into a mapping of connector name to raw value."""

    try:
        return tomli.loads(text)
    except tomli.TOMLDecodeError as exc:
        # Only the decoder's syntax message is kept; the chained error carries the document.
        raise ConnectorAuthParseError(
            f"Invalid TOML in connector authentication file {source}: {exc.args[0]}"
        ) from None


def load_raw_auth_table(settings: ConnectorAuthSettings | None = None) -> dict[str, Any]:
    """Resolve, read and parse the auth file.

    The file is read again on every call; callers that need a single snapshot
    should hold on to the returned mapping.
    """

    settings = settings or ConnectorAuthSettings()
    path = resolve_auth_file_path(settings)
    return parse_auth_table(read_auth_file(path), source=path)


__all__ = [
    "load_raw_auth_table",
    "parse_auth_table",
    "read_auth_file",
    "resolve_auth_file_path",
]
