"""Settings locating the connector authentication file."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

FILE_PATH_ENV_VAR = "CONNECTOR_AUTH_FILE_PATH"


class ConnectorAuthSettings(BaseSettings):
    """Settings consumed by the connector authentication loaders.

    Typical usage is exporting ``CONNECTOR_AUTH_FILE_PATH`` before running
    the connector test suite::

        export CONNECTOR_AUTH_FILE_PATH="tests/connectors/sample_auth.toml"
    """

    file_path: Path | None = Field(
        default=None,
        description="Path to the TOML file holding per-connector credentials",
    )
    dummy_connector: bool = Field(
        default=False,
        description="Include the dummy connector in the static authentication record",
    )

    model_config = SettingsConfigDict(
        env_prefix="CONNECTOR_AUTH_",
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )


__all__ = ["FILE_PATH_ENV_VAR", "ConnectorAuthSettings"]
