"""Infers each connector's authentication shape from the keys it defines."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any

from .auth_type import BodyKey, ConnectorAuthType, HeaderKey, MultiAuthKey, NoKey, SignatureKey
from .config import ConnectorAuthSettings
from .exceptions import ConnectorAuthSchemaError
from .source import load_raw_auth_table

logger = logging.getLogger(__name__)

AUTH_FIELDS = ("api_key", "key1", "api_secret", "key2")


def _as_str(value: Any, field: str, *, strict: bool) -> str:
    if isinstance(value, str):
        return value
    if strict:
        raise ConnectorAuthSchemaError(
            f"Field '{field}' must be a string, got {type(value).__name__}"
        )
    return ""


def classify_auth_entry(value: Any, *, strict: bool = False) -> ConnectorAuthType:
    """Return the canonical auth value for one raw connector entry.

    The shape is chosen from which of ``api_key``, ``key1``, ``api_secret``
    and ``key2`` are present. Any other combination, or a value that is not
    a table, yields :class:`NoKey`, and a recognised field holding a
    non-string value becomes ``""``. With ``strict=True`` both cases raise
    :class:`ConnectorAuthSchemaError` instead.
    """

    if not isinstance(value, Mapping):
        if strict:
            raise ConnectorAuthSchemaError(
                f"Expected a table of credentials, got {type(value).__name__}"
            )
        return NoKey()

    api_key, key1, api_secret, key2 = (value.get(field) for field in AUTH_FIELDS)
    present = tuple(field in value for field in AUTH_FIELDS)

    match present:
        case (True, False, False, False):
            return HeaderKey(api_key=_as_str(api_key, "api_key", strict=strict))
        case (True, True, False, False):
            return BodyKey(
                api_key=_as_str(api_key, "api_key", strict=strict),
                key1=_as_str(key1, "key1", strict=strict),
            )
        case (True, True, True, False):
            return SignatureKey(
                api_key=_as_str(api_key, "api_key", strict=strict),
                key1=_as_str(key1, "key1", strict=strict),
                api_secret=_as_str(api_secret, "api_secret", strict=strict),
            )
        case (True, True, True, True):
            return MultiAuthKey(
                api_key=_as_str(api_key, "api_key", strict=strict),
                key1=_as_str(key1, "key1", strict=strict),
                api_secret=_as_str(api_secret, "api_secret", strict=strict),
                key2=_as_str(key2, "key2", strict=strict),
            )

    if strict:
        defined = [field for field, is_set in zip(AUTH_FIELDS, present) if is_set]
        raise ConnectorAuthSchemaError(
            f"Unsupported combination of credential fields: {defined}"
        )
    return NoKey()


def build_auth_map(
    raw_table: Mapping[str, Any], *, strict: bool = False
) -> dict[str, ConnectorAuthType]:
    """Classify every entry of a raw connector table."""

    auth_map: dict[str, ConnectorAuthType] = {}
    for connector_name, entry in raw_table.items():
        try:
            auth_map[connector_name] = classify_auth_entry(entry, strict=strict)
        except ConnectorAuthSchemaError as exc:
            raise ConnectorAuthSchemaError(f"Connector '{connector_name}': {exc}") from exc
    return auth_map


class ConnectorAuthenticationMap:
    """Read-only mapping of connector name to its canonical auth value."""

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[str, ConnectorAuthType]) -> None:
        self._entries: Mapping[str, ConnectorAuthType] = MappingProxyType(dict(entries))

    @classmethod
    def from_table(
        cls, raw_table: Mapping[str, Any], *, strict: bool = False
    ) -> ConnectorAuthenticationMap:
        """Classify an in-memory raw table."""

        return cls(build_auth_map(raw_table, strict=strict))

    @classmethod
    def load(
        cls, settings: ConnectorAuthSettings | None = None, *, strict: bool = False
    ) -> ConnectorAuthenticationMap:
        """Read the configured auth file and classify every connector in it."""

        auth_map = cls.from_table(load_raw_auth_table(settings), strict=strict)
        logger.info(
            "Loaded connector authentication map",
            extra={"connector_count": len(auth_map)},
        )
        return auth_map

    def inner(self) -> Mapping[str, ConnectorAuthType]:
        """Return a read-only view of every connector's auth value."""

        return self._entries

    def get(self, connector_name: str) -> ConnectorAuthType | None:
        """Return the auth value of ``connector_name``, or ``None`` if absent."""

        return self._entries.get(connector_name)

    def __getitem__(self, connector_name: str) -> ConnectorAuthType:
        return self._entries[connector_name]

    def __contains__(self, connector_name: object) -> bool:
        return connector_name in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConnectorAuthenticationMap):
            return NotImplemented
        return dict(self._entries) == dict(other._entries)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        shapes = {name: auth.auth_type.value for name, auth in self._entries.items()}
        return f"{type(self).__name__}({shapes!r})"


def load_connector_auth_map(
    settings: ConnectorAuthSettings | None = None, *, strict: bool = False
) -> ConnectorAuthenticationMap:
    """Load and classify the configured auth file."""

    return ConnectorAuthenticationMap.load(settings, strict=strict)


__all__ = [
    "AUTH_FIELDS",
    "ConnectorAuthenticationMap",
    "build_auth_map",
    "classify_auth_entry",
    "load_connector_auth_map",
]
