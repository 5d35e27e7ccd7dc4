"""Canonical authentication values handed to connector integrations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar, TypeAlias


class AuthType(StrEnum):
    """Tags for the supported authentication shapes."""

    NO_KEY = "NoKey"
    HEADER_KEY = "HeaderKey"
    BODY_KEY = "BodyKey"
    SIGNATURE_KEY = "SignatureKey"
    MULTI_AUTH_KEY = "MultiAuthKey"


@dataclass(frozen=True, slots=True)
class NoKey:
    """Connector configured without usable credentials."""

    auth_type: ClassVar[AuthType] = AuthType.NO_KEY


@dataclass(frozen=True, slots=True)
class HeaderKey:
    """Single API key, usually sent as a request header."""

    api_key: str

    auth_type: ClassVar[AuthType] = AuthType.HEADER_KEY


@dataclass(frozen=True, slots=True)
class BodyKey:
    """API key plus one additional key, usually sent in the request body."""

    api_key: str
    key1: str

    auth_type: ClassVar[AuthType] = AuthType.BODY_KEY


@dataclass(frozen=True, slots=True)
class SignatureKey:
    """Key pair plus a secret used to sign requests."""

    api_key: str
    key1: str
    api_secret: str

    auth_type: ClassVar[AuthType] = AuthType.SIGNATURE_KEY


@dataclass(frozen=True, slots=True)
class MultiAuthKey:
    """Signature credentials plus a second auxiliary key."""

    api_key: str
    key1: str
    api_secret: str
    key2: str

    auth_type: ClassVar[AuthType] = AuthType.MULTI_AUTH_KEY


ConnectorAuthType: TypeAlias = NoKey | HeaderKey | BodyKey | SignatureKey | MultiAuthKey


__all__ = [
    "AuthType",
    "BodyKey",
    "ConnectorAuthType",
    "HeaderKey",
    "MultiAuthKey",
    "NoKey",
    "SignatureKey",
]
