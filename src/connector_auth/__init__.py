"""Connector credential loading for payment connector integration tests."""

from .auth_type import (
    AuthType,
    BodyKey,
    ConnectorAuthType,
    HeaderKey,
    MultiAuthKey,
    NoKey,
    SignatureKey,
)
from .authentication import (
    ConnectorAuthentication,
    DummyConnectorAuthentication,
    load_connector_authentication,
)
from .classifier import (
    AUTH_FIELDS,
    ConnectorAuthenticationMap,
    build_auth_map,
    classify_auth_entry,
    load_connector_auth_map,
)
from .config import FILE_PATH_ENV_VAR, ConnectorAuthSettings
from .exceptions import (
    ConnectorAuthConfigError,
    ConnectorAuthError,
    ConnectorAuthFileError,
    ConnectorAuthParseError,
    ConnectorAuthSchemaError,
)
from .schemas import (
    AutomationConfigs,
    BodyKeyConfig,
    HeaderKeyConfig,
    MultiAuthKeyConfig,
    SignatureKeyConfig,
)
from .source import load_raw_auth_table

__all__ = [
    "AUTH_FIELDS",
    "AuthType",
    "AutomationConfigs",
    "BodyKey",
    "BodyKeyConfig",
    "ConnectorAuthConfigError",
    "ConnectorAuthError",
    "ConnectorAuthFileError",
    "ConnectorAuthParseError",
    "ConnectorAuthSchemaError",
    "ConnectorAuthSettings",
    "ConnectorAuthType",
    "ConnectorAuthentication",
    "ConnectorAuthenticationMap",
    "DummyConnectorAuthentication",
    "FILE_PATH_ENV_VAR",
    "HeaderKey",
    "HeaderKeyConfig",
    "MultiAuthKey",
    "MultiAuthKeyConfig",
    "NoKey",
    "SignatureKey",
    "SignatureKeyConfig",
    "build_auth_map",
    "classify_auth_entry",
    "load_connector_auth_map",
    "load_connector_authentication",
    "load_raw_auth_table",
]
