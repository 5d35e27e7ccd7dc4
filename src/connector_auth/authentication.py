"""Static per-connector credential record validated straight from the auth file."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from .auth_type import ConnectorAuthType
from .config import ConnectorAuthSettings
from .exceptions import ConnectorAuthSchemaError
from .schemas import (
    AutomationConfigs,
    BodyKeyConfig,
    HeaderKeyConfig,
    MultiAuthKeyConfig,
    SecretKeyRecord,
    SignatureKeyConfig,
)
from .source import load_raw_auth_table

logger = logging.getLogger(__name__)


class ConnectorAuthentication(BaseModel):
    """Credentials for every connector exercised by the test suite.

    Each field expects one fixed key shape. Unlike the classifier, a table
    that does not fit its shape makes loading fail.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    aci: BodyKeyConfig | None = None
    adyen: BodyKeyConfig | None = None
    adyen_uk: BodyKeyConfig | None = None
    airwallex: BodyKeyConfig | None = None
    authorizedotnet: BodyKeyConfig | None = None
    bambora: BodyKeyConfig | None = None
    bitpay: HeaderKeyConfig | None = None
    bluesnap: BodyKeyConfig | None = None
    cashtocode: BodyKeyConfig | None = None
    checkout: SignatureKeyConfig | None = None
    coinbase: HeaderKeyConfig | None = None
    cryptopay: BodyKeyConfig | None = None
    cybersource: SignatureKeyConfig | None = None
    dlocal: SignatureKeyConfig | None = None
    fiserv: SignatureKeyConfig | None = None
    forte: MultiAuthKeyConfig | None = None
    globalpay: BodyKeyConfig | None = None
    globepay: BodyKeyConfig | None = None
    iatapay: SignatureKeyConfig | None = None
    mollie: BodyKeyConfig | None = None
    multisafepay: HeaderKeyConfig | None = None
    nexinets: BodyKeyConfig | None = None
    noon: SignatureKeyConfig | None = None
    nmi: HeaderKeyConfig | None = None
    nuvei: SignatureKeyConfig | None = None
    opayo: HeaderKeyConfig | None = None
    opennode: HeaderKeyConfig | None = None
    payeezy: SignatureKeyConfig | None = None
    payme: BodyKeyConfig | None = None
    paypal: BodyKeyConfig | None = None
    payu: BodyKeyConfig | None = None
    powertranz: BodyKeyConfig | None = None
    rapyd: BodyKeyConfig | None = None
    shift4: HeaderKeyConfig | None = None
    stripe: HeaderKeyConfig | None = None
    stripe_au: HeaderKeyConfig | None = None
    stripe_uk: HeaderKeyConfig | None = None
    trustpay: SignatureKeyConfig | None = None
    tsys: SignatureKeyConfig | None = None
    worldpay: BodyKeyConfig | None = None
    worldline: SignatureKeyConfig | None = None
    zen: HeaderKeyConfig | None = None
    automation_configs: AutomationConfigs | None = None

    @classmethod
    def connector_names(cls) -> list[str]:
        """Return the connector fields declared on this record."""

        return [name for name in cls.model_fields if name != "automation_configs"]

    @classmethod
    def from_table(cls, raw_table: Mapping[str, Any]) -> ConnectorAuthentication:
        """Validate an in-memory raw table into this record class."""

        try:
            return cls.model_validate(raw_table)
        except ValidationError as exc:
            # The pydantic error echoes raw input values, so it is not chained.
            raise ConnectorAuthSchemaError(_describe_validation_error(exc)) from None

    @classmethod
    def load(cls, settings: ConnectorAuthSettings | None = None) -> ConnectorAuthentication:
        """Read the configured auth file into the record class for ``settings``."""

        settings = settings or ConnectorAuthSettings()
        record_cls = DummyConnectorAuthentication if settings.dummy_connector else cls
        record = record_cls.from_table(load_raw_auth_table(settings))
        logger.info(
            "Loaded connector authentication record",
            extra={
                "configured_connectors": sum(
                    getattr(record, name) is not None for name in record.connector_names()
                ),
                "dummy_connector": settings.dummy_connector,
            },
        )
        return record

    def auth_type_for(self, connector_name: str) -> ConnectorAuthType | None:
        """Return the canonical auth value of ``connector_name`` if configured."""

        if connector_name not in self.connector_names():
            raise KeyError(connector_name)
        config: SecretKeyRecord | None = getattr(self, connector_name)
        if config is None:
            return None
        return config.to_auth_type()


class DummyConnectorAuthentication(ConnectorAuthentication):
    """Record variant used when the dummy connector is enabled."""

    dummyconnector: HeaderKeyConfig | None = None


def _describe_validation_error(exc: ValidationError) -> str:
    problems = [
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors(include_input=False, include_url=False)
    ]
    return "Connector authentication file does not match the expected schema: " + "; ".join(
        problems
    )


def load_connector_authentication(
    settings: ConnectorAuthSettings | None = None,
) -> ConnectorAuthentication:
    """Load the configured auth file into the static record."""

    return ConnectorAuthentication.load(settings)


__all__ = [
    "ConnectorAuthentication",
    "DummyConnectorAuthentication",
    "load_connector_authentication",
]
