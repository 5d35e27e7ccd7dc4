"""Pydantic schemas for credential tables with a statically known shape.

Every credential field is a :class:`pydantic.SecretStr`, so printing or
serializing a record shows a placeholder instead of the secret. The raw
text is read only in the ``to_auth_type`` conversions below.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, SecretStr, StrictBool

from .auth_type import BodyKey, HeaderKey, MultiAuthKey, SignatureKey


class SecretKeyConfig(BaseModel):
    """Base model for credential records read from the auth file."""

    model_config = ConfigDict(frozen=True, extra="ignore")


class HeaderKeyConfig(SecretKeyConfig):
    """Credentials for connectors authenticating with a single API key."""

    api_key: SecretStr

    def to_auth_type(self) -> HeaderKey:
        return HeaderKey(api_key=self.api_key.get_secret_value())


class BodyKeyConfig(SecretKeyConfig):
    """Credentials for connectors authenticating with a key pair."""

    api_key: SecretStr
    key1: SecretStr

    def to_auth_type(self) -> BodyKey:
        return BodyKey(
            api_key=self.api_key.get_secret_value(),
            key1=self.key1.get_secret_value(),
        )


class SignatureKeyConfig(SecretKeyConfig):
    """Credentials for connectors that sign requests with an API secret."""

    api_key: SecretStr
    key1: SecretStr
    api_secret: SecretStr

    def to_auth_type(self) -> SignatureKey:
        return SignatureKey(
            api_key=self.api_key.get_secret_value(),
            key1=self.key1.get_secret_value(),
            api_secret=self.api_secret.get_secret_value(),
        )


class MultiAuthKeyConfig(SecretKeyConfig):
    """Credentials for connectors requiring all four keys."""

    api_key: SecretStr
    key1: SecretStr
    api_secret: SecretStr
    key2: SecretStr

    def to_auth_type(self) -> MultiAuthKey:
        return MultiAuthKey(
            api_key=self.api_key.get_secret_value(),
            key1=self.key1.get_secret_value(),
            api_secret=self.api_secret.get_secret_value(),
            key2=self.key2.get_secret_value(),
        )


SecretKeyRecord = HeaderKeyConfig | BodyKeyConfig | SignatureKeyConfig | MultiAuthKeyConfig


class AutomationConfigs(BaseModel):
    """Settings used by the browser-driven connector test flows."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    hs_base_url: str | None = None
    hs_api_key: SecretStr | None = None
    hs_test_browser: str | None = None
    chrome_profile_path: str | None = None
    firefox_profile_path: str | None = None
    pypl_email: str | None = None
    pypl_pass: SecretStr | None = None
    gmail_email: str | None = None
    gmail_pass: SecretStr | None = None
    configs_url: str | None = None
    stripe_pub_key: str | None = None
    testcases_path: str | None = None
    bluesnap_gateway_merchant_id: str | None = None
    globalpay_gateway_merchant_id: str | None = None
    run_minimum_steps: StrictBool | None = None
    airwallex_merchant_name: str | None = None


__all__ = [
    "AutomationConfigs",
    "BodyKeyConfig",
    "HeaderKeyConfig",
    "MultiAuthKeyConfig",
    "SecretKeyConfig",
    "SecretKeyRecord",
    "SignatureKeyConfig",
]
