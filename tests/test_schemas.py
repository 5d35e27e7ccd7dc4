"""Tests for the secret-holding credential records and their conversion."""

import pytest
from pydantic import SecretStr, ValidationError

from connector_auth import (
    AutomationConfigs,
    BodyKey,
    BodyKeyConfig,
    HeaderKey,
    HeaderKeyConfig,
    MultiAuthKey,
    MultiAuthKeyConfig,
    SignatureKey,
    SignatureKeyConfig,
)

SECRETS = {
    "api_key": "api-key-value",
    "key1": "key1-value",
    "api_secret": "api-secret-value",
    "key2": "key2-value",
}


class TestConversion:
    def test_header_key(self):
        config = HeaderKeyConfig(api_key=SecretStr("api-key-value"))

        assert config.to_auth_type() == HeaderKey(api_key="api-key-value")

    def test_body_key(self):
        config = BodyKeyConfig.model_validate({"api_key": "a", "key1": "b"})

        assert config.to_auth_type() == BodyKey(api_key="a", key1="b")

    def test_signature_key(self):
        config = SignatureKeyConfig.model_validate(
            {"api_key": "a", "key1": "b", "api_secret": "c"}
        )

        assert config.to_auth_type() == SignatureKey(api_key="a", key1="b", api_secret="c")

    def test_multi_auth_key_preserves_content(self):
        # Whitespace and unicode must survive unwrapping untouched.
        values = {
            "api_key": "  leading",
            "key1": "trailing  ",
            "api_secret": "s€cr3t/+=",
            "key2": "",
        }
        config = MultiAuthKeyConfig.model_validate(values)

        assert config.to_auth_type() == MultiAuthKey(**values)


class TestRedaction:
    @pytest.mark.parametrize(
        "config_cls", [HeaderKeyConfig, BodyKeyConfig, SignatureKeyConfig, MultiAuthKeyConfig]
    )
    def test_text_rendering_hides_values(self, config_cls):
        config = config_cls.model_validate(SECRETS)

        rendered = [str(config), repr(config), config.model_dump_json()]

        for text in rendered:
            for secret in SECRETS.values():
                assert secret not in text
        assert "**********" in repr(config)

    def test_automation_passwords_are_hidden(self):
        automation = AutomationConfigs(pypl_email="qa@example.com", pypl_pass="hunter2")

        assert "hunter2" not in repr(automation)
        assert "qa@example.com" in repr(automation)

    def test_records_are_frozen(self):
        config = HeaderKeyConfig.model_validate({"api_key": "a"})

        with pytest.raises(ValidationError):
            config.api_key = SecretStr("b")


class TestValidation:
    def test_missing_field_is_rejected(self):
        with pytest.raises(ValidationError):
            BodyKeyConfig.model_validate({"api_key": "a"})

    def test_non_string_field_is_rejected(self):
        with pytest.raises(ValidationError):
            HeaderKeyConfig.model_validate({"api_key": 123})

    def test_extra_fields_are_ignored(self):
        config = BodyKeyConfig.model_validate(SECRETS)

        assert config.to_auth_type() == BodyKey(api_key="api-key-value", key1="key1-value")

    @pytest.mark.parametrize("value", ["yes", "1", 1])
    def test_run_minimum_steps_requires_boolean(self, value):
        with pytest.raises(ValidationError):
            AutomationConfigs.model_validate({"run_minimum_steps": value})
