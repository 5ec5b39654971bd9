"""Tests for configuration schemas."""

import pytest
from pydantic import ValidationError

from aws_autoconfig.config.schemas import (
    AutoConfiguration,
    ClientConfiguration,
    EndpointSettings,
    RetryOptions,
    S3Options,
    ServiceSettings,
    StorageOverlay,
)


class TestServiceSettings:
    """Tests for ServiceSettings model."""

    def test_defaults(self):
        """Test that an empty section is all-unset and enabled."""
        settings = ServiceSettings()

        assert settings.client is None
        assert settings.endpoint is None
        assert settings.region is None
        assert settings.enabled is True

    def test_kebab_case_keys(self):
        """Test that kebab-case keys are accepted."""
        settings = ServiceSettings.model_validate(
            {"endpoint": {"service-endpoint": "sns.us-west-1.amazonaws.com", "signing-region": "us-west-1"}}
        )

        assert settings.endpoint == EndpointSettings(
            service_endpoint="sns.us-west-1.amazonaws.com", signing_region="us-west-1"
        )

    def test_snake_case_keys(self):
        """Test that snake_case keys are accepted too."""
        settings = ServiceSettings.model_validate({"endpoint": {"service_endpoint": "http://localhost:4566"}})

        assert settings.endpoint.service_endpoint == "http://localhost:4566"

    def test_unknown_keys_ignored(self):
        """Test that unknown keys do not fail validation."""
        settings = ServiceSettings.model_validate({"region": "eu-west-1", "regoin": "typo", "path-style": True})

        assert settings.region == "eu-west-1"

    def test_invalid_field_dropped(self):
        """Test that an invalid value falls back to the field default."""
        settings = ServiceSettings.model_validate({"enabled": "not-a-bool", "region": "eu-west-1"})

        assert settings.enabled is True
        assert settings.region == "eu-west-1"

    def test_invalid_region_dropped(self):
        """Test that a non-string region is ignored."""
        settings = ServiceSettings.model_validate({"region": ["us-east-1"]})

        assert settings.region is None

    def test_invalid_nested_field_dropped(self):
        """Test that an invalid nested field only drops that field."""
        settings = ServiceSettings.model_validate(
            {"endpoint": {"service-endpoint": "http://localhost:4566", "signing-region": {"bad": 1}}}
        )

        assert settings.endpoint.service_endpoint == "http://localhost:4566"
        assert settings.endpoint.signing_region is None

    def test_non_mapping_section_dropped(self):
        """Test that a scalar where a section is expected is ignored."""
        settings = ServiceSettings.model_validate({"endpoint": "http://localhost:4566", "region": "eu-west-1"})

        assert settings.endpoint is None
        assert settings.region == "eu-west-1"

    def test_non_mapping_service_fails(self):
        """Test that a scalar service entry is rejected (the loader skips it)."""
        with pytest.raises(ValidationError):
            ServiceSettings.model_validate("us-west-2")

    def test_enabled_string_values(self):
        """Test that string booleans from properties are coerced."""
        assert ServiceSettings.model_validate({"enabled": "false"}).enabled is False
        assert ServiceSettings.model_validate({"enabled": "true"}).enabled is True

    def test_frozen(self):
        """Test that settings cannot be modified after load."""
        settings = ServiceSettings(region="us-east-1")

        with pytest.raises(ValidationError):
            settings.region = "eu-west-1"


class TestClientConfiguration:
    """Tests for ClientConfiguration model."""

    def test_known_fields(self):
        """Test parsing known botocore options."""
        client = ClientConfiguration.model_validate(
            {"connect-timeout": "5", "max-pool-connections": 20, "tcp-keepalive": True}
        )

        assert client.connect_timeout == 5.0
        assert client.max_pool_connections == 20
        assert client.tcp_keepalive is True

    def test_unknown_options_dropped(self):
        """Test that options botocore does not know are not passed on."""
        client = ClientConfiguration.model_validate({"conect-timeout": 5, "read-timeout": 9})

        assert client.to_config_kwargs() == {"read_timeout": 9}

    def test_nested_retry_keys_normalized(self):
        """Test that nested retry keys are converted to botocore names."""
        client = ClientConfiguration.model_validate({"retries": {"max-attempts": 5, "mode": "adaptive"}})

        assert client.retries == RetryOptions(max_attempts=5, mode="adaptive")
        assert client.to_config_kwargs() == {"retries": {"max_attempts": 5, "mode": "adaptive"}}

    def test_retry_values_coerced(self):
        """Test that string retry values from properties become integers."""
        client = ClientConfiguration.model_validate({"retries": {"max-attempts": "5", "total-max-attempts": "7"}})

        assert client.retries.max_attempts == 5
        assert client.retries.total_max_attempts == 7

    def test_invalid_retry_values_dropped(self):
        """Test that a bad retry mode or count is ignored on its own."""
        client = ClientConfiguration.model_validate({"retries": {"max-attempts": "many", "mode": "eager"}})

        assert client.retries == RetryOptions()
        assert client.to_config_kwargs() == {}

    def test_s3_options(self):
        """Test that the s3 sub-section is validated."""
        client = ClientConfiguration.model_validate(
            {"s3": {"addressing-style": "sideways", "use-arn-region": "true", "bucket": "x"}}
        )

        assert client.s3 == S3Options(use_arn_region=True)

    def test_to_config_kwargs_excludes_unset(self):
        """Test that only configured options become Config arguments."""
        client = ClientConfiguration(read_timeout=30)

        assert client.to_config_kwargs() == {"read_timeout": 30}

    def test_invalid_option_dropped(self):
        """Test that an invalid option is ignored."""
        client = ClientConfiguration.model_validate({"connect-timeout": "soon", "read-timeout": 10})

        assert client.to_config_kwargs() == {"read_timeout": 10}


class TestStorageOverlay:
    """Tests for StorageOverlay model."""

    def test_all_unset_by_default(self):
        """Test that every flag defaults to None, not False."""
        overlay = StorageOverlay()

        assert overlay.model_dump() == {
            "path_style_access_enabled": None,
            "chunked_encoding_disabled": None,
            "accelerate_mode_enabled": None,
            "payload_signing_enabled": None,
            "dualstack_enabled": None,
            "force_global_bucket_access_enabled": None,
        }

    def test_false_is_distinct_from_unset(self):
        """Test that an explicit false is kept."""
        overlay = StorageOverlay.model_validate({"accelerate-mode-enabled": False})

        assert overlay.accelerate_mode_enabled is False
        assert overlay.payload_signing_enabled is None

    def test_flags_are_independent(self):
        """Test that an invalid flag does not affect the others."""
        overlay = StorageOverlay.model_validate(
            {"path-style-access-enabled": "maybe", "dualstack-enabled": "true", "region": "us-east-1"}
        )

        assert overlay.path_style_access_enabled is None
        assert overlay.dualstack_enabled is True


class TestAutoConfiguration:
    """Tests for AutoConfiguration snapshot."""

    def test_services_read_only(self):
        """Test that the services tree cannot be modified."""
        cfg = AutoConfiguration(services={"s3": ServiceSettings()})

        with pytest.raises(TypeError):
            cfg.services["sqs"] = ServiceSettings()

    def test_defaults(self):
        """Test empty snapshot defaults."""
        cfg = AutoConfiguration()

        assert len(cfg.services) == 0
        assert cfg.storage == StorageOverlay()
        assert cfg.namespace == "aws"
        assert cfg.storage_key == "s3"
