"""
Configuration schemas for AWS client auto-configuration.

This module defines Pydantic models for:
- Per-service settings (``aws.<service>[-async].*``)
- Transport tuning passed through to ``botocore.config.Config``
- The storage (S3) overlay flags (``aws.s3.*``)

All models parse leniently: unknown keys are ignored and a field whose value
cannot be validated is dropped (it falls back to its default) instead of failing
the whole load. Keys may be written in kebab-case or snake_case.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Annotated, Any, Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ModelWrapValidatorHandler,
    ValidationError,
    field_validator,
    model_validator,
)

from aws_autoconfig.any.logging import get_logger

LOGGER = get_logger("aws_autoconfig.config.schemas")


def _snake_keys(data: Mapping[Any, Any]) -> dict[str, Any]:
    """Normalize ``kebab-case`` keys to ``snake_case``."""
    return {str(key).replace("-", "_"): value for key, value in data.items()}


class LenientModel(BaseModel):
    """
    Base model implementing the ignore-invalid-fields policy.

    Validation is retried with every offending top-level field removed until
    the remaining data validates. Nested models are lenient on their own, so an
    invalid nested field only drops that nested field.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    @model_validator(mode="wrap")
    @classmethod
    def _drop_invalid_fields(cls, data: Any, handler: ModelWrapValidatorHandler[Any]) -> Any:
        if not isinstance(data, Mapping):
            return handler(data)

        data = _snake_keys(data)
        unknown = data.keys() - cls.model_fields.keys()
        if unknown:
            LOGGER.debug("Ignoring unknown configuration keys", model=cls.__name__, keys=sorted(unknown))
            for key in unknown:
                del data[key]

        while True:
            try:
                return handler(data)
            except ValidationError as e:
                invalid = {err["loc"][0] for err in e.errors() if err["loc"]} & data.keys()
                if not invalid:
                    raise
                LOGGER.debug("Ignoring invalid configuration fields", model=cls.__name__, fields=sorted(invalid))
                for key in invalid:
                    del data[key]


class RetryOptions(LenientModel):
    """Retry behavior (``aws.<service>.client.retries.*``)."""

    max_attempts: int | None = None
    total_max_attempts: int | None = None
    mode: Literal["legacy", "standard", "adaptive"] | None = None


class ProxyOptions(LenientModel):
    """Proxy TLS options (``aws.<service>.client.proxies-config.*``)."""

    proxy_ca_bundle: str | None = None
    proxy_client_cert: str | None = None
    proxy_use_forwarding_for_https: bool | None = None


class S3Options(LenientModel):
    """S3 addressing options (``aws.s3.client.s3.*``)."""

    addressing_style: Literal["auto", "virtual", "path"] | None = None
    use_accelerate_endpoint: bool | None = None
    payload_signing_enabled: bool | None = None
    use_arn_region: bool | None = None
    us_east_1_regional_endpoint: Literal["regional", "legacy"] | None = None


class ClientConfiguration(LenientModel):
    """
    Transport tuning for an SDK client (``aws.<service>.client.*``).

    Field names follow ``botocore.config.Config``. Keys not listed here are
    ignored, like any other unknown configuration key.

    Example:
    -------
        aws:
          sqs:
            client:
              connect-timeout: 5
              read-timeout: 30
              retries:
                max-attempts: 5
                mode: adaptive

    """

    connect_timeout: float | None = None
    read_timeout: float | None = None
    max_pool_connections: int | None = None
    retries: RetryOptions | None = None
    proxies: dict[str, str] | None = None
    proxies_config: ProxyOptions | None = None
    user_agent: str | None = None
    user_agent_extra: str | None = None
    tcp_keepalive: bool | None = None
    parameter_validation: bool | None = None
    signature_version: str | None = None
    inject_host_prefix: bool | None = None
    use_fips_endpoint: bool | None = None
    client_cert: str | None = None
    s3: S3Options | None = None

    def to_config_kwargs(self) -> dict[str, Any]:
        """Return the explicitly set options as ``botocore.config.Config`` keyword arguments."""
        # Sub-sections whose every key was dropped contribute nothing.
        return {key: value for key, value in self.model_dump(exclude_none=True).items() if value != {}}


class EndpointSettings(LenientModel):
    """Explicit endpoint override (``aws.<service>.endpoint.*``)."""

    service_endpoint: str | None = Field(
        default=None,
        description="Service endpoint with or without the protocol "
        "(e.g. https://sns.us-west-1.amazonaws.com or sns.us-west-1.amazonaws.com)",
    )
    signing_region: str | None = Field(
        default=None,
        description="Region to use for SigV4 signing of requests (e.g. us-west-1)",
    )


class ServiceSettings(LenientModel):
    """
    Settings for one service key (``aws.<service>[-async].*``).

    Example:
    -------
        aws:
          sqs:
            endpoint:
              service-endpoint: http://localhost:4566
              signing-region: us-east-1
          sns:
            region: eu-west-1
          kinesis:
            enabled: false

    """

    client: ClientConfiguration | None = None
    endpoint: EndpointSettings | None = None
    region: Annotated[
        str | None,
        Field(description="Region used only when no endpoint is configured"),
    ] = None
    enabled: Annotated[bool, Field(description="Whether the client is registered at all")] = True


class StorageOverlay(LenientModel):
    """
    S3 client specific flags (``aws.s3.*``).

    Each flag is tri-state: ``None`` leaves the SDK default untouched, while
    ``False`` explicitly disables the behavior.
    """

    path_style_access_enabled: bool | None = None
    chunked_encoding_disabled: bool | None = None
    accelerate_mode_enabled: bool | None = None
    payload_signing_enabled: bool | None = None
    dualstack_enabled: bool | None = None
    force_global_bucket_access_enabled: bool | None = None


class AutoConfiguration(BaseModel):
    """
    Loaded configuration snapshot: the service settings tree plus the storage overlay.

    The tree is exposed as a read-only mapping and is never mutated after load.
    """

    model_config = ConfigDict(frozen=True)

    services: Mapping[str, ServiceSettings] = Field(default_factory=dict, validate_default=True)
    storage: StorageOverlay = Field(default_factory=StorageOverlay)
    namespace: str = "aws"
    storage_key: str = "s3"

    @field_validator("services", mode="after")
    @classmethod
    def _freeze_services(cls, v: Mapping[str, ServiceSettings]) -> Mapping[str, ServiceSettings]:
        return MappingProxyType(dict(v))
