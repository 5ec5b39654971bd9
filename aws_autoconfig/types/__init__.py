"""Type definitions for aws-autoconfig."""

from aws_autoconfig.types.services import (
    ASYNC_SUFFIX,
    DEFAULT_ASYNC_PROFILE,
    DEFAULT_PROFILE,
    DEFAULT_SERVICE_NAMES,
    RESERVED_KEYS,
    async_key,
    base_service_name,
    default_profile_key,
    is_async,
    provider_name,
)

__all__ = [
    "ASYNC_SUFFIX",
    "DEFAULT_ASYNC_PROFILE",
    "DEFAULT_PROFILE",
    "DEFAULT_SERVICE_NAMES",
    "RESERVED_KEYS",
    "async_key",
    "base_service_name",
    "default_profile_key",
    "is_async",
    "provider_name",
]
