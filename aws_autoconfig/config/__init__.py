"""Client configuration loading and resolution."""

from aws_autoconfig.config.loaders import (
    DEFAULT_NAMESPACE,
    DEFAULT_STORAGE_KEY,
    load_config,
    load_environ,
    load_properties,
    load_yaml_config,
)
from aws_autoconfig.config.resolver import (
    ConfigResolver,
    EffectiveClientSettings,
    EndpointConfiguration,
)
from aws_autoconfig.config.schemas import (
    AutoConfiguration,
    ClientConfiguration,
    EndpointSettings,
    ProxyOptions,
    RetryOptions,
    S3Options,
    ServiceSettings,
    StorageOverlay,
)

__all__ = [
    # Loaders
    "DEFAULT_NAMESPACE",
    "DEFAULT_STORAGE_KEY",
    "load_config",
    "load_environ",
    "load_properties",
    "load_yaml_config",
    # Resolution
    "ConfigResolver",
    "EffectiveClientSettings",
    "EndpointConfiguration",
    # Schemas
    "AutoConfiguration",
    "ClientConfiguration",
    "EndpointSettings",
    "ProxyOptions",
    "RetryOptions",
    "S3Options",
    "ServiceSettings",
    "StorageOverlay",
]
