"""
aws-autoconfig - Auto-configuration of AWS SDK clients from key-value settings.

This library provides:
- Configuration loading from mappings, dotted properties, YAML and environment variables
- Per-service settings layered over "default"/"default-async" profiles
- S3 specific overlay flags
- Lazy boto3/aioboto3 clients registered in a dependency-injector container
"""

from aws_autoconfig.any.container import (
    AutoConfigContainer,
    create_client_container,
    get_clients,
    get_resolver,
)
from aws_autoconfig.any.exceptions import (
    AutoConfigError,
    AutoConfigurationError,
    ClientConstructionError,
    ServiceNotRegisteredError,
)
from aws_autoconfig.config import (
    AutoConfiguration,
    ConfigResolver,
    EffectiveClientSettings,
    EndpointConfiguration,
    StorageOverlay,
    load_config,
    load_environ,
    load_properties,
    load_yaml_config,
)

try:
    from aws_autoconfig._version import __version__
except ImportError:
    __version__ = "0.0.0.dev0"

__all__ = [
    # Exceptions
    "AutoConfigError",
    "AutoConfigurationError",
    "ClientConstructionError",
    "ServiceNotRegisteredError",
    # Configuration
    "AutoConfiguration",
    "ConfigResolver",
    "EffectiveClientSettings",
    "EndpointConfiguration",
    "StorageOverlay",
    "load_config",
    "load_environ",
    "load_properties",
    "load_yaml_config",
    # DI Container
    "AutoConfigContainer",
    "create_client_container",
    "get_clients",
    "get_resolver",
    # Version
    "__version__",
]
