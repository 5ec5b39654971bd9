"""
Any - shared components for aws-autoconfig.

This module defines the exceptions, logging, protocols, session factory and
DI container used throughout aws-autoconfig.
"""

from aws_autoconfig.any.cloud_sessions import Boto3SessionFactory
from aws_autoconfig.any.container import (
    AutoConfigContainer,
    container,
    create_client_container,
    get_client_configurer,
    get_client_registrar,
    get_clients,
    get_resolver,
    get_session_factory,
)
from aws_autoconfig.any.exceptions import (
    AutoConfigError,
    AutoConfigurationError,
    ClientConstructionError,
    ServiceNotRegisteredError,
)
from aws_autoconfig.any.logging import get_logger, setup_logging
from aws_autoconfig.any.protocols import ClientBuilder, CloudSessionFactory

__all__ = [
    # Exceptions
    "AutoConfigError",
    "AutoConfigurationError",
    "ClientConstructionError",
    "ServiceNotRegisteredError",
    # Logging
    "get_logger",
    "setup_logging",
    # Protocols
    "ClientBuilder",
    "CloudSessionFactory",
    # DI Container
    "AutoConfigContainer",
    "container",
    "create_client_container",
    "get_client_configurer",
    "get_client_registrar",
    "get_clients",
    "get_resolver",
    "get_session_factory",
    # Cloud Sessions
    "Boto3SessionFactory",
]
