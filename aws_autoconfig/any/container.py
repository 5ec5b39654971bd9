"""
Dependency injection container for aws-autoconfig.

Wires configuration, resolver, session factory, configurer and registrar.
Uses dependency-injector for clean DI with singletons.
"""

from collections.abc import Iterable

from dependency_injector import containers, providers

from aws_autoconfig.any.cloud_sessions import Boto3SessionFactory
from aws_autoconfig.any.protocols import CloudSessionFactory
from aws_autoconfig.clients.configurer import ClientBuilderConfigurer
from aws_autoconfig.clients.registrar import ClientRegistrar
from aws_autoconfig.config.loaders import load_environ
from aws_autoconfig.config.resolver import ConfigResolver
from aws_autoconfig.config.schemas import AutoConfiguration


def _create_clients(registrar: ClientRegistrar) -> containers.DynamicContainer:
    return registrar.create_container()


class AutoConfigContainer(containers.DeclarativeContainer):
    """
    Inversion of Control (IoC) container for AWS client auto-configuration.

    Example:
    -------
        ```python
        from aws_autoconfig.any.container import AutoConfigContainer
        from aws_autoconfig.config import load_yaml_config

        container = AutoConfigContainer()
        container.settings.override(load_yaml_config("application.yaml"))

        # Resolver (singleton)
        region = container.resolver().resolve_region("sqs")

        # Registered clients (singleton container, clients built lazily)
        s3 = container.clients().s3()
        ```

    """

    # Singleton: configuration snapshot, read from AWS__* environment variables
    # unless overridden
    settings = providers.Singleton(load_environ)

    resolver = providers.Singleton(ConfigResolver, configuration=settings)

    # Singleton: boto3/aioboto3 sessions via the default credential chain
    session_factory = providers.Singleton(Boto3SessionFactory)

    configurer = providers.Singleton(
        ClientBuilderConfigurer,
        resolver=resolver,
        session_factory=session_factory,
    )

    registrar = providers.Singleton(ClientRegistrar, resolver=resolver, configurer=configurer)

    clients = providers.Singleton(_create_clients, registrar=registrar)


def create_client_container(
    configuration: AutoConfiguration,
    service_keys: Iterable[str] | None = None,
    session_factory: CloudSessionFactory | None = None,
) -> containers.DynamicContainer:
    """
    Create a container of auto-configured clients for a configuration snapshot.

    Args:
    ----
        configuration: Loaded configuration snapshot
        service_keys: Keys to register (defaults to the known services plus configured keys)
        session_factory: Optional session factory (defaults to Boto3SessionFactory)

    Returns:
    -------
        Container with one provider per enabled client

    Example:
    -------
        ```python
        from aws_autoconfig.config import load_properties

        cfg = load_properties({"aws.sqs.endpoint.service-endpoint": "http://localhost:4566"})
        clients = create_client_container(cfg, service_keys=["sqs"])
        sqs = clients.sqs()
        ```

    """
    ioc = AutoConfigContainer()
    ioc.settings.override(configuration)
    if session_factory is not None:
        ioc.session_factory.override(session_factory)
    return ioc.registrar().create_container(service_keys)


# Global singleton container instance
container = AutoConfigContainer()


def get_resolver() -> ConfigResolver:
    """
    Get the configuration resolver (singleton).

    Example:
    -------
        ```python
        from aws_autoconfig.any.container import get_resolver

        settings = get_resolver().resolve("sqs")
        ```

    """
    return container.resolver()


def get_session_factory() -> CloudSessionFactory:
    """Get the cloud session factory (singleton)."""
    return container.session_factory()


def get_client_configurer() -> ClientBuilderConfigurer:
    """Get the client builder configurer (singleton)."""
    return container.configurer()


def get_client_registrar() -> ClientRegistrar:
    """Get the client registrar (singleton)."""
    return container.registrar()


def get_clients() -> containers.DynamicContainer:
    """
    Get the container of registered clients (singleton).

    Example:
    -------
        ```python
        from aws_autoconfig.any.container import get_clients

        s3 = get_clients().s3()
        ```

    """
    return container.clients()
