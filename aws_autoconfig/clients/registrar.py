"""
Client registration in a dependency-injector container.

For every known service key whose ``enabled`` flag is not false, a provider is
set on the container under the key's identifier form (``sqs-async`` →
``sqs_async``). Clients are built lazily on first access:

- sync clients are ``providers.Singleton`` (one boto3 client, reused)
- async clients are ``providers.Factory`` (a new aioboto3 client context per call)
"""

from collections.abc import Iterable
from typing import Any

from dependency_injector import containers, providers

from aws_autoconfig.any.exceptions import ServiceNotRegisteredError
from aws_autoconfig.any.logging import get_logger
from aws_autoconfig.any.protocols import ClientBuilder
from aws_autoconfig.config.resolver import ConfigResolver
from aws_autoconfig.types import (
    DEFAULT_SERVICE_NAMES,
    RESERVED_KEYS,
    async_key,
    is_async,
    provider_name,
)

LOGGER = get_logger("aws_autoconfig.clients.registrar")


class ClientRegistrar:
    """
    Register auto-configured clients as container providers.

    Example:
    -------
        >>> registrar = ClientRegistrar(resolver, configurer)
        >>> clients = registrar.create_container()
        >>> s3 = clients.s3()            # boto3 client, built once
        >>> async with clients.sqs_async() as sqs:
        ...     await sqs.list_queues()

    """

    def __init__(self, resolver: ConfigResolver, configurer: ClientBuilder) -> None:
        """
        Initialize the registrar.

        Args:
        ----
            resolver: Resolver over the loaded configuration (injected by container)
            configurer: Builds clients from resolved settings (injected by container)

        """
        self._resolver = resolver
        self._configurer = configurer

    def service_keys(self, service_names: Iterable[str] | None = None) -> list[str]:
        """
        Return the service keys to register, in order and without duplicates.

        Args:
        ----
            service_names: Base service names (defaults to DEFAULT_SERVICE_NAMES).
                Each contributes its sync and async key. Keys present in the
                configuration are always included.

        """
        if service_names is None:
            service_names = DEFAULT_SERVICE_NAMES

        keys: list[str] = []
        for name in service_names:
            keys.extend([name, async_key(name)])
        keys.extend(self._resolver.configuration.services)

        return [key for key in dict.fromkeys(keys) if key not in RESERVED_KEYS]

    def register(
        self,
        container: containers.DynamicContainer,
        service_keys: Iterable[str] | None = None,
    ) -> list[str]:
        """
        Register client providers on a container.

        Args:
        ----
            container: Container to set providers on
            service_keys: Keys to register (defaults to :meth:`service_keys`)

        Returns:
        -------
            Names of the registered providers

        """
        if service_keys is None:
            service_keys = self.service_keys()

        registered: list[str] = []
        for key in service_keys:
            if key in RESERVED_KEYS:
                continue
            if not self._resolver.is_enabled(key):
                LOGGER.info("Client disabled, not registering", service=key)
                continue

            if is_async(key):
                provider: providers.Provider = providers.Factory(self._configurer.build_client, key)
            else:
                provider = providers.Singleton(self._configurer.build_client, key)

            name = provider_name(key)
            if name not in container.providers and hasattr(container, name):
                LOGGER.warning("Service key collides with a container attribute, not registering", service=key)
                continue

            container.set_provider(name, provider)
            registered.append(name)

        LOGGER.info("Registered AWS clients", count=len(registered))
        return registered

    def create_container(self, service_keys: Iterable[str] | None = None) -> containers.DynamicContainer:
        """Create a new container holding the registered client providers."""
        container = containers.DynamicContainer()
        self.register(container, service_keys)
        return container


def get_client(container: containers.DynamicContainer, service_key: str) -> Any:
    """
    Return the client registered for a service key.

    Raises
    ------
        ServiceNotRegisteredError: If the key is disabled or was never registered

    """
    provider = container.providers.get(provider_name(service_key))
    if provider is None:
        raise ServiceNotRegisteredError(
            f"No client registered for '{service_key}'. "
            f"Check that '{service_key}' is a known service and not disabled."
        )
    return provider()
