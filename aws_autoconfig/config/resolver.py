"""
Effective settings resolution for AWS clients.

Given a service key, the resolver layers the service's own settings over the
matching default profile (``default`` for sync keys, ``default-async`` for async
keys) one field at a time:

    specific value  ->  default profile value  ->  unset

Endpoint configuration always wins over region configuration, and an endpoint
counts only when its ``service-endpoint`` is non-empty. ``enabled`` is read from
the service's own settings only and defaults to True.

Resolution is a pure read of an immutable snapshot: it never raises, never
mutates the tree and never caches.
"""

from typing import NamedTuple

from aws_autoconfig.config.schemas import (
    AutoConfiguration,
    ClientConfiguration,
    ServiceSettings,
    StorageOverlay,
)
from aws_autoconfig.types import default_profile_key

_UNSET = ServiceSettings()


class EndpointConfiguration(NamedTuple):
    """Resolved endpoint override."""

    service_endpoint: str
    signing_region: str | None = None


class EffectiveClientSettings(NamedTuple):
    """Construction parameters for one client."""

    enabled: bool
    client_config: ClientConfiguration | None
    endpoint: EndpointConfiguration | None
    region: str | None


def _endpoint_of(settings: ServiceSettings) -> EndpointConfiguration | None:
    """Return the settings' endpoint if it names a service endpoint, else None."""
    endpoint = settings.endpoint
    if endpoint is None or not endpoint.service_endpoint:
        return None
    return EndpointConfiguration(endpoint.service_endpoint, endpoint.signing_region or None)


def _region_of(settings: ServiceSettings) -> str | None:
    return settings.region or None


def _client_of(settings: ServiceSettings) -> ClientConfiguration | None:
    return settings.client


class ConfigResolver:
    """
    Resolve effective client settings from a loaded configuration snapshot.

    Example:
    -------
        >>> cfg = load_config({"default": {"region": "us-west-1"},
        ...                    "queue": {"endpoint": {"service-endpoint": "https://queue.example.com"}}})
        >>> resolver = ConfigResolver(cfg)
        >>> resolver.resolve_region("queue") is None
        True
        >>> resolver.resolve_endpoint("queue")
        EndpointConfiguration(service_endpoint='https://queue.example.com', signing_region=None)
        >>> resolver.resolve_region("topic")
        'us-west-1'

    """

    def __init__(self, configuration: AutoConfiguration) -> None:
        """
        Initialize the resolver.

        Args:
        ----
            configuration: Loaded configuration snapshot (injected by container)

        """
        self._configuration = configuration

    @property
    def configuration(self) -> AutoConfiguration:
        return self._configuration

    def _settings(self, service_key: str) -> ServiceSettings:
        return self._configuration.services.get(service_key, _UNSET)

    def _default_settings(self, service_key: str) -> ServiceSettings:
        return self._configuration.services.get(default_profile_key(service_key), _UNSET)

    def resolve_endpoint(self, service_key: str) -> EndpointConfiguration | None:
        """
        Resolve the endpoint override for a service.

        Returns
        -------
            The service's endpoint, else the default profile's endpoint, else None.
            A signing region without a service endpoint is discarded.

        """
        endpoint = _endpoint_of(self._settings(service_key))
        if endpoint is None:
            endpoint = _endpoint_of(self._default_settings(service_key))
        return endpoint

    def resolve_region(self, service_key: str) -> str | None:
        """
        Resolve the region for a service.

        Returns
        -------
            None whenever an endpoint resolves; otherwise the service's region,
            else the default profile's region, else None.

        """
        if self.resolve_endpoint(service_key) is not None:
            return None
        region = _region_of(self._settings(service_key))
        if region is None:
            region = _region_of(self._default_settings(service_key))
        return region

    def resolve_client_configuration(self, service_key: str) -> ClientConfiguration | None:
        """
        Resolve transport tuning for a service.

        Returns
        -------
            The service's client configuration, else the default profile's,
            else None (the SDK's built-in defaults apply).

        """
        client = _client_of(self._settings(service_key))
        if client is None:
            client = _client_of(self._default_settings(service_key))
        return client

    def is_enabled(self, service_key: str) -> bool:
        """Return whether a client should be built for the service (True when unset)."""
        return self._settings(service_key).enabled

    def resolve_storage_overlay(self) -> StorageOverlay:
        """Return the S3 overlay flags as configured."""
        return self._configuration.storage

    def resolve(self, service_key: str) -> EffectiveClientSettings:
        """Resolve every construction parameter for a service at once."""
        return EffectiveClientSettings(
            enabled=self.is_enabled(service_key),
            client_config=self.resolve_client_configuration(service_key),
            endpoint=self.resolve_endpoint(service_key),
            region=self.resolve_region(service_key),
        )

    def __repr__(self) -> str:
        """Return string representation."""
        return f"ConfigResolver(services={list(self._configuration.services)})"
