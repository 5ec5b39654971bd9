"""
Client builder configuration.

Translates resolved settings into the keyword arguments of
``session.client(service_name, **kwargs)``:

- ``config``: a ``botocore.config.Config`` built from the client configuration,
  plus the storage overlay for the S3 client
- ``endpoint_url`` and ``region_name`` (the signing region) when an endpoint resolved
- ``region_name`` alone when only a region resolved

Nothing is passed for settings that resolved to unset, so the SDK defaults apply.
"""

from typing import Any

from botocore.config import Config
from botocore.exceptions import BotoCoreError

from aws_autoconfig.any.exceptions import ClientConstructionError
from aws_autoconfig.any.logging import get_logger
from aws_autoconfig.any.protocols import CloudSessionFactory
from aws_autoconfig.config.resolver import ConfigResolver, EndpointConfiguration
from aws_autoconfig.config.schemas import StorageOverlay
from aws_autoconfig.types import base_service_name, is_async

LOGGER = get_logger("aws_autoconfig.clients.configurer")

# Overlay flags that botocore has no switch for.
UNSUPPORTED_STORAGE_FLAGS = ("chunked_encoding_disabled", "force_global_bucket_access_enabled")


def _endpoint_url(endpoint: EndpointConfiguration) -> str:
    """Return the service endpoint as a URL, defaulting the scheme to https."""
    url = endpoint.service_endpoint
    if "://" not in url:
        url = f"https://{url}"
    return url


def storage_config_kwargs(overlay: StorageOverlay) -> dict[str, Any]:
    """
    Map the storage overlay to ``botocore.config.Config`` keyword arguments.

    Unset flags contribute nothing.

    Example:
    -------
        >>> storage_config_kwargs(StorageOverlay(path_style_access_enabled=True, dualstack_enabled=False))
        {'s3': {'addressing_style': 'path'}, 'use_dualstack_endpoint': False}

    """
    s3: dict[str, Any] = {}
    kwargs: dict[str, Any] = {}

    if overlay.path_style_access_enabled is not None:
        s3["addressing_style"] = "path" if overlay.path_style_access_enabled else "virtual"
    if overlay.accelerate_mode_enabled is not None:
        s3["use_accelerate_endpoint"] = overlay.accelerate_mode_enabled
    if overlay.payload_signing_enabled is not None:
        s3["payload_signing_enabled"] = overlay.payload_signing_enabled

    if s3:
        kwargs["s3"] = s3
    if overlay.dualstack_enabled is not None:
        kwargs["use_dualstack_endpoint"] = overlay.dualstack_enabled

    for flag in UNSUPPORTED_STORAGE_FLAGS:
        if getattr(overlay, flag) is not None:
            LOGGER.warning("Storage flag has no botocore equivalent, skipping", flag=flag)

    return kwargs


class ClientBuilderConfigurer:
    """
    Build SDK clients from resolved settings.

    Example:
    -------
        >>> configurer = ClientBuilderConfigurer(resolver, Boto3SessionFactory())
        >>> configurer.client_kwargs("sqs")
        {'endpoint_url': 'http://localhost:4566', 'region_name': 'us-east-1'}
        >>> sqs = configurer.build_client("sqs")

    """

    def __init__(self, resolver: ConfigResolver, session_factory: CloudSessionFactory) -> None:
        """
        Initialize the configurer.

        Args:
        ----
            resolver: Resolver over the loaded configuration (injected by container)
            session_factory: Creates boto3/aioboto3 sessions (injected by container)

        """
        self._resolver = resolver
        self._sessions = session_factory

    def is_storage_service(self, service_key: str) -> bool:
        return base_service_name(service_key) == self._resolver.configuration.storage_key

    def config_kwargs(self, service_key: str) -> dict[str, Any]:
        """
        Return ``botocore.config.Config`` keyword arguments for a service.

        The storage overlay wins over an ``s3`` block in the client configuration.
        """
        client_config = self._resolver.resolve_client_configuration(service_key)
        kwargs = client_config.to_config_kwargs() if client_config is not None else {}

        if self.is_storage_service(service_key):
            overlay = storage_config_kwargs(self._resolver.resolve_storage_overlay())
            s3 = {**(kwargs.get("s3") or {}), **overlay.pop("s3", {})}
            kwargs.update(overlay)
            if s3:
                kwargs["s3"] = s3

        return kwargs

    def client_kwargs(self, service_key: str) -> dict[str, Any]:
        """
        Return the keyword arguments for ``session.client(...)``.

        Raises
        ------
            ClientConstructionError: If the client configuration is rejected by botocore

        """
        kwargs: dict[str, Any] = {}

        config_kwargs = self.config_kwargs(service_key)
        if config_kwargs:
            try:
                kwargs["config"] = Config(**config_kwargs)
            except (TypeError, ValueError, BotoCoreError) as e:
                raise ClientConstructionError(f"Invalid client configuration for '{service_key}': {e}") from e

        endpoint = self._resolver.resolve_endpoint(service_key)
        if endpoint is not None:
            kwargs["endpoint_url"] = _endpoint_url(endpoint)
            if endpoint.signing_region:
                kwargs["region_name"] = endpoint.signing_region
        else:
            region = self._resolver.resolve_region(service_key)
            if region is not None:
                kwargs["region_name"] = region

        return kwargs

    def build_client(self, service_key: str) -> Any:
        """
        Build the client for a service key.

        Sync keys return a boto3 client. Async keys (``-async``) return the
        aioboto3 client context manager, to be entered with ``async with``.

        Raises
        ------
            ClientConstructionError: If the SDK rejects the resolved settings
            AutoConfigurationError: If the SDK library is not installed

        """
        kwargs = self.client_kwargs(service_key)
        service_name = base_service_name(service_key)

        if is_async(service_key):
            session = self._sessions.create_async_session()
        else:
            session = self._sessions.create_session()

        try:
            client = session.client(service_name, **kwargs)
        except (BotoCoreError, ValueError) as e:
            raise ClientConstructionError(f"Failed to build client for '{service_key}': {e}") from e

        LOGGER.debug(
            "Built client",
            service=service_key,
            endpoint=kwargs.get("endpoint_url", "default"),
            region=kwargs.get("region_name", "default"),
        )
        return client
