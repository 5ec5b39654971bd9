"""Auto-configured AWS client construction and registration."""

from aws_autoconfig.clients.configurer import ClientBuilderConfigurer, storage_config_kwargs
from aws_autoconfig.clients.registrar import ClientRegistrar, get_client

__all__ = ["ClientBuilderConfigurer", "ClientRegistrar", "get_client", "storage_config_kwargs"]
