"""
Protocol definitions for aws-autoconfig.

These protocols define the contracts between the resolver's consumers and
the SDK. They let tests inject fakes for sessions and client builders.

All protocols follow PEP 544 (Structural Subtyping / Protocol).
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class CloudSessionFactory(Protocol):
    """
    Protocol for creating SDK sessions.

    Implementations:
    - any/cloud_sessions.py - boto3/aioboto3 sessions
    """

    def create_session(self) -> Any:
        """
        Create a synchronous session.

        Returns
        -------
            Object with a ``client(service_name, **kwargs)`` method

        """
        ...

    def create_async_session(self) -> Any:
        """
        Create an asynchronous session.

        Returns
        -------
            Object whose ``client(service_name, **kwargs)`` returns an async context manager

        """
        ...


@runtime_checkable
class ClientBuilder(Protocol):
    """
    Protocol for building a configured client for a service key.

    Implementations:
    - clients/configurer.py - ClientBuilderConfigurer
    """

    def client_kwargs(self, service_key: str) -> dict[str, Any]:
        """Return the keyword arguments used to construct the client."""
        ...

    def build_client(self, service_key: str) -> Any:
        """
        Build the client for a service key.

        Raises
        ------
            ClientConstructionError: If the SDK rejects the resolved settings

        """
        ...
