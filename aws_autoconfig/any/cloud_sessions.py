"""
Cloud session factory for boto3/aioboto3.

Sessions resolve credentials through the SDK's default provider chain
(environment, shared config files, instance metadata) unless explicit session
arguments are given.
"""

from collections.abc import Callable
from typing import Any

from aws_autoconfig.any.exceptions import AutoConfigurationError
from aws_autoconfig.any.logging import get_logger

LOGGER = get_logger("aws_autoconfig.any.cloud_sessions")


class Boto3SessionFactory:
    """
    Factory for creating boto3/aioboto3 sessions.

    Example:
    -------
        ```python
        factory = Boto3SessionFactory(profile_name="dev")

        # Sync session
        s3_client = factory.create_session().client("s3")

        # Async session
        async with factory.create_async_session().client("sqs") as sqs:
            await sqs.list_queues()
        ```

    """

    def __init__(self, **session_kwargs: Any) -> None:
        """
        Initialize session factory.

        Args:
        ----
            **session_kwargs: Arguments forwarded to ``Session(...)``
                (profile_name, aws_access_key_id, aws_secret_access_key, ...)

        """
        self._session_kwargs = session_kwargs
        LOGGER.debug("Initialized Boto3SessionFactory", profile=session_kwargs.get("profile_name"))

    def _create_session_impl(self, session_factory: Callable[..., Any], library_name: str) -> Any:
        """
        Create session using provided factory.

        Args:
        ----
            session_factory: Callable that creates the session (boto3.Session or aioboto3.Session)
            library_name: Name of the library for logging ("boto3" or "aioboto3")

        """
        session = session_factory(**self._session_kwargs)
        LOGGER.debug("Created session", library=library_name, profile=self._session_kwargs.get("profile_name"))
        return session

    def create_session(self) -> Any:
        """
        Create a boto3.Session.

        Raises
        ------
            AutoConfigurationError: If boto3 is not available

        """
        try:
            import boto3
        except ImportError as e:
            raise AutoConfigurationError("boto3 not installed. Install with: pip install boto3") from e

        return self._create_session_impl(boto3.Session, "boto3")

    def create_async_session(self) -> Any:
        """
        Create an aioboto3.Session.

        Raises
        ------
            AutoConfigurationError: If aioboto3 is not available

        """
        try:
            import aioboto3
        except ImportError as e:
            raise AutoConfigurationError("aioboto3 not installed. Install with: pip install aioboto3") from e

        return self._create_session_impl(aioboto3.Session, "aioboto3")

    def __repr__(self) -> str:
        """Return string representation."""
        return f"Boto3SessionFactory(profile={self._session_kwargs.get('profile_name')})"
