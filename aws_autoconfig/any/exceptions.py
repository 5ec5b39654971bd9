"""
Auto-configuration exception classes.

This module defines custom exceptions for aws-autoconfig so that callers can tell
configuration and client construction failures apart from built-in Python errors.

Resolution itself never raises: invalid configuration degrades to "unset".
These exceptions cover the edges around it (reading configuration sources,
constructing SDK clients, looking up registered clients).
"""


class AutoConfigError(Exception):
    """
    Base exception for all aws-autoconfig errors.

    All aws-autoconfig exceptions inherit from this, allowing users to catch them
    with a single except clause while not catching unrelated Python errors.
    """

    pass


class AutoConfigurationError(AutoConfigError):
    """
    Raised when a configuration source cannot be read.

    This covers missing or unparsable YAML files and missing optional SDK
    libraries. Invalid individual values never raise this; they are dropped.
    """

    pass


class ClientConstructionError(AutoConfigError):
    """
    Raised when the SDK fails to build a client from the resolved settings.

    Example:
    -------
        >>> configurer.build_client("s3")
        ClientConstructionError: Failed to build client for 's3': ...

    """

    pass


class ServiceNotRegisteredError(AutoConfigError):
    """
    Raised when a client is requested that was never registered.

    A client is not registered when its service key is disabled
    (``aws.<key>.enabled: false``) or unknown to the registrar.
    """

    pass
