"""
Service key definitions for aws-autoconfig.

A service key names a client category (the boto3 service name) and whether the
client is synchronous or asynchronous. ``"sqs"`` and ``"sqs-async"`` are two
independent configuration slots.
"""

ASYNC_SUFFIX = "-async"
"""Suffix marking the asynchronous (aioboto3) variant of a service."""

DEFAULT_PROFILE = "default"
"""Reserved key holding fallback settings for synchronous clients."""

DEFAULT_ASYNC_PROFILE = DEFAULT_PROFILE + ASYNC_SUFFIX
"""Reserved key holding fallback settings for asynchronous clients."""

RESERVED_KEYS = frozenset({DEFAULT_PROFILE, DEFAULT_ASYNC_PROFILE})

# Clients registered when the caller does not name any.
DEFAULT_SERVICE_NAMES: tuple[str, ...] = (
    "cloudformation",
    "cloudwatch",
    "dynamodb",
    "ec2",
    "ecr",
    "ecs",
    "elasticache",
    "events",
    "firehose",
    "iam",
    "kinesis",
    "kms",
    "lambda",
    "logs",
    "rds",
    "route53",
    "s3",
    "secretsmanager",
    "ses",
    "sns",
    "sqs",
    "ssm",
    "stepfunctions",
    "sts",
)


def is_async(service_key: str) -> bool:
    """Return True if the key denotes an asynchronous client variant."""
    return service_key.endswith(ASYNC_SUFFIX)


def base_service_name(service_key: str) -> str:
    """
    Strip the async suffix from a service key.

    Example:
    -------
        >>> base_service_name("sqs-async")
        'sqs'

    """
    if is_async(service_key):
        return service_key[: -len(ASYNC_SUFFIX)]
    return service_key


def async_key(service_name: str) -> str:
    """Return the asynchronous variant key for a service name."""
    return base_service_name(service_name) + ASYNC_SUFFIX


def default_profile_key(service_key: str) -> str:
    """Return the default profile a key falls back to ("default" or "default-async")."""
    return DEFAULT_ASYNC_PROFILE if is_async(service_key) else DEFAULT_PROFILE


def provider_name(service_key: str) -> str:
    """
    Return the container attribute name a client is registered under.

    Example:
    -------
        >>> provider_name("sqs-async")
        'sqs_async'

    """
    return service_key.replace("-", "_")
