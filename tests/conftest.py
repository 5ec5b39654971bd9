"""Pytest configuration and fixtures for aws-autoconfig tests."""

import logging
from collections.abc import Generator
from unittest.mock import MagicMock

import pytest
import structlog

from aws_autoconfig.config import ConfigResolver, load_config


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Restore structlog and stdlib logging defaults so configuration does not leak between tests."""
    yield
    structlog.reset_defaults()
    logger = logging.getLogger("aws_autoconfig")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def raw_config() -> dict:
    """Nested configuration covering defaults, endpoints, regions and the S3 overlay."""
    return {
        "aws": {
            "default": {
                "region": "us-west-1",
                "client": {"connect-timeout": 5},
            },
            "default-async": {
                "region": "eu-central-1",
            },
            "sqs": {
                "endpoint": {
                    "service-endpoint": "http://localhost:4566",
                    "signing-region": "us-east-1",
                },
                "region": "ap-northeast-1",
            },
            "sns": {
                "region": "eu-west-1",
                "client": {"read-timeout": 30},
            },
            "kinesis": {
                "enabled": False,
            },
            "s3": {
                "path-style-access-enabled": True,
                "dualstack-enabled": False,
            },
        }
    }


@pytest.fixture
def configuration(raw_config):
    """Loaded configuration snapshot."""
    return load_config(raw_config)


@pytest.fixture
def resolver(configuration):
    """Resolver over the sample configuration."""
    return ConfigResolver(configuration)


@pytest.fixture
def mock_session_factory():
    """Session factory returning mock sync and async sessions."""
    factory = MagicMock()
    factory.create_session.return_value = MagicMock(name="boto3_session")
    factory.create_async_session.return_value = MagicMock(name="aioboto3_session")
    return factory
