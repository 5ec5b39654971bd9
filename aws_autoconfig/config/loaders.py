"""
Configuration loading functions for AWS client auto-configuration.

This module builds an :class:`AutoConfiguration` snapshot from:
- Nested mappings (already parsed configuration, e.g. from a settings object)
- Flat dotted properties (``aws.sqs.endpoint.service-endpoint``)
- YAML files
- Environment variables (``AWS__SQS__ENDPOINT__SERVICE_ENDPOINT``)

Features:
- Namespace selection (``aws`` by default)
- Lenient parsing: unknown keys and invalid values are ignored, never fatal
- The S3 section doubles as the storage overlay (``aws.s3.path-style-access-enabled``)
"""

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from aws_autoconfig.any.exceptions import AutoConfigurationError
from aws_autoconfig.any.logging import get_logger
from aws_autoconfig.config.schemas import AutoConfiguration, ServiceSettings, StorageOverlay

LOGGER = get_logger("aws_autoconfig.config.loaders")

DEFAULT_NAMESPACE = "aws"
DEFAULT_STORAGE_KEY = "s3"


def _fold_properties(properties: Mapping[str, Any]) -> dict[str, Any]:
    """
    Fold flat dotted keys into a nested dictionary.

    Examples:
    --------
        {"aws.sqs.region": "us-west-2"} → {"aws": {"sqs": {"region": "us-west-2"}}}

    A scalar never replaces a section: when both ``aws.s3`` and ``aws.s3.region``
    are given, the section wins.

    """
    tree: dict[str, Any] = {}
    for dotted, value in properties.items():
        parts = [part for part in str(dotted).split(".") if part]
        if not parts:
            continue

        node = tree
        for part in parts[:-1]:
            child = node.get(part)
            if not isinstance(child, dict):
                child = {}
                node[part] = child
            node = child

        if isinstance(node.get(parts[-1]), dict):
            LOGGER.debug("Ignoring scalar property shadowed by a section", key=str(dotted))
            continue
        node[parts[-1]] = value
    return tree


def _select_section(data: Mapping[str, Any], namespace: str) -> Mapping[str, Any]:
    """Return the namespace section if present, else treat ``data`` as the section itself."""
    section = data.get(namespace)
    if isinstance(section, Mapping):
        return section
    return data


def load_config(
    data: Mapping[str, Any] | None,
    namespace: str = DEFAULT_NAMESPACE,
    storage_key: str = DEFAULT_STORAGE_KEY,
) -> AutoConfiguration:
    """
    Load configuration from a nested mapping.

    Args:
    ----
        data: Mapping keyed by service name, optionally wrapped in the namespace
        namespace: Top-level configuration namespace
        storage_key: Service key whose section also carries the storage overlay flags

    Returns:
    -------
        Read-only AutoConfiguration snapshot

    Example:
    -------
        >>> cfg = load_config({"aws": {"default": {"region": "us-west-1"}}})
        >>> cfg.services["default"].region
        'us-west-1'

    """
    if not isinstance(data, Mapping):
        if data is not None:
            LOGGER.warning("Ignoring non-mapping configuration", type=type(data).__name__)
        data = {}

    section = _select_section(data, namespace)

    services: dict[str, ServiceSettings] = {}
    for key, value in section.items():
        try:
            services[str(key)] = ServiceSettings.model_validate(value)
        except ValidationError:
            LOGGER.debug("Ignoring invalid service entry", service=str(key))

    storage_section = section.get(storage_key)
    if isinstance(storage_section, Mapping):
        storage = StorageOverlay.model_validate(storage_section)
    else:
        storage = StorageOverlay()

    LOGGER.debug("Loaded client configuration", namespace=namespace, services=sorted(services))
    return AutoConfiguration(
        services=services,
        storage=storage,
        namespace=namespace,
        storage_key=storage_key,
    )


def load_properties(
    properties: Mapping[str, Any],
    namespace: str = DEFAULT_NAMESPACE,
    storage_key: str = DEFAULT_STORAGE_KEY,
) -> AutoConfiguration:
    """
    Load configuration from flat dotted properties.

    Only keys under ``<namespace>.`` are considered.

    Example:
    -------
        >>> cfg = load_properties({
        ...     "aws.sqs.endpoint.service-endpoint": "http://localhost:4566",
        ...     "aws.s3.path-style-access-enabled": "true",
        ... })
        >>> cfg.storage.path_style_access_enabled
        True

    """
    prefix = f"{namespace}."
    scoped = {key: value for key, value in properties.items() if str(key).startswith(prefix)}
    return load_config(_fold_properties(scoped), namespace=namespace, storage_key=storage_key)


def load_yaml_config(
    config_file: Path | str,
    namespace: str = DEFAULT_NAMESPACE,
    storage_key: str = DEFAULT_STORAGE_KEY,
) -> AutoConfiguration:
    """
    Load configuration from a YAML file.

    Args:
    ----
        config_file: Path to the YAML file
        namespace: Top-level configuration namespace
        storage_key: Service key whose section also carries the storage overlay flags

    Returns:
    -------
        Read-only AutoConfiguration snapshot

    Raises:
    ------
        AutoConfigurationError: If the file is missing or is not valid YAML

    """
    config_file = Path(config_file)
    if not config_file.exists():
        raise AutoConfigurationError(f"Client configuration not found: {config_file}")

    try:
        with open(config_file) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise AutoConfigurationError(f"Failed to parse {config_file}: {e}") from e

    LOGGER.info("Loaded client configuration file", path=str(config_file))
    return load_config(data, namespace=namespace, storage_key=storage_key)


def load_environ(
    environ: Mapping[str, str] | None = None,
    namespace: str = DEFAULT_NAMESPACE,
    storage_key: str = DEFAULT_STORAGE_KEY,
) -> AutoConfiguration:
    """
    Load configuration from environment variables.

    Variables are named ``<NAMESPACE>__<SERVICE>__<PROPERTY>...``: ``__`` separates
    levels, single underscores become hyphens and names are lower-cased.

    Examples:
    --------
        AWS__SQS_ASYNC__REGION=eu-west-1           → aws.sqs-async.region
        AWS__S3__PATH_STYLE_ACCESS_ENABLED=true    → aws.s3.path-style-access-enabled
        AWS__DEFAULT__CLIENT__CONNECT_TIMEOUT=5    → aws.default.client.connect-timeout

    Args:
    ----
        environ: Environment mapping (defaults to os.environ)
        namespace: Top-level configuration namespace
        storage_key: Service key whose section also carries the storage overlay flags

    """
    if environ is None:
        environ = os.environ

    prefix = f"{namespace.upper()}__"
    properties: dict[str, str] = {}
    for name, value in environ.items():
        if not name.startswith(prefix):
            continue
        parts = [part.lower().replace("_", "-") for part in name[len(prefix) :].split("__") if part]
        if parts:
            properties[".".join([namespace, *parts])] = value

    return load_properties(properties, namespace=namespace, storage_key=storage_key)
