"""Lookup of connector types by name, as the broker's config refers to them."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from authproxy_connector.connector.authproxy import AuthProxyConfig
from authproxy_connector.connector.protocol import CallbackConnector
from authproxy_connector.constants import CONNECTOR_TYPE
from authproxy_connector.errors import ConfigError, UnknownConnectorTypeError

logger = logging.getLogger(__name__)

CONNECTOR_TYPES: dict[str, type[AuthProxyConfig]] = {
    CONNECTOR_TYPE: AuthProxyConfig,
}


def parse_config(connector_type: str, data: Mapping[str, Any] | None = None) -> AuthProxyConfig:
    """Build the config object for ``connector_type`` from its JSON mapping."""
    config_cls = CONNECTOR_TYPES.get(connector_type)
    if config_cls is None:
        raise UnknownConnectorTypeError(connector_type)
    return config_cls.from_mapping(data)


def open_connector(
    connector_type: str,
    connector_id: str,
    data: Mapping[str, Any] | None = None,
    connector_logger: logging.Logger | None = None,
) -> CallbackConnector:
    """Parse the config for ``connector_type`` and open it as ``connector_id``.

    Raises:
        UnknownConnectorTypeError: No connector is registered under that type.
        ConfigError: The ID is empty or the config is malformed.
    """
    if not connector_id:
        raise ConfigError("connector id must not be empty")
    config = parse_config(connector_type, data)
    connector = config.open(connector_id, logger=connector_logger)
    logger.info("Opened %s connector '%s'", connector_type, connector_id)
    return connector
