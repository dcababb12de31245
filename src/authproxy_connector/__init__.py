"""authproxy-connector: identity broker connector for authenticating reverse proxies."""

from __future__ import annotations

import logging

from authproxy_connector.connector.authproxy import AuthProxyConfig, AuthProxyConnector
from authproxy_connector.connector.protocol import CallbackConnector, ConnectorConfig, Identity, Scopes
from authproxy_connector.constants import CONNECTOR_TYPE, DEFAULT_USER_HEADER, ERROR_CODES
from authproxy_connector.errors import (
    ConfigError,
    ConnectorError,
    InvalidCallbackURLError,
    NotAuthenticatedError,
    UnknownConnectorTypeError,
    to_error_response,
)
from authproxy_connector.registry import CONNECTOR_TYPES, open_connector, parse_config

__all__ = [
    # Public API
    "open_connector",
    "parse_config",
    "configure_logging",
    # Connector
    "AuthProxyConfig",
    "AuthProxyConnector",
    "CallbackConnector",
    "ConnectorConfig",
    "Identity",
    "Scopes",
    # Errors
    "ConnectorError",
    "ConfigError",
    "InvalidCallbackURLError",
    "NotAuthenticatedError",
    "UnknownConnectorTypeError",
    "to_error_response",
    # Constants
    "CONNECTOR_TYPE",
    "CONNECTOR_TYPES",
    "DEFAULT_USER_HEADER",
    "ERROR_CODES",
]

__version__ = "0.1.0"

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Set the log level for the authproxy_connector logger (e.g. "DEBUG", "INFO")."""
    valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
    if level.upper() not in valid_levels:
        raise ValueError(f"Unknown log level: {level!r}. Valid: {sorted(valid_levels)}")
    logging.getLogger("authproxy_connector").setLevel(getattr(logging, level.upper()))
