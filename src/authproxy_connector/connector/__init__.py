"""Connector implementations and the broker-facing protocol."""

from authproxy_connector.connector.authproxy import AuthProxyConfig, AuthProxyConnector
from authproxy_connector.connector.protocol import CallbackConnector, ConnectorConfig, Identity, Scopes

__all__ = [
    "AuthProxyConfig",
    "AuthProxyConnector",
    "CallbackConnector",
    "ConnectorConfig",
    "Identity",
    "Scopes",
]
