"""Shared test fixtures for authproxy-connector tests."""

from __future__ import annotations

from typing import Any

import pytest

from authproxy_connector.connector.authproxy import AuthProxyConfig, AuthProxyConnector
from authproxy_connector.connector.protocol import Scopes

CONNECTOR_ID = "authproxy"


def build_scope(
    path: str = "/callback/authproxy",
    headers: dict[str, str] | None = None,
    scope_type: str = "http",
) -> dict[str, Any]:
    """Build a minimal ASGI scope carrying the given headers."""
    raw = [(k.lower().encode("latin-1"), v.encode("latin-1")) for k, v in (headers or {}).items()]
    return {"type": scope_type, "path": path, "headers": raw}


@pytest.fixture
def scopes() -> Scopes:
    return Scopes()


@pytest.fixture
def connector() -> AuthProxyConnector:
    """Connector opened with the default user header."""
    return AuthProxyConfig().open(CONNECTOR_ID)


@pytest.fixture
def shib_headers() -> dict[str, str]:
    """A full header set as injected by a Shibboleth SP."""
    return {
        "X-Remote-User": "a1b2c3",
        "X-Shib-displayName": "Alice Example",
        "X-Shib-eduPersonPrincipalName": "alice@example.edu",
        "X-Shib-mail": "alice@example.com",
        "X-Shib-eduPersonScopedAffiliation": "staff@example.edu;member@example.edu",
    }
