"""Broker-facing connector protocol and the identity record it produces."""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Any, Protocol, runtime_checkable


@dataclass(frozen=True)
class Scopes:
    """Scopes requested by the client for the current login.

    Attributes:
        offline_access: The client asked for a refresh token.
        groups: The client asked for group claims.
    """

    offline_access: bool = False
    groups: bool = False


@dataclass(frozen=True)
class Identity:
    """Identity returned by a connector after a successful login.

    Attributes:
        user_id: Opaque subject identifier. Always set.
        username: Human-readable display name.
        preferred_username: Stable machine-usable username.
        email: Email address.
        email_verified: True only when the email came from a trusted source.
        groups: Group memberships, in the order the upstream sent them.
        connector_data: Opaque per-connector state kept by the broker.
    """

    user_id: str
    username: str = ""
    preferred_username: str = ""
    email: str = ""
    email_verified: bool = False
    groups: tuple[str, ...] = ()
    connector_data: bytes = b""

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["groups"] = list(self.groups)
        del data["connector_data"]
        return data


@runtime_checkable
class CallbackConnector(Protocol):
    """Protocol for connectors that authenticate through a browser redirect.

    The broker sends the user to ``login_url`` and later hands the request
    that comes back to ``handle_callback``.
    """

    def login_url(self, scopes: Scopes, callback_url: str, state: str) -> str:
        """Build the URL the browser is redirected to.

        Args:
            scopes: Scopes requested by the client.
            callback_url: The broker's callback base URL.
            state: Opaque state token to round-trip.

        Returns:
            The redirect URL.
        """
        ...

    def handle_callback(self, scopes: Scopes, request: Any) -> Identity:
        """Resolve the identity of the user from the callback request.

        Args:
            scopes: Scopes requested by the client.
            request: The inbound callback request.

        Returns:
            The resolved ``Identity``.
        """
        ...


@runtime_checkable
class ConnectorConfig(Protocol):
    """Protocol for connector configurations that open a connector by ID."""

    def open(self, connector_id: str, logger: logging.Logger | None = None) -> CallbackConnector: ...
