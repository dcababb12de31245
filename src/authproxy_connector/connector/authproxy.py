"""Connector that trusts identity headers injected by an authenticating proxy.

The proxy in front of the broker (e.g. Apache ``mod_auth_*`` or Shibboleth)
performs the real authentication and forwards the user in ``X-Remote-User``
plus optional ``X-Shib-*`` attribute headers. This connector must only be
reachable through that proxy; headers are trusted as-is.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any
from urllib.parse import quote

from starlette.datastructures import URL, Headers

from authproxy_connector.connector.protocol import CallbackConnector, Identity, Scopes
from authproxy_connector.constants import (
    AFFILIATION_HEADER,
    DEFAULT_USER_HEADER,
    DISPLAY_NAME_HEADER,
    GROUP_DELIMITER,
    MAIL_HEADER,
    PRINCIPAL_NAME_HEADER,
    STATE_PARAM,
)
from authproxy_connector.errors import ConfigError, InvalidCallbackURLError, NotAuthenticatedError

logger = logging.getLogger(__name__)

# Separators and sub-delims kept verbatim when escaping the connector path
_PATH_SAFE = "/:@!$&'()*+,;="


@dataclass(frozen=True)
class AuthProxyConfig:
    """Configuration for the auth proxy connector.

    Attributes:
        user_header: Header carrying the authenticated user. Empty means
            ``X-Remote-User``.
    """

    user_header: str = ""

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> AuthProxyConfig:
        """Build a config from the broker's JSON config (``userHeader`` key)."""
        if not data:
            return cls()
        user_header = data.get("userHeader", data.get("user_header", ""))
        if user_header is None:
            user_header = ""
        if not isinstance(user_header, str):
            raise ConfigError(
                f"userHeader must be a string, got {type(user_header).__name__}",
                details={"field": "userHeader"},
            )
        return cls(user_header=user_header)

    def open(self, connector_id: str, logger: logging.Logger | None = None) -> AuthProxyConnector:
        """Return a connector that requires no user interaction."""
        return AuthProxyConnector(
            user_header=self.user_header or DEFAULT_USER_HEADER,
            path_suffix="/" + connector_id,
            broker_logger=logger,
        )


class AuthProxyConnector:
    """Returns an identity built from headers set by the authenticating proxy.

    Args:
        user_header: Header carrying the user ID.
        path_suffix: Appended to the callback URL path, ``"/" + connector_id``.
        broker_logger: Logger handed over by the broker. Defaults to the
            module logger.
    """

    def __init__(
        self,
        user_header: str = DEFAULT_USER_HEADER,
        *,
        path_suffix: str = "",
        broker_logger: logging.Logger | None = None,
    ) -> None:
        self._user_header = user_header
        self._path_suffix = path_suffix
        self._logger = broker_logger if broker_logger is not None else logger

    @property
    def user_header(self) -> str:
        return self._user_header

    @property
    def path_suffix(self) -> str:
        return self._path_suffix

    def login_url(self, scopes: Scopes | None, callback_url: str, state: str) -> str:
        """Return the callback URL with the connector path and ``state`` query parameter."""
        url = _parse_callback_url(callback_url)
        url = url.replace(path=url.path + quote(self._path_suffix, safe=_PATH_SAFE))
        return str(url.include_query_params(**{STATE_PARAM: state}))

    def handle_callback(self, scopes: Scopes | None, request: Any) -> Identity:
        """Parse the request headers and return the user's identity.

        Raises:
            NotAuthenticatedError: The user header is missing or empty.
        """
        headers = _request_headers(request)
        self._logger.debug("Headers: %s", headers.items())

        remote_user = _get_header(headers, self._user_header)
        if not remote_user:
            raise NotAuthenticatedError()

        fields: dict[str, Any] = {"user_id": remote_user}

        display_name = _get_header(headers, DISPLAY_NAME_HEADER)
        if display_name:
            fields["username"] = display_name

        eppn = _get_header(headers, PRINCIPAL_NAME_HEADER)
        if eppn:
            fields["preferred_username"] = eppn

        mail = _get_header(headers, MAIL_HEADER)
        if mail:
            fields["email"] = mail
            fields["email_verified"] = True

        affiliation = _get_header(headers, AFFILIATION_HEADER)
        if affiliation:
            fields["groups"] = tuple(affiliation.split(GROUP_DELIMITER))

        identity = Identity(**fields)
        self._logger.debug("Resolved identity for user %r from header %s", remote_user, self._user_header)
        return identity


def _parse_callback_url(callback_url: str) -> URL:
    """Parse and validate an absolute callback URL."""
    try:
        url = URL(callback_url)
        # Port is parsed lazily; touching it surfaces malformed ports
        url.port  # noqa: B018
    except ValueError as exc:
        raise InvalidCallbackURLError(callback_url, str(exc)) from exc
    if not url.scheme or not url.netloc:
        raise InvalidCallbackURLError(callback_url, "not an absolute URL")
    return url


def _request_headers(request: Any) -> Mapping[str, str]:
    """Normalize a request, ASGI scope or header mapping for case-insensitive lookup.

    Starlette ``Headers`` are returned as-is. Plain mappings are folded into a
    dict keyed by lowercased name, first value wins, values left untouched.
    """
    if isinstance(request, Headers):
        return request
    headers = getattr(request, "headers", None)
    if headers is None and isinstance(request, Mapping):
        if "type" in request and isinstance(request.get("headers"), list):
            return Headers(scope=request)
        headers = request
    if isinstance(headers, Headers):
        return headers
    if isinstance(headers, Mapping):
        folded: dict[str, str] = {}
        for key, value in headers.items():
            folded.setdefault(str(key).lower(), str(value))
        return folded
    raise TypeError(f"Cannot read headers from {type(request).__name__}")


def _get_header(headers: Mapping[str, str], name: str) -> str:
    return headers.get(name.lower()) or ""


# Verify protocol compliance at import time
assert isinstance(AuthProxyConnector.__new__(AuthProxyConnector), CallbackConnector)
