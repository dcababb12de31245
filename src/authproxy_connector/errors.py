"""Connector error hierarchy and its mapping to broker error responses."""

from __future__ import annotations

from typing import Any

from authproxy_connector.constants import ERROR_CODES


class ConnectorError(Exception):
    """Base class for errors surfaced to the broker.

    Attributes:
        code: Stable machine-readable error code.
        message: Human-readable message.
        details: Extra context, or None.
    """

    code: str = ERROR_CODES["INTERNAL_ERROR"]

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class InvalidCallbackURLError(ConnectorError):
    """The broker supplied a callback URL that could not be parsed."""

    code = ERROR_CODES["INVALID_CALLBACK_URL"]

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(
            f"failed to parse callback URL {url!r}: {reason}",
            details={"url": url, "reason": reason},
        )
        self.url = url
        self.reason = reason


class NotAuthenticatedError(ConnectorError):
    """The proxy did not inject the user header; the login redirect must be re-run."""

    code = ERROR_CODES["NOT_AUTHENTICATED"]

    def __init__(self, message: str = "need login redirect") -> None:
        super().__init__(message)


class ConfigError(ConnectorError):
    code = ERROR_CODES["CONFIG_ERROR"]


class UnknownConnectorTypeError(ConfigError):
    code = ERROR_CODES["UNKNOWN_CONNECTOR_TYPE"]

    def __init__(self, connector_type: str) -> None:
        super().__init__(
            f"unknown connector type {connector_type!r}",
            details={"type": connector_type},
        )
        self.connector_type = connector_type


def to_error_response(error: Exception) -> dict[str, Any]:
    """Convert any exception to a broker error response dict.

    Returns:
        dict with keys:
            - is_error: True
            - error_type: str (error code or "INTERNAL_ERROR")
            - message: str (safe error message)
            - details: dict | None
    """
    if isinstance(error, ConnectorError):
        return {
            "is_error": True,
            "error_type": error.code,
            "message": error.message,
            "details": error.details,
        }

    # Unknown exception - sanitize completely
    return {
        "is_error": True,
        "error_type": ERROR_CODES["INTERNAL_ERROR"],
        "message": "Internal error occurred",
        "details": None,
    }
