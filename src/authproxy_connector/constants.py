"""Header names, defaults and error codes shared across authproxy-connector."""

from __future__ import annotations

# Registry key under which the broker looks up this connector type
CONNECTOR_TYPE = "authproxy"

DEFAULT_USER_HEADER = "X-Remote-User"

# Attribute headers injected by a Shibboleth-style authenticating proxy
DISPLAY_NAME_HEADER = "X-Shib-displayName"
PRINCIPAL_NAME_HEADER = "X-Shib-eduPersonPrincipalName"
MAIL_HEADER = "X-Shib-mail"
AFFILIATION_HEADER = "X-Shib-eduPersonScopedAffiliation"

GROUP_DELIMITER = ";"
STATE_PARAM = "state"

ERROR_CODES: dict[str, str] = {
    "INVALID_CALLBACK_URL": "INVALID_CALLBACK_URL",
    "NOT_AUTHENTICATED": "NOT_AUTHENTICATED",
    "CONFIG_ERROR": "CONFIG_ERROR",
    "UNKNOWN_CONNECTOR_TYPE": "UNKNOWN_CONNECTOR_TYPE",
    "INTERNAL_ERROR": "INTERNAL_ERROR",
}
