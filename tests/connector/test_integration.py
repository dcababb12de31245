"""End-to-end tests: a Starlette host app driving the full login flow.

Verifies the broker-side pipeline:
  login_url → (proxy injects headers) → callback handler → handle_callback
"""

from __future__ import annotations

from urllib.parse import parse_qs, urlsplit

import pytest
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse, RedirectResponse
from starlette.routing import Route
from starlette.testclient import TestClient

from authproxy_connector import NotAuthenticatedError, Scopes, open_connector, to_error_response

CALLBACK_BASE = "http://testserver/callback"


@pytest.fixture
def broker_connector():
    return open_connector("authproxy", "shib", {"userHeader": "X-Remote-User"})


@pytest.fixture
def client(broker_connector) -> TestClient:
    """Broker app that resolves identities inside its callback handler."""

    async def login(request: Request) -> RedirectResponse:
        url = broker_connector.login_url(Scopes(), CALLBACK_BASE, request.query_params["state"])
        return RedirectResponse(url, status_code=302)

    async def callback(request: Request) -> JSONResponse:
        try:
            identity = broker_connector.handle_callback(Scopes(), request)
        except NotAuthenticatedError as exc:
            return JSONResponse(to_error_response(exc), status_code=401)
        return JSONResponse({"state": request.query_params.get("state"), "identity": identity.to_dict()})

    app = Starlette(
        routes=[
            Route("/login", login),
            Route("/callback/shib", callback),
        ]
    )
    return TestClient(app)


class TestLoginFlow:
    def test_login_redirects_to_connector_path(self, client):
        response = client.get("/login", params={"state": "xyz"}, follow_redirects=False)
        assert response.status_code == 302
        location = urlsplit(response.headers["location"])
        assert location.path == "/callback/shib"
        assert parse_qs(location.query) == {"state": ["xyz"]}

    def test_callback_through_proxy(self, client):
        response = client.get(
            "/callback/shib?state=xyz",
            headers={
                "X-Remote-User": "alice",
                "X-Shib-mail": "alice@example.com",
                "X-Shib-eduPersonScopedAffiliation": "staff;alumni;",
            },
        )
        assert response.status_code == 200
        body = response.json()
        assert body["state"] == "xyz"
        assert body["identity"]["user_id"] == "alice"
        assert body["identity"]["email_verified"] is True
        assert body["identity"]["groups"] == ["staff", "alumni", ""]

    def test_callback_bypassing_proxy(self, client):
        response = client.get("/callback/shib?state=xyz")
        assert response.status_code == 401
        assert response.json()["error_type"] == "NOT_AUTHENTICATED"
