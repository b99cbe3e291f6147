"""Pytest fixtures.

Service-level tests get an in-memory refresh-token store and a controllable
clock; API tests get a fresh app per test on in-memory SQLite.
"""

from __future__ import annotations

import pytest

from auth.service import AuthSessionService
from chirpy import create_app
from tests.helpers import PASSWORD, SECRET, FakeClock, InMemoryRefreshTokenStore


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store():
    return InMemoryRefreshTokenStore()


@pytest.fixture
def service(store, clock):
    return AuthSessionService(store, signing_secret=SECRET, api_key="polka-key", clock=clock)


@pytest.fixture
def app():
    """Flask app configured by TestingConfig (in-memory SQLite, dev platform)."""
    app = create_app("testing")
    app.logger.setLevel("WARNING")
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def register(client):
    """Create a user through the API and return its JSON body."""

    def _register(email: str = "user@x.com", password: str = PASSWORD) -> dict:
        resp = client.post("/api/users", json={"email": email, "password": password})
        assert resp.status_code == 201, resp.get_json()
        return resp.get_json()

    return _register


@pytest.fixture
def login(client, register):
    """Register then log in; returns the login JSON body (user + tokens)."""

    def _login(email: str = "user@x.com", password: str = PASSWORD) -> dict:
        register(email, password)
        resp = client.post("/api/login", json={"email": email, "password": password})
        assert resp.status_code == 200, resp.get_json()
        return resp.get_json()

    return _login
