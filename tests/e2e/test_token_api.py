"""End-to-end tests for the token endpoints."""

import time

import jwt
import pytest
from fastapi.testclient import TestClient

from meh.interface.api.app import create_app
from tests.conftest import ADMIN_PASSWORD, JWT_SECRET, auth_header, make_token
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client with test container."""
    return TestClient(create_app(container=build_test_container()))


class TestAdminToken:
    def test_login(self, client):
        # Act
        response = client.post("/token/admin", json={"password": ADMIN_PASSWORD})

        # Assert
        assert response.status_code == 200
        payload = response.json()["response"]
        assert payload["scopes"] == ["admin", "user"]
        assert payload["token"]

    def test_wrong_password(self, client):
        response = client.post("/token/admin", json={"password": "nope"})

        assert response.status_code == 401
        assert response.json()["error"]["message"].startswith("`badpass`")

    def test_no_password(self, client):
        response = client.post("/token/admin")

        assert response.status_code == 400
        assert response.json()["error"]["message"].startswith("`nopass`")

    def test_admin_token_unlocks_moderation(self, client):
        token = client.post("/token/admin", json={"password": ADMIN_PASSWORD}).json()[
            "response"
        ]["token"]

        response = client.get(
            "/comments", params={"post": "/blog"}, headers=auth_header(token)
        )

        assert response.status_code == 200


class TestRefresh:
    def test_first_visit_gets_user_token(self, client):
        response = client.post("/token/refresh")

        assert response.status_code == 200
        assert response.json()["response"]["scopes"] == ["user"]

    def test_refresh_keeps_admin_scope(self, client):
        response = client.post(
            "/token/refresh", headers=auth_header(make_token(("admin", "user")))
        )

        assert response.json()["response"]["scopes"] == ["admin", "user"]

    def test_token_without_scopes_claim_refreshes_as_user(self, client):
        token = jwt.encode(
            {"iat": int(time.time()) - 60, "sub": "b" * 32},
            JWT_SECRET,
            algorithm="HS256",
        )

        response = client.post("/token/refresh", headers=auth_header(token))

        assert response.status_code == 200
        assert response.json()["response"]["scopes"] == ["user"]

    def test_refreshed_token_is_too_fresh_to_post(self, client):
        token = client.post("/token/refresh").json()["response"]["token"]

        response = client.post(
            "/comment",
            json={"post": "/blog", "author": "Bot", "text": "spam"},
            headers=auth_header(token),
        )

        assert response.status_code == 503


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert response.json()["environment"] == "test"
