"""Tests for the error envelope handlers."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from meh.domain.error import NotFoundError, RateLimitError, StoreError
from meh.interface.error import GENERIC_MESSAGE, register_error_handlers


@pytest.fixture
def client():
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/toosoon")
    async def toosoon():
        raise RateLimitError(RateLimitError.TOO_SOON, "Token too fresh")

    @app.get("/pending")
    async def pending():
        raise RateLimitError(RateLimitError.PENDING, "Wait for moderation")

    @app.get("/store")
    async def store():
        raise StoreError("connection refused by 10.0.0.5")

    @app.get("/missing")
    async def missing():
        raise NotFoundError("Comment 7 not found")

    return TestClient(app)


class TestDomainErrorHandler:
    @pytest.mark.parametrize(
        "path,tag",
        [("/toosoon", "toosoon"), ("/pending", "pending")],
    )
    def test_rate_limit_keeps_tag(self, client, path, tag):
        response = client.get(path)

        assert response.status_code == 503
        error = response.json()["error"]
        assert error["code"] == 503
        assert error["message"].startswith(f"`{tag}`")

    def test_store_error_is_generic(self, client):
        response = client.get("/store")

        assert response.status_code == 500
        assert response.json() == {
            "error": {"message": GENERIC_MESSAGE, "code": 500}
        }

    def test_not_found_passes_message(self, client):
        response = client.get("/missing")

        assert response.status_code == 404
        assert response.json()["error"]["message"] == "Comment 7 not found"
