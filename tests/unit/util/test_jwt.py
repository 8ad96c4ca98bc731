"""Unit tests for JWT utilities."""

import jwt
import pytest

from meh.config import AuthSettings
from meh.util.jwt import JWTError, create_token, verify_token

SETTINGS = AuthSettings(jwt_secret="unit-test-secret-long-enough-for-hs256")


def test_created_token_claims():
    token = create_token(["admin", "user"], "abc", SETTINGS, 1_700_000_000)

    with pytest.raises(JWTError, match="expired"):
        # Issued long ago, so expired by now
        verify_token(token, SETTINGS)

    claims = jwt.decode(
        token,
        SETTINGS.jwt_secret,
        algorithms=["HS256"],
        options={"verify_exp": False},
    )
    assert claims["scopes"] == ["admin", "user"]
    assert claims["sub"] == "abc"
    assert claims["iat"] == 1_700_000_000
    assert claims["exp"] == 1_700_000_000 + 30 * 24 * 3600


def test_token_without_iat_is_rejected():
    token = jwt.encode({"scopes": ["user"]}, SETTINGS.jwt_secret, algorithm="HS256")

    with pytest.raises(JWTError, match="Invalid token"):
        verify_token(token, SETTINGS)


def test_wrong_algorithm_is_rejected():
    token = jwt.encode(
        {"scopes": ["admin"], "iat": 1}, SETTINGS.jwt_secret, algorithm="HS512"
    )

    with pytest.raises(JWTError):
        verify_token(token, SETTINGS)


def test_malformed_scopes():
    token = jwt.encode(
        {"scopes": "admin", "iat": 1}, SETTINGS.jwt_secret, algorithm="HS256"
    )

    with pytest.raises(JWTError, match="payload"):
        verify_token(token, SETTINGS)


def test_missing_scopes_claim_differs_from_empty():
    absent = jwt.encode({"iat": 1, "sub": "abc"}, SETTINGS.jwt_secret, algorithm="HS256")
    empty = jwt.encode(
        {"scopes": [], "iat": 1, "sub": "abc"}, SETTINGS.jwt_secret, algorithm="HS256"
    )

    assert verify_token(absent, SETTINGS).scopes is None
    assert verify_token(empty, SETTINGS).scopes == []
