"""Signing and verifying identity tokens (HS256 JWTs)."""

from datetime import timedelta

import jwt
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from meh.config import AuthSettings


class TokenPayload(BaseModel):
    """Claims of an identity token.

    A token without a scopes claim grants nothing, it is not malformed.
    The claim stays None then, to tell it apart from an empty list.
    """

    scopes: list[str] | None = None
    iat: int
    sub: str | None = None


class JWTError(Exception):
    """Token could not be verified."""


def create_token(scopes: list[str], sub: str, settings: AuthSettings, iat: int) -> str:
    """Sign a token issued at `iat` (seconds since epoch).

    The expiry is counted from the issuance time, not from now, so a
    backdated token expires accordingly.
    """
    expiry = iat + int(timedelta(days=settings.jwt_expiry_days).total_seconds())
    claims = {"scopes": scopes, "iat": iat, "sub": sub, "exp": expiry}
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Check signature and expiry, then parse the claims.

    Raises:
        JWTError: With a message fit for the client
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["iat"]},
        )
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")

    try:
        return TokenPayload.model_validate(claims)
    except PydanticValidationError:
        raise JWTError("Invalid token payload")
