"""Identity token domain service."""

import secrets
import time

import bcrypt
import logfire

from meh.config import AuthSettings
from meh.domain.error import AuthenticationError, AuthorizationError, ValidationError
from meh.domain.value import IdentityToken, Scope, SubjectId
from meh.util.error import ConfigurationError
from meh.util.jwt import JWTError, create_token, verify_token

from .base import Service


class TokenService(Service):
    """Domain service for issuing, decoding and checking identity tokens."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize token service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def issue_token(
        self, scopes: list[str], sub: str | None = None, now: float | None = None
    ) -> str:
        """Issue a signed token.

        Args:
            scopes: Scopes to grant
            sub: Session subject to keep, a new random one when None
            now: Issuance time in seconds, defaults to the wall clock

        Returns:
            JWT token string
        """
        sub = sub or secrets.token_hex(16)
        iat = int(time.time() if now is None else now)
        with logfire.span("token_service.issue_token", scopes=scopes):
            token = create_token(scopes, sub, self.auth_settings, iat)
            logfire.info("Token issued", scopes=scopes)
            return token

    def issue_admin_token(self, password: str | None) -> tuple[str, list[str]]:
        """Exchange the admin password for an admin token.

        Admin tokens carry the user scope as well.

        Args:
            password: Password supplied by the caller

        Returns:
            Tuple of (token, scopes)

        Raises:
            ValidationError: If no password was given
            ConfigurationError: If no admin password is configured
            AuthenticationError: If the password does not match
        """
        if not password:
            raise ValidationError("`nopass` Password is required")

        hashed = self.auth_settings.admin_password
        if not hashed:
            raise ConfigurationError("`noadmin` Admin password not configured")

        try:
            matches = bcrypt.checkpw(password.encode(), hashed.encode())
        except ValueError:
            logfire.error("Configured admin password is not a bcrypt hash")
            raise ConfigurationError("`noadmin` Admin password not configured")

        if not matches:
            logfire.warn("Admin login with wrong password")
            raise AuthenticationError("`badpass` Invalid password")

        scopes = [Scope.ADMIN.value, Scope.USER.value]
        return self.issue_token(scopes), scopes

    def refresh_token(self, current: IdentityToken | None) -> tuple[str, list[str]]:
        """Issue a fresh token, keeping scopes and subject of a valid current one.

        A current token without a scopes claim is refreshed as a user token.

        Args:
            current: Decoded token sent with the request, if any

        Returns:
            Tuple of (token, scopes)
        """
        if current is None:
            scopes = [Scope.USER.value]
            sub = None
        elif current.scopes is None:
            scopes = [Scope.USER.value]
            sub = current.sub
        else:
            scopes = sorted(current.scopes)
            sub = current.sub
        return self.issue_token(scopes, sub), scopes

    def decode(self, token: str) -> IdentityToken:
        """Verify a token and extract its claims.

        Args:
            token: JWT token string

        Returns:
            Decoded identity token

        Raises:
            AuthenticationError: If token is invalid or expired
        """
        try:
            payload = verify_token(token, self.auth_settings)
        except JWTError as e:
            logfire.info("Token verification failed", error=str(e))
            raise AuthenticationError(str(e))

        return IdentityToken(
            scopes=None if payload.scopes is None else frozenset(payload.scopes),
            iat=payload.iat,
            sub=SubjectId(payload.sub) if payload.sub else None,
        )

    def decode_optional(self, token: str | None) -> IdentityToken | None:
        """Decode a token without raising.

        Read-only operations degrade to the unprivileged view, so a missing
        or invalid token simply yields None.

        Args:
            token: JWT token string (optional)

        Returns:
            Decoded token, None if missing or invalid
        """
        if not token:
            return None

        try:
            return self.decode(token)
        except AuthenticationError:
            return None

    def authorize(self, token: str | None, *required: Scope) -> IdentityToken:
        """Decode a token and check it carries every required scope.

        Args:
            token: JWT token string (optional)
            required: Scopes the operation needs

        Returns:
            Decoded identity token

        Raises:
            AuthenticationError: If the token is missing or invalid
            AuthorizationError: If a required scope is missing
        """
        if not token:
            raise AuthenticationError("No valid token given")

        identity = self.decode(token)
        if not identity.has_scopes(*required):
            logfire.warn(
                "Missing required scope",
                required=[scope.value for scope in required],
                scopes=sorted(identity.scopes or ()),
            )
            raise AuthorizationError("Insufficient permissions")
        return identity
