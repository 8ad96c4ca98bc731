"""Test configuration and fixtures.

Settings are read from the environment, the values below are set before any
test module builds a container.
"""

import os
import time

import bcrypt

from meh.config import AuthSettings
from meh.util.jwt import create_token

ADMIN_PASSWORD = "correct horse battery staple"
JWT_SECRET = "test-secret-that-is-long-enough-for-hs256"

os.environ["ENVIRONMENT"] = "test"
os.environ["AUTH__JWT_SECRET"] = JWT_SECRET
os.environ["AUTH__ADMIN_PASSWORD"] = bcrypt.hashpw(
    ADMIN_PASSWORD.encode(), bcrypt.gensalt(rounds=4)
).decode()
# Mail must never leave a test run
os.environ["NOTIFICATION__NOTIFY_EMAIL"] = ""
os.environ["NOTIFICATION__SMTP_HOST"] = ""


def make_token(
    scopes: tuple[str, ...] = ("user",),
    sub: str = "0123456789abcdef0123456789abcdef",
    age: int = 60,
) -> str:
    """Helper to sign a token issued `age` seconds ago.

    The default age is past the minimum token age, so the token can be used
    to post right away.
    """
    return create_token(
        list(scopes),
        sub,
        AuthSettings(jwt_secret=JWT_SECRET),
        int(time.time()) - age,
    )


def auth_header(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
