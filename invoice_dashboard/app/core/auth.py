"""
Credential sign‑in.

``sign_in`` checks a submitted email/password pair against the
``users`` table and, on success, writes a signed session token into
the ``Session`` it was given.  Failures are reported with
``AuthError`` subclasses whose ``type`` names the reason, so callers
can tell bad credentials apart from everything else.
"""

import logging
import sqlite3
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from pydantic import ValidationError

from ..schemas.user import LoginForm
from .db import get_connection
from .security import create_access_token, verify_password


logger = logging.getLogger(__name__)

CREDENTIALS_PROVIDER = "credentials"


class AuthError(Exception):
    """Base class for sign‑in failures."""

    type = "AuthError"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.type)


class CredentialsSignin(AuthError):
    """The email/password pair was rejected."""

    type = "CredentialsSignin"


class CallbackRouteError(AuthError):
    """Looking up the user failed."""

    type = "CallbackRouteError"


class InvalidProvider(AuthError):
    type = "InvalidProvider"


@dataclass
class Session:
    """Session established by a successful sign‑in."""

    token: Optional[str] = None
    email: Optional[str] = None


def _get_user(email: str) -> Optional[sqlite3.Row]:
    conn = get_connection()
    try:
        return conn.execute(
            "SELECT id, name, email, password FROM users WHERE email = ?",
            (email,),
        ).fetchone()
    finally:
        conn.close()


async def sign_in(provider: str, credentials: Mapping[str, Any], session: Session) -> None:
    """Sign a user in with ``provider``.

    Only the ``credentials`` provider is configured.

    Raises
    ------
    CredentialsSignin
        The form is malformed, the user is unknown or the password does
        not match.
    CallbackRouteError
        The user could not be looked up.
    InvalidProvider
        ``provider`` is not configured.
    """
    if provider != CREDENTIALS_PROVIDER:
        raise InvalidProvider(f"Unknown sign-in provider: {provider}")

    try:
        form = LoginForm.model_validate(
            {"email": credentials.get("email"), "password": credentials.get("password")}
        )
    except ValidationError:
        raise CredentialsSignin()

    try:
        user = _get_user(form.email)
    except sqlite3.Error as e:
        logger.error("Failed to fetch user %s: %s", form.email, e)
        raise CallbackRouteError("Failed to fetch user.") from e

    if user is None or not verify_password(form.password, user["password"]):
        logger.info("Rejected sign-in for %s", form.email)
        raise CredentialsSignin()

    session.token = create_access_token({"sub": user["email"]})
    session.email = user["email"]
    logger.info("Signed in %s", user["email"])
