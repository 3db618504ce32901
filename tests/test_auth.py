from __future__ import annotations

import asyncio

import pytest

from invoice_dashboard.app.core.auth import (
    AuthError,
    CallbackRouteError,
    CredentialsSignin,
    InvalidProvider,
    Session,
    sign_in,
)
from invoice_dashboard.app.core.security import decode_access_token, hash_password, verify_password
from invoice_dashboard.app.services.auth_service import AuthActions

EMAIL = "user@nextmail.com"
PASSWORD = "123456"


def _raising(error: Exception):
    async def fake_sign_in(provider, credentials, session):
        raise error

    return fake_sign_in


def test_successful_sign_in_returns_nothing(database) -> None:
    session = Session()

    message = asyncio.run(AuthActions(session).authenticate(None, {"email": EMAIL, "password": PASSWORD}))

    assert message is None
    assert session.email == EMAIL
    assert decode_access_token(session.token)["sub"] == EMAIL


def test_wrong_password_is_invalid_credentials(database) -> None:
    session = Session()

    message = asyncio.run(AuthActions(session).authenticate(None, {"email": EMAIL, "password": "wrong-password"}))

    assert message == "Invalid credentials."
    assert session.token is None


def test_unknown_user_is_invalid_credentials(database) -> None:
    message = asyncio.run(
        AuthActions(Session()).authenticate("Invalid credentials.", {"email": "ghost@example.com", "password": PASSWORD})
    )

    assert message == "Invalid credentials."


@pytest.mark.parametrize(
    "credentials",
    [{}, {"email": "not-an-email", "password": PASSWORD}, {"email": EMAIL, "password": "123"}],
)
def test_malformed_credentials_raise_credentials_signin(database, credentials) -> None:
    with pytest.raises(CredentialsSignin):
        asyncio.run(sign_in("credentials", credentials, Session()))


def test_unknown_provider(database) -> None:
    with pytest.raises(InvalidProvider):
        asyncio.run(sign_in("github", {"email": EMAIL, "password": PASSWORD}, Session()))


def test_other_auth_errors_are_generic() -> None:
    actions = AuthActions(Session(), sign_in=_raising(CallbackRouteError("boom")))

    assert asyncio.run(actions.authenticate(None, {})) == "Something went wrong."


def test_base_auth_error_is_generic() -> None:
    actions = AuthActions(Session(), sign_in=_raising(AuthError()))

    assert asyncio.run(actions.authenticate(None, {})) == "Something went wrong."


def test_foreign_errors_propagate() -> None:
    actions = AuthActions(Session(), sign_in=_raising(RuntimeError("not an auth failure")))

    with pytest.raises(RuntimeError, match="not an auth failure"):
        asyncio.run(actions.authenticate(None, {}))


def test_password_hash_round_trip() -> None:
    hashed = hash_password("s3cret!")

    assert verify_password("s3cret!", hashed)
    assert not verify_password("other", hashed)
    assert not verify_password("s3cret!", "garbage")


def test_tampered_token_is_rejected(database) -> None:
    session = Session()
    asyncio.run(sign_in("credentials", {"email": EMAIL, "password": PASSWORD}, session))
    header, payload, signature = session.token.split(".")

    assert decode_access_token(f"{header}.{payload}.{signature[:-2]}xx") is None
    assert decode_access_token("not-a-token") is None
