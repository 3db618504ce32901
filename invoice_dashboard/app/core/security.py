"""
Security helpers for password hashing and session tokens.

Session tokens are compact JSON Web Tokens signed with HMAC‑SHA256
and base64url encoded.  They embed arbitrary claims and an expiration
timestamp (``exp``).  The secret key from the application settings is
used to sign and verify them.  Passwords are hashed with PBKDF2‑HMAC
over SHA‑256 with a random per‑password salt.
"""

import base64
import hashlib
import hmac
import json
import os
import time
from typing import Dict, Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .config import settings


PBKDF2_ITERATIONS = 100_000


def _b64_url_encode(data: bytes) -> str:
    """Base64‑url encode bytes without padding."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("utf-8")


def _b64_url_decode(data: str) -> bytes:
    """Decode base64‑url encoded string, adding padding if necessary."""
    padding = "=" * (-len(data) % 4)
    return base64.urlsafe_b64decode(data + padding)


def _sign(message: bytes, secret: str) -> bytes:
    return hmac.new(secret.encode("utf-8"), message, hashlib.sha256).digest()


def create_access_token(data: Dict[str, str], expires_delta: Optional[int] = None) -> str:
    """Create a signed session token with the given payload.

    The payload is extended with an ``exp`` field holding the
    expiration time as a UNIX timestamp.

    Parameters
    ----------
    data : dict
        Claims to embed in the token (e.g. ``{"sub": "user@example.com"}``).
    expires_delta : Optional[int]
        Lifetime of the token in seconds.  Defaults to
        ``settings.access_token_expire_minutes * 60``.

    Returns
    -------
    str
        A token of the form ``header.payload.signature``.
    """
    to_encode = data.copy()
    exp_seconds = expires_delta or settings.access_token_expire_minutes * 60
    to_encode["exp"] = int(time.time()) + exp_seconds
    header = {"alg": "HS256", "typ": "JWT"}
    header_b64 = _b64_url_encode(json.dumps(header, separators=(",", ":")).encode("utf-8"))
    payload_b64 = _b64_url_encode(json.dumps(to_encode, separators=(",", ":")).encode("utf-8"))
    signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
    signature_b64 = _b64_url_encode(_sign(signing_input, settings.secret_key))
    return f"{header_b64}.{payload_b64}.{signature_b64}"


def decode_access_token(token: str) -> Optional[Dict[str, str]]:
    """Verify and decode a session token.

    Returns the payload dictionary when the signature matches and the
    token has not expired, otherwise ``None``.
    """
    parts = token.split(".")
    if len(parts) != 3:
        return None
    header_b64, payload_b64, signature_b64 = parts
    signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
    expected_sig = _sign(signing_input, settings.secret_key)
    try:
        actual_sig = _b64_url_decode(signature_b64)
    except ValueError:
        return None
    # Constant‑time comparison to prevent timing attacks
    if not hmac.compare_digest(expected_sig, actual_sig):
        return None
    try:
        data = json.loads(_b64_url_decode(payload_b64).decode("utf-8"))
    except ValueError:
        return None
    if not isinstance(data, dict) or data.get("exp") is None or int(data["exp"]) < int(time.time()):
        return None
    return data


security = HTTPBearer(auto_error=False)


def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Dict[str, str]:
    """Dependency that retrieves the signed‑in user.

    The token is read from the session cookie set by ``POST /login``
    or, for API clients, from an ``Authorization: Bearer`` header.  If
    neither is present, the token is invalid or the user no longer
    exists, an HTTP 401 error is raised.  On success the decoded
    payload is returned with ``user_id`` and ``name`` attached.
    """
    token = request.cookies.get(settings.session_cookie_name)
    if credentials is not None:
        token = credentials.credentials
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    payload = decode_access_token(token)
    if not payload:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    from invoice_dashboard.app.core.db import get_connection
    conn = get_connection()
    try:
        user_row = conn.execute(
            "SELECT id, name FROM users WHERE email = ?",
            (payload.get("sub"),),
        ).fetchone()
    finally:
        conn.close()
    if not user_row:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User no longer exists",
            headers={"WWW-Authenticate": "Bearer"},
        )
    payload["user_id"] = user_row["id"]
    payload["name"] = user_row["name"]
    return payload


def hash_password(password: str) -> str:
    """Hash a password using PBKDF2‑HMAC with SHA‑256.

    A 16‑byte random salt is generated for each password.  The result
    holds the salt and the digest in hex separated by ``$``.
    """
    salt = os.urandom(16)
    dk = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, PBKDF2_ITERATIONS)
    return f"{salt.hex()}${dk.hex()}"


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against a stored ``salt$hash`` string."""
    try:
        salt_hex, hash_hex = hashed_password.split("$", 1)
        salt = bytes.fromhex(salt_hex)
        stored_hash = bytes.fromhex(hash_hex)
    except ValueError:
        return False
    dk = hashlib.pbkdf2_hmac("sha256", plain_password.encode("utf-8"), salt, PBKDF2_ITERATIONS)
    return hmac.compare_digest(dk, stored_hash)
