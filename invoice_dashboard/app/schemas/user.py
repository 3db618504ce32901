"""
Pydantic models for user data.

Users sign in with an email and a password.  Stored passwords are
PBKDF2 hashes and are never returned through these schemas.
"""

from pydantic import BaseModel, Field


class LoginForm(BaseModel):
    """Credentials submitted to ``POST /login``."""

    email: str = Field(..., pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$", example="user@nextmail.com")
    password: str = Field(..., min_length=6, example="123456")
