"""
Login form action.

Wraps ``core.auth.sign_in`` and turns its failures into the message
shown on the login form.
"""

from typing import Any, Awaitable, Callable, Mapping, Optional

from ..core.auth import AuthError, Session, sign_in


SignIn = Callable[[str, Mapping[str, Any], Session], Awaitable[None]]


class AuthActions:
    """Authenticate a login form submission into ``session``."""

    def __init__(self, session: Session, sign_in: SignIn = sign_in) -> None:
        self.session = session
        self._sign_in = sign_in

    async def authenticate(
        self,
        prev_state: Optional[str],
        credentials: Mapping[str, Any],
    ) -> Optional[str]:
        """Return ``None`` once signed in, otherwise the message to display.

        Errors that do not come from the sign‑in layer are re‑raised.
        """
        try:
            await self._sign_in("credentials", credentials, self.session)
        except AuthError as error:
            if error.type == "CredentialsSignin":
                return "Invalid credentials."
            return "Something went wrong."
        return None
