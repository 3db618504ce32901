"""
Login and logout.

``POST /login`` takes the login form, signs the user in and stores the
session token in an HTTP‑only cookie before redirecting to the
dashboard.  Rejected credentials answer 401 with the message to show
on the form.
"""

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse, RedirectResponse

from invoice_dashboard.app.core.auth import Session
from invoice_dashboard.app.core.config import settings
from invoice_dashboard.app.services.auth_service import AuthActions


router = APIRouter()


@router.post("/login")
async def login(request: Request):
    """Sign in with ``email`` and ``password`` form fields."""
    form = await request.form()
    session = Session()
    message = await AuthActions(session).authenticate(None, form)
    if message is not None:
        return JSONResponse(status_code=status.HTTP_401_UNAUTHORIZED, content={"message": message})
    response = RedirectResponse(url="/dashboard", status_code=status.HTTP_303_SEE_OTHER)
    response.set_cookie(
        settings.session_cookie_name,
        session.token,
        max_age=settings.access_token_expire_minutes * 60,
        httponly=True,
        samesite="lax",
    )
    return response


@router.post("/logout")
async def logout() -> RedirectResponse:
    response = RedirectResponse(url="/login", status_code=status.HTTP_303_SEE_OTHER)
    response.delete_cookie(settings.session_cookie_name)
    return response
