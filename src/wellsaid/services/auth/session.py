"""Session cookie helpers.

Supabase owns the session itself; these helpers only carry the tokens it
issues between the browser and the server.
"""

from typing import Any

from starlette.responses import Response

from src.wellsaid.config import settings

ACCESS_TOKEN_COOKIE = "sb-access-token"
REFRESH_TOKEN_COOKIE = "sb-refresh-token"
CODE_VERIFIER_COOKIE = "sb-code-verifier"

# OAuth round trips that take longer than this have to start over
CODE_VERIFIER_MAX_AGE_SECONDS = 600


def set_session_cookies(response: Response, session: Any | None) -> None:
    """
    Store the provider-issued session tokens on the response.

    Args:
        response: Outgoing response (usually a redirect)
        session: Supabase session, or None when the provider did not issue one
            (e.g. email confirmation is still pending)
    """
    if session is None:
        return

    cookie_options = {
        "httponly": True,
        "secure": settings.session_cookie_secure,
        "samesite": "lax",
        "path": "/",
    }
    response.set_cookie(
        ACCESS_TOKEN_COOKIE,
        session.access_token,
        max_age=session.expires_in,
        **cookie_options,
    )
    response.set_cookie(REFRESH_TOKEN_COOKIE, session.refresh_token, **cookie_options)


def clear_session_cookies(response: Response) -> None:
    """Remove the session and PKCE cookies."""
    response.delete_cookie(ACCESS_TOKEN_COOKIE, path="/")
    response.delete_cookie(REFRESH_TOKEN_COOKIE, path="/")
    response.delete_cookie(CODE_VERIFIER_COOKIE, path="/")


def set_code_verifier_cookie(response: Response, code_verifier: str | None) -> None:
    """Carry the PKCE verifier from the OAuth start to the callback."""
    if not code_verifier:
        return

    response.set_cookie(
        CODE_VERIFIER_COOKIE,
        code_verifier,
        max_age=CODE_VERIFIER_MAX_AGE_SECONDS,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
        path="/",
    )
