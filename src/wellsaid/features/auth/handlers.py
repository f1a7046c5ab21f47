"""Page and form handlers for the authentication section."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse, Response
from supabase import Client

from src.wellsaid.config import settings
from src.wellsaid.features.auth import actions
from src.wellsaid.features.auth.models import ActionFailure, Credentials, OnboardingForm, Redirect
from src.wellsaid.services.auth.client import get_access_token, get_auth_client, get_code_verifier
from src.wellsaid.services.auth.dependencies import get_current_user
from src.wellsaid.services.auth.session import (
    CODE_VERIFIER_COOKIE,
    clear_session_cookies,
    set_code_verifier_cookie,
    set_session_cookies,
)
from src.wellsaid.services.rate_limiter import default_rate_limit, public_rate_limit
from src.wellsaid.web import templates

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


def get_base_url(request: Request) -> str:
    """
    Public base URL of the site, used to build OAuth callback URLs.

    Prefers the configured ``site_url``; otherwise trusts the proxy headers.
    """
    if settings.site_url:
        return settings.site_url.rstrip("/")

    host = (
        request.headers.get("x-forwarded-host")
        or request.headers.get("host")
        or "localhost:3000"
    )
    protocol = request.headers.get("x-forwarded-proto") or "https"
    return f"{protocol}://{host}"


def wants_json(request: Request) -> bool:
    """True when the caller asked for a JSON result instead of a page."""
    return "application/json" in request.headers.get("accept", "")


def redirect_to(result: Redirect) -> RedirectResponse:
    """Turn a successful action result into a 303 redirect, storing any session."""
    response = RedirectResponse(url=result.path, status_code=status.HTTP_303_SEE_OTHER)
    set_session_cookies(response, result.session)
    return response


def render_failure(
    request: Request, template: str, failure: ActionFailure, **context
) -> Response:
    """Report a failed action as ``{"error": ...}`` or by re-rendering the page."""
    if wants_json(request):
        return JSONResponse(failure.model_dump(), status_code=status.HTTP_400_BAD_REQUEST)

    return templates.TemplateResponse(
        request,
        template,
        {"error": failure.error, **context},
        status_code=status.HTTP_400_BAD_REQUEST,
    )


@router.get("/signup", response_class=HTMLResponse, include_in_schema=False)
@default_rate_limit
async def signup_page(request: Request, user=Depends(get_current_user)) -> Response:
    """Serve the email/password signup form; signed-in users go to the dashboard."""
    if user is not None:
        return redirect_to(Redirect(path=settings.dashboard_path))

    return templates.TemplateResponse(request, "auth/signup.html", {"error": None})


@router.post("/signup", include_in_schema=False)
@public_rate_limit
async def signup(request: Request, client: Client = Depends(get_auth_client)) -> Response:
    """
    Handle the signup form.

    Redirects to onboarding on success; on provider rejection re-renders the
    form with the provider's message (or returns it as JSON).
    """
    form = await request.form()
    result = actions.signup(form, client)

    if isinstance(result, ActionFailure):
        email = Credentials.from_form(form).email
        return render_failure(request, "auth/signup.html", result, email=email)

    return redirect_to(result)


@router.get("/login", response_class=HTMLResponse, include_in_schema=False)
@default_rate_limit
async def login_page(request: Request, user=Depends(get_current_user)) -> Response:
    """Serve the login page with the Google sign-in option; signed-in users go to the dashboard."""
    if user is not None:
        return redirect_to(Redirect(path=settings.dashboard_path))

    return templates.TemplateResponse(request, "auth/login.html", {"error": None})


@router.post("/login/google", include_in_schema=False)
@public_rate_limit
async def login_with_google(
    request: Request, client: Client = Depends(get_auth_client)
) -> Response:
    """Start Google OAuth and send the browser to the consent screen."""
    result = actions.sign_in_with_google(client, get_base_url(request))

    if isinstance(result, ActionFailure):
        return render_failure(request, "auth/login.html", result)

    response = redirect_to(result)
    set_code_verifier_cookie(response, get_code_verifier(client))
    return response


@router.get("/auth/callback", include_in_schema=False)
async def oauth_callback(
    request: Request,
    code: str | None = None,
    client: Client = Depends(get_auth_client),
) -> RedirectResponse:
    """Finish the OAuth flow started by ``/login/google``."""
    result = actions.complete_oauth_login(
        client, code, request.cookies.get(CODE_VERIFIER_COOKIE)
    )

    response = redirect_to(result)
    if code and result.session is None:
        clear_session_cookies(response)
    else:
        response.delete_cookie(CODE_VERIFIER_COOKIE, path="/")
    return response


@router.get("/onboarding", response_class=HTMLResponse, include_in_schema=False)
@default_rate_limit
async def onboarding_page(request: Request, user=Depends(get_current_user)) -> Response:
    """Serve the onboarding profile form; signed-out visitors go to login."""
    if user is None:
        return redirect_to(Redirect(path=settings.login_path))

    return templates.TemplateResponse(
        request, "auth/onboarding.html", {"error": None, "form": {}}
    )


@router.post("/onboarding", include_in_schema=False)
@public_rate_limit
async def onboarding(
    request: Request,
    form: Annotated[OnboardingForm, Form()],
    client: Client = Depends(get_auth_client),
) -> Response:
    """Save the onboarding details and continue to the dashboard."""
    result = actions.complete_onboarding(form, client, get_access_token(request))

    if isinstance(result, ActionFailure):
        return render_failure(
            request, "auth/onboarding.html", result, form=form.model_dump()
        )

    return redirect_to(result)
