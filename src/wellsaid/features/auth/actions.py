"""Server-side form actions for the auth pages.

Each action talks to Supabase through a request-scoped client and returns a
tagged result (``Redirect`` or ``ActionFailure``). Performing the actual
navigation is left to the HTTP handlers.
"""

import logging
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any

from supabase import AuthError, Client, PostgrestAPIError

from src.wellsaid.config import settings
from src.wellsaid.features.auth.models import (
    ActionFailure,
    ActionResult,
    Credentials,
    OnboardingForm,
    Redirect,
)
from src.wellsaid.services import PostHogService
from src.wellsaid.services.auth.exceptions import AuthenticationError

logger = logging.getLogger(__name__)


def signup(form: Mapping[str, Any], client: Client) -> ActionResult:
    """
    Register a new account with Supabase Auth.

    Fields are forwarded exactly as submitted; validation (missing fields,
    weak passwords, duplicate accounts) is left to the provider. Provider
    rejections come back as ``ActionFailure`` with the provider's message and
    are not retried. Anything other than an ``AuthError`` propagates.

    Args:
        form: Submitted form fields (``email`` and ``password``)
        client: Request-scoped Supabase client

    Returns:
        Redirect to the onboarding page, or ActionFailure with the provider message
    """
    credentials = Credentials.from_form(form)

    try:
        response = client.auth.sign_up(
            {"email": credentials.email, "password": credentials.password}
        )
    except AuthError as e:
        logger.info(
            f"Signup rejected by auth provider: {e.message}",
            extra={"error_code": getattr(e, "code", None)},
        )
        PostHogService().capture(
            distinct_id="anonymous",
            event="signup_failed",
            properties={"error_code": getattr(e, "code", None)},
        )
        return ActionFailure(error=e.message)

    user = getattr(response, "user", None)
    session = getattr(response, "session", None)
    if user is not None:
        logger.info(f"User signed up: {user.id}")
        PostHogService().capture(
            distinct_id=str(user.id),
            event="user_signed_up",
            properties={"confirmation_pending": session is None},
        )

    return Redirect(path=settings.onboarding_path, session=session)


def sign_in_with_google(client: Client, base_url: str) -> ActionResult:
    """
    Start the Google OAuth flow.

    Args:
        client: Request-scoped Supabase client
        base_url: Public base URL of this site, used for the callback

    Returns:
        Redirect to the provider's consent URL, or ActionFailure
    """
    try:
        response = client.auth.sign_in_with_oauth(
            {
                "provider": "google",
                "options": {"redirect_to": f"{base_url}/auth/callback"},
            }
        )
    except AuthError as e:
        logger.warning(f"Google OAuth start failed: {e.message}")
        return ActionFailure(error=e.message)

    PostHogService().capture(
        distinct_id="anonymous",
        event="oauth_login_started",
        properties={"provider": "google"},
    )
    return Redirect(path=response.url)


def complete_oauth_login(client: Client, code: str | None, code_verifier: str | None) -> Redirect:
    """
    Exchange the OAuth callback code for a session and pick the landing page.

    Users without a first name on their profile still have to finish
    onboarding, as do users whose profile cannot be read. A failed code
    exchange sends the browser back to the login page.
    """
    if not code:
        return Redirect(path=settings.login_path)

    try:
        response = client.auth.exchange_code_for_session(
            {"auth_code": code, "code_verifier": code_verifier}
        )
    except AuthError as e:
        logger.warning(f"OAuth code exchange failed: {e.message}")
        return Redirect(path=settings.login_path)

    user = getattr(response, "user", None)
    session = getattr(response, "session", None)
    if user is None or session is None:
        return Redirect(path=settings.login_path)

    client.postgrest.auth(session.access_token)
    try:
        profile = (
            client.table("profiles").select("first_name").eq("id", str(user.id)).limit(1).execute()
        )
        first_name = profile.data[0].get("first_name") if profile.data else None
    except PostgrestAPIError as e:
        logger.warning(f"Profile lookup failed for user {user.id}: {e.message}")
        first_name = None

    destination = settings.dashboard_path if first_name else settings.onboarding_path
    logger.info(f"OAuth login completed for user {user.id}, redirecting to {destination}")
    return Redirect(path=destination, session=session)


def _get_authenticated_user(client: Client, access_token: str | None) -> Any:
    """
    Resolve the user behind an access token via Supabase Auth.

    Raises:
        AuthenticationError: If the token is missing, invalid or expired
    """
    if not access_token:
        raise AuthenticationError("No session")

    try:
        response = client.auth.get_user(access_token)
    except AuthError as e:
        raise AuthenticationError(e.message) from e

    user = getattr(response, "user", None)
    if user is None:
        raise AuthenticationError("Session has no user")
    return user


def complete_onboarding(
    form: OnboardingForm, client: Client, access_token: str | None
) -> ActionResult:
    """
    Save the onboarding profile details for the signed-in user.

    Args:
        form: Validated onboarding form
        client: Request-scoped Supabase client (bound to the user's token)
        access_token: The user's access token

    Returns:
        Redirect to the dashboard, or ActionFailure
    """
    try:
        user = _get_authenticated_user(client, access_token)
    except AuthenticationError as e:
        logger.warning(f"Onboarding rejected: {e}")
        return ActionFailure(error="Not authenticated")

    try:
        client.table("profiles").update(
            {
                "first_name": form.first_name,
                "last_name": form.last_name,
                "preferred_language": form.preferred_language,
                "hospital_phone": form.hospital_phone or None,
                "phone_extension": form.phone_extension or None,
                "updated_at": datetime.now(UTC).isoformat(),
            }
        ).eq("id", str(user.id)).execute()
    except Exception as e:
        logger.error(f"Profile update failed for user {user.id}: {e}", exc_info=True)
        return ActionFailure(error="Failed to save profile")

    PostHogService().capture(
        distinct_id=str(user.id),
        event="onboarding_completed",
        properties={"preferred_language": form.preferred_language},
    )
    return Redirect(path=settings.dashboard_path)
