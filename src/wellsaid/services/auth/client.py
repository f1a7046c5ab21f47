"""Request-scoped Supabase clients for the auth pages."""

import logging

from fastapi import Request
from supabase import Client, ClientOptions, create_client

from src.wellsaid.config import settings
from src.wellsaid.services.auth.session import ACCESS_TOKEN_COOKIE

logger = logging.getLogger(__name__)

# Storage key supabase-py writes the PKCE verifier under when an OAuth flow starts
CODE_VERIFIER_STORAGE_KEY = "supabase.auth.token-code-verifier"


def get_access_token(request: Request) -> str | None:
    """
    Resolve the caller's Supabase access token.

    A bearer token in the Authorization header takes precedence over the
    session cookie set after signup or OAuth login.

    Args:
        request: Incoming request

    Returns:
        Access token string, or None for anonymous requests
    """
    auth_header = request.headers.get("authorization")
    if auth_header and auth_header.startswith("Bearer "):
        return auth_header[len("Bearer ") :]

    return request.cookies.get(ACCESS_TOKEN_COOKIE) or None


def create_request_client(access_token: str | None = None) -> Client:
    """
    Build a fresh Supabase client with the anon key.

    The client never persists or refreshes a session on its own and is not
    shared between requests. When an access token is supplied it is bound to
    PostgREST so RLS policies see the user.

    Args:
        access_token: Optional user access token

    Returns:
        Configured Supabase client
    """
    client = create_client(
        settings.supabase_url,
        settings.supabase_anon_key,
        options=ClientOptions(
            auto_refresh_token=False,
            persist_session=False,
            flow_type="pkce",
        ),
    )
    if access_token:
        client.postgrest.auth(access_token)
    return client


def get_auth_client(request: Request) -> Client:
    """
    FastAPI dependency returning a Supabase client bound to this request.

    Example:
        @router.post("/signup")
        async def signup(client: Client = Depends(get_auth_client)):
            ...
    """
    access_token = get_access_token(request)
    logger.debug(
        "Creating request-scoped Supabase client",
        extra={"authenticated": access_token is not None},
    )
    return create_request_client(access_token)


def get_code_verifier(client: Client) -> str | None:
    """
    Read the PKCE code verifier generated by ``sign_in_with_oauth``.

    The request-scoped client is discarded once the response is sent, so the
    verifier has to travel to the OAuth callback in a cookie.
    """
    return client.options.storage.get_item(CODE_VERIFIER_STORAGE_KEY)
