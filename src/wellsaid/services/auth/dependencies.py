"""FastAPI dependencies for resolving the signed-in Supabase user."""

import logging
from typing import Any

from fastapi import Request
from supabase import AuthError

from src.wellsaid.services.auth.client import create_request_client, get_access_token

logger = logging.getLogger(__name__)


def get_current_user(request: Request) -> Any | None:
    """
    Resolve the user behind the request's access token, if any.

    Anonymous requests never reach Supabase. A token the provider rejects
    (expired, revoked, forged) is treated as signed out.

    Args:
        request: Incoming request

    Returns:
        Supabase user, or None when signed out

    Example:
        @router.get("/login")
        async def login_page(request: Request, user=Depends(get_current_user)):
            if user is not None:
                ...
    """
    access_token = get_access_token(request)
    if not access_token:
        return None

    client = create_request_client(access_token)
    try:
        response = client.auth.get_user(access_token)
    except AuthError as e:
        logger.info(f"Session rejected by auth provider: {e.message}")
        return None

    return getattr(response, "user", None)
