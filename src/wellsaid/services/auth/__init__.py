"""Supabase authentication plumbing shared by the auth pages."""

from src.wellsaid.services.auth.client import (
    create_request_client,
    get_access_token,
    get_auth_client,
    get_code_verifier,
)
from src.wellsaid.services.auth.dependencies import get_current_user
from src.wellsaid.services.auth.exceptions import AuthenticationError
from src.wellsaid.services.auth.session import (
    ACCESS_TOKEN_COOKIE,
    CODE_VERIFIER_COOKIE,
    REFRESH_TOKEN_COOKIE,
    clear_session_cookies,
    set_code_verifier_cookie,
    set_session_cookies,
)

__all__ = [
    "create_request_client",
    "get_access_token",
    "get_auth_client",
    "get_code_verifier",
    "get_current_user",
    "AuthenticationError",
    "ACCESS_TOKEN_COOKIE",
    "CODE_VERIFIER_COOKIE",
    "REFRESH_TOKEN_COOKIE",
    "clear_session_cookies",
    "set_code_verifier_cookie",
    "set_session_cookies",
]
