"""Custom exceptions for authentication."""


class AuthenticationError(Exception):
    """Raised when a request carries no valid Supabase session."""

    pass
