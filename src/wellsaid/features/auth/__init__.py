"""Authentication pages: signup, Google login, OAuth callback and onboarding."""

from src.wellsaid.features.auth.handlers import router

__all__ = ["router"]
