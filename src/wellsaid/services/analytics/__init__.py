"""Product analytics integrations."""

from src.wellsaid.services.analytics.posthog import PostHogService

__all__ = ["PostHogService"]
