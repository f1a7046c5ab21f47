"""Shared services module for external integrations."""

from src.wellsaid.services.analytics import PostHogService

__all__ = [
    "PostHogService",
]
