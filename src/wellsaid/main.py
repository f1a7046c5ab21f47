"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse
from pydantic import BaseModel
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from src.wellsaid.config import settings
from src.wellsaid.features.auth import router as auth_router
from src.wellsaid.services.rate_limiter import limiter

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle (startup and shutdown)."""
    logger.info(
        "Starting WellSaid auth web",
        extra={
            "supabase_url": settings.supabase_url,
            "rate_limit_enabled": settings.rate_limit_enabled,
            "site_url": settings.site_url,
        },
    )
    if not settings.posthog_api_key:
        logger.info("PostHog API key not set, analytics events are disabled")

    yield

    logger.info("WellSaid auth web shut down")


app = FastAPI(
    title="WellSaid Auth",
    description="Signup, login and onboarding pages for WellSaid",
    version="0.1.0",
    debug=settings.debug,
    lifespan=lifespan,
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

origins = settings.cors_origins.split(",")
logger.info(f"Origins : {origins}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type", "Authorization"],
)

app.include_router(auth_router)


class HealthCheckResponse(BaseModel):
    """Health check response."""

    status: str


@app.get("/", include_in_schema=False)
async def root_redirect() -> RedirectResponse:
    """Send visitors to the login page."""
    return RedirectResponse(url=settings.login_path)


@app.get("/health", response_model=HealthCheckResponse)
async def health_check() -> HealthCheckResponse:
    """Health check endpoint."""
    return HealthCheckResponse(status="healthy")
