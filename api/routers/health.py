"""Service status endpoints."""

import time
from datetime import UTC, datetime

from fastapi import APIRouter
from pydantic import BaseModel

from api.config import get_settings
from visibility import __version__
from visibility.analyzer.content import CHECKS
from visibility.analyzer.models import AnalyzerOptions
from visibility.crawlers.bots import AI_CRAWLERS

router = APIRouter(tags=["Health"])

STARTED_AT = time.monotonic()


class HealthResponse(BaseModel):
    status: str
    timestamp: str
    version: str
    uptime_seconds: int
    enabled_checks: list[str]


class ApiInfoResponse(BaseModel):
    """What this deployment exposes."""

    name: str
    version: str
    env: str
    docs: str | None
    known_crawlers: int


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness plus the analyzer checks this instance runs by default."""
    options = AnalyzerOptions.from_settings(get_settings())
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(UTC).isoformat(),
        version=__version__,
        uptime_seconds=int(time.monotonic() - STARTED_AT),
        enabled_checks=[field for flag, field, _ in CHECKS if getattr(options, flag)],
    )


@router.get("/", response_model=ApiInfoResponse)
async def root() -> ApiInfoResponse:
    settings = get_settings()
    return ApiInfoResponse(
        name="AI Visibility API",
        version=__version__,
        env=settings.env,
        docs="/docs" if settings.debug else None,
        known_crawlers=len(AI_CRAWLERS),
    )
