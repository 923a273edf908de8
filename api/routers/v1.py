"""V1 API router - aggregates all versioned endpoints."""

from fastapi import APIRouter

from api.routers import analyze, bots, generate

router = APIRouter()

router.include_router(analyze.router)
router.include_router(bots.router)
router.include_router(generate.router)


@router.get("/")
async def v1_root() -> dict[str, str]:
    """V1 API root endpoint."""
    return {
        "version": "1",
        "status": "active",
    }
