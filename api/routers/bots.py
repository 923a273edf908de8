"""AI crawler registry endpoints."""

from fastapi import APIRouter

from api.schemas.generate import BotResponse
from visibility.crawlers.bots import AI_CRAWLERS, BotPurpose, get_bots_by_purpose

router = APIRouter(prefix="/bots", tags=["Bots"])


@router.get("", response_model=list[BotResponse])
async def list_bots(purpose: BotPurpose | None = None) -> list[BotResponse]:
    """List known AI crawlers, optionally filtered by purpose."""
    bots = get_bots_by_purpose(purpose) if purpose is not None else list(AI_CRAWLERS)
    return [BotResponse.from_bot(bot) for bot in bots]
