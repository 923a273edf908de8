"""Known AI crawlers and user-agent detection."""

from visibility.crawlers.bots import (
    AI_CRAWLERS,
    BotInfo,
    BotPurpose,
    detect_bot,
    get_all_bot_names,
    get_bots_by_purpose,
)
from visibility.crawlers.detector import AIBotDetector

__all__ = [
    "AI_CRAWLERS",
    "AIBotDetector",
    "BotInfo",
    "BotPurpose",
    "detect_bot",
    "get_all_bot_names",
    "get_bots_by_purpose",
]
