"""Registry of known AI crawlers.

Kept in one place so detection, robots.txt generation and the API share
the same source of truth.
"""

from dataclasses import dataclass
from enum import StrEnum


class BotPurpose(StrEnum):
    """Why a crawler fetches content."""

    TRAINING = "training"  # Model training data collection
    SEARCH = "search"  # Live answers / AI search results
    INDEXING = "indexing"  # Classic search index
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class BotInfo:
    """Identity of a crawler matched by user-agent substring."""

    name: str
    company: str
    user_agent_pattern: str  # Lowercase substring of the User-Agent
    purpose: BotPurpose

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "company": self.company,
            "user_agent_pattern": self.user_agent_pattern,
            "purpose": self.purpose.value,
        }


AI_CRAWLERS: tuple[BotInfo, ...] = (
    BotInfo("GPTBot", "OpenAI", "gptbot", BotPurpose.TRAINING),
    BotInfo("ChatGPT-User", "OpenAI", "chatgpt-user", BotPurpose.SEARCH),
    BotInfo("ClaudeBot", "Anthropic", "claudebot", BotPurpose.TRAINING),
    BotInfo("Claude-Web", "Anthropic", "claude-web", BotPurpose.SEARCH),
    BotInfo("PerplexityBot", "Perplexity AI", "perplexitybot", BotPurpose.SEARCH),
    BotInfo("Google-Extended", "Google", "google-extended", BotPurpose.TRAINING),
    BotInfo("Googlebot", "Google", "googlebot", BotPurpose.INDEXING),
    BotInfo("Bingbot", "Microsoft", "bingbot", BotPurpose.INDEXING),
    BotInfo("CCBot", "Common Crawl", "ccbot", BotPurpose.TRAINING),
    BotInfo("YouBot", "You.com", "youbot", BotPurpose.SEARCH),
    BotInfo("cohere-ai", "Cohere", "cohere-ai", BotPurpose.TRAINING),
    BotInfo("meta-externalagent", "Meta", "meta-externalagent", BotPurpose.TRAINING),
    BotInfo("Applebot-Extended", "Apple", "applebot-extended", BotPurpose.TRAINING),
    BotInfo("Diffbot", "Diffbot", "diffbot", BotPurpose.INDEXING),
    BotInfo("Bytespider", "ByteDance", "bytespider", BotPurpose.TRAINING),
)


def detect_bot(user_agent: str | None) -> BotInfo | None:
    """Return the first known crawler whose pattern occurs in the User-Agent."""
    if not user_agent:
        return None
    ua = user_agent.lower()
    for bot in AI_CRAWLERS:
        if bot.user_agent_pattern in ua:
            return bot
    return None


def get_all_bot_names() -> list[str]:
    return [bot.name for bot in AI_CRAWLERS]


def get_bots_by_purpose(purpose: BotPurpose | str) -> list[BotInfo]:
    return [bot for bot in AI_CRAWLERS if bot.purpose == purpose]
