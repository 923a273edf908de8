"""Configurable AI crawler detector."""

from collections.abc import Iterable

from visibility.crawlers.bots import AI_CRAWLERS, BotInfo, BotPurpose, detect_bot


class AIBotDetector:
    """Detects AI crawlers, with custom patterns and an ignore list."""

    def __init__(
        self,
        additional_bots: Iterable[str] = (),
        ignore_bots: Iterable[str] = (),
    ):
        self.additional_bots = list(additional_bots)
        self.ignore_bots = {bot.lower() for bot in ignore_bots}

    def detect(self, user_agent: str | None) -> BotInfo | None:
        """
        Detect whether a User-Agent belongs to an AI crawler.

        Args:
            user_agent: Raw User-Agent header value

        Returns:
            BotInfo if detected, None otherwise
        """
        if not user_agent:
            return None

        known = detect_bot(user_agent)
        if known is not None and known.user_agent_pattern not in self.ignore_bots:
            return known

        ua = user_agent.lower()
        for pattern in self.additional_bots:
            lowered = pattern.lower()
            if lowered in ua and lowered not in self.ignore_bots:
                return BotInfo(
                    name=pattern,
                    company="Unknown",
                    user_agent_pattern=lowered,
                    purpose=BotPurpose.UNKNOWN,
                )

        return None

    def get_bot_names(self) -> list[str]:
        """All tracked bot names, registry first."""
        return [bot.name for bot in AI_CRAWLERS] + self.additional_bots
