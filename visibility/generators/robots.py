"""robots.txt generation with explicit AI crawler rules."""

from dataclasses import dataclass, field

from visibility.crawlers.bots import AI_CRAWLERS, BotPurpose, get_all_bot_names

DEFAULT_DISALLOW = ["/admin", "/api", "/private", "/_next", "/static"]


@dataclass
class RobotsConfig:
    """robots.txt generation options."""

    allow_ai: list[str] = field(default_factory=get_all_bot_names)
    block_ai: list[str] = field(default_factory=list)
    disallow: list[str] = field(default_factory=lambda: list(DEFAULT_DISALLOW))
    sitemap_url: str | None = None
    crawl_delay: int = 0


class RobotsGenerator:
    """Builds robots.txt content. Blocked bots are never listed as allowed."""

    def __init__(self, config: RobotsConfig | None = None):
        self.config = config or RobotsConfig()

    def generate(self) -> str:
        config = self.config
        lines = [
            "# robots.txt - Generated by aivisibility",
            "",
        ]

        if config.block_ai:
            lines.append("# Blocked AI crawlers (training opt-out)")
            for bot in config.block_ai:
                lines += [f"User-agent: {bot}", "Disallow: /", ""]

        allowed_bots = [bot for bot in config.allow_ai if bot not in config.block_ai]
        if allowed_bots:
            lines.append("# AI crawlers - explicitly allowed")
            for bot in allowed_bots:
                lines += [f"User-agent: {bot}", "Allow: /"]
                if config.crawl_delay > 0:
                    lines.append(f"Crawl-delay: {config.crawl_delay}")
                lines.append("")

        lines += ["# Default rules", "User-agent: *"]
        lines += [f"Disallow: {path}" for path in config.disallow]
        lines.append("")

        if config.sitemap_url:
            lines.append(f"Sitemap: {config.sitemap_url}")

        return "\n".join(lines)

    @classmethod
    def allow_all(
        cls, disallow: list[str] | None = None, sitemap_url: str | None = None
    ) -> str:
        """robots.txt that allows every known AI crawler."""
        return cls(
            RobotsConfig(
                allow_ai=get_all_bot_names(),
                disallow=list(DEFAULT_DISALLOW) if disallow is None else disallow,
                sitemap_url=sitemap_url,
            )
        ).generate()

    @classmethod
    def block_training(
        cls, disallow: list[str] | None = None, sitemap_url: str | None = None
    ) -> str:
        """robots.txt that blocks training crawlers but allows search/indexing ones."""
        training = [bot.name for bot in AI_CRAWLERS if bot.purpose == BotPurpose.TRAINING]
        others = [bot.name for bot in AI_CRAWLERS if bot.purpose != BotPurpose.TRAINING]
        return cls(
            RobotsConfig(
                allow_ai=others,
                block_ai=training,
                disallow=list(DEFAULT_DISALLOW) if disallow is None else disallow,
                sitemap_url=sitemap_url,
            )
        ).generate()
