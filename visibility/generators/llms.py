"""llms.txt generation.

llms.txt is a plain-markdown index that helps LLMs discover the most
useful pages of a site. Specification: https://llmstxt.org
"""

import re
from dataclasses import dataclass, field
from typing import Literal

import httpx
import structlog
from bs4 import BeautifulSoup

logger = structlog.get_logger(__name__)

Priority = Literal["high", "medium", "low"]

PRIORITY_ORDER = {"high": 0, "medium": 1, "low": 2}
SUMMARY_MAX_LENGTH = 300
DEFAULT_USER_AGENT = "aivisibility/0.1.0 (llms.txt generator)"
FOOTER = "Generated by aivisibility"


@dataclass
class LLMSPage:
    """A page listed in llms.txt."""

    url: str
    title: str
    summary: str | None = None  # Fetched from the live page when auto_summarize is on
    priority: Priority | None = None


@dataclass
class ContactInfo:
    email: str | None = None
    twitter: str | None = None
    github: str | None = None


@dataclass
class LLMSConfig:
    """llms.txt generation options."""

    site_name: str
    description: str
    pages: list[LLMSPage] = field(default_factory=list)
    base_url: str | None = None
    contact: ContactInfo | None = None
    auto_summarize: bool = False


def resolve_url(url: str, base_url: str | None) -> str:
    """Join a relative page URL onto the site base URL."""
    if url.startswith(("http://", "https://")):
        return url
    if base_url:
        path = url if url.startswith("/") else f"/{url}"
        return f"{base_url.rstrip('/')}{path}"
    return url


def extract_summary(html: str) -> str:
    """First meaningful paragraph of a page, collapsed and truncated."""
    soup = BeautifulSoup(html, "html.parser")
    container = soup.select_one("article, main, .content")
    paragraph = container.find("p") if container is not None else None
    if paragraph is None:
        paragraph = soup.find("p")
    if paragraph is None:
        return ""

    text = re.sub(r"\s+", " ", paragraph.get_text()).strip()
    if len(text) > SUMMARY_MAX_LENGTH:
        return text[:SUMMARY_MAX_LENGTH] + "..."
    return text


class LLMSTextGenerator:
    """Generates llms.txt content for a site."""

    def __init__(
        self,
        config: LLMSConfig,
        timeout: float = 5.0,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.config = config
        self.timeout = timeout
        self.user_agent = user_agent
        self._transport = transport

    async def generate(self) -> str:
        """
        Generate the llms.txt content.

        Pages without a summary get one fetched from the live URL when
        auto_summarize is enabled; failed fetches leave the page unsummarized.
        """
        config = self.config
        lines = [f"# {config.site_name}", "", f"> {config.description}", ""]

        if config.contact is not None:
            lines += ["## About", ""]
            if config.contact.email:
                lines.append(f"- Email: {config.contact.email}")
            if config.contact.twitter:
                lines.append(f"- Twitter: {config.contact.twitter}")
            if config.contact.github:
                lines.append(f"- GitHub: {config.contact.github}")
            lines.append("")

        ordered = sorted(config.pages, key=lambda p: PRIORITY_ORDER[p.priority or "medium"])
        high_priority = [p for p in ordered if p.priority == "high"]
        rest = [p for p in ordered if p.priority != "high"]

        async with httpx.AsyncClient(
            timeout=self.timeout,
            follow_redirects=True,
            headers={"User-Agent": self.user_agent},
            transport=self._transport,
        ) as client:
            if high_priority:
                lines += ["## Key Resources", ""]
                for page in high_priority:
                    lines += await self._page_lines(client, page)

            if rest:
                lines += ["## All Pages", ""]
                for page in rest:
                    lines += await self._page_lines(client, page)

        lines += ["---", FOOTER]
        return "\n".join(lines)

    async def _page_lines(self, client: httpx.AsyncClient, page: LLMSPage) -> list[str]:
        full_url = resolve_url(page.url, self.config.base_url)
        lines = [f"### {page.title}", f"URL: {full_url}"]

        summary = page.summary
        if not summary and self.config.auto_summarize:
            summary = await self._fetch_summary(client, full_url)

        if summary:
            lines += ["", summary]
        lines.append("")
        return lines

    async def _fetch_summary(self, client: httpx.AsyncClient, url: str) -> str:
        try:
            response = await client.get(url)
        except httpx.HTTPError as e:
            logger.warning("llms_summary_fetch_failed", url=url, error=str(e))
            return ""

        if not response.is_success:
            logger.warning("llms_summary_fetch_failed", url=url, status_code=response.status_code)
            return ""

        return extract_summary(response.text)

    @staticmethod
    def minimal(config: LLMSConfig) -> str:
        """Minimal llms.txt with just titles and URLs, for large sites."""
        lines = [f"# {config.site_name}", "", f"> {config.description}", "", "## Pages", ""]
        base = (config.base_url or "").rstrip("/")
        for page in config.pages:
            url = page.url if page.url.startswith("http") else f"{base}{page.url}"
            lines.append(f"- [{page.title}]({url})")
        return "\n".join(lines)
