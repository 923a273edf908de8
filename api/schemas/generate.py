"""Schemas for robots.txt, llms.txt and JSON-LD generation."""

from typing import Any, Literal

from pydantic import BaseModel, Field

from visibility.crawlers.bots import BotInfo
from visibility.generators.robots import DEFAULT_DISALLOW


class BotResponse(BaseModel):
    name: str
    company: str
    user_agent_pattern: str
    purpose: str

    @classmethod
    def from_bot(cls, bot: BotInfo) -> "BotResponse":
        return cls.model_validate(bot.to_dict())


class RobotsRequest(BaseModel):
    """robots.txt options. Omitting allow_ai allows every known AI crawler."""

    allow_ai: list[str] | None = None
    block_ai: list[str] = Field(default_factory=list)
    block_training: bool = False
    disallow: list[str] = Field(default_factory=lambda: list(DEFAULT_DISALLOW))
    sitemap_url: str | None = None
    crawl_delay: int = Field(0, ge=0)


class LLMSPageIn(BaseModel):
    url: str
    title: str
    summary: str | None = None
    priority: Literal["high", "medium", "low"] | None = None


class ContactIn(BaseModel):
    email: str | None = None
    twitter: str | None = None
    github: str | None = None


class LLMSRequest(BaseModel):
    site_name: str
    description: str
    pages: list[LLMSPageIn] = Field(default_factory=list)
    base_url: str | None = None
    contact: ContactIn | None = None
    auto_summarize: bool = False
    minimal: bool = False


class SchemaRequest(BaseModel):
    """Either raw HTML to auto-detect from, or an explicit type with fields."""

    type: Literal["auto", "faq", "product", "article", "org", "person"] = "auto"
    html: str | None = None
    data: dict[str, Any] = Field(default_factory=dict)
    author: str | None = None
    publisher: str | None = None


class TextResponse(BaseModel):
    content: str


class SchemaResponse(BaseModel):
    json_ld: dict[str, Any]
    script_tag: str
