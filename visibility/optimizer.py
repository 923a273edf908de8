"""HTML optimization for AI crawler responses.

Strips non-essential markup (scripts, trackers, ads) while keeping the
semantic structure, JSON-LD and meaningful text.
"""

import re
from dataclasses import dataclass

import structlog
from bs4 import BeautifulSoup, Comment, Tag

logger = structlog.get_logger(__name__)

JSON_LD_TYPE = "application/ld+json"
OPTIMIZED_MARKER = " Optimized for AI crawlers by aivisibility "

TRACKING_PATTERN = re.compile(r"google-analytics|gtm|facebook|pixel", re.I)
TRACKING_LINK_PATTERN = re.compile(r"google-analytics|doubleclick|facebook\.net", re.I)
AD_PATTERN = re.compile(r"ad-|ads-|advertisement|banner-ad|sponsored", re.I)


@dataclass(frozen=True)
class OptimizationOptions:
    """Which optimizations apply to bot-bound HTML."""

    strip_js: bool = True
    remove_ads: bool = True
    remove_tracking: bool = True
    simplify_nav: bool = False


def _attr_text(tag: Tag, name: str) -> str:
    value = tag.get(name, "")
    if isinstance(value, list):
        return " ".join(value)
    return str(value)


def _is_tracking_pixel(img: Tag) -> bool:
    return _attr_text(img, "width") == "1" and _attr_text(img, "height") == "1"


class HTMLOptimizer:
    """Rewrites HTML into a leaner document for AI crawlers."""

    def __init__(self, options: OptimizationOptions | None = None):
        self.options = options or OptimizationOptions()

    def optimize(self, html: str) -> str:
        soup = BeautifulSoup(html, "html.parser")

        if self.options.strip_js:
            self._strip_js(soup)
        if self.options.remove_tracking:
            self._remove_tracking(soup)
        if self.options.remove_ads:
            self._remove_ads(soup)
        if self.options.simplify_nav:
            self._simplify_nav(soup)

        if soup.head is not None:
            soup.head.insert(0, Comment(OPTIMIZED_MARKER))

        return str(soup)

    def _strip_js(self, soup: BeautifulSoup) -> None:
        for script in soup.find_all("script"):
            if _attr_text(script, "type").lower() != JSON_LD_TYPE:
                script.decompose()

        for tag in soup.find_all(True):
            handlers = [name for name in tag.attrs if name.lower().startswith("on")]
            for name in handlers:
                del tag[name]

    def _remove_tracking(self, soup: BeautifulSoup) -> None:
        for img in soup.find_all("img"):
            if _is_tracking_pixel(img):
                img.decompose()

        for noscript in soup.find_all("noscript"):
            if TRACKING_PATTERN.search(noscript.decode_contents()):
                noscript.decompose()

        for link in soup.find_all("link"):
            if TRACKING_LINK_PATTERN.search(str(link)):
                link.decompose()

    def _remove_ads(self, soup: BeautifulSoup) -> None:
        removed = 0
        for tag in soup.find_all(True):
            if tag.decomposed:
                continue
            attrs_text = f"{_attr_text(tag, 'class')} {_attr_text(tag, 'id')}"
            if AD_PATTERN.search(attrs_text):
                tag.decompose()
                removed += 1

        for ins in soup.find_all("ins"):
            ins.decompose()
            removed += 1

        if removed:
            logger.debug("ads_removed", count=removed)

    def _simplify_nav(self, soup: BeautifulSoup) -> None:
        for nav in soup.find_all("nav"):
            links = [link.extract() for link in nav.find_all("a", href=True)]
            nav.clear()
            for i, link in enumerate(links):
                if i:
                    nav.append(" | ")
                nav.append(link)
