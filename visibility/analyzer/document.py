"""Parsed HTML document shared by all readability checks."""

from functools import cached_property

from bs4 import BeautifulSoup, Tag


class ParsedDocument:
    """Read-only query access over one parsed HTML document.

    Parsing is best-effort: malformed markup yields empty query results
    rather than errors.
    """

    def __init__(self, html: str):
        self.html = html
        self.soup = BeautifulSoup(html, "html.parser")

    @property
    def body(self) -> Tag:
        # Fragments without a <body> are treated as all-body content
        return self.soup.body or self.soup

    @cached_property
    def body_text(self) -> str:
        """Visible text of the body, untrimmed."""
        return self.body.get_text()

    def select(self, selector: str) -> list[Tag]:
        """All elements matching a CSS selector, in document order."""
        return self.soup.select(selector)

    def select_one(self, selector: str) -> Tag | None:
        """First element matching a CSS selector in document order."""
        return self.soup.select_one(selector)

    def exists(self, selector: str) -> bool:
        return self.select_one(selector) is not None

    def find_all(self, names: str | list[str]) -> list[Tag]:
        return self.soup.find_all(names)


def element_text(tag: Tag | None) -> str:
    """Whitespace-trimmed text of an element's subtree ("" for no element)."""
    if tag is None:
        return ""
    return tag.get_text().strip()
