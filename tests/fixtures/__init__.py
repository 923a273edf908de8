"""Shared test fixtures."""

from tests.fixtures.pages import (
    GOOD_HTML,
    POOR_HTML,
    fact_paragraph,
    json_ld,
)

__all__ = [
    "GOOD_HTML",
    "POOR_HTML",
    "fact_paragraph",
    "json_ld",
]
