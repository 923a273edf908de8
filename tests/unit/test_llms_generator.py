"""Tests for llms.txt generation."""

import httpx
import pytest

from visibility.generators.llms import (
    ContactInfo,
    LLMSConfig,
    LLMSPage,
    LLMSTextGenerator,
    extract_summary,
    resolve_url,
)

ABOUT_HTML = """<html><body>
<nav><p>Menu</p></nav>
<main><h1>About</h1><p>Acme   builds
widgets for factories.</p></main>
</body></html>"""


def transport_for(pages: dict[str, httpx.Response]) -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        response = pages.get(str(request.url))
        if response is None:
            raise httpx.ConnectError("connection refused", request=request)
        return response

    return httpx.MockTransport(handler)


class TestHelpers:
    """Tests for URL and summary helpers."""

    def test_resolve_url(self):
        assert resolve_url("/about", "https://example.com/") == "https://example.com/about"
        assert resolve_url("about", "https://example.com") == "https://example.com/about"
        assert resolve_url("https://other.test/x", "https://example.com") == "https://other.test/x"
        assert resolve_url("/about", None) == "/about"

    def test_extract_summary_prefers_main_content(self):
        assert extract_summary(ABOUT_HTML) == "Acme builds widgets for factories."

    def test_extract_summary_falls_back_to_first_paragraph(self):
        assert extract_summary("<div><p>First.</p><p>Second.</p></div>") == "First."

    def test_extract_summary_truncates(self):
        summary = extract_summary(f"<p>{'word ' * 100}</p>")

        assert len(summary) == 303
        assert summary.endswith("...")

    def test_extract_summary_no_paragraph(self):
        assert extract_summary("<div>No paragraphs</div>") == ""


class TestLLMSTextGenerator:
    """Tests for LLMSTextGenerator."""

    @pytest.mark.asyncio
    async def test_generate_sections(self):
        config = LLMSConfig(
            site_name="Acme",
            description="Widgets for factories",
            base_url="https://acme.test",
            contact=ContactInfo(email="hi@acme.test", github="acme"),
            pages=[
                LLMSPage(url="/blog", title="Blog", priority="low"),
                LLMSPage(url="/", title="Home", priority="high", summary="Start here."),
                LLMSPage(url="/docs", title="Docs"),
            ],
        )

        content = await LLMSTextGenerator(config, transport=transport_for({})).generate()
        lines = content.splitlines()

        assert lines[:4] == ["# Acme", "", "> Widgets for factories", ""]
        assert "- Email: hi@acme.test" in lines
        assert "- GitHub: acme" in lines
        assert not any(line.startswith("- Twitter") for line in lines)
        assert lines.index("## Key Resources") < lines.index("### Home")
        assert lines.index("## All Pages") < lines.index("### Docs") < lines.index("### Blog")
        assert "URL: https://acme.test/docs" in lines
        assert "Start here." in lines
        assert lines[-2:] == ["---", "Generated by aivisibility"]

    @pytest.mark.asyncio
    async def test_auto_summarize(self):
        config = LLMSConfig(
            site_name="Acme",
            description="Widgets",
            base_url="https://acme.test",
            auto_summarize=True,
            pages=[LLMSPage(url="/about", title="About")],
        )
        transport = transport_for(
            {"https://acme.test/about": httpx.Response(200, text=ABOUT_HTML)}
        )

        content = await LLMSTextGenerator(config, transport=transport).generate()

        assert "Acme builds widgets for factories." in content

    @pytest.mark.asyncio
    async def test_failed_fetch_leaves_page_unsummarized(self):
        config = LLMSConfig(
            site_name="Acme",
            description="Widgets",
            base_url="https://acme.test",
            auto_summarize=True,
            pages=[
                LLMSPage(url="/missing", title="Missing"),
                LLMSPage(url="/down", title="Down"),
            ],
        )
        transport = transport_for({"https://acme.test/missing": httpx.Response(404)})

        content = await LLMSTextGenerator(config, transport=transport).generate()
        lines = content.splitlines()

        missing = lines.index("### Missing")
        assert lines[missing + 1 : missing + 3] == ["URL: https://acme.test/missing", ""]
        assert "### Down" in lines

    @pytest.mark.asyncio
    async def test_no_fetch_without_auto_summarize(self):
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(200, text=ABOUT_HTML)

        config = LLMSConfig(
            site_name="Acme", description="Widgets", pages=[LLMSPage(url="/a", title="A")]
        )
        await LLMSTextGenerator(config, transport=httpx.MockTransport(handler)).generate()

        assert calls == []

    def test_minimal(self):
        config = LLMSConfig(
            site_name="Acme",
            description="Widgets",
            base_url="https://acme.test/",
            pages=[
                LLMSPage(url="/", title="Home"),
                LLMSPage(url="https://docs.acme.test", title="Docs"),
            ],
        )

        assert LLMSTextGenerator.minimal(config) == "\n".join(
            [
                "# Acme",
                "",
                "> Widgets",
                "",
                "## Pages",
                "",
                "- [Home](https://acme.test/)",
                "- [Docs](https://docs.acme.test)",
            ]
        )
