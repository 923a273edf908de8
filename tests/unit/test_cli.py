"""Tests for the aivisibility command line interface."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from tests.fixtures import GOOD_HTML, POOR_HTML
from visibility.cli import cli, find_files, markdown_to_html


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def site(tmp_path: Path) -> Path:
    (tmp_path / "good.html").write_text(GOOD_HTML, encoding="utf-8")
    (tmp_path / "docs").mkdir()
    (tmp_path / "docs" / "guide.md").write_text("# Guide\n\nShort.\n", encoding="utf-8")
    (tmp_path / "node_modules").mkdir()
    (tmp_path / "node_modules" / "vendor.html").write_text(POOR_HTML, encoding="utf-8")
    (tmp_path / ".cache").mkdir()
    (tmp_path / ".cache" / "old.html").write_text(POOR_HTML, encoding="utf-8")
    (tmp_path / "notes.txt").write_text("ignored", encoding="utf-8")
    return tmp_path


class TestHelpers:
    """Tests for file discovery and markdown conversion."""

    def test_find_files(self, site: Path):
        files = find_files(site)

        assert sorted(p.name for p in files) == ["good.html", "guide.md"]

    def test_find_files_missing_dir(self, tmp_path: Path):
        assert find_files(tmp_path / "nope") == []

    def test_markdown_to_html(self):
        html = markdown_to_html("# Title\n\n## Section\n\nSome **bold** text is here.\n\n- one\n- two\n")

        assert "<h1>Title</h1>" in html
        assert "<h2>Section</h2>" in html
        assert "<p>Some <strong>bold</strong> text is here.</p>" in html
        assert "<ul><li>one</li>\n<li>two</li>\n</ul>" in html


class TestAnalyzeCommand:
    """Tests for `aivisibility analyze`."""

    def test_analyze_directory(self, runner: CliRunner, site: Path):
        result = runner.invoke(cli, ["analyze", "--dir", str(site)])

        assert result.exit_code == 0, result.output
        assert "Scanning 2 file(s)" in result.output
        assert "Files scanned: 2" in result.output
        assert "Passing (>=80): 1 / 2" in result.output
        # Worst first
        assert result.output.index("guide.md") < result.output.index("good.html")
        assert "vendor.html" not in result.output

    def test_analyze_single_file(self, runner: CliRunner, site: Path):
        result = runner.invoke(cli, ["analyze", "--file", str(site / "good.html")])

        assert result.exit_code == 0, result.output
        assert "98/100" in result.output
        assert "Files scanned: 1" in result.output

    def test_issue_listing_is_truncated(self, runner: CliRunner, tmp_path: Path):
        (tmp_path / "poor.html").write_text(POOR_HTML, encoding="utf-8")

        result = runner.invoke(cli, ["analyze", "--dir", str(tmp_path)])

        assert result.output.count("Fix: ") == 3
        assert "... and 8 more issues" in result.output

    def test_min_score_filters_report(self, runner: CliRunner, site: Path):
        result = runner.invoke(cli, ["analyze", "--dir", str(site), "--min-score", "90"])

        assert "guide.md" in result.output
        assert "good.html" not in result.output
        assert "Files scanned: 2" in result.output

    def test_all_files_pass_threshold(self, runner: CliRunner, site: Path):
        result = runner.invoke(
            cli, ["analyze", "--file", str(site / "good.html"), "--min-score", "50"]
        )

        assert "All files meet the minimum score threshold!" in result.output

    def test_json_output(self, runner: CliRunner, site: Path):
        result = runner.invoke(cli, ["analyze", "--file", str(site / "good.html"), "--json"])

        assert result.exit_code == 0, result.output
        payload = json.loads(result.output)
        assert len(payload) == 1
        assert payload[0]["score"] == 98
        assert payload[0]["result"]["breakdown"]["schema_coverage"] == 100

    def test_no_files(self, runner: CliRunner, tmp_path: Path):
        result = runner.invoke(cli, ["analyze", "--dir", str(tmp_path)])

        assert result.exit_code == 0
        assert "No HTML or Markdown files found" in result.output


class TestGenerateCommands:
    """Tests for `aivisibility generate ...`."""

    def test_robots(self, runner: CliRunner, tmp_path: Path):
        out = tmp_path / "public" / "robots.txt"

        result = runner.invoke(
            cli,
            [
                "generate",
                "robots",
                "--out",
                str(out),
                "--block-training",
                "--sitemap",
                "https://example.com/sitemap.xml",
            ],
        )

        assert result.exit_code == 0, result.output
        content = out.read_text(encoding="utf-8")
        assert "User-agent: GPTBot\nDisallow: /" in content
        assert "User-agent: PerplexityBot\nAllow: /" in content
        assert content.endswith("Sitemap: https://example.com/sitemap.xml")

    def test_llms(self, runner: CliRunner, tmp_path: Path):
        out = tmp_path / "llms.txt"

        result = runner.invoke(
            cli,
            [
                "generate",
                "llms",
                "--out",
                str(out),
                "--site-name",
                "Acme",
                "--base-url",
                "https://acme.test",
            ],
        )

        assert result.exit_code == 0, result.output
        content = out.read_text(encoding="utf-8")
        assert content.startswith("# Acme\n\n> A website")
        assert "- [Home](https://acme.test/)" in content
        assert "- [Documentation](https://acme.test/docs)" in content

    def test_schema_to_stdout(self, runner: CliRunner):
        result = runner.invoke(cli, ["generate", "schema", "--type", "faq"])

        assert result.exit_code == 0, result.output
        assert '<script type="application/ld+json">' in result.output
        assert '"@type": "FAQPage"' in result.output

    def test_schema_to_file(self, runner: CliRunner, tmp_path: Path):
        out = tmp_path / "schema.html"

        result = runner.invoke(
            cli,
            [
                "generate",
                "schema",
                "--type",
                "product",
                "--name",
                "Widget",
                "--price",
                "9.5",
                "--author",
                "Jane",
                "--out",
                str(out),
            ],
        )

        assert result.exit_code == 0, result.output
        body = out.read_text(encoding="utf-8")
        schema = json.loads(body.split("\n", 1)[1].rsplit("\n", 1)[0])
        assert schema["name"] == "Widget"
        assert schema["offers"]["price"] == 9.5
        assert schema["author"]["name"] == "Jane"

    def test_schema_rejects_unknown_type(self, runner: CliRunner):
        result = runner.invoke(cli, ["generate", "schema", "--type", "recipe"])

        assert result.exit_code == 2


class TestBotsCommand:
    """Tests for `aivisibility bots`."""

    def test_lists_all(self, runner: CliRunner):
        result = runner.invoke(cli, ["bots"])

        assert result.exit_code == 0
        assert len(result.output.strip().splitlines()) == 15

    def test_filter_by_purpose(self, runner: CliRunner):
        result = runner.invoke(cli, ["bots", "--purpose", "indexing"])

        names = [line.split()[0] for line in result.output.strip().splitlines()]
        assert names == ["Googlebot", "Bingbot", "Diffbot"]

    def test_version(self, runner: CliRunner):
        result = runner.invoke(cli, ["--version"])

        assert "0.1.0" in result.output
