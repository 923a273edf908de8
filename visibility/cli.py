"""Command line interface.

Usage:
    aivisibility analyze --dir ./pages
    aivisibility analyze --file index.html --json
    aivisibility generate robots --block-training --sitemap https://example.com/sitemap.xml
    aivisibility generate llms --site-name "My Site" --base-url https://example.com
    aivisibility generate schema --type faq
    aivisibility bots --purpose training
"""

import json
import os
import re
from pathlib import Path

import click
import structlog

from api.logging import setup_logging
from visibility import __version__
from visibility.analyzer.content import ContentAnalyzer
from visibility.analyzer.models import AIReadabilityScore
from visibility.crawlers.bots import AI_CRAWLERS, BotPurpose, get_bots_by_purpose
from visibility.generators.llms import LLMSConfig, LLMSPage, LLMSTextGenerator
from visibility.generators.robots import RobotsGenerator
from visibility.schema.builder import (
    ArticleData,
    FAQItem,
    OrganizationData,
    PersonData,
    ProductAuthor,
    ProductData,
    SchemaBuilder,
)

logger = structlog.get_logger(__name__)

SUPPORTED_EXTENSIONS = {".html", ".htm", ".md", ".mdx"}
MARKDOWN_EXTENSIONS = {".md", ".mdx"}
SKIPPED_DIRS = {"node_modules"}
PASSING_SCORE = 80
WARNING_SCORE = 60
ISSUES_SHOWN = 3

SEVERITY_COLORS = {"high": "red", "medium": "yellow", "low": "blue"}


def find_files(directory: Path) -> list[Path]:
    """HTML and Markdown files under a directory, skipping hidden dirs and node_modules."""
    results: list[Path] = []
    if not directory.exists():
        return results

    for root, dirs, files in os.walk(directory):
        dirs[:] = sorted(d for d in dirs if not d.startswith(".") and d not in SKIPPED_DIRS)
        for name in sorted(files):
            path = Path(root) / name
            if path.suffix.lower() in SUPPORTED_EXTENSIONS:
                results.append(path)
    return results


def markdown_to_html(markdown: str) -> str:
    """Very basic Markdown to HTML conversion, enough for analysis."""
    html = re.sub(r"^# (.+)$", r"<h1>\1</h1>", markdown, flags=re.M)
    html = re.sub(r"^## (.+)$", r"<h2>\1</h2>", html, flags=re.M)
    html = re.sub(r"^### (.+)$", r"<h3>\1</h3>", html, flags=re.M)
    html = re.sub(r"\*\*(.+?)\*\*", r"<strong>\1</strong>", html)
    html = re.sub(r"\*(.+?)\*", r"<em>\1</em>", html)
    html = re.sub(r"^- (.+)$", r"<li>\1</li>", html, flags=re.M)
    html = re.sub(r"(<li>.*</li>\n?)+", lambda m: f"<ul>{m.group(0)}</ul>", html)
    html = re.sub(r"\n\n([^<\n].*)", r"\n\n<p>\1</p>", html)
    return html


def score_label(score: int) -> str:
    if score >= PASSING_SCORE:
        color = "green"
    elif score >= WARNING_SCORE:
        color = "yellow"
    else:
        color = "red"
    return click.style(f"{score}/100", fg=color)


def _write_output(path: str, content: str) -> Path:
    out_path = Path(path).resolve()
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(content, encoding="utf-8")
    return out_path


def _print_report(display_path: str, result: AIReadabilityScore) -> None:
    score = result.overall_score
    icon = "PASS" if score >= PASSING_SCORE else "WARN" if score >= WARNING_SCORE else "FAIL"
    click.echo(f"[{icon}] {click.style(display_path, bold=True)} - {score_label(score)}")

    b = result.breakdown
    click.echo(
        click.style(
            f"   Answer placement: {b.answer_front_loading}  Fact density: {b.fact_density}  "
            f"Headings: {b.heading_structure}  E-E-A-T: {b.eeat_signals}  "
            f"Snippability: {b.snippability}  Schema: {b.schema_coverage}",
            dim=True,
        )
    )

    for issue in result.issues[:ISSUES_SHOWN]:
        severity = click.style(issue.severity.value.upper(), fg=SEVERITY_COLORS[issue.severity])
        click.echo(f"   {severity} {issue.message}")
        click.echo(click.style(f"      Fix: {issue.fix}", dim=True))

    if len(result.issues) > ISSUES_SHOWN:
        click.echo(click.style(f"   ... and {len(result.issues) - ISSUES_SHOWN} more issues", dim=True))
    click.echo()


@click.group()
@click.version_option(__version__, prog_name="aivisibility")
@click.option("--verbose", "-v", is_flag=True, help="Verbose (debug) logging")
def cli(verbose: bool):
    """Make your web app citable by AI models."""
    setup_logging("DEBUG" if verbose else "WARNING")


@cli.command()
@click.option(
    "--dir",
    "directory",
    type=click.Path(file_okay=False),
    default=".",
    help="Directory to scan",
)
@click.option(
    "--file",
    "single_file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Analyze a single file",
)
@click.option("--json", "as_json", is_flag=True, help="Output results as JSON")
@click.option(
    "--min-score",
    type=int,
    default=101,
    help="Only show files below this score",
)
def analyze(directory: str, single_file: str | None, as_json: bool, min_score: int):
    """Analyze HTML/Markdown files for AI readability."""
    analyzer = ContentAnalyzer()

    if single_file:
        files = [Path(single_file).resolve()]
    else:
        files = find_files(Path(directory).resolve())

    if not files:
        click.echo(click.style("No HTML or Markdown files found", fg="yellow"))
        return

    if not as_json:
        click.echo(click.style("\naivisibility analyze\n", fg="cyan", bold=True))
        click.echo(click.style(f"Scanning {len(files)} file(s)...\n", dim=True))

    results: list[tuple[Path, AIReadabilityScore]] = []
    for path in files:
        try:
            content = path.read_text(encoding="utf-8")
            if path.suffix.lower() in MARKDOWN_EXTENSIONS:
                content = markdown_to_html(content)
            results.append((path, analyzer.analyze_sync(content)))
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("analyze_file_failed", file=str(path), error=str(e))
            if not as_json:
                click.echo(click.style(f"Error analyzing {path}: {e}", fg="red"), err=True)

    if as_json:
        payload = [
            {"file": str(path), "score": result.overall_score, "result": result.to_dict()}
            for path, result in results
        ]
        click.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    # Worst first
    results.sort(key=lambda item: item[1].overall_score)

    shown = 0
    cwd = Path.cwd()
    for path, result in results:
        if result.overall_score >= min_score:
            continue
        shown += 1
        display_path = os.path.relpath(path, cwd)
        _print_report(display_path, result)

    if shown == 0:
        click.echo(click.style("All files meet the minimum score threshold!\n", fg="green"))

    scores = [result.overall_score for _, result in results]
    average = round(sum(scores) / len(scores)) if scores else 0
    passing = sum(1 for score in scores if score >= PASSING_SCORE)

    click.echo("-" * 50)
    click.echo(f"{click.style('Files scanned:', bold=True)} {len(results)}")
    click.echo(f"{click.style('Average score:', bold=True)} {score_label(average)}")
    click.echo(
        f"{click.style(f'Passing (>={PASSING_SCORE}):', bold=True)} "
        f"{click.style(str(passing), fg='green')} / {len(results)}"
    )
    click.echo()


@cli.group()
def generate():
    """Generate AI visibility config files."""


@generate.command()
@click.option("--out", default="./public/robots.txt", show_default=True, help="Output path")
@click.option("--block-training", is_flag=True, help="Block training bots (CCBot, GPTBot, ...)")
@click.option("--sitemap", default=None, help="Sitemap URL to include")
def robots(out: str, block_training: bool, sitemap: str | None):
    """Generate robots.txt with AI crawler rules."""
    if block_training:
        content = RobotsGenerator.block_training(sitemap_url=sitemap)
    else:
        content = RobotsGenerator.allow_all(sitemap_url=sitemap)

    out_path = _write_output(out, content)
    click.echo(click.style(f"robots.txt generated -> {out_path}", fg="green"))
    click.echo(click.style("\nContent preview:", dim=True))
    click.echo(click.style("\n".join(content.split("\n")[:10]), dim=True))


@generate.command()
@click.option("--out", default="./public/llms.txt", show_default=True, help="Output path")
@click.option("--site-name", default="My Site", show_default=True, help="Site name")
@click.option("--description", default="A website", show_default=True, help="Site description")
@click.option("--base-url", default=None, help="Base URL (e.g. https://mysite.com)")
def llms(out: str, site_name: str, description: str, base_url: str | None):
    """Generate llms.txt for AI model indexing."""
    content = LLMSTextGenerator.minimal(
        LLMSConfig(
            site_name=site_name,
            description=description,
            base_url=base_url,
            pages=[
                LLMSPage(url="/", title="Home", priority="high"),
                LLMSPage(url="/about", title="About"),
                LLMSPage(url="/docs", title="Documentation"),
            ],
        )
    )

    out_path = _write_output(out, content)
    click.echo(click.style(f"llms.txt generated -> {out_path}", fg="green"))
    click.echo(click.style("\nContent:", dim=True))
    click.echo(click.style(content, dim=True))


@generate.command()
@click.option(
    "--type",
    "schema_type",
    type=click.Choice(["faq", "product", "article", "org", "person"]),
    default="article",
    show_default=True,
    help="Schema type",
)
@click.option("--out", default=None, help="Output path (prints to stdout if not set)")
@click.option("--name", default=None, help="Name/headline")
@click.option("--price", type=float, default=0.0, help="Price (for product schema)")
@click.option("--author", default=None, help="Author name")
def schema(schema_type: str, out: str | None, name: str | None, price: float, author: str | None):
    """Generate JSON-LD schema markup."""
    if schema_type == "faq":
        data = SchemaBuilder.faq(
            [
                FAQItem(question="What is this?", answer="Replace with your FAQ content"),
                FAQItem(question="How does it work?", answer="Replace with your answer"),
            ]
        )
    elif schema_type == "product":
        data = SchemaBuilder.product(
            ProductData(
                name=name or "Product Name",
                price=price,
                author=ProductAuthor(name=author) if author else None,
            )
        )
    elif schema_type == "org":
        data = SchemaBuilder.organization(OrganizationData(name=name or "Organization Name"))
    elif schema_type == "person":
        data = SchemaBuilder.person(PersonData(name=name or "Person Name"))
    else:
        data = SchemaBuilder.article(ArticleData(headline=name or "Article Title", author=author))

    script_tag = SchemaBuilder.to_script_tag(data)

    if out:
        out_path = _write_output(out, script_tag)
        click.echo(click.style(f"Schema written -> {out_path}", fg="green"))
    else:
        click.echo(click.style("\nJSON-LD Schema:\n", fg="cyan", bold=True))
        click.echo(script_tag)


@cli.command()
@click.option(
    "--purpose",
    type=click.Choice([p.value for p in BotPurpose]),
    default=None,
    help="Only list crawlers with this purpose",
)
def bots(purpose: str | None):
    """List known AI crawlers."""
    crawlers = get_bots_by_purpose(purpose) if purpose else list(AI_CRAWLERS)
    for bot in crawlers:
        click.echo(f"{bot.name:<20} {bot.company:<15} {bot.purpose.value:<10} {bot.user_agent_pattern}")


def main() -> None:
    cli()


if __name__ == "__main__":
    cli()
