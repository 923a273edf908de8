"""Content analyzer: scores HTML for AI readability.

Runs six independent checks over one parsed document, combines their
sub-scores with fixed weights and ranks the issues they raise.

Example:
    analyzer = ContentAnalyzer()
    result = await analyzer.analyze(html)
    print(f"Score: {result.overall_score}/100")
    for issue in result.issues:
        print(f"[{issue.severity}] {issue.message}")
"""

from collections.abc import Callable

import structlog

from visibility.analyzer.answer import check_answer_front_loading
from visibility.analyzer.authority import check_eeat
from visibility.analyzer.document import ParsedDocument
from visibility.analyzer.facts import check_fact_density
from visibility.analyzer.headings import check_heading_structure
from visibility.analyzer.models import (
    AIReadabilityScore,
    AnalysisIssue,
    AnalyzerOptions,
    CheckResult,
    ScoreBreakdown,
    weighted_score,
)
from visibility.analyzer.recommendations import generate_recommendations
from visibility.analyzer.schema import check_schema_coverage
from visibility.analyzer.snippets import check_snippability

logger = structlog.get_logger(__name__)

Check = Callable[[ParsedDocument], CheckResult]

# (option flag, breakdown field, check) in execution order
CHECKS: tuple[tuple[str, str, Check], ...] = (
    ("check_answer_placement", "answer_front_loading", check_answer_front_loading),
    ("check_fact_density", "fact_density", check_fact_density),
    ("check_heading_structure", "heading_structure", check_heading_structure),
    ("check_eeat", "eeat_signals", check_eeat),
    ("check_snippability", "snippability", check_snippability),
    ("check_schema", "schema_coverage", check_schema_coverage),
)

DISABLED_SCORE = 100


def sort_issues(issues: list[AnalysisIssue]) -> list[AnalysisIssue]:
    """Order issues high -> medium -> low, keeping discovery order within a tier."""
    return sorted(issues, key=lambda issue: issue.severity.rank)


class ContentAnalyzer:
    """Analyzes HTML content and scores it for AI readability.

    The options are fixed at construction, so one instance can be shared
    across concurrent calls.
    """

    def __init__(self, options: AnalyzerOptions | None = None):
        self._options = options or AnalyzerOptions()

    @property
    def options(self) -> AnalyzerOptions:
        return self._options

    async def analyze(self, html: str) -> AIReadabilityScore:
        """Analyze HTML content and return an AI readability score."""
        return self.analyze_sync(html)

    def analyze_sync(self, html: str) -> AIReadabilityScore:
        doc = ParsedDocument(html)
        breakdown = ScoreBreakdown()
        issues: list[AnalysisIssue] = []

        for flag, field_name, check in CHECKS:
            if not getattr(self._options, flag):
                setattr(breakdown, field_name, DISABLED_SCORE)
                continue

            result = check(doc)
            setattr(breakdown, field_name, result.score)
            issues.extend(result.issues)

        overall_score = weighted_score(breakdown)

        logger.debug(
            "content_analysis_complete",
            overall_score=overall_score,
            issues=len(issues),
            html_length=len(html),
        )

        return AIReadabilityScore(
            overall_score=overall_score,
            breakdown=breakdown,
            issues=sort_issues(issues),
            recommendations=generate_recommendations(breakdown),
        )


def analyze_content(html: str, options: AnalyzerOptions | None = None) -> AIReadabilityScore:
    """
    Convenience function to score HTML for AI readability.

    Args:
        html: HTML content to analyze
        options: Which checks to run (all by default)

    Returns:
        AIReadabilityScore with breakdown, ranked issues and recommendations
    """
    analyzer = ContentAnalyzer(options)
    return analyzer.analyze_sync(html)
