"""Fact density check.

Counts verifiable, citable claims (numbers, percentages, years, magnitudes,
month names) per 100 words of paragraph prose.
"""

import re

from visibility.analyzer.document import ParsedDocument
from visibility.analyzer.models import AnalysisIssue, CheckResult, IssueType, Severity

# Bare numbers deliberately count as facts ("Step 1" included).
FACT_PATTERN = re.compile(
    r"\b\d+(?:\.\d+)?%"
    r"|\b\d{4}\b"
    r"|\b\d+(?:,\d{3})*(?:\.\d+)?\s*(?:million|billion|thousand|k|m|b)?\b"
    r"|\b(?:january|february|march|april|may|june|july|august|september|october|november|december)\b",
    re.IGNORECASE | re.ASCII,
)

LOW_DENSITY = 2.0
TARGET_DENSITY = 4.0
HIGH_DENSITY = 10.0


def count_facts(text: str) -> int:
    """Number of fact tokens in a piece of text."""
    return len(FACT_PATTERN.findall(text))


def check_fact_density(doc: ParsedDocument) -> CheckResult:
    total_words = 0
    verifiable_facts = 0

    for paragraph in doc.find_all("p"):
        text = paragraph.get_text()
        total_words += len(text.split())
        verifiable_facts += count_facts(text)

    if total_words == 0:
        return CheckResult(
            score=0,
            issues=[
                AnalysisIssue(
                    type=IssueType.FACT_DENSITY,
                    severity=Severity.HIGH,
                    message="No paragraph content found",
                    fix="Add substantive text content to the page",
                )
            ],
        )

    facts_per_hundred = verifiable_facts / total_words * 100

    if facts_per_hundred < LOW_DENSITY:
        return CheckResult(
            score=25,
            issues=[
                AnalysisIssue(
                    type=IssueType.FACT_DENSITY,
                    severity=Severity.HIGH,
                    message=(
                        f"Very low fact density: {facts_per_hundred:.1f} facts per 100 words "
                        "(target: 4-6)"
                    ),
                    fix=(
                        "Add specific numbers, dates, statistics, or measurable claims "
                        "to support your content"
                    ),
                )
            ],
        )

    if facts_per_hundred < TARGET_DENSITY:
        return CheckResult(
            score=60,
            issues=[
                AnalysisIssue(
                    type=IssueType.FACT_DENSITY,
                    severity=Severity.MEDIUM,
                    message=(
                        f"Below-target fact density: {facts_per_hundred:.1f} facts per 100 words "
                        "(target: 4-6)"
                    ),
                    fix="Include more specific data points, percentages, or concrete examples",
                )
            ],
        )

    if facts_per_hundred > HIGH_DENSITY:
        return CheckResult(
            score=75,
            issues=[
                AnalysisIssue(
                    type=IssueType.FACT_DENSITY,
                    severity=Severity.LOW,
                    message="Very high fact density: content may feel dense or list-heavy",
                    fix="Add explanatory prose between data points to improve readability",
                )
            ],
        )

    return CheckResult(score=95)
