"""Snippability check.

A section is snippable when the element right after its H2/H3 carries
enough text to be quoted on its own.
"""

from visibility.analyzer.document import ParsedDocument, element_text
from visibility.analyzer.models import (
    AnalysisIssue,
    CheckResult,
    IssueType,
    Severity,
    round_half_up,
)

MIN_SNIPPET_LENGTH = 80


def check_snippability(doc: ParsedDocument) -> CheckResult:
    headings = doc.find_all(["h2", "h3"])

    if not headings:
        return CheckResult(
            score=30,
            issues=[
                AnalysisIssue(
                    type=IssueType.SNIPPABILITY,
                    severity=Severity.MEDIUM,
                    message="No H2/H3 subheadings found",
                    fix=(
                        "Break content into sections with descriptive H2/H3 headings "
                        "so AI can extract individual sections"
                    ),
                )
            ],
        )

    issues: list[AnalysisIssue] = []
    snippable_count = 0

    for heading in headings:
        next_text = element_text(heading.find_next_sibling())
        if len(next_text) >= MIN_SNIPPET_LENGTH:
            snippable_count += 1
        else:
            issues.append(
                AnalysisIssue(
                    type=IssueType.SNIPPABILITY,
                    severity=Severity.LOW,
                    message=f'Section "{element_text(heading)}" has insufficient content below it',
                    fix=(
                        "Add at least 2-3 sentences of context below each heading "
                        "so the section can stand alone"
                    ),
                )
            )

    score = round_half_up(snippable_count / len(headings) * 100)
    return CheckResult(score=score, issues=issues)
