"""Heading hierarchy check.

Validates a single well-formed outline: one H1, no skipped levels,
no empty headings.
"""

from visibility.analyzer.document import ParsedDocument, element_text
from visibility.analyzer.models import AnalysisIssue, CheckResult, IssueType, Severity

PENALTY_MISSING_H1 = 40
PENALTY_MULTIPLE_H1 = 20
PENALTY_H3_WITHOUT_H2 = 20
PENALTY_SKIP = 10
PENALTY_EMPTY = 10


def _issue(severity: Severity, message: str, fix: str) -> AnalysisIssue:
    return AnalysisIssue(
        type=IssueType.HEADING_STRUCTURE,
        severity=severity,
        message=message,
        fix=fix,
    )


def check_heading_structure(doc: ParsedDocument) -> CheckResult:
    issues: list[AnalysisIssue] = []
    score = 100

    h1_count = len(doc.find_all("h1"))
    h2_count = len(doc.find_all("h2"))
    h3_count = len(doc.find_all("h3"))

    if h1_count == 0:
        issues.append(
            _issue(Severity.HIGH, "Missing H1 tag", "Add exactly one H1 tag as the main page title")
        )
        score -= PENALTY_MISSING_H1
    elif h1_count > 1:
        issues.append(
            _issue(
                Severity.MEDIUM,
                f"Multiple H1 tags found ({h1_count})",
                "Use only one H1 per page. Demote additional H1s to H2",
            )
        )
        score -= PENALTY_MULTIPLE_H1

    if h3_count > 0 and h2_count == 0:
        issues.append(
            _issue(
                Severity.MEDIUM,
                "H3 tags used without any H2 tags",
                "Add H2 headings to create proper hierarchy: H1 → H2 → H3",
            )
        )
        score -= PENALTY_H3_WITHOUT_H2

    # Each heading is compared with its immediate predecessor
    last_level = 1
    for tag in doc.find_all(["h1", "h2", "h3", "h4"]):
        level = int(tag.name[1])
        if level > last_level + 1:
            issues.append(
                _issue(
                    Severity.LOW,
                    f"Heading level skipped: H{last_level} → H{level}",
                    f"Add an H{last_level + 1} between your H{last_level} and H{level}",
                )
            )
            score -= PENALTY_SKIP
        last_level = level

    for tag in doc.find_all(["h1", "h2", "h3"]):
        if not element_text(tag):
            issues.append(
                _issue(Severity.MEDIUM, "Empty heading tag found", "Remove or fill empty heading tags")
            )
            score -= PENALTY_EMPTY

    return CheckResult(score=max(0, score), issues=issues)
