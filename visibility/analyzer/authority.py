"""E-E-A-T signal check.

Detects Experience, Expertise, Authoritativeness and Trust signals that
AI systems use to weigh the credibility of a page. Four independent
signals are worth 25 points each.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass

from visibility.analyzer.document import ParsedDocument
from visibility.analyzer.models import AnalysisIssue, CheckResult, IssueType, Severity

MAX_SCORE = 100

AUTHOR_SELECTOR = (
    '[itemtype*="Person"], [itemprop="author"], meta[name="author"], .author, [rel="author"]'
)
AUTHOR_BYLINE_PATTERN = re.compile(r"written by|by [A-Z][a-z]+ [A-Z][a-z]+", re.IGNORECASE)

ORGANIZATION_SELECTOR = '[itemtype*="Organization"], [itemprop="publisher"]'
SITE_NAME_SELECTOR = 'meta[property="og:site_name"]'

CONTACT_SELECTOR = 'a[href^="mailto:"], a[href^="tel:"], [role="contentinfo"], footer'

TRUST_PATTERNS = [
    re.compile(r"years?\s+(?:of\s+)?experience", re.IGNORECASE),
    re.compile(r"certified|certification", re.IGNORECASE),
    re.compile(r"award|recognized", re.IGNORECASE),
    re.compile(r"published|featured in", re.IGNORECASE),
    re.compile(r"trusted by|used by", re.IGNORECASE),
    re.compile(r"\d+\s*(?:k|,000)?\s*(?:users|customers|companies)", re.IGNORECASE | re.ASCII),
]


def has_author(doc: ParsedDocument) -> bool:
    return doc.exists(AUTHOR_SELECTOR) or AUTHOR_BYLINE_PATTERN.search(doc.body_text) is not None


def has_organization(doc: ParsedDocument) -> bool:
    return doc.exists(ORGANIZATION_SELECTOR) or doc.exists(SITE_NAME_SELECTOR)


def has_contact(doc: ParsedDocument) -> bool:
    return doc.exists(CONTACT_SELECTOR)


def has_trust_language(doc: ParsedDocument) -> bool:
    body_text = doc.body_text
    return any(pattern.search(body_text) for pattern in TRUST_PATTERNS)


@dataclass(frozen=True)
class EEATSignal:
    """One scored credibility signal and the issue raised when it is absent."""

    name: str
    points: int
    detect: Callable[[ParsedDocument], bool]
    severity: Severity
    message: str
    fix: str

    def missing_issue(self) -> AnalysisIssue:
        return AnalysisIssue(
            type=IssueType.EEAT,
            severity=self.severity,
            message=self.message,
            fix=self.fix,
        )


EEAT_SIGNALS: tuple[EEATSignal, ...] = (
    EEATSignal(
        name="author",
        points=25,
        detect=has_author,
        severity=Severity.MEDIUM,
        message="No author information detected",
        fix="Add author name with a link to their bio or use schema.org Person markup",
    ),
    EEATSignal(
        name="organization",
        points=25,
        detect=has_organization,
        severity=Severity.LOW,
        message="No organization/publisher markup found",
        fix="Add Organization schema or og:site_name meta tag",
    ),
    EEATSignal(
        name="contact",
        points=25,
        detect=has_contact,
        severity=Severity.MEDIUM,
        message="No contact information found",
        fix="Add email, phone, or contact page link. AI models use this as a trust signal",
    ),
    EEATSignal(
        name="trust",
        points=25,
        detect=has_trust_language,
        severity=Severity.LOW,
        message="No expertise/trust signals detected",
        fix="Add credentials, years of experience, customer counts, or press mentions",
    ),
)


def check_eeat(doc: ParsedDocument) -> CheckResult:
    score = 0
    issues: list[AnalysisIssue] = []

    for signal in EEAT_SIGNALS:
        if signal.detect(doc):
            score += signal.points
        else:
            issues.append(signal.missing_issue())

    return CheckResult(score=min(score, MAX_SCORE), issues=issues)
