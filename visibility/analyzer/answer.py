"""Answer front-loading check.

AI answer engines favour pages that state the core answer directly,
immediately after the principal heading.
"""

import structlog

from visibility.analyzer.document import ParsedDocument, element_text
from visibility.analyzer.models import AnalysisIssue, CheckResult, IssueType, Severity

logger = structlog.get_logger(__name__)

MAIN_CONTENT_SELECTOR = 'main, article, [role="main"], .content, #content'
MIN_ANSWER_LENGTH = 30
ANSWER_WORDS = ("is", "are", "helps", "provides", "enables", "allows", "lets", "gives", "makes")
MAX_POSITION_RATIO = 0.2
POSITION_PROBE_LENGTH = 50


def _first_paragraph_text(doc: ParsedDocument) -> str:
    main_content = doc.select_one(MAIN_CONTENT_SELECTOR)
    if main_content is not None:
        return element_text(main_content.find("p"))

    h1 = doc.soup.find("h1")
    return element_text(h1.find_next_sibling("p"))


def check_answer_front_loading(doc: ParsedDocument) -> CheckResult:
    """Score how directly and how early the page answers its own topic."""
    h1 = doc.soup.find("h1")

    if h1 is None:
        return CheckResult(
            score=0,
            issues=[
                AnalysisIssue(
                    type=IssueType.ANSWER_PLACEMENT,
                    severity=Severity.HIGH,
                    message="No H1 tag found on the page",
                    fix="Add a clear, descriptive H1 tag that states what this page is about",
                )
            ],
        )

    first_p_text = _first_paragraph_text(doc)

    if len(first_p_text) < MIN_ANSWER_LENGTH:
        return CheckResult(
            score=20,
            issues=[
                AnalysisIssue(
                    type=IssueType.ANSWER_PLACEMENT,
                    severity=Severity.HIGH,
                    message="No substantive paragraph found after H1",
                    fix=(
                        "Add a clear, direct answer or description in the first "
                        "paragraph immediately after your H1"
                    ),
                )
            ],
        )

    lowered = first_p_text.lower()
    if not any(word in lowered for word in ANSWER_WORDS):
        h1_text = h1.get_text().lower()
        return CheckResult(
            score=55,
            issues=[
                AnalysisIssue(
                    type=IssueType.ANSWER_PLACEMENT,
                    severity=Severity.MEDIUM,
                    message="First paragraph may not directly answer the page topic",
                    fix=f'Start with a direct statement like "This page covers..." or "{h1_text} is..."',
                )
            ],
        )

    all_text = doc.body_text
    position = all_text.find(first_p_text[:POSITION_PROBE_LENGTH])
    position_ratio = position / len(all_text) if all_text else 0.0

    if position_ratio > MAX_POSITION_RATIO:
        logger.debug("answer_too_far_down", position_ratio=round(position_ratio, 3))
        return CheckResult(
            score=65,
            issues=[
                AnalysisIssue(
                    type=IssueType.ANSWER_PLACEMENT,
                    severity=Severity.MEDIUM,
                    message="Main answer appears too far down the page",
                    fix="Move the key answer/description to the very top of the page content",
                )
            ],
        )

    return CheckResult(score=95)
