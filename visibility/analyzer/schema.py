"""JSON-LD structured data coverage check."""

import json
import math
from dataclasses import dataclass

import structlog

from visibility.analyzer.document import ParsedDocument
from visibility.analyzer.models import AnalysisIssue, CheckResult, IssueType, Severity

logger = structlog.get_logger(__name__)

JSON_LD_SELECTOR = 'script[type="application/ld+json"]'

# Score when structured data exists but no block is usable
BROKEN_SCHEMA_SCORE = 10


@dataclass(frozen=True)
class RecommendedSchemaType:
    """A schema.org type AI models benefit from, matched as a literal marker."""

    schema_type: str
    message: str
    fix: str

    @property
    def marker(self) -> str:
        return f'"{self.schema_type}"'

    def missing_issue(self) -> AnalysisIssue:
        return AnalysisIssue(
            type=IssueType.SCHEMA,
            severity=Severity.LOW,
            message=self.message,
            fix=self.fix,
        )


RECOMMENDED_SCHEMA_TYPES: tuple[RecommendedSchemaType, ...] = (
    RecommendedSchemaType(
        schema_type="FAQPage",
        message="No FAQPage schema found",
        fix="Add FAQ schema to help AI models extract Q&A content from your page",
    ),
    RecommendedSchemaType(
        schema_type="Organization",
        message="No Organization schema found",
        fix="Add Organization schema to establish E-E-A-T signals for AI models",
    ),
)

# Number of recommended types present -> score
COVERAGE_SCORES = {2: 100, 1: 75, 0: 50}


def _is_present(value: object) -> bool:
    """JavaScript truthiness: empty objects and arrays count as present."""
    if isinstance(value, float) and math.isnan(value):
        return False
    return value not in (None, "", 0, False)


def _is_valid_block(data: object) -> bool:
    return isinstance(data, dict) and _is_present(data.get("@context")) and _is_present(
        data.get("@type")
    )


def check_schema_coverage(doc: ParsedDocument) -> CheckResult:
    scripts = doc.select(JSON_LD_SELECTOR)

    if not scripts:
        return CheckResult(
            score=0,
            issues=[
                AnalysisIssue(
                    type=IssueType.SCHEMA,
                    severity=Severity.HIGH,
                    message="No JSON-LD structured data found",
                    fix="Add JSON-LD schema markup using SchemaBuilder",
                )
            ],
        )

    issues: list[AnalysisIssue] = []
    valid_schemas = 0
    block_texts: list[str] = []

    for script in scripts:
        raw = script.string or ""
        block_texts.append(raw)
        try:
            data = json.loads(raw)
        except (ValueError, RecursionError) as e:
            # Decode errors, oversized integer literals and excessive nesting
            logger.debug("invalid_json_ld", error=str(e))
            issues.append(
                AnalysisIssue(
                    type=IssueType.SCHEMA,
                    severity=Severity.MEDIUM,
                    message="Invalid JSON-LD schema found (parse error)",
                    fix="Validate your JSON-LD using schema.org validator or use SchemaBuilder",
                )
            )
            continue

        if _is_valid_block(data):
            valid_schemas += 1

    if valid_schemas == 0:
        return CheckResult(score=BROKEN_SCHEMA_SCORE, issues=issues)

    schema_text = "".join(block_texts)
    present = 0
    for recommended in RECOMMENDED_SCHEMA_TYPES:
        if recommended.marker in schema_text:
            present += 1
        else:
            issues.append(recommended.missing_issue())

    return CheckResult(score=COVERAGE_SCORES[present], issues=issues)
