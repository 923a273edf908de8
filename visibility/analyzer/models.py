"""Data model for AI readability analysis."""

import math
from dataclasses import asdict, dataclass, field, fields
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from api.config import Settings


class IssueType(StrEnum):
    """Which check produced an issue."""

    ANSWER_PLACEMENT = "answer-placement"
    FACT_DENSITY = "fact-density"
    HEADING_STRUCTURE = "heading-structure"
    EEAT = "eeat"
    SNIPPABILITY = "snippability"
    SCHEMA = "schema"


class Severity(StrEnum):
    """Issue severity, most urgent first."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        return SEVERITY_RANK[self]


SEVERITY_RANK = {
    Severity.HIGH: 0,
    Severity.MEDIUM: 1,
    Severity.LOW: 2,
}


@dataclass(frozen=True)
class AnalysisIssue:
    """A single actionable finding."""

    type: IssueType
    severity: Severity
    message: str
    fix: str

    def to_dict(self) -> dict:
        return {
            "type": self.type.value,
            "severity": self.severity.value,
            "message": self.message,
            "fix": self.fix,
        }


@dataclass
class CheckResult:
    """Score (0-100) and issues returned by one check."""

    score: int
    issues: list[AnalysisIssue] = field(default_factory=list)


@dataclass(frozen=True)
class AnalyzerOptions:
    """Which checks run. A disabled check scores 100 and reports nothing."""

    check_answer_placement: bool = True
    check_fact_density: bool = True
    check_heading_structure: bool = True
    check_eeat: bool = True
    check_snippability: bool = True
    check_schema: bool = True

    @classmethod
    def from_settings(cls, settings: "Settings") -> "AnalyzerOptions":
        return cls(
            check_answer_placement=settings.analyzer_check_answer_placement,
            check_fact_density=settings.analyzer_check_fact_density,
            check_heading_structure=settings.analyzer_check_heading_structure,
            check_eeat=settings.analyzer_check_eeat,
            check_snippability=settings.analyzer_check_snippability,
            check_schema=settings.analyzer_check_schema,
        )


@dataclass
class ScoreBreakdown:
    """Per-dimension sub-scores, each an integer 0-100."""

    answer_front_loading: int = 0
    fact_density: int = 0
    heading_structure: int = 0
    eeat_signals: int = 0
    snippability: int = 0
    schema_coverage: int = 0

    def items(self) -> list[tuple[str, int]]:
        return [(f.name, getattr(self, f.name)) for f in fields(self)]

    def to_dict(self) -> dict:
        return asdict(self)


# Weighted average: answer placement and E-E-A-T matter most. Sums to 1.0.
WEIGHTS: dict[str, float] = {
    "answer_front_loading": 0.25,
    "fact_density": 0.15,
    "heading_structure": 0.15,
    "eeat_signals": 0.20,
    "snippability": 0.10,
    "schema_coverage": 0.15,
}


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return math.floor(value + 0.5)


def weighted_score(breakdown: ScoreBreakdown) -> int:
    """Overall score from a breakdown using the fixed weights."""
    total = sum(score * WEIGHTS[name] for name, score in breakdown.items())
    return round_half_up(total)


@dataclass
class AIReadabilityScore:
    """Complete result of one analysis."""

    overall_score: int
    breakdown: ScoreBreakdown
    issues: list[AnalysisIssue] = field(default_factory=list)
    recommendations: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "overall_score": self.overall_score,
            "breakdown": self.breakdown.to_dict(),
            "issues": [i.to_dict() for i in self.issues],
            "recommendations": list(self.recommendations),
        }
