"""AI readability analysis package."""

from visibility.analyzer.content import ContentAnalyzer, analyze_content
from visibility.analyzer.models import (
    WEIGHTS,
    AIReadabilityScore,
    AnalysisIssue,
    AnalyzerOptions,
    CheckResult,
    IssueType,
    ScoreBreakdown,
    Severity,
)

__all__ = [
    "ContentAnalyzer",
    "analyze_content",
    "AIReadabilityScore",
    "AnalysisIssue",
    "AnalyzerOptions",
    "CheckResult",
    "IssueType",
    "ScoreBreakdown",
    "Severity",
    "WEIGHTS",
]
