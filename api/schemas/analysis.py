"""Schemas for content analysis requests and responses."""

from pydantic import BaseModel, Field

from visibility.analyzer.models import AIReadabilityScore, AnalyzerOptions


class AnalyzerOptionsIn(BaseModel):
    """Per-request check toggles. Omitted flags use the server defaults."""

    check_answer_placement: bool | None = None
    check_fact_density: bool | None = None
    check_heading_structure: bool | None = None
    check_eeat: bool | None = None
    check_snippability: bool | None = None
    check_schema: bool | None = None

    def merge(self, defaults: AnalyzerOptions) -> AnalyzerOptions:
        overrides = self.model_dump(exclude_none=True)
        return AnalyzerOptions(
            **{
                "check_answer_placement": defaults.check_answer_placement,
                "check_fact_density": defaults.check_fact_density,
                "check_heading_structure": defaults.check_heading_structure,
                "check_eeat": defaults.check_eeat,
                "check_snippability": defaults.check_snippability,
                "check_schema": defaults.check_schema,
                **overrides,
            }
        )


class AnalyzeRequest(BaseModel):
    """Document to score."""

    html: str = Field(..., description="Raw HTML of the page")
    options: AnalyzerOptionsIn | None = None


class IssueResponse(BaseModel):
    type: str
    severity: str
    message: str
    fix: str


class BreakdownResponse(BaseModel):
    answer_front_loading: int = Field(..., ge=0, le=100)
    fact_density: int = Field(..., ge=0, le=100)
    heading_structure: int = Field(..., ge=0, le=100)
    eeat_signals: int = Field(..., ge=0, le=100)
    snippability: int = Field(..., ge=0, le=100)
    schema_coverage: int = Field(..., ge=0, le=100)


class AnalyzeResponse(BaseModel):
    """AI readability score for one document."""

    overall_score: int = Field(..., ge=0, le=100)
    breakdown: BreakdownResponse
    issues: list[IssueResponse]
    recommendations: list[str]

    @classmethod
    def from_result(cls, result: AIReadabilityScore) -> "AnalyzeResponse":
        return cls.model_validate(result.to_dict())
