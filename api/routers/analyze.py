"""Content analysis endpoints."""

import structlog
from fastapi import APIRouter

from api.config import get_settings
from api.exceptions import PayloadTooLargeError
from api.schemas import ErrorResponse
from api.schemas.analysis import AnalyzeRequest, AnalyzeResponse
from visibility.analyzer.content import ContentAnalyzer
from visibility.analyzer.models import AnalyzerOptions

router = APIRouter(prefix="/analyze", tags=["Analyze"])
logger = structlog.get_logger()


@router.post(
    "",
    response_model=AnalyzeResponse,
    responses={413: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
async def analyze_html(request: AnalyzeRequest) -> AnalyzeResponse:
    """Score an HTML document for AI readability."""
    settings = get_settings()

    size = len(request.html.encode("utf-8"))
    if size > settings.max_html_bytes:
        raise PayloadTooLargeError(size=size, limit=settings.max_html_bytes)

    options = AnalyzerOptions.from_settings(settings)
    if request.options is not None:
        options = request.options.merge(options)

    result = await ContentAnalyzer(options).analyze(request.html)

    logger.info(
        "content_analyzed",
        overall_score=result.overall_score,
        issues=len(result.issues),
        html_bytes=size,
    )
    return AnalyzeResponse.from_result(result)
