"""HTTP middleware: request tracing, access logging and AI crawler handling."""

from __future__ import annotations

import time
import uuid
from collections.abc import Awaitable, Callable
from typing import Any

import structlog
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from visibility.crawlers.detector import AIBotDetector
from visibility.optimizer import HTMLOptimizer

CallNext = Callable[[Request], Awaitable[Response]]

REQUEST_ID_HEADER = "X-Request-ID"

logger = structlog.get_logger()


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Tag every request (and its log lines) with an id, echoed in the response."""

    async def dispatch(self, request: Request, call_next: CallNext) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id)

        response = await call_next(request)  # type: ignore[return-value]
        response.headers[REQUEST_ID_HEADER] = request_id
        return response


class LoggingMiddleware(BaseHTTPMiddleware):
    """One access log line per request, with status and latency."""

    async def dispatch(self, request: Request, call_next: CallNext) -> Response:
        started = time.perf_counter()
        response = await call_next(request)  # type: ignore[return-value]

        logger.info(
            "request_completed",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - started) * 1000, 2),
            ai_bot=getattr(request.state, "is_ai_bot", None),
        )
        return response


class AIBotDetectionMiddleware(BaseHTTPMiddleware):
    """Flag requests from AI crawlers on request.state."""

    def __init__(self, app: Any, detector: AIBotDetector | None = None, verbose: bool = False):
        super().__init__(app)
        self.detector = detector or AIBotDetector()
        self.verbose = verbose

    async def dispatch(self, request: Request, call_next: CallNext) -> Response:
        bot = self.detector.detect(request.headers.get("user-agent", ""))

        request.state.is_ai_bot = bot is not None
        request.state.ai_bot_info = bot

        if bot is not None and self.verbose:
            logger.info(
                "ai_crawler_detected",
                bot=bot.name,
                company=bot.company,
                purpose=bot.purpose.value,
                method=request.method,
                path=request.url.path,
            )

        return await call_next(request)  # type: ignore[return-value]


class AIResponseOptimizationMiddleware(BaseHTTPMiddleware):
    """Serve stripped-down HTML to detected AI crawlers.

    Must run after AIBotDetectionMiddleware (i.e. be added before it).
    """

    def __init__(self, app: Any, optimizer: HTMLOptimizer | None = None):
        super().__init__(app)
        self.optimizer = optimizer or HTMLOptimizer()

    async def dispatch(self, request: Request, call_next: CallNext) -> Response:
        response = await call_next(request)  # type: ignore[return-value]

        if not getattr(request.state, "is_ai_bot", False):
            return response

        content_type = response.headers.get("content-type", "")
        if "text/html" not in content_type:
            return response

        body = b"".join([chunk async for chunk in response.body_iterator])  # type: ignore[attr-defined]
        charset = getattr(response, "charset", None) or "utf-8"
        html = body.decode(charset, errors="replace")

        if "<html" in html:
            html = self.optimizer.optimize(html)

        headers = {
            key: value for key, value in response.headers.items() if key.lower() != "content-length"
        }
        return Response(
            content=html.encode(charset),
            status_code=response.status_code,
            headers=headers,
        )
