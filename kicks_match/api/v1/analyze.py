"""Shoe photo analysis API endpoint."""
from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from kicks_match.core.exceptions import AnalysisError
from kicks_match.schemas.shoe import AnalysisResult
from kicks_match.services.shoe_analyze_service import IMAGE_FIELD, ShoeAnalyzeService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["analyze"])


def get_analyze_service() -> ShoeAnalyzeService:
    """Dependency returning a service bound to the current settings."""
    return ShoeAnalyzeService()


async def run_analysis(
    request: Request,
    service: ShoeAnalyzeService,
) -> tuple[int, AnalysisResult]:
    """
    Run the whole analysis flow for a multipart request.

    Never raises: every failure becomes an ``ok=False`` result paired with
    the HTTP status it should be answered with.

    Returns:
        (status_code, result)
    """
    start_time = time.time()
    try:
        form = await request.form()
        result = await service.analyze_upload(form.get(IMAGE_FIELD))
    except AnalysisError as e:
        logger.warning(f"[API] ✗ Analysis failed ({e.status_code}): {e}")
        return e.status_code, AnalysisResult.failure(str(e))
    except Exception as e:
        logger.error(f"[API] ✗ Unexpected error: {e}", exc_info=True)
        return 500, AnalysisResult.failure(str(e))

    latency_ms = int((time.time() - start_time) * 1000)
    logger.info(f"[API] ✓ Analysis completed: size={result.size}, latency={latency_ms}ms")
    return 200, result


@router.post("/analyze", response_model=AnalysisResult, response_model_exclude_none=True)
async def analyze(
    request: Request,
    service: ShoeAnalyzeService = Depends(get_analyze_service),
) -> JSONResponse:
    """
    Analyze one shoe photo.

    Multipart form with the image under field ``image``.

    Returns:
        200 ``{ok: true, size, mime, shoe}``; on failure ``{ok: false, error}``
        with 400 (no image), 500 (misconfiguration or unexpected error)
        or 502 (model service failure)
    """
    logger.info("[API] POST /api/analyze - Request received")
    status_code, result = await run_analysis(request, service)
    return JSONResponse(status_code=status_code, content=result.to_payload())
