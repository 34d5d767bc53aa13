"""Upload page: pick a photo, analyze it, show the result."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from starlette.datastructures import UploadFile

from kicks_match.api.v1.analyze import get_analyze_service, run_analysis
from kicks_match.core.config import get_settings
from kicks_match.services.shoe_analyze_service import IMAGE_FIELD, ShoeAnalyzeService
from kicks_match.ui.render import build_result_view, preview_data_uri

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parents[2] / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter(tags=["ui"])


def _page_context(**extra) -> dict:
    settings = get_settings()
    context = {
        "title": settings.app_name,
        "description": settings.app_description,
        "image_field": IMAGE_FIELD,
        "result": None,
        "preview_url": None,
    }
    context.update(extra)
    return context


async def _uploaded_preview(request: Request) -> Optional[str]:
    # Starlette caches the parsed form, so this reuses the analyzed upload
    form = await request.form()
    upload = form.get(IMAGE_FIELD)
    if not isinstance(upload, UploadFile):
        return None
    await upload.seek(0)
    return preview_data_uri(await upload.read(), upload.content_type)


@router.get("/", response_class=HTMLResponse)
async def upload_page(request: Request) -> HTMLResponse:
    """Empty upload form."""
    return templates.TemplateResponse(request, "index.html", _page_context())


@router.post("/", response_class=HTMLResponse)
async def upload_and_analyze(
    request: Request,
    service: ShoeAnalyzeService = Depends(get_analyze_service),
) -> HTMLResponse:
    """Analyze the submitted photo and render the result below the form."""
    logger.info("[UI] POST / - Analyze submitted")
    status_code, result = await run_analysis(request, service)

    try:
        preview_url = await _uploaded_preview(request)
    except Exception as e:
        logger.warning(f"[UI] Could not build preview: {e}")
        preview_url = None

    context = _page_context(result=build_result_view(result), preview_url=preview_url)
    return templates.TemplateResponse(
        request, "index.html", context, status_code=status_code
    )
