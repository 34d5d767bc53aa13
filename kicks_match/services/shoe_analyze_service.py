"""Shoe photo analysis service.

Flow per request: validate upload -> check credential -> encode ->
call model -> parse reply (or fall back) -> build result.
"""
from __future__ import annotations

import logging
from typing import Any, Optional

from pydantic import ValidationError
from starlette.datastructures import UploadFile

from kicks_match.core.config import Settings, get_settings
from kicks_match.core.exceptions import ClientInputError
from kicks_match.schemas.shoe import AnalysisResult, ShoeDescription, fallback_shoe
from kicks_match.services.gemini_client import GeminiClient
from kicks_match.services.prompts.shoe_prompts import build_shoe_analysis_prompt
from kicks_match.utils.image_encoding import encode_base64_chunked
from kicks_match.utils.json_utils import extract_json

logger = logging.getLogger(__name__)

DEFAULT_MIME = "image/jpeg"
IMAGE_FIELD = "image"


def parse_shoe_description(text: Optional[str]) -> ShoeDescription:
    """
    Turn the model's reply text into a ShoeDescription.

    Never raises: no text, no JSON object, or an object with wrongly typed
    fields all give the fallback description.
    """
    if not text:
        logger.warning("[SHOE_SERVICE] Model returned no text, using fallback")
        return fallback_shoe()

    parsed = extract_json(text)
    if parsed is None:
        logger.warning(
            "[SHOE_SERVICE] No JSON object in model reply, using fallback: %s",
            text[:200],
        )
        return fallback_shoe()

    try:
        return ShoeDescription.model_validate(parsed)
    except ValidationError as exc:
        logger.warning(
            "[SHOE_SERVICE] Model JSON does not fit ShoeDescription, using fallback: %s",
            exc.errors()[:3],
        )
        return fallback_shoe()


class ShoeAnalyzeService:
    """Analyze one uploaded shoe photo."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        client: Optional[GeminiClient] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.client = client or GeminiClient(self.settings)

    async def analyze_upload(self, upload: Any) -> AnalysisResult:
        """
        Analyze the value of the ``image`` form field.

        Raises:
            ClientInputError: when ``upload`` is not a file
        """
        if not isinstance(upload, UploadFile):
            raise ClientInputError("No image provided")

        data = await upload.read()
        logger.info(
            f"[SHOE_SERVICE] Upload read: filename={upload.filename}, "
            f"size={len(data)}, content_type={upload.content_type}"
        )
        return await self.analyze(data, upload.content_type)

    async def analyze(self, data: bytes, mime: Optional[str] = None) -> AnalysisResult:
        """
        Analyze raw image bytes.

        Args:
            data: image bytes (may be empty)
            mime: content type of the upload, ``image/jpeg`` when missing

        Returns:
            AnalysisResult with ``ok=True``

        Raises:
            ConfigurationError: when no API key is configured
            UpstreamError: when the model call fails
        """
        # Fail on configuration before doing any work
        self.client.ensure_configured()

        mime_type = mime or DEFAULT_MIME
        image_base64 = encode_base64_chunked(data, self.settings.base64_chunk_size)
        logger.info(
            f"[SHOE_SERVICE] Encoded image: bytes={len(data)}, "
            f"b64_chars={len(image_base64)}, mime={mime_type}"
        )

        text = await self.client.generate_from_image(
            prompt=build_shoe_analysis_prompt(),
            image_base64=image_base64,
            mime_type=mime_type,
        )
        shoe = parse_shoe_description(text)

        logger.info(
            f"[SHOE_SERVICE] Analysis done: brand_guess={shoe.brand_guess!r}, "
            f"dominant_colors={len(shoe.dominant_colors)}"
        )
        return AnalysisResult(ok=True, size=len(data), mime=mime_type, shoe=shoe)
