"""Client for the Gemini ``generateContent`` REST endpoint.

Sends one prompt plus one inline image and returns the generated text.
No retries: a failed call is reported to the caller as ``UpstreamError``.
"""
from __future__ import annotations

import logging
from time import perf_counter
from typing import Any, Dict, Optional

import httpx

from kicks_match.core.config import Settings, get_settings
from kicks_match.core.exceptions import ConfigurationError, UpstreamError

logger = logging.getLogger(__name__)


def extract_candidate_text(data: Any) -> str:
    """
    Pull the generated text out of a ``generateContent`` reply.

    The reply looks like ``{"candidates": [{"content": {"parts": [{"text": ...}]}}]}``.
    Only the first candidate is used; its text parts are joined in order.
    Any missing or oddly typed level yields ``""`` instead of an error.
    """
    if not isinstance(data, dict):
        return ""
    candidates = data.get("candidates")
    if not isinstance(candidates, list) or not candidates:
        return ""
    first = candidates[0]
    content = first.get("content") if isinstance(first, dict) else None
    parts = content.get("parts") if isinstance(content, dict) else None
    if not isinstance(parts, list):
        return ""
    return "".join(
        part["text"]
        for part in parts
        if isinstance(part, dict) and isinstance(part.get("text"), str)
    )


class GeminiClient:
    """Async client for a Gemini multimodal model."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.settings = settings or get_settings()
        # Tests pass an httpx.MockTransport here
        self._transport = transport
        self._timeout = httpx.Timeout(self.settings.gemini_timeout_seconds)

    @property
    def endpoint(self) -> str:
        base_url = self.settings.gemini_base_url.rstrip("/")
        return f"{base_url}/models/{self.settings.gemini_model}:generateContent"

    def ensure_configured(self) -> None:
        """
        Raises:
            ConfigurationError: when no API key is configured
        """
        if not self.settings.gemini_api_key:
            raise ConfigurationError("Missing GEMINI_API_KEY")

    def build_payload(self, prompt: str, image_base64: str, mime_type: str) -> Dict[str, Any]:
        return {
            "contents": [
                {
                    "role": "user",
                    "parts": [
                        {"text": prompt},
                        {"inlineData": {"mimeType": mime_type, "data": image_base64}},
                    ],
                }
            ],
            "generationConfig": {
                "temperature": self.settings.gemini_temperature,
                "maxOutputTokens": self.settings.gemini_max_output_tokens,
            },
        }

    async def generate_from_image(
        self,
        prompt: str,
        image_base64: str,
        mime_type: str,
    ) -> str:
        """
        Ask the model about one image.

        Args:
            prompt: instruction text
            image_base64: image bytes as base64 text
            mime_type: content type of the image

        Returns:
            Generated text, possibly empty when the reply carries none

        Raises:
            ConfigurationError: when no API key is configured
            UpstreamError: on a non-success status or a transport failure
        """
        self.ensure_configured()

        headers = {
            "x-goog-api-key": self.settings.gemini_api_key,
            "Content-Type": "application/json",
        }
        payload = self.build_payload(prompt, image_base64, mime_type)

        start = perf_counter()
        logger.info(
            "[GEMINI] Request: model=%s, mime=%s, image_b64_chars=%d",
            self.settings.gemini_model,
            mime_type,
            len(image_base64),
        )

        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                response = await client.post(self.endpoint, headers=headers, json=payload)
        except httpx.TimeoutException as exc:
            raise UpstreamError("Upstream request timed out") from exc
        except httpx.RequestError as exc:
            raise UpstreamError(f"Upstream transport error: {exc}") from exc

        duration_ms = (perf_counter() - start) * 1000
        logger.info(
            "[GEMINI] Response: status=%s, duration=%.2f ms, body_snippet=%s",
            response.status_code,
            duration_ms,
            response.text[:200],
        )

        if not response.is_success:
            raise UpstreamError.from_response(response.status_code, response.text)

        try:
            data = response.json()
        except ValueError:
            logger.warning("[GEMINI] Success reply is not JSON, treating as empty text")
            return ""
        return extract_candidate_text(data)
