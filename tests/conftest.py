"""Pytest configuration for test suite."""
from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import httpx
import pytest

# Add project root to Python path so 'kicks_match' imports without installing
project_root = Path(__file__).parent.parent.resolve()
project_root_str = str(project_root)
if project_root_str not in sys.path:
    sys.path.insert(0, project_root_str)
os.environ.setdefault("PYTHONPATH", project_root_str)

from kicks_match.core.config import Settings  # noqa: E402
from kicks_match.services.gemini_client import GeminiClient  # noqa: E402
from kicks_match.services.shoe_analyze_service import ShoeAnalyzeService  # noqa: E402


def gemini_body(*texts: str) -> Dict[str, Any]:
    """A generateContent reply whose first candidate holds ``texts`` as parts."""
    return {
        "candidates": [
            {
                "content": {"role": "model", "parts": [{"text": t} for t in texts]},
                "finishReason": "STOP",
            }
        ]
    }


class FakeGemini:
    """httpx.MockTransport handler standing in for the Gemini API."""

    def __init__(
        self,
        reply_text: Optional[str] = None,
        status: int = 200,
        body: Any = None,
        raw: Optional[str] = None,
        exc: Optional[Exception] = None,
    ) -> None:
        self.reply_text = reply_text
        self.status = status
        self.body = body
        self.raw = raw
        self.exc = exc
        self.calls: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        if self.exc is not None:
            raise self.exc
        if self.raw is not None:
            return httpx.Response(self.status, text=self.raw)
        if self.body is not None:
            return httpx.Response(self.status, json=self.body)
        return httpx.Response(self.status, json=gemini_body(self.reply_text or ""))


@pytest.fixture
def fake_gemini():
    """Factory for FakeGemini handlers."""
    return FakeGemini


@pytest.fixture
def make_settings():
    def _make(api_key: Optional[str] = "test-key", **overrides: Any) -> Settings:
        return Settings(gemini_api_key=api_key, **overrides)

    return _make


@pytest.fixture
def make_service(make_settings):
    """Build a ShoeAnalyzeService whose Gemini calls go to ``fake``."""

    def _make(fake: FakeGemini, api_key: Optional[str] = "test-key", **overrides: Any):
        settings = make_settings(api_key, **overrides)
        client = GeminiClient(settings, transport=httpx.MockTransport(fake))
        return ShoeAnalyzeService(settings=settings, client=client)

    return _make


@pytest.fixture
def sample_shoe() -> Dict[str, Any]:
    return {
        "brand_guess": "Nike",
        "model_guess": "Air Force 1",
        "dominant_colors": [
            {"name": "cave stone", "hex": "#B0A58B", "ratio": 0.52},
            {"name": "black", "hex": "#000000", "ratio": 0.38},
        ],
        "accent_colors": [{"name": "white", "hex": "#FFFFFF"}],
        "materials": ["leather"],
        "style_tags": ["streetwear", "basketball"],
        "short_text_summary": "Taupe and black low-top sneaker with a streetwear vibe",
    }
