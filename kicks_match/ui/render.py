"""View helpers for the upload page.

Turns an AnalysisResult into plain values the template can print.
"""
from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from typing import List, Optional

from kicks_match.schemas.shoe import AnalysisResult, ColorSwatch
from kicks_match.utils.image_encoding import encode_base64_chunked

SUMMARY_PLACEHOLDER = "Shoe summary not provided"
NEUTRAL_SWATCH = "#808080"

_HEX_COLOR = re.compile(r"#[0-9A-Fa-f]{6}")


def format_percent(ratio: Optional[float]) -> str:
    """``0.52`` -> ``"52%"``; empty string when there is no ratio."""
    if ratio is None:
        return ""
    # Halves round up, as in the browser's toFixed(0)
    percent = Decimal(str(ratio * 100)).to_integral_value(rounding=ROUND_HALF_UP)
    return f"{percent}%"


def format_color_label(color: ColorSwatch) -> str:
    """Label shown next to a swatch, e.g. ``cave stone (#B0A58B) • 52%``."""
    label = f"{color.name} ({color.hex})"
    percent = format_percent(color.ratio)
    if percent:
        label = f"{label} • {percent}"
    return label


def swatch_color(hex_value: str) -> str:
    """The hex if it is a plain ``#RRGGBB`` value, else a neutral grey.

    The value lands in a ``style`` attribute, where anything else could carry CSS.
    """
    return hex_value if _HEX_COLOR.fullmatch(hex_value) else NEUTRAL_SWATCH


@dataclass
class ColorChip:
    hex: str
    label: str


@dataclass
class ResultView:
    ok: bool
    error: Optional[str] = None
    summary: str = ""
    dominant: List[ColorChip] = field(default_factory=list)
    accent: List[ColorChip] = field(default_factory=list)
    raw_json: str = ""


def _chips(colors: List[ColorSwatch]) -> List[ColorChip]:
    return [ColorChip(hex=swatch_color(c.hex), label=format_color_label(c)) for c in colors]


def build_result_view(result: AnalysisResult) -> ResultView:
    """Everything the result panel shows, including the raw JSON dump."""
    view = ResultView(
        ok=result.ok,
        error=result.error,
        raw_json=json.dumps(result.to_payload(), indent=2, ensure_ascii=False),
    )
    if result.ok and result.shoe is not None:
        view.summary = result.shoe.short_text_summary or SUMMARY_PLACEHOLDER
        view.dominant = _chips(result.shoe.dominant_colors)
        view.accent = _chips(result.shoe.accent_colors)
    return view


def preview_data_uri(data: bytes, mime: Optional[str]) -> Optional[str]:
    """Inline ``data:`` URI for showing the uploaded photo back to the user."""
    if not data:
        return None
    return f"data:{mime or 'image/jpeg'};base64,{encode_base64_chunked(data)}"
