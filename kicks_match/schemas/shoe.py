"""Schemas for shoe photo analysis."""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ColorSwatch(BaseModel):
    """One named color seen on the shoe."""

    model_config = ConfigDict(extra="ignore")

    name: str = Field(..., description="Human-readable color name, e.g. 'cave stone'")
    hex: str = Field(..., description="Color as #RRGGBB")
    # NaN/Infinity cannot be written back out as JSON
    ratio: Optional[float] = Field(
        None,
        allow_inf_nan=False,
        description="Share of the shoe covered by this color, 0-1 (advisory)",
    )


class ShoeDescription(BaseModel):
    """Structured description of a shoe photo as returned by the model."""

    model_config = ConfigDict(extra="ignore")

    brand_guess: str = ""
    model_guess: str = ""
    dominant_colors: List[ColorSwatch] = Field(default_factory=list)
    accent_colors: List[ColorSwatch] = Field(default_factory=list)
    materials: List[str] = Field(default_factory=list)
    style_tags: List[str] = Field(default_factory=list)
    short_text_summary: str = Field(
        "",
        description="One-line summary, at most 25 words (requested, not enforced)",
    )

    @field_validator("brand_guess", "model_guess", "short_text_summary", mode="before")
    @classmethod
    def _null_text_is_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator(
        "dominant_colors", "accent_colors", "materials", "style_tags", mode="before"
    )
    @classmethod
    def _null_list_is_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class AnalysisResult(BaseModel):
    """Response envelope of the analyze endpoint."""

    ok: bool
    error: Optional[str] = None
    size: Optional[int] = None
    mime: Optional[str] = None
    shoe: Optional[ShoeDescription] = None

    @classmethod
    def failure(cls, message: str) -> "AnalysisResult":
        return cls(ok=False, error=message or "Unknown error")

    def to_payload(self) -> Dict[str, Any]:
        """JSON-ready dict with unset optional fields left out."""
        return self.model_dump(mode="json", exclude_none=True)


# Returned whenever the model answered but no description could be read from it
FALLBACK_SHOE = ShoeDescription(
    brand_guess="",
    model_guess="",
    dominant_colors=[ColorSwatch(name="grey", hex="#808080")],
    accent_colors=[],
    materials=[],
    style_tags=[],
    short_text_summary="Could not read a shoe description from the model reply",
)


def fallback_shoe() -> ShoeDescription:
    """Return a private copy of the fallback description."""
    return FALLBACK_SHOE.model_copy(deep=True)
