"""Prompt for shoe photo analysis.

Kept in its own module so the wording can be tuned without touching the
service. The field names here must match ``ShoeDescription``.
"""
from __future__ import annotations

SUMMARY_WORD_LIMIT = 25

SHOE_ANALYSIS_PROMPT = f"""You are a footwear expert looking at a photo of a shoe.
Describe the shoe and reply with ONE JSON object and nothing else, using exactly this shape:

{{
  "brand_guess": "string, empty if unsure",
  "model_guess": "string, empty if unsure",
  "dominant_colors": [{{"name": "string", "hex": "#RRGGBB", "ratio": 0.0}}],
  "accent_colors": [{{"name": "string", "hex": "#RRGGBB"}}],
  "materials": ["string"],
  "style_tags": ["string"],
  "short_text_summary": "string"
}}

Rules:
- Use exactly these field names. Do not add other fields.
- Every "hex" value is a 7-character uppercase hex color like "#1A2B3C".
- "ratio" is the approximate share of the shoe covered by that color, between 0 and 1.
- List dominant colors from most to least visible.
- "short_text_summary" is at most {SUMMARY_WORD_LIMIT} words.
- Only describe what is visible in the photo. Leave a field empty rather than invent it.
- Do not wrap the JSON in markdown fences or add any text before or after it."""


def build_shoe_analysis_prompt() -> str:
    """Return the fixed instruction sent with every image."""
    return SHOE_ANALYSIS_PROMPT
