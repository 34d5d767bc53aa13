"""Tests for JSON extraction from model replies."""
from __future__ import annotations

import pytest

from kicks_match.utils.json_utils import extract_json


class TestExtractJson:
    """Test cases for extract_json."""

    def test_whole_text_is_json(self):
        assert extract_json('{"brand_guess": "Nike"}') == {"brand_guess": "Nike"}

    def test_object_wrapped_in_prose(self):
        text = 'here you go: {"brand_guess":"Nike","materials":["mesh"]} thanks'
        assert extract_json(text) == {"brand_guess": "Nike", "materials": ["mesh"]}

    def test_markdown_fence(self):
        text = '```json\n{"style_tags": ["retro"]}\n```'
        assert extract_json(text) == {"style_tags": ["retro"]}

    def test_nested_object_is_not_cut_short(self):
        text = 'result {"a": {"b": {"c": 1}}, "d": 2} done'
        assert extract_json(text) == {"a": {"b": {"c": 1}}, "d": 2}

    def test_first_of_several_objects(self):
        """A greedy first-{ to last-} match would swallow both objects and fail."""
        text = 'first {"a": 1} and then {"b": 2}'
        assert extract_json(text) == {"a": 1}

    def test_braces_inside_strings(self):
        text = 'note: {"summary": "logo looks like } or {", "ok": true} end'
        assert extract_json(text) == {"summary": "logo looks like } or {", "ok": True}

    def test_escaped_quotes_inside_strings(self):
        text = r'x {"summary": "the \"}\" shape", "n": 1} y'
        assert extract_json(text) == {"summary": 'the "}" shape', "n": 1}

    def test_skips_invalid_candidate(self):
        text = '{not json} but this is: {"brand_guess": "Vans"}'
        assert extract_json(text) == {"brand_guess": "Vans"}

    @pytest.mark.parametrize(
        "text",
        [None, "", "   \n", "no json here", '{"a": 1', "[1, 2, 3]", '"just a string"'],
    )
    def test_returns_none_without_object(self, text):
        assert extract_json(text) is None
