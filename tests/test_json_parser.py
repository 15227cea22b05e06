"""Tests for JSON extraction utility."""

import pytest

from career_assistant.errors import MalformedResponse
from career_assistant.utils.json_parser import extract_json, parse_json_object


class TestExtractJson:
    def test_direct_json(self):
        assert extract_json('{"name": "test"}') == {"name": "test"}

    def test_fenced_code_block(self):
        text = 'Here is the result:\n```json\n{"name": "test"}\n```\nDone.'
        assert extract_json(text) == {"name": "test"}

    def test_fenced_without_json_tag(self):
        assert extract_json('```\n{"key": "value"}\n```') == {"key": "value"}

    def test_embedded_json(self):
        text = 'The analysis is: {"score": 90, "pass": true} as shown above.'
        assert extract_json(text) == {"score": 90, "pass": True}

    def test_invalid_json_raises(self):
        with pytest.raises(MalformedResponse, match="Could not extract"):
            extract_json("no json here at all")

    def test_top_level_array_is_not_an_object(self):
        with pytest.raises(MalformedResponse):
            extract_json('["a", "b"]')


class TestParseJsonObject:
    def test_valid_object(self):
        assert parse_json_object('{"skills": ["Python"]}') == {"skills": ["Python"]}

    @pytest.mark.parametrize("text", ["", None, "not json", "[1, 2]", '{"truncated": '])
    def test_malformed_becomes_empty_object(self, text):
        assert parse_json_object(text) == {}
