"""Tests for field-by-field defaulting of structured model output."""

import json

import pytest

from career_assistant.models.analysis import ATSAnalysis, SkillGapAnalysis
from career_assistant.models.profile import ParsedProfile
from career_assistant.normalizer import (
    coerce,
    normalize_ats,
    normalize_profile,
    normalize_skill_gap,
)
from career_assistant.prompts.schemas import ATS_FALLBACK_SUMMARY


class TestCoerce:
    def test_wrong_primitive_kinds_get_defaults(self):
        schema = {
            "type": "object",
            "properties": {
                "s": {"type": "string"},
                "n": {"type": "number"},
                "a": {"type": "array", "items": {"type": "string"}},
            },
        }
        assert coerce({"s": 5, "n": "7", "a": "x"}, schema) == {"s": "", "n": 0, "a": []}

    def test_booleans_are_not_numbers(self):
        assert coerce(True, {"type": "number"}) == 0

    def test_non_string_items_dropped(self):
        schema = {"type": "array", "items": {"type": "string"}}
        assert coerce(["Python", None, 3, "SQL"], schema) == ["Python", "SQL"]

    def test_integral_floats_become_int(self):
        assert coerce(2.0, {"type": "integer"}) == 2
        assert coerce(2.5, {"type": "integer"}) == 0

    def test_numbers_beyond_float_range_get_defaults(self):
        huge = 10**400
        assert coerce(huge, {"type": "integer"}) == 0
        assert coerce(huge, {"type": "number"}) == 0
        assert coerce(float("nan"), {"type": "number"}) == 0

    def test_extra_keys_dropped(self):
        schema = {"type": "object", "properties": {"a": {"type": "string"}}}
        assert coerce({"a": "x", "b": "y"}, schema) == {"a": "x"}


class TestNormalizeProfile:
    @pytest.mark.parametrize(
        "raw",
        ["", "not json", "{}", '{"skills": null, "education": "none"}', "[]"],
    )
    def test_array_fields_always_arrays(self, raw):
        profile = normalize_profile(raw)
        assert isinstance(profile, ParsedProfile)
        for field in ("education", "experience", "skills", "projects"):
            assert isinstance(getattr(profile, field), list)

    def test_scalar_fields_defaulted_too(self):
        profile = normalize_profile('{"name": null, "targetRole": 42}')
        assert profile.name == ""
        assert profile.target_role == ""

    def test_nested_records_filled(self):
        raw = json.dumps(
            {
                "name": "Jane Doe",
                "experience": [{"role": "Engineer"}, "garbage"],
                "projects": [{"title": "CLI", "techStack": "Python"}],
            }
        )
        profile = normalize_profile(raw)
        assert profile.name == "Jane Doe"
        assert len(profile.experience) == 1
        assert profile.experience[0].role == "Engineer"
        assert profile.experience[0].company == ""
        assert profile.projects[0].tech_stack == "Python"


class TestNormalizeATS:
    def test_full_payload(self):
        raw = json.dumps(
            {
                "score": 82,
                "missingKeywords": ["Redux"],
                "formattingIssues": [],
                "contentSuggestions": ["Quantify impact"],
                "summary": "Strong match",
            }
        )
        result = normalize_ats(raw)
        assert result == ATSAnalysis(
            score=82,
            missing_keywords=["Redux"],
            formatting_issues=[],
            content_suggestions=["Quantify impact"],
            summary="Strong match",
        )

    @pytest.mark.parametrize("raw", ["", "oops", '{"summary": ""}', '{"score": "high"}'])
    def test_malformed_yields_defaults(self, raw):
        result = normalize_ats(raw)
        assert result.score == 0
        assert result.missing_keywords == []
        assert result.formatting_issues == []
        assert result.content_suggestions == []
        assert result.summary == ATS_FALLBACK_SUMMARY

    def test_oversized_score_defaulted(self):
        result = normalize_ats('{"score": 1' + "0" * 400 + "}")
        assert result.score == 0

    def test_out_of_range_score_passed_through(self):
        assert normalize_ats('{"score": 140}').score == 140
        assert normalize_ats('{"score": -5}').score == -5

    def test_out_of_range_score_clamped_when_enabled(self):
        assert normalize_ats('{"score": 140}', clamp_scores=True).score == 100
        assert normalize_ats('{"score": -5}', clamp_scores=True).score == 0
        assert normalize_ats('{"score": 82}', clamp_scores=True).score == 82


class TestNormalizeSkillGap:
    def test_match_score_defaulted(self):
        result = normalize_skill_gap('{"missingSkills": ["Go"]}')
        assert isinstance(result, SkillGapAnalysis)
        assert result.match_score == 0
        assert result.missing_skills == ["Go"]
        assert result.strong_skills == []
        assert result.learning_path == []

    def test_learning_path_steps_filled(self):
        raw = json.dumps(
            {
                "matchScore": 55,
                "learningPath": [
                    {"week": 1, "topic": "Docker", "resources": ["docs.docker.com"]},
                    {"week": "two", "actionItem": "Deploy"},
                ],
            }
        )
        result = normalize_skill_gap(raw)
        assert result.learning_path[0].week == 1
        assert result.learning_path[0].action_item == ""
        assert result.learning_path[1].week == 0
        assert result.learning_path[1].resources == []
        assert result.learning_path[1].action_item == "Deploy"

    def test_oversized_week_defaulted(self):
        result = normalize_skill_gap('{"learningPath": [{"week": 1' + "0" * 400 + "}]}")
        assert result.learning_path[0].week == 0

    def test_match_score_clamping_is_optional(self):
        assert normalize_skill_gap('{"matchScore": 120}').match_score == 120
        assert normalize_skill_gap('{"matchScore": 120}', clamp_scores=True).match_score == 100
