"""Turn untrusted model output into fully populated result models.

Every structured result is validated field by field against the JSON schema
it was generated from. Absent or wrongly typed values become an empty
string, zero or an empty list (or the schema's ``default``), so callers never
see a missing field.
"""

from __future__ import annotations

import logging
import math
from typing import Any

from career_assistant.models.analysis import ATSAnalysis, SkillGapAnalysis
from career_assistant.models.profile import ParsedProfile
from career_assistant.prompts.schemas import ATS_SCHEMA, PROFILE_SCHEMA, SKILL_GAP_SCHEMA
from career_assistant.utils.json_parser import parse_json_object

logger = logging.getLogger(__name__)

_EMPTY = {"string": "", "number": 0, "integer": 0, "boolean": False}


def _default(schema: dict) -> Any:
    if "default" in schema:
        return schema["default"]
    kind = schema.get("type")
    if kind == "object":
        return coerce({}, schema)
    if kind == "array":
        return []
    return _EMPTY.get(kind)


def _is_number(value: Any) -> bool:
    """Finite int or float; booleans and ints beyond float range do not count."""
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def coerce(value: Any, schema: dict) -> Any:
    """Coerce ``value`` to the shape described by ``schema``."""
    kind = schema.get("type")

    if kind == "object":
        source = value if isinstance(value, dict) else {}
        return {
            key: coerce(source[key], prop) if key in source else _default(prop)
            for key, prop in schema.get("properties", {}).items()
        }

    if kind == "array":
        if not isinstance(value, list):
            return _default(schema)
        items = schema.get("items", {})
        if items.get("type") in ("object", "array"):
            return [coerce(item, items) for item in _items_of(value, items)]
        return [coerce(item, items) for item in value if _matches(item, items)]

    if _matches(value, schema):
        if kind == "integer":
            return int(value)
        return value
    return _default(schema)


def _items_of(values: list, schema: dict) -> list:
    """Array items of container type; anything else is dropped."""
    container = dict if schema.get("type") == "object" else list
    return [v for v in values if isinstance(v, container)]


def _matches(value: Any, schema: dict) -> bool:
    kind = schema.get("type")
    if kind == "string":
        return isinstance(value, str)
    if kind == "number":
        return _is_number(value)
    if kind == "integer":
        return _is_number(value) and float(value).is_integer()
    if kind == "boolean":
        return isinstance(value, bool)
    return kind is None


def _clamp(score: float) -> float:
    return max(0.0, min(100.0, score))


def normalize_profile(raw_text: str | None) -> ParsedProfile:
    data = coerce(parse_json_object(raw_text), PROFILE_SCHEMA)
    return ParsedProfile.model_validate(data)


def normalize_ats(raw_text: str | None, *, clamp_scores: bool = False) -> ATSAnalysis:
    data = coerce(parse_json_object(raw_text), ATS_SCHEMA)
    if not data["summary"]:
        data["summary"] = ATS_SCHEMA["properties"]["summary"]["default"]
    if clamp_scores:
        data["score"] = _clamp(data["score"])
    return ATSAnalysis.model_validate(data)


def normalize_skill_gap(raw_text: str | None, *, clamp_scores: bool = False) -> SkillGapAnalysis:
    data = coerce(parse_json_object(raw_text), SKILL_GAP_SCHEMA)
    if clamp_scores:
        data["matchScore"] = _clamp(data["matchScore"])
    return SkillGapAnalysis.model_validate(data)
