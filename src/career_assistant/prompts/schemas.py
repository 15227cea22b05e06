"""JSON schemas for schema-bound generation.

The same schema objects constrain the model's output and drive the
field-by-field defaulting in ``career_assistant.normalizer``.
"""

from __future__ import annotations

_STRING = {"type": "string"}
_NUMBER = {"type": "number"}
_STRING_LIST = {"type": "array", "items": _STRING}


def _object(properties: dict, required: list[str] | None = None) -> dict:
    schema = {"type": "object", "properties": properties}
    if required:
        schema["required"] = required
    return schema


PROFILE_SCHEMA = _object(
    {
        "name": _STRING,
        "email": _STRING,
        "phone": _STRING,
        "targetRole": _STRING,
        "skills": _STRING_LIST,
        "education": {
            "type": "array",
            "items": _object(
                {
                    "degree": _STRING,
                    "institution": _STRING,
                    "year": _STRING,
                    "score": _STRING,
                }
            ),
        },
        "experience": {
            "type": "array",
            "items": _object(
                {
                    "role": _STRING,
                    "company": _STRING,
                    "duration": _STRING,
                    "description": _STRING,
                }
            ),
        },
        "projects": {
            "type": "array",
            "items": _object(
                {
                    "title": _STRING,
                    "description": _STRING,
                    "techStack": _STRING,
                }
            ),
        },
    }
)

ATS_FALLBACK_SUMMARY = "Could not analyze the resume content. Please try converting to text."

ATS_SCHEMA = _object(
    {
        "score": {**_NUMBER, "description": "Match score from 0 to 100"},
        "missingKeywords": _STRING_LIST,
        "formattingIssues": _STRING_LIST,
        "contentSuggestions": _STRING_LIST,
        "summary": {
            **_STRING,
            "description": "Brief overall feedback",
            "default": ATS_FALLBACK_SUMMARY,
        },
    },
    required=["score", "missingKeywords", "formattingIssues", "contentSuggestions", "summary"],
)

SKILL_GAP_SCHEMA = _object(
    {
        "matchScore": _NUMBER,
        "missingSkills": _STRING_LIST,
        "strongSkills": _STRING_LIST,
        "learningPath": {
            "type": "array",
            "items": _object(
                {
                    "week": {"type": "integer"},
                    "topic": _STRING,
                    "resources": _STRING_LIST,
                    "actionItem": _STRING,
                }
            ),
        },
    }
)
