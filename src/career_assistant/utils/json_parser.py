"""Utility to extract a JSON object from LLM responses."""

from __future__ import annotations

import json
import logging

from career_assistant.errors import MalformedResponse

logger = logging.getLogger(__name__)


def extract_json(text: str) -> dict:
    """Extract a JSON object from an LLM response.

    Tries in order:
    1. Direct json.loads on the full text
    2. Strip fenced code block markers and parse
    3. Find first '{' to last '}' and parse

    Raises MalformedResponse when none of these yields an object.
    """
    text = (text or "").strip()

    candidates = [text]
    stripped = _strip_code_fences(text)
    if stripped != text:
        candidates.append(stripped)
    braces = _brace_span(stripped)
    if braces is not None:
        candidates.append(braces)

    for candidate in candidates:
        try:
            value = json.loads(candidate)
        except json.JSONDecodeError:
            continue
        if isinstance(value, dict):
            return value

    raise MalformedResponse(f"Could not extract a JSON object from text: {text[:200]}...")


def parse_json_object(text: str | None) -> dict:
    """Like extract_json, but an unparseable payload becomes an empty object."""
    try:
        return extract_json(text or "")
    except MalformedResponse as exc:
        logger.warning("Malformed structured response, using defaults: %s", exc)
        return {}


def _strip_code_fences(text: str) -> str:
    """Remove markdown code fence markers from text."""
    lines = text.split("\n")

    if lines and lines[0].strip().startswith("```"):
        lines = lines[1:]

    while lines and lines[-1].strip() in ("```", ""):
        lines = lines[:-1]

    return "\n".join(lines).strip()


def _brace_span(text: str) -> str | None:
    start = text.find("{")
    end = text.rfind("}")
    if start != -1 and end > start:
        return text[start : end + 1]
    return None
