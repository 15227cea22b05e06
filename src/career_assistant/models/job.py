"""Pydantic model for job listings."""

from __future__ import annotations

from pydantic import BaseModel

from career_assistant.models.profile import CAMEL_CONFIG


class Job(BaseModel):
    id: str
    title: str
    company: str
    location: str
    type: str  # Full-time, Hybrid, Internship, ...
    salary: str
    posted: str
    description: str
    skills_required: list[str]
    apply_link: str | None = None
    match_score: int | None = None

    model_config = CAMEL_CONFIG
