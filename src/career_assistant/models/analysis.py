"""Pydantic models for ATS scoring and skill-gap analysis."""

from __future__ import annotations

from pydantic import BaseModel

from career_assistant.models.profile import CAMEL_CONFIG


class ATSAnalysis(BaseModel):
    score: float = 0  # intended 0-100, not clamped unless configured
    missing_keywords: list[str] = []
    formatting_issues: list[str] = []
    content_suggestions: list[str] = []
    summary: str = ""

    model_config = CAMEL_CONFIG


class LearningStep(BaseModel):
    week: int = 0
    topic: str = ""
    resources: list[str] = []
    action_item: str = ""

    model_config = CAMEL_CONFIG


class SkillGapAnalysis(BaseModel):
    match_score: float = 0
    missing_skills: list[str] = []
    strong_skills: list[str] = []
    learning_path: list[LearningStep] = []

    model_config = CAMEL_CONFIG
