"""Skill Gap Analyzer - Compares current skills with a target role."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from career_assistant.clients.llm_client import LLMClient
from career_assistant.errors import MissingInput
from career_assistant.models.analysis import SkillGapAnalysis
from career_assistant.normalizer import normalize_skill_gap
from career_assistant.prompts.builders import build_skill_gap_request

logger = logging.getLogger(__name__)


class SkillGapAnalyzer:
    def __init__(self, llm: LLMClient, *, clamp_scores: bool = False):
        self.llm = llm
        self.clamp_scores = clamp_scores

    async def analyze(self, skills: Sequence[str], target_role: str) -> SkillGapAnalysis:
        if not target_role or not target_role.strip():
            raise MissingInput("Target role is empty")

        result = await self.llm.generate(build_skill_gap_request(skills, target_role))
        analysis = normalize_skill_gap(result.text, clamp_scores=self.clamp_scores)
        logger.info(
            "Skill gap for %s: match %s, %d missing",
            target_role,
            analysis.match_score,
            len(analysis.missing_skills),
        )
        return analysis
