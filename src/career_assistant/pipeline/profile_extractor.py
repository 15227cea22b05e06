"""Profile Extractor - Parses a resume into a structured profile."""

from __future__ import annotations

import logging

from career_assistant.clients.llm_client import LLMClient
from career_assistant.models.profile import ParsedProfile
from career_assistant.models.resume_input import ResumeInput
from career_assistant.normalizer import normalize_profile
from career_assistant.prompts.builders import build_parse_request

logger = logging.getLogger(__name__)


class ProfileExtractor:
    def __init__(self, llm: LLMClient):
        self.llm = llm

    async def parse(self, resume: ResumeInput) -> ParsedProfile:
        """Extract profile fields from a resume.

        Generation failures propagate as GenerationError; malformed output
        yields an empty but complete profile.
        """
        result = await self.llm.generate(build_parse_request(resume))
        profile = normalize_profile(result.text)
        logger.info(
            "Parsed resume: %d skills, %d experience entries",
            len(profile.skills),
            len(profile.experience),
        )
        return profile
