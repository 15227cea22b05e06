"""Resume Writer - Generates a Markdown resume from the user profile."""

from __future__ import annotations

import logging

from career_assistant.clients.llm_client import LLMClient
from career_assistant.models.profile import UserProfile
from career_assistant.prompts.builders import build_resume_request

logger = logging.getLogger(__name__)


class ResumeWriter:
    def __init__(self, llm: LLMClient, temperature: float = 0.4):
        self.llm = llm
        self.temperature = temperature

    async def generate(self, profile: UserProfile, language: str = "English") -> str:
        """Return the resume as Markdown text, unmodified from the model."""
        logger.info("Generating %s resume for %s", language, profile.name or "<unnamed>")
        request = build_resume_request(profile, language, temperature=self.temperature)
        result = await self.llm.generate(request)
        return result.text
