"""Facade wiring every generation service to one client and config."""

from __future__ import annotations

from collections.abc import Sequence

from career_assistant.clients.llm_client import LLMClient
from career_assistant.config import AppConfig
from career_assistant.models.analysis import ATSAnalysis, SkillGapAnalysis
from career_assistant.models.profile import ParsedProfile, UserProfile
from career_assistant.models.resume_input import ResumeInput
from career_assistant.pipeline.ats_checker import ATSChecker
from career_assistant.pipeline.interview import InterviewSession
from career_assistant.pipeline.profile_extractor import ProfileExtractor
from career_assistant.pipeline.resume_writer import ResumeWriter
from career_assistant.pipeline.skill_gap import SkillGapAnalyzer


class CareerAssistant:
    """Entry point for the UI layers (CLI, tests)."""

    def __init__(self, llm: LLMClient, config: AppConfig | None = None):
        config = config or AppConfig()
        self.llm = llm
        self.config = config
        self.resume_writer = ResumeWriter(
            llm, temperature=config.generation.resume_temperature
        )
        self.profile_extractor = ProfileExtractor(llm)
        self.ats_checker = ATSChecker(
            llm,
            jd_max_chars=config.analysis.jd_max_chars,
            resume_max_chars=config.analysis.resume_max_chars,
            clamp_scores=config.analysis.clamp_scores,
        )
        self.skill_gap = SkillGapAnalyzer(llm, clamp_scores=config.analysis.clamp_scores)

    @classmethod
    def from_config(cls, config: AppConfig, api_key: str | None = None) -> CareerAssistant:
        gen = config.generation
        llm = LLMClient(
            api_key=api_key,
            timeout=gen.timeout,
            model=gen.model,
            max_tokens=gen.max_tokens,
            max_attempts=gen.max_attempts,
        )
        return cls(llm, config)

    async def generate_resume(self, profile: UserProfile, language: str = "English") -> str:
        return await self.resume_writer.generate(profile, language)

    async def parse_resume_profile(self, resume: ResumeInput) -> ParsedProfile:
        return await self.profile_extractor.parse(resume)

    async def analyze_ats(self, resume: ResumeInput, job_description: str) -> ATSAnalysis:
        return await self.ats_checker.analyze(resume, job_description)

    async def analyze_skill_gap(
        self, skills: Sequence[str], target_role: str
    ) -> SkillGapAnalysis:
        return await self.skill_gap.analyze(skills, target_role)

    def start_interview(self, profile_name: str, target_role: str) -> InterviewSession:
        session = InterviewSession(
            self.llm, temperature=self.config.generation.interview_temperature
        )
        session.start(profile_name, target_role)
        return session
