"""ATS Checker - Scores a resume against a job description."""

from __future__ import annotations

import logging

from career_assistant.clients.llm_client import LLMClient
from career_assistant.errors import GenerationError, MissingInput
from career_assistant.models.analysis import ATSAnalysis
from career_assistant.models.resume_input import ResumeInput
from career_assistant.normalizer import normalize_ats
from career_assistant.prompts.builders import JD_MAX_CHARS, RESUME_MAX_CHARS, build_ats_request

logger = logging.getLogger(__name__)


def failed_analysis() -> ATSAnalysis:
    """Result returned when the upstream call fails."""
    return ATSAnalysis(
        score=0,
        missing_keywords=[],
        formatting_issues=[],
        content_suggestions=["System Error: Could not process file."],
        summary="Analysis failed. Please ensure the resume is a readable PDF or Text file.",
    )


class ATSChecker:
    def __init__(
        self,
        llm: LLMClient,
        *,
        jd_max_chars: int = JD_MAX_CHARS,
        resume_max_chars: int = RESUME_MAX_CHARS,
        clamp_scores: bool = False,
    ):
        self.llm = llm
        self.jd_max_chars = jd_max_chars
        self.resume_max_chars = resume_max_chars
        self.clamp_scores = clamp_scores

    async def analyze(self, resume: ResumeInput, job_description: str) -> ATSAnalysis:
        """Score the resume; generation failures degrade to failed_analysis()."""
        if not job_description or not job_description.strip():
            raise MissingInput("Job description is empty")

        request = build_ats_request(
            resume,
            job_description,
            jd_max_chars=self.jd_max_chars,
            resume_max_chars=self.resume_max_chars,
        )
        try:
            result = await self.llm.generate(request)
        except GenerationError as exc:
            logger.warning("ATS analysis failed: %s", exc.cause or exc)
            return failed_analysis()

        analysis = normalize_ats(result.text, clamp_scores=self.clamp_scores)
        logger.info("ATS score: %s", analysis.score)
        return analysis
