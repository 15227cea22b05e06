"""Prompt builders, one per generation operation.

Every builder is pure: it only assembles a GenerationRequest from its
arguments. Resume and job-description text is truncated here, before the
prompt is put together.
"""

from __future__ import annotations

import json
from collections.abc import Sequence

from career_assistant.models.generation import (
    ContentPart,
    FilePart,
    GenerationRequest,
    Operation,
    TextPart,
)
from career_assistant.models.interview import Speaker, Turn
from career_assistant.models.profile import UserProfile
from career_assistant.models.resume_input import FileResume, ResumeInput, TextResume
from career_assistant.prompts.schemas import ATS_SCHEMA, PROFILE_SCHEMA, SKILL_GAP_SCHEMA

JD_MAX_CHARS = 3000
RESUME_MAX_CHARS = 5000

RESUME_PROMPT = """\
You are an expert resume writer. Create a professional, ATS-friendly resume \
in Markdown format for the profile below.
Language: {language}.

Structure it with clear headers: # Name, ## Summary, ## Skills, ## Experience, \
## Projects, ## Education.
Use strong action verbs and highlight achievements. Only use facts present in \
the profile; do not invent experience.

Profile Data: {profile}"""

PARSE_PROMPT = """\
Analyze the provided resume and extract the following information into a \
structured JSON object:
- name, email, phone
- education: list of {degree, institution, year, score}
- experience: list of {role, company, duration, description}
- skills: list of strings
- projects: list of {title, description, techStack}
- targetRole: infer it from the experience or summary if not explicit

If a field is not found, leave it as an empty string or an empty list."""

ATS_PROMPT = """\
Act as an algorithmic ATS (Applicant Tracking System) scanner.
Compare the resume provided (in the attachment or text) against the job \
description below.

SCORING RUBRIC (follow strictly so identical input gets an identical score):
1. Keyword matching (40%): key technical skills and nouns from the job \
description present in the resume.
2. Experience relevance (30%): job titles, seniority and industry experience.
3. Formatting and structure (15%): clear sections, standard headers, readability.
4. Education and soft skills (15%): required degrees and soft skills.

Be objective. If the input is the same, the score MUST be the same.

Job Description: {job_description}

Return a JSON object strictly following the schema."""

SKILL_GAP_PROMPT = """\
Analyze the skill gap for a user who wants to become a "{target_role}".
Current Skills: {skills}.

Identify the missing critical skills and the skills that are already strong, \
assign a match score from 0 to 100, and create a 4-week learning path with \
one topic, resources and a concrete action item per week."""

INTERVIEW_SYSTEM = """\
You are a professional interviewer conducting an interview for the role of {role}.
Ask one relevant question at a time.
Evaluate the candidate's previous answer briefly before moving to the next question.
Keep the tone professional but encouraging.
If the candidate asks for feedback, give it."""

_SPEAKER_LABELS = {Speaker.USER: "Candidate", Speaker.MODEL: "Interviewer"}


def truncate(text: str, limit: int) -> str:
    """Keep the first ``limit`` characters of ``text``."""
    return text[:limit]


def build_resume_request(
    profile: UserProfile,
    language: str = "English",
    *,
    temperature: float = 0.4,
) -> GenerationRequest:
    profile_json = json.dumps(profile.model_dump(by_alias=True), ensure_ascii=False)
    prompt = RESUME_PROMPT.format(language=language, profile=profile_json)
    return GenerationRequest(
        operation=Operation.GENERATE_RESUME,
        parts=[TextPart(prompt)],
        temperature=temperature,
    )


def _resume_parts(
    resume: ResumeInput,
    instructions: str,
    label: str,
    max_chars: int | None = None,
) -> list[ContentPart]:
    """Order parts so a file precedes the instructions and text follows them."""
    if isinstance(resume, FileResume):
        return [FilePart(resume.media_type, resume.data), TextPart(instructions)]
    if isinstance(resume, TextResume):
        text = resume.text if max_chars is None else truncate(resume.text, max_chars)
        return [TextPart(instructions), TextPart(f"{label}: {text}")]
    raise TypeError(f"Unknown resume input: {type(resume).__name__}")


def build_parse_request(resume: ResumeInput) -> GenerationRequest:
    return GenerationRequest(
        operation=Operation.PARSE_RESUME,
        parts=_resume_parts(resume, PARSE_PROMPT, "Resume Text"),
        temperature=0.0,
        schema=PROFILE_SCHEMA,
    )


def build_ats_request(
    resume: ResumeInput,
    job_description: str,
    *,
    jd_max_chars: int = JD_MAX_CHARS,
    resume_max_chars: int = RESUME_MAX_CHARS,
) -> GenerationRequest:
    instructions = ATS_PROMPT.format(
        job_description=truncate(job_description, jd_max_chars)
    )
    return GenerationRequest(
        operation=Operation.SCORE_ATS,
        parts=_resume_parts(resume, instructions, "Resume Content", resume_max_chars),
        temperature=0.0,
        schema=ATS_SCHEMA,
    )


def build_skill_gap_request(skills: Sequence[str], target_role: str) -> GenerationRequest:
    prompt = SKILL_GAP_PROMPT.format(target_role=target_role, skills=", ".join(skills))
    return GenerationRequest(
        operation=Operation.SKILL_GAP,
        parts=[TextPart(prompt)],
        temperature=0.0,
        schema=SKILL_GAP_SCHEMA,
    )


def build_interview_request(
    role: str,
    history: Sequence[Turn],
    message: str,
    *,
    temperature: float = 0.3,
) -> GenerationRequest:
    """Build one interview exchange from the prior turns and the new answer."""
    parts: list[ContentPart] = [
        TextPart(f"{_SPEAKER_LABELS[turn.speaker]}: {turn.text}") for turn in history
    ]
    parts.append(TextPart(f"{_SPEAKER_LABELS[Speaker.USER]}: {message}"))
    return GenerationRequest(
        operation=Operation.INTERVIEW_TURN,
        parts=parts,
        temperature=temperature,
        system=INTERVIEW_SYSTEM.format(role=role),
    )
