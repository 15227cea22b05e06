"""Data models for the career assistant."""

from career_assistant.models.analysis import ATSAnalysis, LearningStep, SkillGapAnalysis
from career_assistant.models.generation import (
    ContentPart,
    FilePart,
    GenerationRequest,
    GenerationResult,
    Operation,
    TextPart,
)
from career_assistant.models.interview import Speaker, Turn
from career_assistant.models.job import Job
from career_assistant.models.profile import (
    Education,
    Experience,
    ParsedProfile,
    Project,
    UserProfile,
)
from career_assistant.models.resume_input import FileResume, ResumeInput, TextResume

__all__ = [
    "ATSAnalysis",
    "ContentPart",
    "Education",
    "Experience",
    "FilePart",
    "FileResume",
    "GenerationRequest",
    "GenerationResult",
    "Job",
    "LearningStep",
    "Operation",
    "ParsedProfile",
    "Project",
    "ResumeInput",
    "SkillGapAnalysis",
    "Speaker",
    "TextPart",
    "TextResume",
    "Turn",
    "UserProfile",
]
