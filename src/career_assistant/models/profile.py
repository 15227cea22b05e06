"""Pydantic models for the user profile."""

from __future__ import annotations

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

CAMEL_CONFIG = {"alias_generator": to_camel, "populate_by_name": True}


class Education(BaseModel):
    degree: str = ""
    institution: str = ""
    year: str = ""
    score: str = ""

    model_config = CAMEL_CONFIG


class Experience(BaseModel):
    role: str = ""
    company: str = ""
    duration: str = ""
    description: str = ""

    model_config = CAMEL_CONFIG


class Project(BaseModel):
    title: str = ""
    description: str = ""
    tech_stack: str = ""  # comma separated, as typed by the user

    model_config = CAMEL_CONFIG


class UserProfile(BaseModel):
    name: str = ""
    email: str = ""
    phone: str = ""
    target_role: str = ""
    education: list[Education] = []
    experience: list[Experience] = []
    skills: list[str] = []  # duplicates tolerated, order preserved
    projects: list[Project] = []

    model_config = CAMEL_CONFIG


class ParsedProfile(UserProfile):
    """Profile extracted from a resume; every field is always populated."""
