"""Client-side application state: profile, preferences and saved jobs."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from career_assistant.models.profile import ParsedProfile, UserProfile


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"


class AppLanguage(str, Enum):
    ENGLISH = "English"
    HINDI = "Hindi"
    TELUGU = "Telugu"
    TAMIL = "Tamil"


class AppSettings(BaseModel):
    theme: Theme = Theme.LIGHT
    dyslexic_mode: bool = False
    language: AppLanguage = AppLanguage.ENGLISH


class AppState(BaseModel):
    profile: UserProfile = Field(default_factory=UserProfile)
    settings: AppSettings = Field(default_factory=AppSettings)
    saved_jobs: list[str] = []

    def merge_parsed_profile(self, parsed: ParsedProfile) -> UserProfile:
        """Overwrite the profile with data extracted from a resume.

        Non-empty scalar fields replace the current value; list fields are
        always replaced.
        """
        updates = {}
        for field in ("name", "email", "phone", "target_role"):
            value = getattr(parsed, field)
            if value:
                updates[field] = value
        updates.update(
            education=parsed.education,
            experience=parsed.experience,
            skills=parsed.skills,
            projects=parsed.projects,
        )
        self.profile = self.profile.model_copy(update=updates)
        return self.profile

    def edit_profile(self, **fields) -> UserProfile:
        """Apply manual edits. Fields passed as None are left unchanged."""
        updates = {k: v for k, v in fields.items() if v is not None}
        self.profile = UserProfile.model_validate(
            {**self.profile.model_dump(), **updates}
        )
        return self.profile

    def toggle_theme(self) -> Theme:
        self.settings.theme = Theme.DARK if self.settings.theme == Theme.LIGHT else Theme.LIGHT
        return self.settings.theme

    def toggle_dyslexic_mode(self) -> bool:
        self.settings.dyslexic_mode = not self.settings.dyslexic_mode
        return self.settings.dyslexic_mode

    def set_language(self, language: AppLanguage | str) -> AppLanguage:
        self.settings.language = AppLanguage(language)
        return self.settings.language

    def toggle_saved_job(self, job_id: str) -> bool:
        """Save or unsave a job. Returns True when the job is now saved."""
        if job_id in self.saved_jobs:
            self.saved_jobs = [j for j in self.saved_jobs if j != job_id]
            return False
        self.saved_jobs = [*self.saved_jobs, job_id]
        return True
