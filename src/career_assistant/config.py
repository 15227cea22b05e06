"""Application configuration loaded from config.yaml."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml


def _check_temperature(name: str, value: float) -> None:
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"{name} must be between 0 and 1, got {value}")


@dataclass(frozen=True)
class GenerationConfig:
    model: str = "claude-haiku-4-5-20251001"
    timeout: int = 60
    max_tokens: int = 8192
    max_attempts: int = 1
    resume_temperature: float = 0.4
    interview_temperature: float = 0.3

    def __post_init__(self) -> None:
        if self.timeout < 1:
            raise ValueError(f"timeout must be >= 1, got {self.timeout}")
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be >= 1, got {self.max_attempts}")
        if self.max_tokens < 1:
            raise ValueError(f"max_tokens must be >= 1, got {self.max_tokens}")
        _check_temperature("resume_temperature", self.resume_temperature)
        _check_temperature("interview_temperature", self.interview_temperature)


@dataclass(frozen=True)
class AnalysisConfig:
    jd_max_chars: int = 3000
    resume_max_chars: int = 5000
    clamp_scores: bool = False

    def __post_init__(self) -> None:
        if self.jd_max_chars < 1:
            raise ValueError(f"jd_max_chars must be >= 1, got {self.jd_max_chars}")
        if self.resume_max_chars < 1:
            raise ValueError(f"resume_max_chars must be >= 1, got {self.resume_max_chars}")


@dataclass(frozen=True)
class StorageConfig:
    db_path: str = "~/.career-assistant/state.db"

    @property
    def resolved_db_path(self) -> Path:
        return Path(self.db_path).expanduser()


@dataclass(frozen=True)
class AppConfig:
    generation: GenerationConfig = field(default_factory=GenerationConfig)
    analysis: AnalysisConfig = field(default_factory=AnalysisConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from YAML file, falling back to defaults."""
    if path is None:
        candidates = [
            Path.cwd() / "config.yaml",
            Path(__file__).resolve().parent.parent.parent / "config.yaml",
        ]
        for c in candidates:
            if c.exists():
                path = c
                break

    raw: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            raw = yaml.safe_load(p.read_text()) or {}

    return AppConfig(
        generation=GenerationConfig(**raw.get("generation", {})),
        analysis=AnalysisConfig(**raw.get("analysis", {})),
        storage=StorageConfig(**raw.get("storage", {})),
    )
