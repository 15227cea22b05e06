"""Request/response contract between the services and the generation client."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union


class Operation(str, Enum):
    GENERATE_RESUME = "generate_resume"
    PARSE_RESUME = "parse_resume"
    SCORE_ATS = "score_ats"
    SKILL_GAP = "skill_gap"
    INTERVIEW_TURN = "interview_turn"


@dataclass(frozen=True)
class TextPart:
    text: str


@dataclass(frozen=True)
class FilePart:
    """Binary payload sent inline, base64 encoded."""

    media_type: str
    data: str


ContentPart = Union[TextPart, FilePart]


@dataclass(frozen=True)
class GenerationRequest:
    """A single call to the generation capability.

    ``temperature`` 0 asks for repeatable output; higher values allow
    stylistic variation. When ``schema`` is set the model is constrained to
    emit JSON of that shape.
    """

    operation: Operation
    parts: list[ContentPart]
    temperature: float = 0.0
    schema: dict[str, Any] | None = None
    system: str = ""

    def __post_init__(self) -> None:
        if not 0.0 <= self.temperature <= 1.0:
            raise ValueError(f"temperature must be between 0 and 1, got {self.temperature}")

    @property
    def structured(self) -> bool:
        return self.schema is not None


@dataclass
class GenerationResult:
    """Raw text returned by the model plus usage metadata."""

    text: str
    input_tokens: int = 0
    output_tokens: int = 0
    metadata: dict[str, Any] = field(default_factory=dict)
