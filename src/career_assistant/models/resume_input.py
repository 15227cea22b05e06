"""The two shapes a resume can take on its way to the model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class TextResume:
    text: str


@dataclass(frozen=True)
class FileResume:
    media_type: str
    data: str  # base64


ResumeInput = Union[TextResume, FileResume]
