"""Models for interview conversation turns."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class Speaker(str, Enum):
    USER = "user"
    MODEL = "model"


class Turn(BaseModel):
    speaker: Speaker
    text: str

    model_config = {"frozen": True}
