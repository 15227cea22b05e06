"""Turn pasted text or an uploaded file into a ResumeInput."""

from __future__ import annotations

import asyncio
import base64
import logging
from pathlib import Path

from career_assistant.errors import FileReadError, MissingInput, UnsupportedFormat
from career_assistant.models.resume_input import FileResume, ResumeInput, TextResume

logger = logging.getLogger(__name__)

PDF_MEDIA_TYPE = "application/pdf"
TEXT_MEDIA_TYPE = "text/plain"


def from_text(text: str | None) -> TextResume:
    """Wrap pasted resume text, rejecting blank input."""
    if not text or not text.strip():
        raise MissingInput("Resume text is empty")
    return TextResume(text=text)


def detect_media_type(filename: str, media_type: str | None = None) -> str:
    """Resolve the resume media type from the declared type or the extension."""
    suffix = Path(filename).suffix.lower()
    if media_type == PDF_MEDIA_TYPE or suffix == ".pdf":
        return PDF_MEDIA_TYPE
    if media_type == TEXT_MEDIA_TYPE or suffix == ".txt":
        return TEXT_MEDIA_TYPE
    raise UnsupportedFormat(
        f"Unsupported file type: {media_type or suffix or filename}. Use PDF or TXT."
    )


def from_upload(
    data: bytes | None,
    filename: str,
    media_type: str | None = None,
) -> ResumeInput:
    """Normalize an uploaded file's bytes.

    PDFs are base64 encoded and sent to the model as-is; text files are
    decoded as UTF-8 and sent as text.
    """
    if data is None or not filename:
        raise MissingInput("No resume file selected")

    resolved = detect_media_type(filename, media_type)
    if resolved == PDF_MEDIA_TYPE:
        return FileResume(
            media_type=PDF_MEDIA_TYPE,
            data=base64.b64encode(data).decode("ascii"),
        )

    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise FileReadError(f"Could not decode {filename} as UTF-8") from exc
    return from_text(text.lstrip("\ufeff"))


async def read_resume_file(
    path: str | Path | None,
    media_type: str | None = None,
) -> ResumeInput:
    """Read a resume file from disk without blocking the event loop."""
    if path is None or not str(path).strip():
        raise MissingInput("No resume file selected")

    file_path = Path(path)
    # Reject unsupported types before touching the disk.
    detect_media_type(file_path.name, media_type)
    logger.debug("Reading resume file %s", file_path)
    try:
        data = await asyncio.to_thread(file_path.read_bytes)
    except OSError as exc:
        raise FileReadError(f"Could not read {file_path}: {exc}") from exc
    return from_upload(data, file_path.name, media_type)
