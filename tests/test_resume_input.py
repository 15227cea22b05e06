"""Tests for resume input normalization."""

import base64

import pytest

from career_assistant.errors import FileReadError, MissingInput, UnsupportedFormat
from career_assistant.models.resume_input import FileResume, TextResume
from career_assistant.parsers.resume_input import (
    detect_media_type,
    from_text,
    from_upload,
    read_resume_file,
)


class TestFromText:
    def test_wraps_text(self):
        assert from_text("Jane Doe, 5 years React experience") == TextResume(
            "Jane Doe, 5 years React experience"
        )

    @pytest.mark.parametrize("text", ["", "   \n\t", None])
    def test_blank_text_rejected(self, text):
        with pytest.raises(MissingInput):
            from_text(text)


class TestDetectMediaType:
    def test_pdf_by_media_type(self):
        assert detect_media_type("resume", "application/pdf") == "application/pdf"

    def test_pdf_by_extension(self):
        assert detect_media_type("Resume.PDF", "application/octet-stream") == "application/pdf"

    def test_text_by_extension(self):
        assert detect_media_type("resume.txt") == "text/plain"

    def test_image_rejected(self):
        with pytest.raises(UnsupportedFormat):
            detect_media_type("photo.png", "image/png")


class TestFromUpload:
    def test_pdf_is_base64_encoded(self):
        data = b"%PDF-1.7 fake"
        result = from_upload(data, "resume.pdf", "application/pdf")
        assert isinstance(result, FileResume)
        assert result.media_type == "application/pdf"
        assert base64.b64decode(result.data) == data

    def test_text_file_is_decoded(self):
        result = from_upload("Jane Doe\nPython".encode("utf-8"), "resume.txt", "text/plain")
        assert result == TextResume("Jane Doe\nPython")

    def test_bom_is_stripped(self):
        result = from_upload("\ufeffJane".encode("utf-8"), "resume.txt")
        assert result == TextResume("Jane")

    def test_undecodable_text_file(self):
        with pytest.raises(FileReadError):
            from_upload(b"\xff\xfe\xfa", "resume.txt")

    def test_empty_text_file(self):
        with pytest.raises(MissingInput):
            from_upload(b"  \n", "resume.txt")

    def test_no_file_selected(self):
        with pytest.raises(MissingInput):
            from_upload(None, "")

    def test_docx_unsupported(self):
        with pytest.raises(UnsupportedFormat):
            from_upload(b"PK", "resume.docx")


class TestReadResumeFile:
    async def test_reads_pdf(self, tmp_path):
        path = tmp_path / "resume.pdf"
        path.write_bytes(b"%PDF-1.4")
        result = await read_resume_file(path)
        assert result == FileResume("application/pdf", base64.b64encode(b"%PDF-1.4").decode())

    async def test_reads_text(self, tmp_path, sample_resume_text):
        path = tmp_path / "resume.txt"
        path.write_text(sample_resume_text, encoding="utf-8")
        result = await read_resume_file(path)
        assert result == TextResume(sample_resume_text)

    async def test_missing_file(self, tmp_path):
        with pytest.raises(FileReadError):
            await read_resume_file(tmp_path / "nope.pdf")

    async def test_unsupported_checked_before_read(self, tmp_path):
        with pytest.raises(UnsupportedFormat):
            await read_resume_file(tmp_path / "nope.png")

    async def test_no_path(self):
        with pytest.raises(MissingInput):
            await read_resume_file(None)
