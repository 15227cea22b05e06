"""Error taxonomy for the generation layer."""

from __future__ import annotations


class CareerAssistantError(Exception):
    """Base class for all errors raised by career_assistant."""


class MissingInput(CareerAssistantError):
    """Raised when a required field, file or resume is absent."""


class UnsupportedFormat(CareerAssistantError):
    """Raised when an uploaded resume is neither PDF nor plain text."""


class FileReadError(CareerAssistantError):
    """Raised when a local resume file cannot be read or decoded."""


class GenerationError(CareerAssistantError):
    """Raised when the remote generation call fails.

    The upstream exception is kept on ``cause`` for logging.
    """

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.cause = cause


class MalformedResponse(CareerAssistantError):
    """A schema-bound response that is not a JSON object.

    Recovered locally by the response normalizer and never raised past it.
    """


class SessionNotStarted(CareerAssistantError):
    """Raised when an interview turn is submitted before ``start``."""


class SessionBusy(CareerAssistantError):
    """Raised when an interview turn is submitted while another is in flight."""
