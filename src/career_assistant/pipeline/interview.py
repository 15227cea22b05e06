"""Mock interview session held in memory for the length of one interview."""

from __future__ import annotations

import asyncio
import logging

from career_assistant.clients.llm_client import LLMClient
from career_assistant.errors import GenerationError, MissingInput, SessionBusy, SessionNotStarted
from career_assistant.models.interview import Speaker, Turn
from career_assistant.prompts.builders import build_interview_request

logger = logging.getLogger(__name__)

DEFAULT_ROLE = "Software Engineer"
EMPTY_REPLY = "I couldn't generate a response."


def opening_line(profile_name: str, target_role: str) -> str:
    name = profile_name.strip() or "there"
    role = target_role.strip() or "a role"
    return (
        f"Hello {name}! I am your AI interviewer. I see you are applying for {role}. "
        "Shall we begin with a brief introduction about yourself?"
    )


class InterviewSession:
    """Ordered, append-only interview turns plus the role being interviewed for.

    Only one ``submit`` may be in flight at a time; a concurrent call is
    rejected with SessionBusy rather than queued.
    """

    def __init__(self, llm: LLMClient, *, temperature: float = 0.3):
        self.llm = llm
        self.temperature = temperature
        self.role: str | None = None
        self._turns: list[Turn] = []
        self._epoch = 0
        self._lock = asyncio.Lock()

    @property
    def active(self) -> bool:
        return self.role is not None

    @property
    def turns(self) -> tuple[Turn, ...]:
        return tuple(self._turns)

    @property
    def busy(self) -> bool:
        return self._lock.locked()

    def start(self, profile_name: str, target_role: str) -> Turn:
        """Reset the session to a single opening turn. Makes no network call."""
        if self.busy:
            raise SessionBusy("Cannot restart while a turn is in flight")
        self.role = target_role.strip() or DEFAULT_ROLE
        opening = Turn(speaker=Speaker.MODEL, text=opening_line(profile_name, target_role))
        self._turns = [opening]
        self._epoch += 1
        logger.info("Interview started for role %s", self.role)
        return opening

    async def submit(self, user_text: str) -> Turn:
        """Send the candidate's answer and return the interviewer's reply."""
        if not user_text or not user_text.strip():
            raise MissingInput("Answer is empty")
        if not self.active:
            raise SessionNotStarted("Call start() before submitting answers")
        if self.busy:
            raise SessionBusy("Another answer is still being processed")

        async with self._lock:
            epoch = self._epoch
            history = list(self._turns)
            self._turns.append(Turn(speaker=Speaker.USER, text=user_text))
            request = build_interview_request(
                self.role, history, user_text, temperature=self.temperature
            )
            try:
                result = await self.llm.generate(request)
            except GenerationError:
                # Drop the unanswered turn so the caller can resubmit it.
                if epoch == self._epoch:
                    self._turns.pop()
                raise

            reply = Turn(speaker=Speaker.MODEL, text=result.text or EMPTY_REPLY)
            if epoch == self._epoch:
                self._turns.append(reply)
            else:
                logger.info("Interview reset while waiting; reply discarded")
            return reply

    def end(self) -> None:
        """Discard the session; nothing is persisted."""
        self.role = None
        self._turns = []
        self._epoch += 1
