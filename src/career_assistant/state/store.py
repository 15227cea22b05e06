"""SQLite-backed key/value store for application state."""

from __future__ import annotations

import json
import logging
import sqlite3
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from career_assistant.models.profile import UserProfile
from career_assistant.state.app_state import AppSettings, AppState

logger = logging.getLogger(__name__)

DEFAULT_DB_PATH = Path.home() / ".career-assistant" / "state.db"

PROFILE_KEY = "cv_profile"
SETTINGS_KEY = "app_settings"
SAVED_JOBS_KEY = "saved_jobs"

_SAVED_JOBS = TypeAdapter(list[str])


class StateStore:
    """Persists AppState as JSON blobs under fixed keys.

    State is read once with ``load()`` and written back with ``save()``;
    nothing else touches the database.
    """

    def __init__(self, db_path: str | Path = DEFAULT_DB_PATH):
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._init_db()

    def _connect(self) -> sqlite3.Connection:
        return sqlite3.connect(str(self.db_path))

    def _init_db(self) -> None:
        with self._connect() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS app_state (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL
                )
            """)

    def _read(self) -> dict[str, str]:
        with self._connect() as conn:
            rows = conn.execute("SELECT key, value FROM app_state").fetchall()
        return dict(rows)

    def load(self) -> AppState:
        """Load state, falling back to defaults per key for missing or invalid blobs."""
        raw = self._read()
        state = AppState()
        if PROFILE_KEY in raw:
            try:
                state.profile = UserProfile.model_validate_json(raw[PROFILE_KEY])
            except ValidationError:
                logger.warning("Stored profile is invalid, using an empty profile")
        if SETTINGS_KEY in raw:
            try:
                state.settings = AppSettings.model_validate_json(raw[SETTINGS_KEY])
            except ValidationError:
                logger.warning("Stored settings are invalid, using defaults")
        if SAVED_JOBS_KEY in raw:
            try:
                state.saved_jobs = _SAVED_JOBS.validate_json(raw[SAVED_JOBS_KEY])
            except ValidationError:
                logger.warning("Stored saved jobs are invalid, starting empty")
        return state

    def save(self, state: AppState) -> None:
        blobs = {
            PROFILE_KEY: state.profile.model_dump_json(by_alias=True),
            SETTINGS_KEY: state.settings.model_dump_json(),
            SAVED_JOBS_KEY: json.dumps(state.saved_jobs),
        }
        with self._connect() as conn:
            conn.executemany(
                "INSERT OR REPLACE INTO app_state (key, value) VALUES (?, ?)",
                blobs.items(),
            )

    def clear(self) -> int:
        """Delete all stored state. Returns count of deleted rows."""
        with self._connect() as conn:
            cursor = conn.execute("DELETE FROM app_state")
            return cursor.rowcount
