"""Tests for the profile command of the CLI."""

import pytest
from typer.testing import CliRunner

from career_assistant import cli
from career_assistant.state.store import StateStore

runner = CliRunner()


@pytest.fixture
def store(tmp_path, monkeypatch):
    store = StateStore(db_path=tmp_path / "state.db")
    monkeypatch.setattr(cli, "_store", lambda: store)
    return store


def test_profile_edits_are_saved(store):
    result = runner.invoke(
        cli.app,
        ["profile", "--name", "Jane Doe", "--target-role", "Data Analyst", "--skills", "SQL, Python,"],
    )

    assert result.exit_code == 0
    profile = store.load().profile
    assert profile.name == "Jane Doe"
    assert profile.target_role == "Data Analyst"
    assert profile.skills == ["SQL", "Python"]


def test_profile_without_options_changes_nothing(store):
    runner.invoke(cli.app, ["profile", "--email", "jane@example.com"])

    result = runner.invoke(cli.app, ["profile"])

    assert result.exit_code == 0
    assert store.load().profile.email == "jane@example.com"
    assert store.load().profile.name == ""
