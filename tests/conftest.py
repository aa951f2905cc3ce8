import io

import pytest
from rich.console import Console

from radixtool.config import Settings
from radixtool.history import HistoryStore


class ScriptedPrompter:
    """Answers prompts from a fixed script, then behaves like a closed stdin."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.messages = []

    def _next(self, message):
        self.messages.append(message)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)

    def select(self, message, choices):
        answer = self._next(message)
        assert answer in choices, f"{answer!r} is not offered by {message!r}"
        return answer

    def ask(self, message):
        return self._next(message)


@pytest.fixture
def history_store(tmp_path):
    """A history store backed by a file in a fresh temp directory."""
    return HistoryStore(tmp_path / "data" / "history.json")


@pytest.fixture
def console():
    """A console that writes plain text to an in-memory buffer."""
    return Console(file=io.StringIO(), width=120, color_system=None)


@pytest.fixture
def settings(tmp_path):
    """Settings with the animations turned off."""
    return Settings(
        history_path=tmp_path / "history.json",
        typing_delay=0,
        fade_steps=1,
        fade_delay=0,
    )


@pytest.fixture
def prompter_factory():
    return ScriptedPrompter
