from pathlib import Path
import sys

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


class ScriptedConsole:
    """Feeds canned answers to prompts and records everything shown."""

    def __init__(self, *answers: str) -> None:
        self._answers = iter(answers)
        self.prompts: list[str] = []
        self.messages: list[str] = []

    def ask(self, prompt: str) -> str:
        self.prompts.append(prompt)
        try:
            return next(self._answers)
        except StopIteration:
            raise EOFError("script exhausted") from None

    def say(self, message: str) -> None:
        self.messages.append(message)

    @property
    def output(self) -> str:
        return "\n".join(self.messages)


@pytest.fixture
def console():
    return ScriptedConsole
