from __future__ import annotations

import os
from typing import List, Optional, Tuple

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication

from monster_tracker.core import MonsterController


class ScriptedDialogs:
    """DialogService double that answers from queued responses and records calls."""

    def __init__(self) -> None:
        self.errors: List[str] = []
        self.confirmations: List[Tuple[str, str]] = []
        self.prompts: List[Tuple[str, str]] = []
        self.confirm_answers: List[bool] = []
        self.prompt_answers: List[Optional[str]] = []

    def show_validation_error(self, message: str) -> None:
        self.errors.append(message)

    def confirm(self, title: str, question: str) -> bool:
        self.confirmations.append((title, question))
        return self.confirm_answers.pop(0)

    def prompt_text(self, title: str, label: str) -> Optional[str]:
        self.prompts.append((title, label))
        return self.prompt_answers.pop(0)


class SignalRecorder:
    def __init__(self, signal) -> None:
        self.calls: list = []
        signal.connect(self._record)

    def _record(self, *args) -> None:
        self.calls.append(args[0] if len(args) == 1 else args)


@pytest.fixture(scope="session")
def qapp() -> QApplication:
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def dialogs() -> ScriptedDialogs:
    return ScriptedDialogs()


@pytest.fixture
def controller(qapp, dialogs) -> MonsterController:
    return MonsterController(dialogs)


@pytest.fixture
def recorder():
    return SignalRecorder
