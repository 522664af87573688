from __future__ import annotations

import pytest

from monster_tracker.core import MonsterController, TrackerConfig
from monster_tracker.ui import MainWindow, QtDialogService


@pytest.fixture
def window(qapp, controller):
    win = MainWindow(controller, TrackerConfig())
    yield win
    win.close()
    win.deleteLater()


def _create(window: MainWindow, name: str, life: str) -> None:
    window.name_field.setText(name)
    window.life_field.setText(life)
    window.create_button.click()


def test_keeps_injected_dialogs(window, dialogs) -> None:
    assert window.controller.dialogs is dialogs


def test_installs_qt_dialogs_when_missing(qapp) -> None:
    controller = MonsterController()
    win = MainWindow(controller)
    assert isinstance(controller.dialogs, QtDialogService)
    win.close()


def test_window_configuration(window) -> None:
    assert window.windowTitle() == "Monster Tracker RPG"
    assert not window.apply_button.isEnabled()
    assert not window.remove_button.isEnabled()
    assert not window.clone_button.isEnabled()
    assert window.clear_button.isEnabled()


def test_create_updates_list_and_clears_fields(window) -> None:
    _create(window, "Goblin", "10")
    assert window.monster_list.count() == 1
    assert window.monster_list.item(0).text() == "Goblin - Life: 10"
    assert window.name_field.text() == ""
    assert window.life_field.text() == ""
    assert window.status_label.text() == "Monster created: Goblin"


def test_invalid_create_keeps_fields(window, dialogs) -> None:
    _create(window, "Goblin", "lots")
    assert window.monster_list.count() == 0
    assert window.life_field.text() == "lots"
    assert dialogs.errors == ["Life should be a positive integer number!"]


def test_selection_enables_actions_and_apply_clears_it(window) -> None:
    _create(window, "Goblin", "10")
    window.monster_list.setCurrentRow(0)
    assert window.controller.selection == 0
    assert window.apply_button.isEnabled()

    window.amount_field.setText("-3")
    window.apply_button.click()

    assert window.monster_list.item(0).text() == "Goblin - Life: 7"
    assert window.amount_field.text() == ""
    assert not window.monster_list.selectedItems()
    assert not window.apply_button.isEnabled()


def test_remove_and_clone_through_buttons(window, dialogs) -> None:
    _create(window, "Orc", "20")
    window.monster_list.setCurrentRow(0)
    dialogs.prompt_answers.append("Orc2")
    window.clone_button.click()
    assert [window.monster_list.item(i).text() for i in range(window.monster_list.count())] == [
        "Orc - Life: 20",
        "Orc2 - Life: 20",
    ]

    window.monster_list.setCurrentRow(1)
    window.remove_button.click()
    assert window.monster_list.count() == 1
    assert window.status_label.text() == "Monster removed: Orc2"


def test_clear_button_with_confirmation(window, dialogs) -> None:
    _create(window, "Orc", "20")
    dialogs.confirm_answers.append(True)
    window.clear_button.click()
    assert window.monster_list.count() == 0
    assert "All monsters have been removed." in window.log_output.toPlainText()
