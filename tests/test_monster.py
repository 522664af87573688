from __future__ import annotations

import pytest

from monster_tracker.core.monster import Monster, parse_int


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("10", 10),
        (" 7 ", 7),
        ("-3", -3),
        ("+5", 5),
        ("0", 0),
        ("", None),
        ("   ", None),
        ("1.5", None),
        ("ten", None),
        ("1_000", None),
        ("--2", None),
        (None, None),
    ],
)
def test_parse_int(text, expected) -> None:
    assert parse_int(text) == expected


def test_change_life_has_no_floor() -> None:
    monster = Monster("Slime", 2)
    assert monster.change_life(-5) == -3
    assert monster.life == -3


def test_copy_is_independent() -> None:
    original = Monster("Orc", 20)
    copied = original.copy()
    copied.change_life(-10)
    copied.name = "Orc2"
    assert original == Monster("Orc", 20)
    assert copied is not original


def test_renamed_keeps_life() -> None:
    original = Monster("Orc", 20)
    clone = original.renamed("Orc2")
    assert clone == Monster("Orc2", 20)
    assert original.name == "Orc"


def test_display_text() -> None:
    assert Monster("Goblin", 10).display_text() == "Goblin - Life: 10"
    assert str(Monster("Ghost", -1)) == "Ghost - Life: -1"
