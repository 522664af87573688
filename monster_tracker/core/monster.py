from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import Optional

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_int(text: Optional[str]) -> Optional[int]:
    """Parse an optionally signed run of ASCII digits; None when it is not one."""
    if text is None:
        return None
    stripped = text.strip()
    if not _INT_PATTERN.fullmatch(stripped):
        return None
    return int(stripped)


@dataclass
class Monster:
    name: str
    life: int

    def change_life(self, delta: int) -> int:
        # No floor: life may reach zero or go negative.
        self.life += delta
        return self.life

    def copy(self) -> "Monster":
        return replace(self)

    def renamed(self, name: str) -> "Monster":
        return replace(self, name=name)

    def display_text(self) -> str:
        return f"{self.name} - Life: {self.life}"

    def __str__(self) -> str:
        return self.display_text()
