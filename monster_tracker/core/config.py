from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, Tuple


class ConfigError(Exception):
    """Raised when a configuration file cannot be read or parsed."""


@dataclass
class WindowConfig:
    title: str = "Monster Tracker RPG"
    width: int = 420
    height: int = 520
    resizable: bool = False

    def to_tuple(self) -> Tuple[int, int]:
        return self.width, self.height


@dataclass
class ListConfig:
    visible_rows: int = 8


@dataclass
class LogConfig:
    show_event_log: bool = True
    max_lines: int = 200


@dataclass
class TrackerConfig:
    window: WindowConfig = field(default_factory=WindowConfig)
    list: ListConfig = field(default_factory=ListConfig)
    log: LogConfig = field(default_factory=LogConfig)

    def update_from_mapping(self, data: Dict[str, Any]) -> None:
        """
        Merge settings from a nested mapping into the config.

        Unknown sections and keys are ignored. A value whose type differs from
        the field default raises ConfigError before anything is assigned.
        """
        sections = dict(self.iter_sections())
        updates = []
        for section_name, section_values in data.items():
            section = sections.get(section_name)
            if section is None:
                continue
            if not isinstance(section_values, dict):
                continue
            for key, value in section_values.items():
                if not hasattr(section, key):
                    continue
                if not _same_type(getattr(section, key), value):
                    expected = type(getattr(section, key)).__name__
                    raise ConfigError(
                        f"{section_name}.{key}: expected {expected}, got {type(value).__name__}"
                    )
                updates.append((section, key, value))
        for section, key, value in updates:
            setattr(section, key, value)

    def iter_sections(self) -> Iterable[Tuple[str, Any]]:
        yield "window", self.window
        yield "list", self.list
        yield "log", self.log


def _same_type(current: Any, value: Any) -> bool:
    # bool is a subclass of int, so the two are checked apart.
    if isinstance(current, bool) or isinstance(value, bool):
        return isinstance(current, bool) and isinstance(value, bool)
    return isinstance(value, type(current))


def load_config(path: Path) -> TrackerConfig:
    config = TrackerConfig()
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise ConfigError(f"{path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a JSON object")
    try:
        config.update_from_mapping(data)
    except ConfigError as exc:
        raise ConfigError(f"{path}: {exc}") from exc
    return config


DEFAULT_CONFIG = TrackerConfig()
