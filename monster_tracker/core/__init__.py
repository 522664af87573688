# SPDX-License-Identifier: MIT
"""
Core record store, controller and configuration for the tracker GUI.
"""

from .config import (
    ConfigError,
    ListConfig,
    LogConfig,
    TrackerConfig,
    WindowConfig,
    load_config,
)  # noqa: F401
from .controller import FormState, MonsterController  # noqa: F401
from .dialogs import DialogService  # noqa: F401
from .errors import ValidationError  # noqa: F401
from .monster import Monster, parse_int  # noqa: F401
from .store import MonsterStore  # noqa: F401
