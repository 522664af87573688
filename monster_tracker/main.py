from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

from PySide6.QtWidgets import QApplication

from monster_tracker.core import ConfigError, MonsterController, TrackerConfig, load_config
from monster_tracker.ui import MainWindow


def create_application(argv: Sequence[str]) -> QApplication:
    app = QApplication.instance() or QApplication(list(argv))
    app.setApplicationName("Monster Tracker")
    return app


def parse_args(argv: Sequence[str]) -> tuple[argparse.Namespace, list[str]]:
    parser = argparse.ArgumentParser(description="Monster Tracker GUI")
    parser.add_argument(
        "--config",
        type=str,
        help="Path to a JSON file with configuration overrides",
    )
    parser.add_argument(
        "--title",
        type=str,
        help="Window title (overrides the configuration file)",
    )
    return parser.parse_known_args(argv)


def build_config(args: argparse.Namespace) -> TrackerConfig:
    if args.config:
        config = load_config(Path(args.config).expanduser().resolve())
    else:
        config = TrackerConfig()
    if args.title:
        config.window.title = args.title
    return config


def split_argv(argv: Sequence[str]) -> tuple[argparse.Namespace, list[str]]:
    program = list(argv[:1]) or ["monster-tracker"]
    args, qt_args = parse_args(list(argv[1:]))
    return args, [*program, *qt_args]


def main(argv: Sequence[str] | None = None) -> int:
    argv = list(argv if argv is not None else sys.argv)
    args, qt_argv = split_argv(argv)

    try:
        config = build_config(args)
    except ConfigError as exc:
        print(f"monster-tracker: invalid configuration: {exc}", file=sys.stderr)
        return 2

    app = create_application(qt_argv)
    controller = MonsterController()
    window = MainWindow(controller, config)
    window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
