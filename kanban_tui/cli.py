#!/usr/bin/env python3
"""kanban-tui - A terminal kanban board."""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path

from kanban_tui.core.ui_mode import UiMode
from kanban_tui.domains.shell.app.keybinding_manager import parse_mode
from kanban_tui.shared.app import RuntimeConfig


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kanban-tui",
        description="A terminal kanban board",
    )
    parser.add_argument(
        "--mode",
        "-m",
        metavar="MODE",
        help='Start in MODE: a screen label such as "Title and Body", or a layout number 1-9',
    )
    parser.add_argument(
        "--list-modes",
        action="store_true",
        help="List the board layouts with their numeric shortcuts and exit",
    )
    parser.add_argument(
        "--settings",
        metavar="PATH",
        help="Path to the settings JSON file",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Record debug events (see --debug-log)",
    )
    parser.add_argument(
        "--debug-log",
        metavar="PATH",
        help="Append debug events to PATH as JSON lines",
    )
    return parser


def format_view_modes() -> str:
    return "\n".join(f"{index}  {label}" for index, label in enumerate(UiMode.view_modes_as_strings(), start=1))


def main(argv: list[str] | None = None) -> int:
    """Entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.list_modes:
        print(format_view_modes())
        return 0

    runtime = RuntimeConfig.from_env()
    if args.settings:
        runtime = replace(runtime, settings_path=Path(args.settings).expanduser())
    if args.debug or args.debug_log:
        runtime = replace(
            runtime,
            debug_mode=True,
            debug_log_path=Path(args.debug_log).expanduser() if args.debug_log else runtime.debug_log_path,
        )
    if args.mode:
        if parse_mode(args.mode) is None:
            print(f"Unknown mode {args.mode!r}; using the saved default view.", file=sys.stderr)
        else:
            runtime = replace(runtime, initial_mode=args.mode)

    from kanban_tui.domains.shell.app.main import KanbanApp

    KanbanApp(runtime=runtime).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
