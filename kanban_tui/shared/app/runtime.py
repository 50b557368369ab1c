"""Runtime configuration for kanban-tui."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass
class RuntimeConfig:
    """Runtime configuration provided by CLI, environment or tests."""

    settings_path: Path | None = None
    debug_mode: bool = False
    debug_log_path: Path | None = None
    initial_mode: str | None = None

    @classmethod
    def from_env(cls) -> RuntimeConfig:
        def _parse_bool(value: str | None, default: bool) -> bool:
            if value is None or not value.strip():
                return default
            return value.strip().lower() in {"1", "true", "yes", "on"}

        def _parse_path(value: str | None) -> Path | None:
            if value is None or not value.strip():
                return None
            return Path(value.strip()).expanduser()

        debug_log_path = _parse_path(os.environ.get("KANBAN_TUI_DEBUG_LOG"))
        return cls(
            settings_path=_parse_path(os.environ.get("KANBAN_TUI_SETTINGS_PATH")),
            debug_mode=_parse_bool(os.environ.get("KANBAN_TUI_DEBUG"), False) or debug_log_path is not None,
            debug_log_path=debug_log_path,
            initial_mode=os.environ.get("KANBAN_TUI_MODE", "").strip() or None,
        )
