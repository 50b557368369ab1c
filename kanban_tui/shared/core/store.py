"""JSON file persistence shared by settings stores."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from kanban_tui.shared.core.debug_events import emit_debug_event


def _resolve_config_dir() -> Path:
    override = os.environ.get("KANBAN_TUI_CONFIG_DIR", "").strip()
    if override:
        return Path(override).expanduser()
    return Path.home() / ".kanban_tui"


CONFIG_DIR = _resolve_config_dir()


class JSONFileStore:
    """Base class for stores persisted as a single JSON document."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.exists()

    def _read_json(self) -> Any | None:
        """Read the JSON document, or None if it is missing or unreadable."""
        if not self._path.exists():
            return None
        try:
            return json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            emit_debug_event(
                "settings.read_failed",
                category="settings",
                level=logging.WARNING,
                path=str(self._path),
                error=str(exc),
            )
            return None

    def _write_json(self, data: Any) -> None:
        """Write the JSON document atomically."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{self._path.name}.", dir=self._path.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(data, handle, indent=2)
                handle.write("\n")
            os.replace(tmp_name, self._path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
