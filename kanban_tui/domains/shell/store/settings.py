"""Settings store for persisted app preferences."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from kanban_tui.shared.core.store import CONFIG_DIR, JSONFileStore


class SettingsStore(JSONFileStore):
    """Store for app settings (keybindings, default view).

    Settings are stored as a JSON object in ~/.kanban_tui/settings.json.
    """

    _instance: SettingsStore | None = None

    def __init__(self, path: Path | None = None) -> None:
        super().__init__(path or CONFIG_DIR / "settings.json")

    @classmethod
    def get_instance(cls) -> SettingsStore:
        """Get the singleton instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Reset the singleton instance (useful for testing)."""
        cls._instance = None

    def load_all(self) -> dict[str, Any]:
        data = self._read_json()
        if not isinstance(data, dict):
            return {}
        return data

    def save_all(self, settings: dict[str, Any]) -> None:
        self._write_json(settings)

    def get(self, key: str, default: Any = None) -> Any:
        return self.load_all().get(key, default)

    def set(self, key: str, value: Any) -> None:
        settings = self.load_all()
        settings[key] = value
        self.save_all(settings)
