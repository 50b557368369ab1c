"""Keybinding and default-view persistence for the shell."""

from __future__ import annotations

import logging
from typing import Any

from kanban_tui.core.keybindings import EditResult, KeyBindings
from kanban_tui.core.keys import Key, KeyParseError
from kanban_tui.core.ui_mode import UiMode
from kanban_tui.shared.core.debug_events import emit_debug_event
from kanban_tui.shared.core.protocols import SettingsStoreProtocol

KEYBINDINGS_SETTINGS_KEY = "keybindings"
DEFAULT_VIEW_SETTINGS_KEY = "default_view"


def parse_mode(value: Any) -> UiMode | None:
    """Parse a stored or user-supplied mode: a display label or a 1-9 shortcut."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return UiMode.from_number(value)
    if not isinstance(value, str):
        return None
    text = value.strip()
    if text.isdigit():
        return UiMode.from_number(int(text))
    return UiMode.from_string(text)


class KeyBindingManager:
    """Centralized keybinding handling for the app."""

    def __init__(self, settings_store: SettingsStoreProtocol | None = None) -> None:
        if settings_store is None:
            from kanban_tui.domains.shell.store.settings import SettingsStore

            settings_store = SettingsStore.get_instance()
        self._settings_store = settings_store
        self._settings: dict[str, Any] = {}

    @property
    def settings_store(self) -> SettingsStoreProtocol:
        return self._settings_store

    def initialize(self) -> dict[str, Any]:
        """Load settings from the store.

        Returns:
            The loaded settings dictionary.
        """
        self._settings = self._settings_store.load_all()
        return self._settings

    def load_keybindings(self, settings: dict[str, Any] | None = None) -> KeyBindings:
        """Build the keybinding table from settings, falling back to defaults."""
        settings = self._settings if settings is None else settings
        raw = settings.get(KEYBINDINGS_SETTINGS_KEY)
        if raw is None:
            return KeyBindings.default()
        if not isinstance(raw, dict):
            emit_debug_event(
                "keybinding.invalid_settings",
                category="keybinding",
                level=logging.WARNING,
                value=type(raw).__name__,
            )
            return KeyBindings.default()
        return KeyBindings.from_dict(raw)

    def load_default_view(self, settings: dict[str, Any] | None = None) -> UiMode:
        """Restore the saved default view, or the default mode if unusable."""
        settings = self._settings if settings is None else settings
        raw = settings.get(DEFAULT_VIEW_SETTINGS_KEY)
        if raw is None:
            return UiMode.default()
        mode = parse_mode(raw)
        if mode is None:
            emit_debug_event(
                "ui_mode.invalid_label",
                category="ui_mode",
                level=logging.WARNING,
                value=repr(raw),
                fallback=str(UiMode.default()),
            )
            return UiMode.default()
        return mode

    def save_keybindings(self, keybindings: KeyBindings) -> None:
        self._update_settings({KEYBINDINGS_SETTINGS_KEY: keybindings.to_dict()})

    def save_default_view(self, mode: UiMode) -> None:
        self._update_settings({DEFAULT_VIEW_SETTINGS_KEY: str(mode)})

    def rebind(self, keybindings: KeyBindings, identifier: str, specs: list[str]) -> EditResult:
        """Rebind ``identifier`` to the keys named by ``specs``.

        Unparseable specs are logged and left out of the new binding.
        """
        keys: list[Key] = []
        for spec in specs:
            try:
                keys.append(Key.parse(spec))
            except KeyParseError as exc:
                emit_debug_event(
                    "keybinding.invalid_key",
                    category="keybinding",
                    level=logging.WARNING,
                    binding=identifier,
                    value=repr(spec),
                    error=str(exc),
                )
        return keybindings.try_edit_keybinding(identifier, keys)

    def reset_to_default(self) -> KeyBindings:
        """Drop persisted keybindings and return the default table."""
        settings = dict(self._settings_store.load_all())
        settings.pop(KEYBINDINGS_SETTINGS_KEY, None)
        self._settings_store.save_all(settings)
        self._settings = settings
        return KeyBindings.default()

    def _update_settings(self, values: dict[str, Any]) -> None:
        settings = dict(self._settings_store.load_all())
        settings.update(values)
        self._settings_store.save_all(settings)
        self._settings = settings
