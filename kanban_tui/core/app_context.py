"""Application context owning the navigation state."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from kanban_tui.core.focus import Focus
from kanban_tui.core.keybindings import KeyBindings
from kanban_tui.core.ui_mode import UiMode


class AppStatus(Enum):
    INIT = "init"
    INITIALIZED = "initialized"
    KEY_BIND_MODE = "key_bind_mode"
    USER_INPUT = "user_input"

    def is_initialized(self) -> bool:
        return self is AppStatus.INITIALIZED


@dataclass
class AppContext:
    """Current mode, focus and keybinding table for one session.

    Passed explicitly to every navigation operation. It is owned by the
    thread that drives the input loop.
    """

    keybindings: KeyBindings = field(default_factory=KeyBindings.default)
    ui_mode: UiMode = field(default_factory=UiMode.default)
    focus: Focus = field(default_factory=Focus.default)
    popup_mode: str | None = None
    previous_ui_mode: UiMode | None = None
    status: AppStatus = AppStatus.INIT

    @property
    def popup_active(self) -> bool:
        return self.popup_mode is not None

    def set_focus(self, focus: Focus) -> None:
        self.focus = focus

    def available_targets(self) -> tuple[Focus, ...]:
        return self.ui_mode.available_targets()

    def focus_is_valid(self) -> bool:
        return self.focus in self.available_targets()

    def open_popup(self, popup: str) -> None:
        self.popup_mode = popup

    def close_popup(self) -> None:
        self.popup_mode = None
