"""Navigation and input-binding core (UI-agnostic)."""

from kanban_tui.core.actions import Action
from kanban_tui.core.app_context import AppContext, AppStatus
from kanban_tui.core.focus import Focus
from kanban_tui.core.keybindings import EditResult, KeyBindingName, KeyBindings
from kanban_tui.core.keys import Key, KeyParseError
from kanban_tui.core.ui_mode import UiMode

__all__ = [
    "Action",
    "AppContext",
    "AppStatus",
    "EditResult",
    "Focus",
    "Key",
    "KeyBindingName",
    "KeyBindings",
    "KeyParseError",
    "UiMode",
]
