"""Application screens and the focus targets each one allows."""

from __future__ import annotations

import logging
from enum import Enum

from kanban_tui.core.focus import Focus
from kanban_tui.shared.core.debug_events import emit_debug_event


class UiMode(Enum):
    """Application screens, valued by their canonical display label."""

    BODY_HELP = "Body and Help"
    BODY_HELP_LOG = "Body, Help and Log"
    BODY_LOG = "Body and Log"
    CONFIG_MENU = "Config"
    CREATE_THEME = "Create Theme"
    EDIT_KEYBINDINGS = "Edit Keybindings"
    HELP_MENU = "Help Menu"
    LOAD_CLOUD_SAVE = "Load a Save (Cloud)"
    LOAD_LOCAL_SAVE = "Load a Save (Local)"
    LOGIN = "Login"
    LOGS_ONLY = "Logs Only"
    MAIN_MENU = "Main Menu"
    NEW_BOARD = "New Board"
    NEW_CARD = "New Card"
    RESET_PASSWORD = "Reset Password"
    SIGN_UP = "Sign Up"
    TITLE_BODY = "Title and Body"
    TITLE_BODY_HELP = "Title, Body and Help"
    TITLE_BODY_HELP_LOG = "Title, Body, Help and Log"
    TITLE_BODY_LOG = "Title, Body and Log"
    ZEN = "Zen"

    @classmethod
    def default(cls) -> UiMode:
        return cls.ZEN

    @classmethod
    def from_string(cls, label: str) -> UiMode | None:
        """Return the mode whose display label is exactly ``label``."""
        return _MODES_BY_LABEL.get(label)

    @classmethod
    def from_number(cls, number: int) -> UiMode:
        """Return the view mode for a numeric shortcut (1-9).

        Anything else is logged and falls back to the title and body layout.
        """
        if isinstance(number, int) and not isinstance(number, bool) and 1 <= number <= len(VIEW_MODES):
            return VIEW_MODES[number - 1]
        emit_debug_event(
            "ui_mode.invalid_number",
            category="ui_mode",
            level=logging.ERROR,
            value=repr(number),
            fallback=str(NUMBER_FALLBACK),
        )
        return NUMBER_FALLBACK

    @classmethod
    def view_modes(cls) -> list[UiMode]:
        """Board layouts, in numeric-shortcut and cycling order."""
        return list(VIEW_MODES)

    @classmethod
    def view_modes_as_strings(cls) -> list[str]:
        return [str(mode) for mode in VIEW_MODES]

    def is_view_mode(self) -> bool:
        return self in VIEW_MODES

    def available_targets(self) -> tuple[Focus, ...]:
        """Legal focus targets in default-focus and tab order."""
        return AVAILABLE_TARGETS[self]

    def __str__(self) -> str:
        return self.value


_MODES_BY_LABEL: dict[str, UiMode] = {mode.value: mode for mode in UiMode}

VIEW_MODES: tuple[UiMode, ...] = (
    UiMode.ZEN,
    UiMode.TITLE_BODY,
    UiMode.BODY_HELP,
    UiMode.BODY_LOG,
    UiMode.TITLE_BODY_HELP,
    UiMode.TITLE_BODY_LOG,
    UiMode.BODY_HELP_LOG,
    UiMode.TITLE_BODY_HELP_LOG,
    UiMode.LOGS_ONLY,
)

NUMBER_FALLBACK = UiMode.TITLE_BODY

AVAILABLE_TARGETS: dict[UiMode, tuple[Focus, ...]] = {
    UiMode.BODY_HELP: (Focus.BODY, Focus.HELP),
    UiMode.BODY_HELP_LOG: (Focus.BODY, Focus.HELP, Focus.LOG),
    UiMode.BODY_LOG: (Focus.BODY, Focus.LOG),
    UiMode.CONFIG_MENU: (Focus.CONFIG_TABLE, Focus.SUBMIT_BUTTON, Focus.EXTRA_FOCUS),
    UiMode.CREATE_THEME: (Focus.THEME_EDITOR, Focus.SUBMIT_BUTTON, Focus.EXTRA_FOCUS),
    UiMode.EDIT_KEYBINDINGS: (Focus.EDIT_KEYBINDINGS_TABLE, Focus.SUBMIT_BUTTON),
    UiMode.HELP_MENU: (Focus.HELP, Focus.LOG),
    UiMode.LOAD_CLOUD_SAVE: (Focus.BODY,),
    UiMode.LOAD_LOCAL_SAVE: (Focus.BODY,),
    UiMode.LOGIN: (
        Focus.TITLE,
        Focus.EMAIL_ID_FIELD,
        Focus.PASSWORD_FIELD,
        Focus.EXTRA_FOCUS,
        Focus.SUBMIT_BUTTON,
    ),
    UiMode.LOGS_ONLY: (Focus.LOG,),
    UiMode.MAIN_MENU: (Focus.MAIN_MENU, Focus.HELP, Focus.LOG),
    UiMode.NEW_BOARD: (Focus.NEW_BOARD_NAME, Focus.NEW_BOARD_DESCRIPTION, Focus.SUBMIT_BUTTON),
    UiMode.NEW_CARD: (
        Focus.CARD_NAME,
        Focus.CARD_DESCRIPTION,
        Focus.CARD_DUE_DATE,
        Focus.SUBMIT_BUTTON,
    ),
    UiMode.RESET_PASSWORD: (
        Focus.TITLE,
        Focus.EMAIL_ID_FIELD,
        Focus.SEND_RESET_PASSWORD_LINK_BUTTON,
        Focus.RESET_PASSWORD_LINK_FIELD,
        Focus.PASSWORD_FIELD,
        Focus.CONFIRM_PASSWORD_FIELD,
        Focus.EXTRA_FOCUS,
        Focus.SUBMIT_BUTTON,
    ),
    UiMode.SIGN_UP: (
        Focus.TITLE,
        Focus.EMAIL_ID_FIELD,
        Focus.PASSWORD_FIELD,
        Focus.CONFIRM_PASSWORD_FIELD,
        Focus.EXTRA_FOCUS,
        Focus.SUBMIT_BUTTON,
    ),
    UiMode.TITLE_BODY: (Focus.TITLE, Focus.BODY),
    UiMode.TITLE_BODY_HELP: (Focus.TITLE, Focus.BODY, Focus.HELP),
    UiMode.TITLE_BODY_HELP_LOG: (Focus.TITLE, Focus.BODY, Focus.HELP, Focus.LOG),
    UiMode.TITLE_BODY_LOG: (Focus.TITLE, Focus.BODY, Focus.LOG),
    UiMode.ZEN: (Focus.BODY,),
}
