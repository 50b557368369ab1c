"""Abstract commands produced by key resolution."""

from __future__ import annotations

from enum import Enum


class Action(str, Enum):
    """Commands handed to the action dispatcher.

    Values double as shell action method suffixes (``action_<value>``).
    """

    ACCEPT = "accept"
    CHANGE_CARD_STATUS_TO_ACTIVE = "change_card_status_to_active"
    CHANGE_CARD_STATUS_TO_COMPLETED = "change_card_status_to_completed"
    CHANGE_CARD_STATUS_TO_STALE = "change_card_status_to_stale"
    CHANGE_CARD_PRIORITY_TO_HIGH = "change_card_priority_to_high"
    CHANGE_CARD_PRIORITY_TO_MEDIUM = "change_card_priority_to_medium"
    CHANGE_CARD_PRIORITY_TO_LOW = "change_card_priority_to_low"
    CLEAR_ALL_TOASTS = "clear_all_toasts"
    DELETE_BOARD = "delete_board"
    DELETE = "delete"
    DOWN = "down"
    GO_TO_MAIN_MENU = "go_to_main_menu"
    GO_TO_PREVIOUS_UI_MODE_OR_CANCEL = "go_to_previous_ui_mode_or_cancel"
    HIDE_UI_ELEMENT = "hide_ui_element"
    LEFT = "left"
    MOVE_CARD_DOWN = "move_card_down"
    MOVE_CARD_LEFT = "move_card_left"
    MOVE_CARD_RIGHT = "move_card_right"
    MOVE_CARD_UP = "move_card_up"
    NEW_BOARD = "new_board"
    NEW_CARD = "new_card"
    NEXT_FOCUS = "next_focus"
    OPEN_CONFIG_MENU = "open_config_menu"
    PREVIOUS_FOCUS = "previous_focus"
    QUIT = "quit"
    REDO = "redo"
    RESET_UI = "reset_ui"
    RIGHT = "right"
    SAVE_STATE = "save_state"
    STOP_USER_INPUT = "stop_user_input"
    TAKE_USER_INPUT = "take_user_input"
    TOGGLE_COMMAND_PALETTE = "toggle_command_palette"
    UNDO = "undo"
    UP = "up"

    def __str__(self) -> str:
        return self.value
