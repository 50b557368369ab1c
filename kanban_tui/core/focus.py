"""Focus targets and cyclic traversal."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum


class Focus(str, Enum):
    """Interactive regions that can receive key input."""

    BODY = "body"
    CARD_COMMENTS = "card_comments"
    CARD_DESCRIPTION = "card_description"
    CARD_DUE_DATE = "card_due_date"
    CARD_NAME = "card_name"
    CARD_PRIORITY = "card_priority"
    CARD_STATUS = "card_status"
    CARD_TAGS = "card_tags"
    CHANGE_CARD_PRIORITY_POPUP = "change_card_priority_popup"
    CHANGE_CARD_STATUS_POPUP = "change_card_status_popup"
    CHANGE_DATE_FORMAT_POPUP = "change_date_format_popup"
    CHANGE_UI_MODE_POPUP = "change_ui_mode_popup"
    CLOSE_BUTTON = "close_button"
    COMMAND_PALETTE_BOARD = "command_palette_board"
    COMMAND_PALETTE_CARD = "command_palette_card"
    COMMAND_PALETTE_COMMAND = "command_palette_command"
    CONFIG_HELP = "config_help"
    CONFIG_TABLE = "config_table"
    CONFIRM_PASSWORD_FIELD = "confirm_password_field"
    EDIT_GENERAL_CONFIG_POPUP = "edit_general_config_popup"
    EDIT_KEYBINDINGS_TABLE = "edit_keybindings_table"
    EDIT_SPECIFIC_KEY_BINDING_POPUP = "edit_specific_key_binding_popup"
    EMAIL_ID_FIELD = "email_id_field"
    # Placeholder for screens that need one more stop without a dedicated region
    EXTRA_FOCUS = "extra_focus"
    FILTER_BY_TAG_POPUP = "filter_by_tag_popup"
    HELP = "help"
    LOAD_SAVE = "load_save"
    LOG = "log"
    MAIN_MENU = "main_menu"
    NEW_BOARD_DESCRIPTION = "new_board_description"
    NEW_BOARD_NAME = "new_board_name"
    NO_FOCUS = "no_focus"
    PASSWORD_FIELD = "password_field"
    RESET_PASSWORD_LINK_FIELD = "reset_password_link_field"
    SELECT_DEFAULT_VIEW = "select_default_view"
    SEND_RESET_PASSWORD_LINK_BUTTON = "send_reset_password_link_button"
    STYLE_EDITOR_BG = "style_editor_bg"
    STYLE_EDITOR_FG = "style_editor_fg"
    STYLE_EDITOR_MODIFIER = "style_editor_modifier"
    SUBMIT_BUTTON = "submit_button"
    TEXT_INPUT = "text_input"
    THEME_EDITOR = "theme_editor"
    THEME_SELECTOR = "theme_selector"
    TITLE = "title"

    @classmethod
    def default(cls) -> Focus:
        return cls.NO_FOCUS

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").title()

    def next(self, targets: Sequence[Focus]) -> Focus:
        """Return the target after this one, wrapping around.

        A focus that is not in ``targets`` moves to the first target.
        """
        if self not in targets:
            return targets[0]
        index = targets.index(self)
        return targets[(index + 1) % len(targets)]

    def prev(self, targets: Sequence[Focus]) -> Focus:
        """Return the target before this one, wrapping around.

        A focus that is not in ``targets`` moves to the first target.
        """
        if self not in targets:
            return targets[0]
        index = targets.index(self)
        return targets[index - 1]

    def __str__(self) -> str:
        return self.value
