"""Help text generation for the keybinding screens."""

from __future__ import annotations

from rich.markup import escape

from kanban_tui.core.focus import Focus
from kanban_tui.core.keybindings import KeyBindingName, KeyBindings
from kanban_tui.core.ui_mode import UiMode

HELP_SECTIONS: dict[str, tuple[KeyBindingName, ...]] = {
    "NAVIGATION": (
        KeyBindingName.UP,
        KeyBindingName.DOWN,
        KeyBindingName.LEFT,
        KeyBindingName.RIGHT,
        KeyBindingName.NEXT_FOCUS,
        KeyBindingName.PREVIOUS_FOCUS,
        KeyBindingName.ACCEPT,
        KeyBindingName.GO_TO_PREVIOUS_UI_MODE_OR_CANCEL,
        KeyBindingName.GO_TO_MAIN_MENU,
        KeyBindingName.OPEN_CONFIG_MENU,
        KeyBindingName.TOGGLE_COMMAND_PALETTE,
        KeyBindingName.HIDE_UI_ELEMENT,
        KeyBindingName.RESET_UI,
    ),
    "BOARDS AND CARDS": (
        KeyBindingName.NEW_BOARD,
        KeyBindingName.NEW_CARD,
        KeyBindingName.DELETE_BOARD,
        KeyBindingName.DELETE_CARD,
        KeyBindingName.MOVE_CARD_UP,
        KeyBindingName.MOVE_CARD_DOWN,
        KeyBindingName.MOVE_CARD_LEFT,
        KeyBindingName.MOVE_CARD_RIGHT,
    ),
    "CARD STATUS AND PRIORITY": (
        KeyBindingName.CHANGE_CARD_STATUS_TO_ACTIVE,
        KeyBindingName.CHANGE_CARD_STATUS_TO_COMPLETED,
        KeyBindingName.CHANGE_CARD_STATUS_TO_STALE,
        KeyBindingName.CHANGE_CARD_PRIORITY_TO_HIGH,
        KeyBindingName.CHANGE_CARD_PRIORITY_TO_MEDIUM,
        KeyBindingName.CHANGE_CARD_PRIORITY_TO_LOW,
    ),
    "GLOBAL": (
        KeyBindingName.TAKE_USER_INPUT,
        KeyBindingName.STOP_USER_INPUT,
        KeyBindingName.UNDO,
        KeyBindingName.REDO,
        KeyBindingName.SAVE_STATE,
        KeyBindingName.CLEAR_ALL_TOASTS,
        KeyBindingName.QUIT,
    ),
}


def format_binding_keys(keybindings: KeyBindings, name: KeyBindingName) -> str:
    keys = keybindings.get_keybindings(name)
    if not keys:
        return "<unbound>"
    return "/".join(key.display for key in keys)


def generate_help_text(keybindings: KeyBindings) -> str:
    """Generate structured help text with one section per command group."""

    def section(title: str) -> str:
        divider = "-" * 62
        return f"[bold $primary]{title}[/]\n[dim]{divider}[/]"

    def binding(key: str, desc: str, indent: int = 4) -> str:
        pad = " " * indent
        return f"{pad}[bold $warning]{escape(key):<14}[/] [dim]-[/] {escape(desc)}"

    lines: list[str] = []
    for title, names in HELP_SECTIONS.items():
        lines.append(section(title))
        for name in names:
            lines.append(binding(format_binding_keys(keybindings, name), name.description))
        lines.append("")

    conflicts = keybindings.conflicts()
    if conflicts:
        lines.append(section("CONFLICTS"))
        for key, names in conflicts.items():
            winner, *shadowed = names
            shadowed_text = ", ".join(name.description for name in shadowed)
            lines.append(binding(key.display, f"{winner.description} (shadows {shadowed_text})"))
        lines.append("")

    return "\n".join(lines).rstrip()


def generate_focus_text(mode: UiMode, focus: Focus) -> str:
    """One line listing the mode's focus targets with the current one highlighted."""
    parts = []
    for target in mode.available_targets():
        label = escape(target.label)
        parts.append(f"[reverse]{label}[/]" if target is focus else label)
    return " | ".join(parts)
