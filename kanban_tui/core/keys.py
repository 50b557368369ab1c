"""Key chord values and display formatting (UI-agnostic)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from textual.events import Key as KeyEvent

KEY_DISPLAY_OVERRIDES: dict[str, str] = {
    "question_mark": "?",
    "slash": "/",
    "asterisk": "*",
    "dollar_sign": "$",
    "percent_sign": "%",
    "space": "<space>",
    "escape": "<esc>",
    "enter": "<enter>",
    "delete": "<del>",
    "insert": "<ins>",
    "backspace": "<backspace>",
    "tab": "<tab>",
    "shift+tab": "<s-tab>",
    "left": "<left>",
    "right": "<right>",
    "up": "<up>",
    "down": "<down>",
    "shift+left": "<s-left>",
    "shift+right": "<s-right>",
    "shift+up": "<s-up>",
    "shift+down": "<s-down>",
    "home": "<home>",
    "end": "<end>",
    "pageup": "<pgup>",
    "pagedown": "<pgdn>",
}

KEY_ALIASES: dict[str, str] = {
    "esc": "escape",
    "return": "enter",
    "del": "delete",
    "ins": "insert",
    "backtab": "shift+tab",
    "pgup": "pageup",
    "pgdn": "pagedown",
    " ": "space",
}

MODIFIERS = ("ctrl", "alt", "meta", "super", "shift")


class KeyParseError(ValueError):
    """Raised when a key specification cannot be parsed."""


def format_key(key: str) -> str:
    """Format a key name for display in UI hints."""
    if key in KEY_DISPLAY_OVERRIDES:
        return KEY_DISPLAY_OVERRIDES[key]
    if key.startswith("ctrl+"):
        return f"^{key.split('+', 1)[1]}"
    return key


@dataclass(frozen=True)
class Key:
    """One physical key chord, named the way Textual names keys."""

    name: str

    @classmethod
    def parse(cls, spec: str) -> Key:
        """Parse a key specification such as ``"q"``, ``"ctrl+c"`` or ``"Esc"``."""
        if not isinstance(spec, str):
            raise KeyParseError(f"Key spec must be a string, got {type(spec).__name__}")
        if spec == " ":
            return cls("space")
        raw = spec.strip()
        if not raw:
            raise KeyParseError("Key spec is empty")
        if len(raw) == 1:
            return cls(raw)

        *modifier_parts, base = raw.split("+")
        if not base:
            # "ctrl++" binds the plus key itself
            if modifier_parts and modifier_parts[-1] == "":
                modifier_parts = modifier_parts[:-1]
                base = "+"
            else:
                raise KeyParseError(f"Key spec {spec!r} has no key after the modifiers")

        modifiers: list[str] = []
        for part in modifier_parts:
            modifier = part.strip().lower()
            if modifier not in MODIFIERS:
                raise KeyParseError(f"Unknown modifier {part!r} in key spec {spec!r}")
            if modifier not in modifiers:
                modifiers.append(modifier)
        # One canonical order, the one Textual reports ("ctrl+shift+z")
        modifiers.sort(key=MODIFIERS.index)

        if len(base) > 1:
            base = base.strip().lower()
            base = KEY_ALIASES.get(base, base)

        if "ctrl" in modifiers and len(base) == 1:
            # Terminals cannot tell ctrl+C from ctrl+c
            base = base.lower()
        if modifiers == ["shift"] and len(base) == 1 and base.isalpha():
            return cls(base.upper())
        if not modifiers:
            return cls(base)
        return cls("+".join([*modifiers, base]))

    @classmethod
    def from_event(cls, event: KeyEvent) -> Key:
        """Build a key from a Textual key event."""
        return cls.parse(event.key)

    @classmethod
    def char(cls, character: str) -> Key:
        if len(character) != 1:
            raise KeyParseError(f"Expected a single character, got {character!r}")
        return cls.parse(character)

    @classmethod
    def ctrl(cls, character: str) -> Key:
        return cls.parse(f"ctrl+{character}")

    @property
    def display(self) -> str:
        return format_key(self.name)

    def __str__(self) -> str:
        return self.name
