"""Rebindable key table: binding names, defaults, resolution and editing."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from kanban_tui.core.actions import Action
from kanban_tui.core.keys import Key, KeyParseError
from kanban_tui.shared.core.debug_events import emit_debug_event

_WORD_BOUNDARY_RE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


class KeyBindingName(Enum):
    """Rebindable commands, in resolution order.

    Values are the identifiers accepted by edit operations.
    """

    ACCEPT = "Accept"
    CHANGE_CARD_STATUS_TO_ACTIVE = "ChangeCardStatusToActive"
    CHANGE_CARD_STATUS_TO_COMPLETED = "ChangeCardStatusToCompleted"
    CHANGE_CARD_STATUS_TO_STALE = "ChangeCardStatusToStale"
    CHANGE_CARD_PRIORITY_TO_HIGH = "ChangeCardPriorityToHigh"
    CHANGE_CARD_PRIORITY_TO_MEDIUM = "ChangeCardPriorityToMedium"
    CHANGE_CARD_PRIORITY_TO_LOW = "ChangeCardPriorityToLow"
    CLEAR_ALL_TOASTS = "ClearAllToasts"
    DELETE_BOARD = "DeleteBoard"
    DELETE_CARD = "DeleteCard"
    DOWN = "Down"
    GO_TO_MAIN_MENU = "GoToMainMenu"
    GO_TO_PREVIOUS_UI_MODE_OR_CANCEL = "GoToPreviousUiModeOrCancel"
    HIDE_UI_ELEMENT = "HideUiElement"
    LEFT = "Left"
    MOVE_CARD_DOWN = "MoveCardDown"
    MOVE_CARD_LEFT = "MoveCardLeft"
    MOVE_CARD_RIGHT = "MoveCardRight"
    MOVE_CARD_UP = "MoveCardUp"
    NEW_BOARD = "NewBoard"
    NEW_CARD = "NewCard"
    NEXT_FOCUS = "NextFocus"
    OPEN_CONFIG_MENU = "OpenConfigMenu"
    PREVIOUS_FOCUS = "PreviousFocus"
    QUIT = "Quit"
    REDO = "Redo"
    RESET_UI = "ResetUi"
    RIGHT = "Right"
    SAVE_STATE = "SaveState"
    STOP_USER_INPUT = "StopUserInput"
    TAKE_USER_INPUT = "TakeUserInput"
    TOGGLE_COMMAND_PALETTE = "ToggleCommandPalette"
    UNDO = "Undo"
    UP = "Up"

    @classmethod
    def parse(cls, identifier: str) -> KeyBindingName | None:
        return _NAMES_BY_IDENTIFIER.get(identifier)

    @classmethod
    def from_field_name(cls, field_name: str) -> KeyBindingName | None:
        return _NAMES_BY_FIELD.get(field_name)

    @property
    def field_name(self) -> str:
        """Name used in persisted configuration (snake_case)."""
        return self.name.lower()

    @property
    def description(self) -> str:
        words = _WORD_BOUNDARY_RE.sub(" ", self.value).split()
        return " ".join([words[0], *(word.lower() for word in words[1:])])

    @property
    def action(self) -> Action:
        return BINDING_ACTIONS[self]

    def __str__(self) -> str:
        return self.value


_NAMES_BY_IDENTIFIER: dict[str, KeyBindingName] = {name.value: name for name in KeyBindingName}
_NAMES_BY_FIELD: dict[str, KeyBindingName] = {name.field_name: name for name in KeyBindingName}

BINDING_ACTIONS: dict[KeyBindingName, Action] = {
    KeyBindingName.ACCEPT: Action.ACCEPT,
    KeyBindingName.CHANGE_CARD_STATUS_TO_ACTIVE: Action.CHANGE_CARD_STATUS_TO_ACTIVE,
    KeyBindingName.CHANGE_CARD_STATUS_TO_COMPLETED: Action.CHANGE_CARD_STATUS_TO_COMPLETED,
    KeyBindingName.CHANGE_CARD_STATUS_TO_STALE: Action.CHANGE_CARD_STATUS_TO_STALE,
    KeyBindingName.CHANGE_CARD_PRIORITY_TO_HIGH: Action.CHANGE_CARD_PRIORITY_TO_HIGH,
    KeyBindingName.CHANGE_CARD_PRIORITY_TO_MEDIUM: Action.CHANGE_CARD_PRIORITY_TO_MEDIUM,
    KeyBindingName.CHANGE_CARD_PRIORITY_TO_LOW: Action.CHANGE_CARD_PRIORITY_TO_LOW,
    KeyBindingName.CLEAR_ALL_TOASTS: Action.CLEAR_ALL_TOASTS,
    KeyBindingName.DELETE_BOARD: Action.DELETE_BOARD,
    KeyBindingName.DELETE_CARD: Action.DELETE,
    KeyBindingName.DOWN: Action.DOWN,
    KeyBindingName.GO_TO_MAIN_MENU: Action.GO_TO_MAIN_MENU,
    KeyBindingName.GO_TO_PREVIOUS_UI_MODE_OR_CANCEL: Action.GO_TO_PREVIOUS_UI_MODE_OR_CANCEL,
    KeyBindingName.HIDE_UI_ELEMENT: Action.HIDE_UI_ELEMENT,
    KeyBindingName.LEFT: Action.LEFT,
    KeyBindingName.MOVE_CARD_DOWN: Action.MOVE_CARD_DOWN,
    KeyBindingName.MOVE_CARD_LEFT: Action.MOVE_CARD_LEFT,
    KeyBindingName.MOVE_CARD_RIGHT: Action.MOVE_CARD_RIGHT,
    KeyBindingName.MOVE_CARD_UP: Action.MOVE_CARD_UP,
    KeyBindingName.NEW_BOARD: Action.NEW_BOARD,
    KeyBindingName.NEW_CARD: Action.NEW_CARD,
    KeyBindingName.NEXT_FOCUS: Action.NEXT_FOCUS,
    KeyBindingName.OPEN_CONFIG_MENU: Action.OPEN_CONFIG_MENU,
    KeyBindingName.PREVIOUS_FOCUS: Action.PREVIOUS_FOCUS,
    KeyBindingName.QUIT: Action.QUIT,
    KeyBindingName.REDO: Action.REDO,
    KeyBindingName.RESET_UI: Action.RESET_UI,
    KeyBindingName.RIGHT: Action.RIGHT,
    KeyBindingName.SAVE_STATE: Action.SAVE_STATE,
    KeyBindingName.STOP_USER_INPUT: Action.STOP_USER_INPUT,
    KeyBindingName.TAKE_USER_INPUT: Action.TAKE_USER_INPUT,
    KeyBindingName.TOGGLE_COMMAND_PALETTE: Action.TOGGLE_COMMAND_PALETTE,
    KeyBindingName.UNDO: Action.UNDO,
    KeyBindingName.UP: Action.UP,
}

DEFAULT_KEYBINDINGS: dict[KeyBindingName, tuple[str, ...]] = {
    KeyBindingName.ACCEPT: ("enter",),
    KeyBindingName.CHANGE_CARD_STATUS_TO_ACTIVE: ("2",),
    KeyBindingName.CHANGE_CARD_STATUS_TO_COMPLETED: ("1",),
    KeyBindingName.CHANGE_CARD_STATUS_TO_STALE: ("3",),
    KeyBindingName.CHANGE_CARD_PRIORITY_TO_HIGH: ("4",),
    KeyBindingName.CHANGE_CARD_PRIORITY_TO_MEDIUM: ("5",),
    KeyBindingName.CHANGE_CARD_PRIORITY_TO_LOW: ("6",),
    KeyBindingName.CLEAR_ALL_TOASTS: ("t",),
    KeyBindingName.DELETE_BOARD: ("D",),
    KeyBindingName.DELETE_CARD: ("d", "delete"),
    KeyBindingName.DOWN: ("down",),
    KeyBindingName.GO_TO_MAIN_MENU: ("m",),
    KeyBindingName.GO_TO_PREVIOUS_UI_MODE_OR_CANCEL: ("escape",),
    KeyBindingName.HIDE_UI_ELEMENT: ("h",),
    KeyBindingName.LEFT: ("left",),
    KeyBindingName.MOVE_CARD_DOWN: ("shift+down",),
    KeyBindingName.MOVE_CARD_LEFT: ("shift+left",),
    KeyBindingName.MOVE_CARD_RIGHT: ("shift+right",),
    KeyBindingName.MOVE_CARD_UP: ("shift+up",),
    KeyBindingName.NEW_BOARD: ("b",),
    KeyBindingName.NEW_CARD: ("n",),
    KeyBindingName.NEXT_FOCUS: ("tab",),
    KeyBindingName.OPEN_CONFIG_MENU: ("c",),
    KeyBindingName.PREVIOUS_FOCUS: ("shift+tab",),
    KeyBindingName.QUIT: ("ctrl+c", "q"),
    KeyBindingName.REDO: ("ctrl+y",),
    KeyBindingName.RESET_UI: ("r",),
    KeyBindingName.RIGHT: ("right",),
    KeyBindingName.SAVE_STATE: ("ctrl+s",),
    KeyBindingName.STOP_USER_INPUT: ("insert",),
    KeyBindingName.TAKE_USER_INPUT: ("i",),
    KeyBindingName.TOGGLE_COMMAND_PALETTE: ("ctrl+p",),
    KeyBindingName.UNDO: ("ctrl+z",),
    KeyBindingName.UP: ("up",),
}


def binding_to_action(name: KeyBindingName) -> Action:
    return BINDING_ACTIONS[name]


def dedupe_keys(keys: Iterable[Key]) -> list[Key]:
    """Drop repeated keys, keeping the first occurrence of each."""
    return list(dict.fromkeys(keys))


@dataclass(frozen=True)
class EditResult:
    """Outcome of a keybinding edit."""

    applied: bool
    binding: KeyBindingName | None
    message: str
    keys: tuple[Key, ...] = ()


class KeyBindings:
    """Mapping from every binding name to an ordered list of keys.

    The same key may be bound to several names; resolution follows
    :class:`KeyBindingName` order, so the earliest name wins.
    """

    def __init__(self, bindings: Mapping[KeyBindingName, Iterable[Key]] | None = None) -> None:
        source = bindings if bindings is not None else _default_key_lists()
        self._bindings: dict[KeyBindingName, list[Key]] = {
            name: list(source.get(name, ())) for name in KeyBindingName
        }

    @classmethod
    def default(cls) -> KeyBindings:
        return cls()

    @classmethod
    def empty(cls) -> KeyBindings:
        return cls({})

    def copy(self) -> KeyBindings:
        return KeyBindings(self._bindings)

    def iter(self) -> Iterator[tuple[KeyBindingName, list[Key]]]:
        """Yield ``(name, stored key list)`` pairs in canonical order."""
        for name in KeyBindingName:
            yield name, self._bindings[name]

    def __iter__(self) -> Iterator[tuple[KeyBindingName, list[Key]]]:
        return self.iter()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, KeyBindings):
            return NotImplemented
        return self._bindings == other._bindings

    def __repr__(self) -> str:
        bound = sum(1 for keys in self._bindings.values() if keys)
        return f"KeyBindings(bound={bound}/{len(self._bindings)})"

    def key_to_action(self, key: Key) -> Action | None:
        binding = self.binding_for_key(key)
        if binding is None:
            return None
        return binding_to_action(binding)

    def binding_for_key(self, key: Key) -> KeyBindingName | None:
        for name, keys in self.iter():
            if key in keys:
                return name
        return None

    def get_keybindings(self, name: KeyBindingName) -> list[Key]:
        """Return a copy of the keys bound to ``name``."""
        return list(self._bindings[name])

    def conflicts(self) -> dict[Key, list[KeyBindingName]]:
        """Keys bound to more than one name, with the names in resolution order."""
        owners: dict[Key, list[KeyBindingName]] = {}
        for name, keys in self.iter():
            for key in keys:
                owners.setdefault(key, []).append(name)
        return {key: names for key, names in owners.items() if len(names) > 1}

    def try_edit_keybinding(self, identifier: str, keys: Iterable[Key]) -> EditResult:
        """Replace the keys bound to ``identifier`` and report what happened."""
        unique_keys = dedupe_keys(keys)
        name = KeyBindingName.parse(identifier)
        if name is None:
            emit_debug_event(
                "keybinding.edit_skipped",
                category="keybinding",
                identifier=identifier,
                keys=[key.name for key in unique_keys],
            )
            return EditResult(
                applied=False,
                binding=None,
                message=f"Invalid keybinding: {identifier}",
                keys=tuple(unique_keys),
            )

        self._bindings[name] = unique_keys
        emit_debug_event(
            "keybinding.edit",
            category="keybinding",
            binding=name.value,
            keys=[key.name for key in unique_keys],
        )
        return EditResult(
            applied=True,
            binding=name,
            message=f"{name.description} bound to {_describe_keys(unique_keys)}",
            keys=tuple(unique_keys),
        )

    def edit_keybinding(self, identifier: str, keys: Iterable[Key]) -> KeyBindings:
        """Replace the keys bound to ``identifier``.

        Unknown identifiers are logged and ignored. Returns ``self`` so edits
        can be chained.
        """
        self.try_edit_keybinding(identifier, keys)
        return self

    def to_dict(self) -> dict[str, list[str]]:
        return {name.field_name: [key.name for key in keys] for name, keys in self.iter()}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> KeyBindings:
        """Build a table from persisted configuration.

        Missing fields keep their defaults. Unknown fields, non-list values and
        unparseable key specs are logged and skipped.
        """
        bindings = cls.default()
        for field_name, raw_keys in data.items():
            name = KeyBindingName.from_field_name(field_name)
            if name is None:
                emit_debug_event(
                    "keybinding.unknown_field",
                    category="keybinding",
                    level=logging.WARNING,
                    field=field_name,
                )
                continue
            if not isinstance(raw_keys, list):
                emit_debug_event(
                    "keybinding.invalid_key",
                    category="keybinding",
                    level=logging.WARNING,
                    binding=name.value,
                    value=repr(raw_keys),
                )
                continue
            bindings.edit_keybinding(name.value, _parse_key_specs(name, raw_keys))
        return bindings


def _parse_key_specs(name: KeyBindingName, specs: Iterable[Any]) -> list[Key]:
    keys: list[Key] = []
    for spec in specs:
        try:
            keys.append(Key.parse(spec))
        except KeyParseError as exc:
            emit_debug_event(
                "keybinding.invalid_key",
                category="keybinding",
                level=logging.WARNING,
                binding=name.value,
                value=repr(spec),
                error=str(exc),
            )
    return keys


def _default_key_lists() -> dict[KeyBindingName, list[Key]]:
    return {name: [Key.parse(spec) for spec in specs] for name, specs in DEFAULT_KEYBINDINGS.items()}


def _describe_keys(keys: list[Key]) -> str:
    if not keys:
        return "nothing"
    return ", ".join(key.display for key in keys)


def missing_default_bindings() -> list[KeyBindingName]:
    """Binding names the default table forgot to assign."""
    return [name for name in KeyBindingName if not DEFAULT_KEYBINDINGS.get(name)]
