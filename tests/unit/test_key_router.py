"""Tests for routing keys to actions through the application context."""

from __future__ import annotations

from kanban_tui.core.actions import Action
from kanban_tui.core.app_context import AppContext, AppStatus
from kanban_tui.core.key_router import resolve_action
from kanban_tui.core.keybindings import KeyBindings
from kanban_tui.core.keys import Key


def test_resolves_through_context_bindings():
    ctx = AppContext(status=AppStatus.INITIALIZED)
    assert resolve_action(ctx, Key.parse("tab")) is Action.NEXT_FOCUS
    assert resolve_action(ctx, Key.parse("shift+tab")) is Action.PREVIOUS_FOCUS
    assert resolve_action(ctx, Key.parse("escape")) is Action.GO_TO_PREVIOUS_UI_MODE_OR_CANCEL


def test_unbound_key_resolves_to_nothing():
    ctx = AppContext()
    assert resolve_action(ctx, Key.parse("z")) is None


def test_keys_are_captured_while_recording_a_binding():
    ctx = AppContext(status=AppStatus.KEY_BIND_MODE)
    assert resolve_action(ctx, Key.parse("q")) is None


def test_uses_edited_table():
    ctx = AppContext(keybindings=KeyBindings.default().edit_keybinding("Quit", [Key.parse("x")]))
    assert resolve_action(ctx, Key.parse("x")) is Action.QUIT
    assert resolve_action(ctx, Key.parse("q")) is None


def test_status_helpers():
    assert AppStatus.INITIALIZED.is_initialized()
    assert not AppStatus.INIT.is_initialized()
