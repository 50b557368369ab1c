"""Tests for keybinding help text."""

from __future__ import annotations

from kanban_tui.core.focus import Focus
from kanban_tui.core.keybindings import KeyBindingName, KeyBindings
from kanban_tui.core.keys import Key
from kanban_tui.core.ui_mode import UiMode
from kanban_tui.domains.shell.app.help_text import (
    HELP_SECTIONS,
    format_binding_keys,
    generate_focus_text,
    generate_help_text,
)


def test_sections_cover_every_binding_once():
    listed = [name for names in HELP_SECTIONS.values() for name in names]
    assert sorted(listed, key=lambda name: name.value) == sorted(KeyBindingName, key=lambda name: name.value)


def test_format_binding_keys():
    bindings = KeyBindings.default()
    assert format_binding_keys(bindings, KeyBindingName.QUIT) == "^c/q"
    bindings.edit_keybinding("Quit", [])
    assert format_binding_keys(bindings, KeyBindingName.QUIT) == "<unbound>"


def test_help_text_lists_sections_and_descriptions():
    text = generate_help_text(KeyBindings.default())

    for title in HELP_SECTIONS:
        assert title in text
    assert "Go to previous ui mode or cancel" in text
    assert "CONFLICTS" not in text


def test_help_text_reports_conflicts():
    bindings = KeyBindings.default().edit_keybinding("Undo", [Key.parse("q")])

    text = generate_help_text(bindings)

    assert "CONFLICTS" in text
    assert "Quit (shadows Undo)" in text


def test_focus_text_highlights_current_target():
    text = generate_focus_text(UiMode.CONFIG_MENU, Focus.SUBMIT_BUTTON)
    assert text == "Config Table | [reverse]Submit Button[/] | Extra Focus"
