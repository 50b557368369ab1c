"""Tests for the keybinding table: defaults, resolution, editing and persistence."""

from __future__ import annotations

import pytest

from kanban_tui.core.actions import Action
from kanban_tui.core.keybindings import (
    BINDING_ACTIONS,
    DEFAULT_KEYBINDINGS,
    KeyBindingName,
    KeyBindings,
    dedupe_keys,
    missing_default_bindings,
)
from kanban_tui.core.keys import Key


def keys(*specs: str) -> list[Key]:
    return [Key.parse(spec) for spec in specs]


class TestNames:
    def test_identifiers_round_trip(self):
        for name in KeyBindingName:
            assert KeyBindingName.parse(name.value) is name
            assert KeyBindingName.from_field_name(name.field_name) is name

    def test_unknown_identifier(self):
        assert KeyBindingName.parse("FlyToTheMoon") is None
        assert KeyBindingName.parse("quit") is None

    def test_field_names_are_snake_case(self):
        assert KeyBindingName.GO_TO_PREVIOUS_UI_MODE_OR_CANCEL.field_name == "go_to_previous_ui_mode_or_cancel"

    def test_description(self):
        assert KeyBindingName.CHANGE_CARD_STATUS_TO_ACTIVE.description == "Change card status to active"
        assert KeyBindingName.QUIT.description == "Quit"

    def test_every_name_has_exactly_one_action(self):
        assert set(BINDING_ACTIONS) == set(KeyBindingName)
        assert len(set(BINDING_ACTIONS.values())) == len(BINDING_ACTIONS)
        assert set(BINDING_ACTIONS.values()) == set(Action)

    def test_delete_card_maps_to_delete(self):
        assert KeyBindingName.DELETE_CARD.action is Action.DELETE


class TestDefaults:
    def test_every_name_is_bound_by_default(self):
        assert missing_default_bindings() == []
        assert set(DEFAULT_KEYBINDINGS) == set(KeyBindingName)
        for name, bound in KeyBindings.default():
            assert bound, name

    def test_default_keys_resolve_to_their_action(self):
        bindings = KeyBindings.default()
        for name, bound in bindings:
            for key in bound:
                assert bindings.key_to_action(key) is name.action

    def test_defaults_have_no_conflicts(self):
        assert KeyBindings.default().conflicts() == {}

    def test_quit_keys(self):
        bindings = KeyBindings.default()
        assert bindings.key_to_action(Key.parse("ctrl+c")) is Action.QUIT
        assert bindings.key_to_action(Key.parse("q")) is Action.QUIT
        assert bindings.key_to_action(Key.parse("z")) is None

    def test_delete_board_is_capital_d(self):
        bindings = KeyBindings.default()
        assert bindings.key_to_action(Key.parse("D")) is Action.DELETE_BOARD
        assert bindings.key_to_action(Key.parse("d")) is Action.DELETE
        assert bindings.key_to_action(Key.parse("delete")) is Action.DELETE

    def test_empty_table_resolves_nothing(self):
        bindings = KeyBindings.empty()
        assert bindings.key_to_action(Key.parse("q")) is None
        assert all(not bound for _, bound in bindings)

    def test_iteration_follows_name_order(self):
        assert [name for name, _ in KeyBindings.default()] == list(KeyBindingName)


class TestEditing:
    def test_dedupe_keeps_first_occurrence(self):
        assert dedupe_keys(keys("a", "b", "a", "c", "b")) == keys("a", "b", "c")

    def test_edit_replaces_keys(self):
        bindings = KeyBindings.default()
        bindings.edit_keybinding("Quit", keys("x", "x", "y"))

        assert bindings.get_keybindings(KeyBindingName.QUIT) == keys("x", "y")
        assert bindings.key_to_action(Key.parse("q")) is None
        assert bindings.key_to_action(Key.parse("x")) is Action.QUIT

    def test_edit_leaves_other_bindings_alone(self):
        bindings = KeyBindings.default()
        before = bindings.to_dict()
        bindings.edit_keybinding("Undo", keys("u"))

        after = bindings.to_dict()
        assert after["undo"] == ["u"]
        del before["undo"], after["undo"]
        assert after == before

    def test_unknown_identifier_changes_nothing(self, debug_events):
        bindings = KeyBindings.default()
        before = bindings.copy()

        result = bindings.try_edit_keybinding("NotARealBinding", keys("x"))

        assert result.applied is False
        assert result.binding is None
        assert result.message == "Invalid keybinding: NotARealBinding"
        assert bindings == before
        assert bindings.to_dict() == KeyBindings.default().to_dict()
        assert len(debug_events.named("keybinding.edit_skipped")) == 1

    def test_try_edit_reports_success(self, debug_events):
        result = KeyBindings.default().try_edit_keybinding("SaveState", keys("ctrl+w", "ctrl+w"))

        assert result.applied is True
        assert result.binding is KeyBindingName.SAVE_STATE
        assert result.keys == tuple(keys("ctrl+w"))
        assert result.message == "Save state bound to ^w"
        assert debug_events.named("keybinding.edit")[0].data["binding"] == "SaveState"

    def test_edits_chain(self):
        bindings = KeyBindings.default()
        returned = bindings.edit_keybinding("Undo", keys("u")).edit_keybinding("Redo", keys("U"))

        assert returned is bindings
        assert bindings.key_to_action(Key.parse("u")) is Action.UNDO
        assert bindings.key_to_action(Key.parse("U")) is Action.REDO

    def test_edit_to_no_keys_unbinds(self):
        bindings = KeyBindings.default().edit_keybinding("Quit", [])
        assert bindings.get_keybindings(KeyBindingName.QUIT) == []
        assert bindings.key_to_action(Key.parse("q")) is None

    def test_get_keybindings_returns_a_copy(self):
        bindings = KeyBindings.default()
        bound = bindings.get_keybindings(KeyBindingName.QUIT)
        bound.append(Key.parse("z"))

        assert bindings.key_to_action(Key.parse("z")) is None

    def test_copy_is_independent(self):
        original = KeyBindings.default()
        clone = original.copy()
        clone.edit_keybinding("Quit", keys("x"))

        assert original.key_to_action(Key.parse("q")) is Action.QUIT
        assert original != clone


class TestConflicts:
    def test_earliest_name_wins(self):
        bindings = KeyBindings.default()
        bindings.edit_keybinding("Up", keys("k"))
        bindings.edit_keybinding("Accept", keys("k"))

        assert bindings.binding_for_key(Key.parse("k")) is KeyBindingName.ACCEPT
        assert bindings.key_to_action(Key.parse("k")) is Action.ACCEPT

    def test_conflicts_lists_names_in_resolution_order(self):
        bindings = KeyBindings.default()
        bindings.edit_keybinding("Undo", keys("q"))

        assert bindings.conflicts() == {Key.parse("q"): [KeyBindingName.QUIT, KeyBindingName.UNDO]}
        assert bindings.key_to_action(Key.parse("q")) is Action.QUIT


class TestPersistence:
    def test_to_dict_uses_field_names_and_key_names(self):
        data = KeyBindings.default().to_dict()

        assert data["quit"] == ["ctrl+c", "q"]
        assert data["delete_card"] == ["d", "delete"]
        assert len(data) == len(KeyBindingName)

    def test_from_dict_restores_saved_table(self):
        bindings = KeyBindings.default().edit_keybinding("Quit", keys("x"))
        assert KeyBindings.from_dict(bindings.to_dict()) == bindings

    def test_missing_fields_keep_defaults(self):
        bindings = KeyBindings.from_dict({"quit": ["x"]})

        assert bindings.get_keybindings(KeyBindingName.QUIT) == keys("x")
        assert bindings.get_keybindings(KeyBindingName.UNDO) == keys("ctrl+z")

    def test_bad_entries_are_skipped_and_logged(self, debug_events):
        bindings = KeyBindings.from_dict(
            {
                "fly": ["f"],
                "undo": "ctrl+u",
                "redo": ["ctrl+r", "", "hyper+r", 7],
            }
        )

        assert bindings.get_keybindings(KeyBindingName.UNDO) == keys("ctrl+z")
        assert bindings.get_keybindings(KeyBindingName.REDO) == keys("ctrl+r")
        assert [event.data.get("field") for event in debug_events.named("keybinding.unknown_field")] == ["fly"]
        assert len(debug_events.named("keybinding.invalid_key")) == 4

    @pytest.mark.parametrize("field", ["quit", "accept"])
    def test_empty_list_unbinds(self, field):
        bindings = KeyBindings.from_dict({field: []})
        assert bindings.get_keybindings(KeyBindingName.from_field_name(field)) == []

    def test_modifier_order_in_saved_specs_is_normalized(self):
        bindings = KeyBindings.from_dict({"undo": ["shift+ctrl+z"]})

        assert bindings.get_keybindings(KeyBindingName.UNDO) == [Key("ctrl+shift+z")]
        assert bindings.key_to_action(Key("ctrl+shift+z")) is Action.UNDO
