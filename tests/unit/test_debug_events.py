"""Tests for debug event emission and the event log."""

from __future__ import annotations

import json
import logging

from kanban_tui.shared.core.debug_events import (
    DebugEventLog,
    add_debug_listener,
    emit_debug_event,
    format_debug_data,
    remove_debug_listener,
)


def test_listeners_receive_events():
    received = []
    add_debug_listener(received.append)

    event = emit_debug_event("thing.happened", category="test", count=2)

    assert received == [event]
    assert event.data == {"count": 2}
    assert event.level_name == "DEBUG"


def test_removed_listener_stops_receiving():
    received = []
    add_debug_listener(received.append)
    remove_debug_listener(received.append)
    remove_debug_listener(received.append)

    emit_debug_event("ignored")

    assert received == []


def test_failing_listener_does_not_break_emission(caplog):
    received = []

    def broken(event):
        raise RuntimeError("boom")

    add_debug_listener(broken)
    add_debug_listener(received.append)

    with caplog.at_level(logging.ERROR, logger="kanban_tui"):
        emit_debug_event("still.delivered")

    assert [event.name for event in received] == ["still.delivered"]
    assert "Debug listener" in caplog.text


def test_events_are_logged(caplog):
    with caplog.at_level(logging.WARNING, logger="kanban_tui"):
        emit_debug_event("settings.read_failed", category="settings", level=logging.WARNING, path="x.json")

    assert "[settings] settings.read_failed path='x.json'" in caplog.text


def test_format_debug_data_skips_none():
    assert format_debug_data({"a": 1, "b": None, "c": "x"}) == "a=1 c='x'"


def test_event_log_keeps_bounded_history():
    log = DebugEventLog(max_events=2).attach()
    for index in range(3):
        emit_debug_event("tick", index=index)

    assert len(log) == 2
    assert [event.data["index"] for event in log] == [1, 2]
    log.clear()
    assert len(log) == 0


def test_event_log_writes_json_lines(tmp_path):
    path = tmp_path / "logs" / "debug.jsonl"
    log = DebugEventLog(path).attach()
    assert log.path == path

    emit_debug_event("keybinding.edit", category="keybinding", binding="Quit", keys=["x"])
    log.detach()
    emit_debug_event("after.detach")

    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 1
    record = json.loads(lines[0])
    assert record["event"] == "keybinding.edit"
    assert record["category"] == "keybinding"
    assert record["data"] == {"binding": "Quit", "keys": ["x"]}
