"""Tests for the command-line entry point."""

from __future__ import annotations

from kanban_tui import cli
from kanban_tui.domains.shell.app.main import KanbanApp


def test_list_modes(capsys):
    assert cli.main(["--list-modes"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "1  Zen"
    assert lines[8] == "9  Logs Only"
    assert len(lines) == 9


def test_runs_app_with_runtime_options(monkeypatch, tmp_path):
    started = []

    def fake_run(self):
        started.append(self)

    monkeypatch.setattr(KanbanApp, "run", fake_run)

    code = cli.main(["--mode", "2", "--settings", str(tmp_path / "settings.json"), "--debug"])

    assert code == 0
    app = started[0]
    assert app.app_context.ui_mode.value == "Title and Body"
    assert app.keybinding_manager.settings_store.path == tmp_path / "settings.json"
    assert app.debug_log is not None


def test_unknown_mode_warns(monkeypatch, capsys, tmp_path):
    started = []
    monkeypatch.setattr(KanbanApp, "run", lambda self: started.append(self))

    cli.main(["--mode", "Sideways", "--settings", str(tmp_path / "settings.json")])

    assert "Unknown mode 'Sideways'" in capsys.readouterr().err
    assert started[0].app_context.ui_mode.value == "Zen"
