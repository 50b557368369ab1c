"""Pytest fixtures for kanban-tui tests."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

import pytest

_TEST_CONFIG_DIR = Path(tempfile.mkdtemp(prefix="kanban-tui-test-config-"))
os.environ.setdefault("KANBAN_TUI_CONFIG_DIR", str(_TEST_CONFIG_DIR))

for _var in ("KANBAN_TUI_SETTINGS_PATH", "KANBAN_TUI_DEBUG", "KANBAN_TUI_DEBUG_LOG", "KANBAN_TUI_MODE"):
    os.environ.pop(_var, None)


@pytest.fixture(autouse=True)
def _reset_shared_state():
    """Keep the settings singleton and debug listeners from leaking between tests."""
    from kanban_tui.domains.shell.store.settings import SettingsStore
    from kanban_tui.shared.core.debug_events import clear_debug_listeners

    SettingsStore.reset_instance()
    clear_debug_listeners()
    yield
    SettingsStore.reset_instance()
    clear_debug_listeners()


@pytest.fixture
def debug_events():
    """Collect debug events emitted during the test."""
    from kanban_tui.shared.core.debug_events import DebugEventLog

    log = DebugEventLog().attach()
    yield log
    log.detach()

