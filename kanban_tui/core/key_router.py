"""Route decoded keys to actions for the current context."""

from __future__ import annotations

from kanban_tui.core.actions import Action
from kanban_tui.core.app_context import AppContext, AppStatus
from kanban_tui.core.keys import Key


def resolve_action(ctx: AppContext, key: Key) -> Action | None:
    """Resolve ``key`` against the context's keybinding table.

    While a new binding is being recorded every key is captured, so nothing
    resolves.
    """
    if ctx.status is AppStatus.KEY_BIND_MODE:
        return None
    return ctx.keybindings.key_to_action(key)
