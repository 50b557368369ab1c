"""Mode activation, focus movement and layout cycling."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from kanban_tui.core.app_context import AppContext
from kanban_tui.core.focus import Focus
from kanban_tui.core.ui_mode import UiMode
from kanban_tui.shared.core.debug_events import emit_debug_event

DrawRoutine = Callable[[AppContext], None]


class ModeRenderers:
    """Registry selecting one draw routine per UI mode."""

    def __init__(self) -> None:
        self._routines: dict[UiMode, DrawRoutine] = {}

    def register(self, modes: UiMode | Iterable[UiMode], routine: DrawRoutine) -> None:
        if isinstance(modes, UiMode):
            modes = (modes,)
        for mode in modes:
            self._routines[mode] = routine

    def get(self, mode: UiMode) -> DrawRoutine | None:
        return self._routines.get(mode)

    def missing(self) -> list[UiMode]:
        return [mode for mode in UiMode if mode not in self._routines]

    def __contains__(self, mode: object) -> bool:
        return mode in self._routines


def repair_focus(ctx: AppContext) -> bool:
    """Reset focus to the mode's first target if it is not legal there.

    Does nothing while a popup is shown. Returns True if focus changed.
    """
    if ctx.popup_active:
        return False
    targets = ctx.ui_mode.available_targets()
    if not targets or ctx.focus in targets:
        return False
    emit_debug_event(
        "focus.repaired",
        category="focus",
        mode=str(ctx.ui_mode),
        stale=ctx.focus.value,
        focus=targets[0].value,
    )
    ctx.set_focus(targets[0])
    return True


def activate_mode(ctx: AppContext, renderers: ModeRenderers | None = None) -> None:
    """Make the context's mode consistent and draw it.

    Must run after every transition.
    """
    repair_focus(ctx)
    if renderers is None:
        return
    routine = renderers.get(ctx.ui_mode)
    if routine is None:
        emit_debug_event(
            "ui_mode.renderer_missing",
            category="ui_mode",
            level=logging.WARNING,
            mode=str(ctx.ui_mode),
        )
        return
    routine(ctx)


def transition_to(ctx: AppContext, mode: UiMode, renderers: ModeRenderers | None = None) -> None:
    """Switch to ``mode`` and activate it, remembering the mode we left."""
    if mode is not ctx.ui_mode:
        ctx.previous_ui_mode = ctx.ui_mode
    ctx.ui_mode = mode
    activate_mode(ctx, renderers)


def focus_next(ctx: AppContext) -> Focus:
    targets = ctx.ui_mode.available_targets()
    if targets:
        ctx.set_focus(ctx.focus.next(targets))
    return ctx.focus


def focus_prev(ctx: AppContext) -> Focus:
    targets = ctx.ui_mode.available_targets()
    if targets:
        ctx.set_focus(ctx.focus.prev(targets))
    return ctx.focus


def next_view_mode(mode: UiMode) -> UiMode:
    """The layout after ``mode`` in view-mode order (first if not a layout)."""
    view_modes = UiMode.view_modes()
    if mode not in view_modes:
        return view_modes[0]
    return view_modes[(view_modes.index(mode) + 1) % len(view_modes)]


def cycle_view_mode(ctx: AppContext, renderers: ModeRenderers | None = None) -> UiMode:
    transition_to(ctx, next_view_mode(ctx.ui_mode), renderers)
    return ctx.ui_mode
