"""Main Textual application for kanban-tui."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, ClassVar

from rich.markup import escape
from textual.app import App, ComposeResult
from textual.containers import Vertical
from textual.events import Key as KeyEvent
from textual.widgets import Static

from kanban_tui.core.actions import Action
from kanban_tui.core.app_context import AppContext, AppStatus
from kanban_tui.core.focus import Focus
from kanban_tui.core.key_router import resolve_action
from kanban_tui.core.keybindings import KeyBindingName
from kanban_tui.core.keys import Key, KeyParseError
from kanban_tui.core.mode_transition import (
    ModeRenderers,
    activate_mode,
    focus_next,
    focus_prev,
    transition_to,
)
from kanban_tui.core.ui_mode import UiMode
from kanban_tui.domains.shell.app.help_text import generate_focus_text, generate_help_text
from kanban_tui.domains.shell.app.keybinding_manager import KeyBindingManager, parse_mode
from kanban_tui.shared.app import RuntimeConfig
from kanban_tui.shared.core.debug_events import DebugEventLog, emit_debug_event
from kanban_tui.shared.core.protocols import SettingsStoreProtocol

ActionDispatcher = Callable[[Action, AppContext], None]

BINDING_ROWS: tuple[KeyBindingName, ...] = tuple(KeyBindingName)

CANCEL_CAPTURE_KEY = Key("escape")

FORM_MODES = (
    UiMode.CONFIG_MENU,
    UiMode.CREATE_THEME,
    UiMode.LOAD_CLOUD_SAVE,
    UiMode.LOAD_LOCAL_SAVE,
    UiMode.LOGIN,
    UiMode.MAIN_MENU,
    UiMode.NEW_BOARD,
    UiMode.NEW_CARD,
    UiMode.RESET_PASSWORD,
    UiMode.SIGN_UP,
)


class KanbanApp(App):
    """Terminal shell driving the navigation core.

    Navigation actions are handled here through ``action_<value>`` methods;
    every other action goes to the injected dispatcher.
    """

    TITLE = "kanban-tui"

    BINDINGS: ClassVar[list[Any]] = []

    # ctrl+p belongs to the rebindable command palette toggle
    ENABLE_COMMAND_PALETTE = False

    CSS = """
    #mode-title {
        height: 1;
        background: $primary;
        color: $text;
        padding: 0 1;
    }
    #mode-focus {
        height: 1;
        padding: 0 1;
    }
    #mode-body {
        padding: 1 2;
    }
    """

    def __init__(
        self,
        *,
        runtime: RuntimeConfig | None = None,
        settings_store: SettingsStoreProtocol | None = None,
        dispatcher: ActionDispatcher | None = None,
    ) -> None:
        super().__init__()
        self._runtime = runtime or RuntimeConfig.from_env()
        if settings_store is None and self._runtime.settings_path is not None:
            from kanban_tui.domains.shell.store.settings import SettingsStore

            settings_store = SettingsStore(self._runtime.settings_path)
        self._keybinding_manager = KeyBindingManager(settings_store)
        settings = self._keybinding_manager.initialize()
        self._default_view = self._keybinding_manager.load_default_view(settings)
        self.app_context = AppContext(
            keybindings=self._keybinding_manager.load_keybindings(settings),
            ui_mode=self._resolve_initial_mode(),
        )
        self._dispatcher = dispatcher
        self._renderers = self._build_renderers()
        self.dispatched_actions: list[Action] = []
        self.last_drawn: tuple[UiMode, Focus] | None = None
        self._views_ready = False
        self._binding_cursor = 0
        self._capture_target: KeyBindingName | None = None
        self.debug_log: DebugEventLog | None = None
        if self._runtime.debug_mode:
            self.debug_log = DebugEventLog(self._runtime.debug_log_path).attach()

    @property
    def keybinding_manager(self) -> KeyBindingManager:
        return self._keybinding_manager

    @property
    def mode_renderers(self) -> ModeRenderers:
        return self._renderers

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Static(id="mode-title")
            yield Static(id="mode-focus")
            yield Static(id="mode-body")

    def on_mount(self) -> None:
        self._views_ready = True
        self.app_context.status = AppStatus.INITIALIZED
        self.refresh_mode()

    def on_unmount(self) -> None:
        if self.debug_log is not None:
            self.debug_log.detach()

    def on_key(self, event: KeyEvent) -> None:
        try:
            key = Key.from_event(event)
        except KeyParseError:
            return
        capturing = self.app_context.status is AppStatus.KEY_BIND_MODE
        if self.handle_key_press(key) is not None or capturing:
            event.stop()
            event.prevent_default()

    def handle_key_press(self, key: Key) -> Action | None:
        """Resolve ``key`` and dispatch the resulting action, if any.

        While a binding is being recorded, the key is recorded instead.
        """
        action = resolve_action(self.app_context, key)
        if action is None:
            if self.app_context.status is AppStatus.KEY_BIND_MODE:
                self._record_binding_key(key)
            return None
        self.route_action(action)
        return action

    def route_action(self, action: Action) -> None:
        self.dispatched_actions.append(action)
        emit_debug_event(
            "action.dispatch",
            category="action",
            action=action.value,
            mode=str(self.app_context.ui_mode),
        )
        handler = getattr(self, f"action_{action.value}", None)
        if callable(handler):
            handler()
        else:
            self._forward(action)
        # The dispatcher may have changed mode or focus directly
        self.refresh_mode()

    def _forward(self, action: Action) -> None:
        if self._dispatcher is not None:
            self._dispatcher(action, self.app_context)

    @property
    def selected_binding(self) -> KeyBindingName:
        return BINDING_ROWS[self._binding_cursor]

    @property
    def capturing_binding(self) -> KeyBindingName | None:
        return self._capture_target

    def _editing_keybindings(self) -> bool:
        return (
            self.app_context.ui_mode is UiMode.EDIT_KEYBINDINGS
            and self.app_context.focus is Focus.EDIT_KEYBINDINGS_TABLE
        )

    def start_key_capture(self, name: KeyBindingName) -> None:
        """Record the next key pressed as the only key bound to ``name``."""
        self._capture_target = name
        self.app_context.status = AppStatus.KEY_BIND_MODE
        emit_debug_event("keybinding.capture_started", category="keybinding", binding=name.value)

    def _record_binding_key(self, key: Key) -> None:
        name = self._capture_target
        self._capture_target = None
        self.app_context.status = AppStatus.INITIALIZED
        if name is None:
            return
        if key == CANCEL_CAPTURE_KEY:
            emit_debug_event("keybinding.capture_cancelled", category="keybinding", binding=name.value)
            self.refresh_mode()
            return
        result = self.app_context.keybindings.try_edit_keybinding(name.value, [key])
        self.refresh_mode()
        if self._views_ready:
            self.notify(result.message)

    def refresh_mode(self) -> None:
        activate_mode(self.app_context, self._renderers)

    def enter_ui_mode(self, mode: UiMode) -> None:
        transition_to(self.app_context, mode, self._renderers)

    # Navigation actions

    def action_accept(self) -> None:
        if self._editing_keybindings():
            self.start_key_capture(self.selected_binding)
        else:
            self._forward(Action.ACCEPT)

    def action_up(self) -> None:
        if self._editing_keybindings():
            self._binding_cursor = (self._binding_cursor - 1) % len(BINDING_ROWS)
        else:
            self._forward(Action.UP)

    def action_down(self) -> None:
        if self._editing_keybindings():
            self._binding_cursor = (self._binding_cursor + 1) % len(BINDING_ROWS)
        else:
            self._forward(Action.DOWN)

    def action_take_user_input(self) -> None:
        self.app_context.status = AppStatus.USER_INPUT
        self._forward(Action.TAKE_USER_INPUT)

    def action_stop_user_input(self) -> None:
        self.app_context.status = AppStatus.INITIALIZED
        self._forward(Action.STOP_USER_INPUT)

    def action_next_focus(self) -> None:
        focus_next(self.app_context)

    def action_previous_focus(self) -> None:
        focus_prev(self.app_context)

    def action_go_to_main_menu(self) -> None:
        self.app_context.close_popup()
        self.enter_ui_mode(UiMode.MAIN_MENU)

    def action_open_config_menu(self) -> None:
        self.app_context.close_popup()
        self.enter_ui_mode(UiMode.CONFIG_MENU)

    def action_go_to_previous_ui_mode_or_cancel(self) -> None:
        if self.app_context.popup_active:
            self.app_context.close_popup()
            return
        previous = self.app_context.previous_ui_mode
        if previous is None or previous is self.app_context.ui_mode:
            return
        self.enter_ui_mode(previous)

    def action_reset_ui(self) -> None:
        self.app_context.close_popup()
        self.app_context.set_focus(self._default_view.available_targets()[0])
        self.enter_ui_mode(self._default_view)

    def action_save_state(self) -> None:
        self._keybinding_manager.save_keybindings(self.app_context.keybindings)
        if self.app_context.ui_mode.is_view_mode():
            self._default_view = self.app_context.ui_mode
            self._keybinding_manager.save_default_view(self.app_context.ui_mode)
        self.notify("Settings saved")

    def action_quit(self) -> None:
        self.exit()

    # Draw routines

    def _build_renderers(self) -> ModeRenderers:
        renderers = ModeRenderers()
        renderers.register(UiMode.view_modes(), self._draw_layout)
        renderers.register((UiMode.HELP_MENU, UiMode.EDIT_KEYBINDINGS), self._draw_keybindings)
        renderers.register(FORM_MODES, self._draw_form)
        return renderers

    def _draw(self, ctx: AppContext, body: str) -> None:
        self.last_drawn = (ctx.ui_mode, ctx.focus)
        if not self._views_ready:
            return
        self.query_one("#mode-title", Static).update(escape(str(ctx.ui_mode)))
        self.query_one("#mode-focus", Static).update(generate_focus_text(ctx.ui_mode, ctx.focus))
        self.query_one("#mode-body", Static).update(body)

    def _draw_layout(self, ctx: AppContext) -> None:
        panels = ", ".join(target.label for target in ctx.ui_mode.available_targets())
        self._draw(ctx, f"[dim]Panels:[/] {escape(panels)}")

    def _draw_keybindings(self, ctx: AppContext) -> None:
        body = generate_help_text(ctx.keybindings)
        if ctx.ui_mode is UiMode.EDIT_KEYBINDINGS:
            selected = escape(self.selected_binding.description)
            if self._capture_target is not None:
                header = f"[bold $warning]Press a key for {selected}[/] [dim](esc cancels)[/]"
            else:
                header = f"[dim]Selected:[/] [reverse]{selected}[/]"
            body = f"{header}\n\n{body}"
        self._draw(ctx, body)

    def _draw_form(self, ctx: AppContext) -> None:
        self._draw(ctx, f"[dim]Editing:[/] {escape(ctx.focus.label)}")

    def _resolve_initial_mode(self) -> UiMode:
        requested = self._runtime.initial_mode
        if requested is None:
            return self._default_view
        mode = parse_mode(requested)
        if mode is None:
            emit_debug_event(
                "ui_mode.invalid_label",
                category="ui_mode",
                level=logging.WARNING,
                value=requested,
                fallback=str(self._default_view),
            )
            return self._default_view
        return mode
