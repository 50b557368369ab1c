"""Debug event emission shared by the core and the shell.

Events are forwarded to the ``kanban_tui`` logger and to any registered
listeners. The shell attaches a :class:`DebugEventLog` when debug mode is on.
"""

from __future__ import annotations

import json
import logging
import time
from collections import deque
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any

logger = logging.getLogger("kanban_tui")

DebugListener = Callable[["DebugEvent"], None]

_listeners: list[DebugListener] = []


@dataclass(frozen=True)
class DebugEvent:
    """A single structured debug event."""

    name: str
    category: str
    data: dict[str, Any] = field(default_factory=dict)
    timestamp: float = field(default_factory=time.time)
    level: int = logging.DEBUG

    @property
    def iso(self) -> str:
        return datetime.fromtimestamp(self.timestamp).isoformat(timespec="milliseconds")

    @property
    def level_name(self) -> str:
        return logging.getLevelName(self.level)

    def to_dict(self) -> dict[str, Any]:
        return {
            "time": self.iso,
            "level": self.level_name,
            "category": self.category,
            "event": self.name,
            "data": {key: _jsonable(value) for key, value in self.data.items()},
        }


def format_debug_data(data: Mapping[str, Any]) -> str:
    """Render event data as ``key=value`` pairs, skipping empty values."""
    parts = []
    for key, value in data.items():
        if value is None:
            continue
        parts.append(f"{key}={value!r}" if isinstance(value, str) else f"{key}={value}")
    return " ".join(parts)


def add_debug_listener(listener: DebugListener) -> None:
    if listener not in _listeners:
        _listeners.append(listener)


def remove_debug_listener(listener: DebugListener) -> None:
    try:
        _listeners.remove(listener)
    except ValueError:
        pass


def clear_debug_listeners() -> None:
    _listeners.clear()


def emit_debug_event(
    name: str,
    *,
    category: str = "general",
    level: int = logging.DEBUG,
    **data: Any,
) -> DebugEvent:
    """Emit a debug event to the logger and all listeners."""
    event = DebugEvent(name=name, category=category, data=dict(data), level=level)
    if logger.isEnabledFor(level):
        logger.log(level, "[%s] %s %s", category, name, format_debug_data(event.data))
    for listener in list(_listeners):
        try:
            listener(event)
        except Exception:
            logger.exception("Debug listener %r failed on %s", listener, name)
    return event


class DebugEventLog:
    """Bounded in-memory history of debug events, optionally mirrored to a file.

    The file receives one JSON object per line.
    """

    def __init__(self, path: Path | None = None, max_events: int = 500) -> None:
        self._events: deque[DebugEvent] = deque(maxlen=max_events)
        self._path = path.expanduser() if path is not None else None
        self._attached = False

    @property
    def path(self) -> Path | None:
        return self._path

    def __call__(self, event: DebugEvent) -> None:
        self._events.append(event)
        if self._path is None:
            return
        self._path.parent.mkdir(parents=True, exist_ok=True)
        with self._path.open("a", encoding="utf-8") as handle:
            handle.write(json.dumps(event.to_dict()) + "\n")

    def __iter__(self) -> Iterator[DebugEvent]:
        return iter(list(self._events))

    def __len__(self) -> int:
        return len(self._events)

    def attach(self) -> DebugEventLog:
        if not self._attached:
            add_debug_listener(self)
            self._attached = True
        return self

    def detach(self) -> None:
        if self._attached:
            remove_debug_listener(self)
            self._attached = False

    def named(self, name: str) -> list[DebugEvent]:
        return [event for event in self._events if event.name == name]

    def clear(self) -> None:
        self._events.clear()


def _jsonable(value: Any) -> Any:
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    if isinstance(value, (list, tuple)):
        return [_jsonable(item) for item in value]
    return str(value)
