"""Protocols for stores injected into the shell."""

from __future__ import annotations

from typing import Any, Protocol


class SettingsStoreProtocol(Protocol):
    def load_all(self) -> dict[str, Any]: ...

    def save_all(self, settings: dict[str, Any]) -> None: ...

    def get(self, key: str, default: Any = None) -> Any: ...
