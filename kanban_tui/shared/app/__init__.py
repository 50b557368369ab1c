from .runtime import RuntimeConfig

__all__ = ["RuntimeConfig"]
