"""Runtime configuration."""

from .runtime import RuntimeSettings, get_settings

__all__ = ["RuntimeSettings", "get_settings"]
