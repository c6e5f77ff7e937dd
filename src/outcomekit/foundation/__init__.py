"""Foundation layer: configuration shared by every other module."""

from .config import LoggingSettings, MessageSettings, OutcomeKitSettings, clear_settings_cache, get_settings

__all__ = ["LoggingSettings", "MessageSettings", "OutcomeKitSettings", "clear_settings_cache", "get_settings"]
