"""Module de configuration."""

from ini_codec.config.settings import IniSettings, LoggingSettings, load_settings

__all__ = [
    "IniSettings",
    "LoggingSettings",
    "load_settings",
]
