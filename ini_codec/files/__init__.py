"""Module de gestion de fichiers INI sur disque."""

from ini_codec.files.base import IniFileManager
from ini_codec.files.manager import LocalIniFileManager

__all__ = [
    "IniFileManager",
    "LocalIniFileManager",
]
