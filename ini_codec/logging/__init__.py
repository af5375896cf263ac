"""Module de logging."""

from ini_codec.logging.base import Logger
from ini_codec.logging.file_logger import FileLogger

__all__ = [
    "Logger",
    "FileLogger",
]
