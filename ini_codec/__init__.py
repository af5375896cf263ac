"""
ini_codec - Lecture et écriture de fichiers de configuration INI.

Modules disponibles:
- document: Modèle en mémoire (Document, Section, ThreadSafeDocument)
- codec: Analyse et sérialisation (IniParser, IniSerializer, loads, dumps)
- files: Gestion de fichiers INI sur disque (LocalIniFileManager)
- config: Réglages TOML/JSON validés par Pydantic (IniSettings)
- logging: Gestion des logs (Logger, FileLogger)
- errors: Exceptions et handlers d'erreurs
"""

__version__ = "1.0.0"

from ini_codec.logging import Logger, FileLogger
from ini_codec.errors import (
    ApplicationError,
    ConfigurationError,
    IniError,
    IniFormatError,
    EmptySectionNameError,
    EmptyKeyNameError,
    MissingDelimiterError,
    StreamError,
    InvalidNameError,
    ErrorHandler,
    ErrorHandlerChain,
    ConsoleErrorHandler,
    LoggerErrorHandler,
)
from ini_codec.document import (
    IniDocument,
    Document,
    Section,
    ThreadSafeDocument,
    ROOT_SECTION,
)
from ini_codec.codec import (
    IniParser,
    ParseResult,
    IniSerializer,
    load,
    loads,
    dump,
    dumps,
)
from ini_codec.config import (
    IniSettings,
    load_settings,
)
from ini_codec.files import IniFileManager, LocalIniFileManager

__all__ = [
    # Logging
    "Logger",
    "FileLogger",
    # Erreurs
    "ApplicationError",
    "ConfigurationError",
    "IniError",
    "IniFormatError",
    "EmptySectionNameError",
    "EmptyKeyNameError",
    "MissingDelimiterError",
    "StreamError",
    "InvalidNameError",
    "ErrorHandler",
    "ErrorHandlerChain",
    "ConsoleErrorHandler",
    "LoggerErrorHandler",
    # Document
    "IniDocument",
    "Document",
    "Section",
    "ThreadSafeDocument",
    "ROOT_SECTION",
    # Codec
    "IniParser",
    "ParseResult",
    "IniSerializer",
    "load",
    "loads",
    "dump",
    "dumps",
    # Config
    "IniSettings",
    "load_settings",
    # Fichiers
    "IniFileManager",
    "LocalIniFileManager",
]
