"""Module de gestion des erreurs."""

from ini_codec.errors.base import ErrorHandler, ErrorHandlerChain
from ini_codec.errors.exceptions import (ApplicationError,
                                         ConfigurationError,
                                         IniError,
                                         IniFormatError,
                                         EmptySectionNameError,
                                         EmptyKeyNameError,
                                         MissingDelimiterError,
                                         StreamError,
                                         InvalidNameError)
from ini_codec.errors.console_handler import ConsoleErrorHandler
from ini_codec.errors.logger_handler import LoggerErrorHandler


__all__ = [
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
    "ConsoleErrorHandler",
    "LoggerErrorHandler",
    "ErrorHandlerChain",
]
