"""
Exceptions personnalisées pour ini_codec.

Les erreurs de format portent le numéro de ligne (base 1) où la
violation a été détectée ; les erreurs de flux enveloppent l'erreur
d'entrée/sortie d'origine via ``__cause__``.
"""


class ApplicationError(Exception):
    """Exception de base pour toutes les applications."""
    pass


class ConfigurationError(ApplicationError):
    """Exception de base pour les réglages de la bibliothèque."""
    pass


class IniError(ApplicationError):
    """Exception de base pour toutes les erreurs INI."""
    pass


class IniFormatError(IniError):
    """Ligne INI mal formée.

    Attributes:
        line_number: Numéro de la ligne fautive (base 1).
        reason: Description de la violation.
    """

    reason = "invalid format"

    def __init__(self, line_number: int, reason: str | None = None) -> None:
        self.line_number = line_number
        if reason is not None:
            self.reason = reason
        super().__init__(f"line {line_number}: {self.reason}")


class EmptySectionNameError(IniFormatError):
    """En-tête de section vide (``[]`` ou ``[   ]``)."""

    reason = "empty section name"


class EmptyKeyNameError(IniFormatError):
    """Ligne clé=valeur sans clé (ligne commençant par ``=``)."""

    reason = "empty key name"


class MissingDelimiterError(IniFormatError):
    """Ligne qui n'est ni vide, ni commentaire, ni en-tête, et sans ``=``."""

    reason = "invalid format, missing '='"


class StreamError(IniError):
    """Échec de lecture ou d'écriture du flux sous-jacent."""
    pass


class InvalidNameError(IniError, ValueError):
    """Nom de section ou de clé refusé par ``Document.set``."""
    pass
