"""
    LoggerErrorHandler
"""
from ini_codec.errors.base import ErrorHandler
from ini_codec.errors.exceptions import ApplicationError
from ini_codec.logging.base import Logger


class LoggerErrorHandler(ErrorHandler):
    """Handler qui consigne les erreurs via le Logger injecté."""

    def __init__(self,
                 logger: Logger,
                 base_error_type: type[Exception] = ApplicationError
                 ) -> None:
        """Initialise le handler avec un logger.

        Args:
            logger: Instance de Logger pour l'enregistrement des erreurs.
            base_error_type: Classe de base des erreurs connues.
        """
        self.logger = logger
        self.base_error_type = base_error_type

    def handle(self, error: Exception) -> None:
        """Journalise l'erreur, en signalant les erreurs inattendues.

        Args:
            error: L'exception à journaliser.
        """
        if isinstance(error, self.base_error_type):
            self.logger.log_error(f"{type(error).__name__}: {str(error)}")
        else:
            self.logger.log_error(
                f"Erreur inattendue: {type(error).__name__}: {str(error)}"
            )
