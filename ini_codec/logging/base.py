"""Interface abstraite pour la journalisation des opérations INI."""

from abc import ABC, abstractmethod


class Logger(ABC):
    """Interface de journalisation injectée dans le parseur,
    le sérialiseur et le gestionnaire de fichiers."""

    @abstractmethod
    def log_info(self, message: str) -> None:
        """Journalise un message d'information."""
        pass

    @abstractmethod
    def log_warning(self, message: str) -> None:
        """Journalise un avertissement."""
        pass

    @abstractmethod
    def log_error(self, message: str) -> None:
        """Journalise une erreur."""
        pass
