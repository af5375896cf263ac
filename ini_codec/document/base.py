"""Interfaces abstraites pour un document INI.

Ce module définit le contrat (ABC) partagé par :
- Document : implémentation simple, non synchronisée
- ThreadSafeDocument : façade protégée par un verrou lecteurs/rédacteur
"""

from abc import ABC, abstractmethod
from typing import IO


class IniDocument(ABC):
    """Interface pour un document INI complet.

    Un document associe des noms de sections (insensibles à la casse)
    à des paires clé=valeur. Les paires placées avant tout en-tête
    appartiennent à la section ``root``.
    """

    @abstractmethod
    def get(self, section: str, key: str) -> str | None:
        """Retourne la valeur d'une clé.

        Args:
            section: Nom de la section (``root`` pour l'en-tête du fichier).
            key: Nom de la clé.

        Returns:
            La valeur, ou None si la section ou la clé n'existe pas.
        """
        pass

    @abstractmethod
    def get_default(self, section: str, key: str, default: str) -> str:
        """Retourne la valeur d'une clé ou ``default`` si elle est absente.

        Args:
            section: Nom de la section.
            key: Nom de la clé.
            default: Valeur retournée si la clé n'existe pas.

        Returns:
            La valeur trouvée ou la valeur par défaut.
        """
        pass

    @abstractmethod
    def set(self, section: str, key: str, value: str) -> None:
        """Affecte une valeur, en créant la section au besoin.

        Args:
            section: Nom de la section.
            key: Nom de la clé.
            value: Nouvelle valeur (chaîne quelconque).

        Raises:
            InvalidNameError: Si le nom de section ou de clé est invalide.
            TypeError: Si la valeur n'est pas une chaîne.
        """
        pass

    @abstractmethod
    def unset(self, section: str, key: str) -> None:
        """Supprime une clé ; la section disparaît avec sa dernière clé.

        Args:
            section: Nom de la section.
            key: Nom de la clé.
        """
        pass

    @abstractmethod
    def has_section(self, section: str) -> bool:
        """Indique si la section existe (c'est-à-dire contient une clé)."""
        pass

    @abstractmethod
    def sections(self) -> list[str]:
        """Retourne les noms de toutes les sections."""
        pass

    @abstractmethod
    def keys(self, section: str) -> list[str]:
        """Retourne les clés d'une section (liste vide si absente)."""
        pass

    @abstractmethod
    def read_from(self, stream: IO) -> int:
        """Analyse un flux et fusionne son contenu dans le document.

        Args:
            stream: Flux texte ou binaire, jamais fermé par cette méthode.

        Returns:
            Nombre approximatif d'octets lus.

        Raises:
            IniFormatError: Si une ligne est mal formée. Les paires lues
                avant la ligne fautive restent fusionnées.
            StreamError: Si la lecture du flux échoue.
        """
        pass

    @abstractmethod
    def write_to(self, stream: IO) -> int:
        """Sérialise le document dans un flux.

        Args:
            stream: Flux texte ou binaire, jamais fermé par cette méthode.

        Returns:
            Nombre d'octets écrits.

        Raises:
            StreamError: Si l'écriture du flux échoue.
        """
        pass
