"""Interface abstraite pour la gestion de fichiers INI sur disque."""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from pathlib import Path

from ini_codec.document.document import Document


class IniFileManager(ABC):
    """Interface pour la lecture, l'écriture et la mise à jour
    de fichiers INI désignés par leur chemin."""

    @abstractmethod
    def read(self, path: Path) -> Document:
        """Lit un fichier INI.

        Args:
            path: Chemin du fichier INI.

        Returns:
            Document analysé.

        Raises:
            FileNotFoundError: Si le fichier n'existe pas.
            IniFormatError: Si le fichier est mal formé.
        """
        pass

    @abstractmethod
    def write(self, path: Path, document: Document) -> int:
        """Écrit un document dans un fichier INI.

        Args:
            path: Chemin du fichier de destination.
            document: Document à écrire.

        Returns:
            Nombre d'octets écrits.
        """
        pass

    @abstractmethod
    def update_section(
        self, path: Path, section: str, values: Mapping[str, str]
    ) -> bool:
        """Met à jour une section, en créant le fichier au besoin.

        Args:
            path: Chemin du fichier INI.
            section: Nom de la section.
            values: Paires clé=valeur à affecter.

        Returns:
            True si des modifications ont été écrites, False sinon.
        """
        pass

    @abstractmethod
    def remove_keys(self, path: Path, section: str, keys: Iterable[str]) -> bool:
        """Supprime des clés d'une section d'un fichier existant.

        Args:
            path: Chemin du fichier INI.
            section: Nom de la section.
            keys: Clés à supprimer.

        Returns:
            True si des modifications ont été écrites, False sinon.
        """
        pass
