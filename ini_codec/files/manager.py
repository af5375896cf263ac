"""Gestionnaire de fichiers INI sur disque.

Ce module fournit LocalIniFileManager, qui s'appuie sur IniParser et
IniSerializer pour lire, écrire et mettre à jour des fichiers INI.
"""

from collections.abc import Iterable, Mapping
from pathlib import Path

from ini_codec.codec.parser import IniParser
from ini_codec.codec.serializer import IniSerializer
from ini_codec.config.settings import IniSettings
from ini_codec.document.document import Document
from ini_codec.files.base import IniFileManager
from ini_codec.logging.base import Logger


class LocalIniFileManager(IniFileManager):
    """Gestionnaire de fichiers INI du système de fichiers local.

    Attributes:
        logger: Instance de Logger pour tracer les opérations.
        settings: Réglages (encodage, ordre des sections).

    Example:
        >>> from ini_codec import FileLogger
        >>> logger = FileLogger("/tmp/ini_codec.log")
        >>> manager = LocalIniFileManager(logger)
        >>> manager.update_section(Path("/tmp/app.ini"), "main", {"debug": "no"})
        True
    """

    def __init__(self, logger: Logger, settings: IniSettings | None = None) -> None:
        """Initialise le gestionnaire.

        Args:
            logger: Instance de Logger pour les messages.
            settings: Réglages ; valeurs par défaut si None.
        """
        self.logger = logger
        self.settings = settings or IniSettings()
        self._parser = IniParser(logger=logger, encoding=self.settings.encoding)
        self._serializer = IniSerializer(
            logger=logger,
            encoding=self.settings.encoding,
            sort_sections=self.settings.sort_sections,
        )

    def read(self, path: Path) -> Document:
        if not path.exists():
            raise FileNotFoundError(f"Fichier non trouvé : {path}")

        with open(path, "rb") as f:
            document = self._parser.parse(f).document

        self.logger.log_info(f"Fichier {path} lu avec succès.")
        return document

    def write(self, path: Path, document: Document) -> int:
        with open(path, "wb") as f:
            written = self._serializer.write_to(document, f)

        self.logger.log_info(f"Fichier {path} écrit avec succès.")
        return written

    def update_section(
        self, path: Path, section: str, values: Mapping[str, str]
    ) -> bool:
        """Met à jour une section et n'écrit que si une valeur change.

        Args:
            path: Chemin du fichier INI ; créé s'il n'existe pas.
            section: Nom de la section.
            values: Paires clé=valeur à affecter.

        Returns:
            True si des modifications ont été écrites, False sinon.
        """
        document = self.read(path) if path.exists() else Document()

        updated = False
        for key, new_value in values.items():
            if document.get(section, key) != new_value:
                document.set(section, key, new_value)
                updated = True
                self.logger.log_info(
                    f"Modification : [{section}] {key} mis à jour"
                )

        if updated:
            self.write(path, document)
            self.logger.log_info(f"Fichier {path} mis à jour.")
        else:
            self.logger.log_info(
                f"Fichier {path} déjà configuré avec les valeurs cibles."
            )

        return updated

    def remove_keys(self, path: Path, section: str, keys: Iterable[str]) -> bool:
        """Supprime des clés et n'écrit que si l'une d'elles existait.

        Raises:
            FileNotFoundError: Si le fichier n'existe pas.
        """
        document = self.read(path)

        removed = False
        for key in keys:
            if document.get(section, key) is not None:
                document.unset(section, key)
                removed = True
                self.logger.log_info(f"Suppression : [{section}] {key}")

        if removed:
            self.write(path, document)
            if not document.has_section(section):
                self.logger.log_warning(
                    f"Section [{section}] vide, retirée de {path}."
                )

        return removed
