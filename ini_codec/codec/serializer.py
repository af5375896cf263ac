"""Sérialiseur canonique du format INI."""

import io
from typing import IO

from ini_codec.codec.escaping import format_value
from ini_codec.document.document import Document, Section
from ini_codec.document.names import ROOT_SECTION
from ini_codec.errors.exceptions import StreamError
from ini_codec.logging.base import Logger


def is_binary_stream(stream: IO) -> bool:
    """Indique si un flux attend des octets plutôt que du texte."""
    if isinstance(stream, io.TextIOBase):
        return False
    if isinstance(stream, (io.RawIOBase, io.BufferedIOBase)):
        return True
    return "b" in getattr(stream, "mode", "")


class IniSerializer:
    """Produit le texte INI d'un document.

    La section ``root`` est écrite en premier, sans en-tête, suivie des
    autres sections non vides, chacune terminée par une ligne vide.
    L'ordre des sections suit l'ordre d'insertion, ou l'ordre
    alphabétique avec ``sort_sections=True`` ; il ne fait pas partie
    du contrat de format.

    Attributes:
        logger: Logger optionnel pour tracer les écritures.
        encoding: Encodage utilisé pour les flux binaires et le
            décompte des octets.
        sort_sections: Trier les sections par nom.
    """

    def __init__(
        self,
        logger: Logger | None = None,
        encoding: str = "utf-8",
        sort_sections: bool = False,
    ) -> None:
        self.logger = logger
        self.encoding = encoding
        self.sort_sections = sort_sections

    def serialize(self, document: Document) -> str:
        """Retourne le texte INI du document.

        Args:
            document: Document à sérialiser.

        Returns:
            Texte INI, chaque ligne terminée par ``\\n``.
        """
        lines: list[str] = []

        if document.has_section(ROOT_SECTION):
            lines.extend(self._section_lines(document[ROOT_SECTION]))
            lines.append("")

        names = [name for name in document.sections() if name != ROOT_SECTION]
        if self.sort_sections:
            names.sort()

        for name in names:
            section = document[name]
            if not section:
                continue
            lines.append(f"[{name}]")
            lines.extend(self._section_lines(section))
            lines.append("")

        return "".join(f"{line}\n" for line in lines)

    def write_to(self, document: Document, stream: IO) -> int:
        """Écrit le document dans un flux en une seule opération.

        Args:
            document: Document à sérialiser.
            stream: Flux texte ou binaire ; il n'est pas fermé.

        Returns:
            Nombre d'octets écrits (selon ``encoding``) ; pour un flux
            texte, les caractères non encodables comptent comme un
            caractère de remplacement.

        Raises:
            StreamError: Si l'écriture échoue ; rien n'est annulé.
        """
        text = self.serialize(document)
        try:
            if is_binary_stream(stream):
                data = text.encode(self.encoding)
                size = len(data)
                stream.write(data)
            else:
                # Le flux texte applique son propre encodage
                size = len(text.encode(self.encoding, "replace"))
                stream.write(text)
        except (OSError, ValueError) as error:
            if self.logger is not None:
                self.logger.log_error(f"Écriture INI impossible : {error}")
            raise StreamError(f"écriture du flux impossible : {error}") from error

        if self.logger is not None:
            self.logger.log_info(
                f"Écriture INI terminée : {len(document)} section(s), "
                f"{size} octet(s) écrits."
            )
        return size

    @staticmethod
    def _section_lines(section: Section) -> list[str]:
        return [f"{key}={format_value(value)}" for key, value in section.items()]
