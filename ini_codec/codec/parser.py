"""Analyseur ligne à ligne du format INI.

Chaque ligne, une fois débarrassée de ses espaces, est soit vide, soit
un commentaire (``;`` ou ``#`` en tête), soit un en-tête ``[section]``,
soit une paire ``clé=valeur`` découpée sur le premier ``=``.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import IO

from ini_codec.codec.escaping import parse_value
from ini_codec.document.document import Document
from ini_codec.document.names import ROOT_SECTION, normalize_name
from ini_codec.errors.exceptions import (EmptyKeyNameError,
                                         EmptySectionNameError,
                                         IniError,
                                         MissingDelimiterError,
                                         StreamError)
from ini_codec.logging.base import Logger

COMMENT_PREFIXES = (";", "#")


@dataclass(frozen=True)
class ParseResult:
    """Résultat d'une analyse complète.

    Attributes:
        document: Document obtenu.
        bytes_read: Nombre approximatif d'octets consommés
            (longueur de chaque ligne + 1), à titre indicatif.
    """

    document: Document
    bytes_read: int


class IniParser:
    """Analyseur INI.

    L'analyse s'arrête à la première erreur. Elle n'est pas
    transactionnelle : les paires lues avant la ligne fautive restent
    fusionnées dans le document cible.

    Attributes:
        logger: Logger optionnel pour tracer les analyses.
        encoding: Encodage des lignes lues depuis un flux binaire.

    Example:
        >>> import io
        >>> result = IniParser().parse(io.StringIO("[Main]\\nName = demo\\n"))
        >>> result.document.get("main", "name")
        'demo'
    """

    def __init__(
        self,
        logger: Logger | None = None,
        encoding: str = "utf-8",
    ) -> None:
        self.logger = logger
        self.encoding = encoding

    def parse(self, stream: IO) -> ParseResult:
        """Analyse un flux dans un nouveau document.

        Args:
            stream: Flux texte ou binaire ; il n'est pas fermé.

        Returns:
            ParseResult avec le document et le nombre d'octets lus.

        Raises:
            IniFormatError: À la première ligne mal formée.
            StreamError: Si la lecture du flux échoue.
        """
        document = Document()
        bytes_read = self.parse_into(document, stream)
        return ParseResult(document=document, bytes_read=bytes_read)

    def parse_into(self, document: Document, stream: IO) -> int:
        """Analyse un flux et fusionne les paires dans ``document``.

        Une clé déjà présente est écrasée.

        Args:
            document: Document cible, modifié en place.
            stream: Flux texte ou binaire ; il n'est pas fermé.

        Returns:
            Nombre approximatif d'octets lus.

        Raises:
            IniFormatError: À la première ligne mal formée.
            StreamError: Si la lecture du flux échoue.
        """
        if isinstance(stream, (str, bytes)):
            raise TypeError("parse_into() attend un flux, pas une chaîne")

        section = ROOT_SECTION
        bytes_read = 0
        line_count = 0
        try:
            for line_count, line, size in self._iter_lines(stream):
                bytes_read += size
                section = self._consume_line(document, section, line_count, line)
        except IniError as error:
            if self.logger is not None:
                self.logger.log_error(f"Analyse INI interrompue : {error}")
            raise

        if self.logger is not None:
            self.logger.log_info(
                f"Analyse INI terminée : {line_count} ligne(s), "
                f"{bytes_read} octet(s) lus."
            )
        return bytes_read

    def _iter_lines(self, stream: IO) -> Iterator[tuple[int, str, int]]:
        """Produit (numéro de ligne, texte, taille en octets + 1).

        Le texte est décodé mais pas encore débarrassé de ses espaces ;
        un retour chariot final fait encore partie de la ligne.
        """
        line_number = 0
        try:
            for raw in stream:
                line_number += 1
                if isinstance(raw, bytes):
                    raw = raw.removesuffix(b"\n")
                    size = len(raw) + 1
                    line = raw.decode(self.encoding)
                else:
                    line = raw.removesuffix("\n")
                    size = len(line.encode(self.encoding, "replace")) + 1
                yield line_number, line, size
        except (OSError, ValueError) as error:
            raise StreamError(
                f"lecture du flux impossible (ligne {line_number}) : {error}"
            ) from error

    @staticmethod
    def _consume_line(
        document: Document, section: str, line_number: int, line: str
    ) -> str:
        """Applique une ligne au document et retourne la section courante."""
        line = line.strip()
        if not line or line.startswith(COMMENT_PREFIXES):
            return section

        if len(line) >= 2 and line[0] == "[" and line[-1] == "]":
            name = normalize_name(line[1:-1].strip())
            if not name:
                raise EmptySectionNameError(line_number)
            # La section n'est créée qu'à sa première clé
            return name

        key, delimiter, value = line.partition("=")
        if not delimiter:
            raise MissingDelimiterError(line_number)

        key = normalize_name(key.strip())
        if not key:
            raise EmptyKeyNameError(line_number)

        document._store(section, key, parse_value(value.strip()))
        return section
