"""Fonctions utilitaires à la manière du module ``json``."""

import io
from typing import IO

from ini_codec.codec.parser import IniParser
from ini_codec.codec.serializer import IniSerializer
from ini_codec.document.document import Document


def load(stream: IO) -> Document:
    """Analyse un flux INI dans un nouveau document."""
    return IniParser().parse(stream).document


def loads(text: str) -> Document:
    """Analyse un texte INI dans un nouveau document.

    Raises:
        IniFormatError: À la première ligne mal formée.
    """
    return load(io.StringIO(text))


def dump(document: Document, stream: IO, sort_sections: bool = False) -> int:
    """Écrit un document dans un flux et retourne le nombre d'octets écrits."""
    return IniSerializer(sort_sections=sort_sections).write_to(document, stream)


def dumps(document: Document, sort_sections: bool = False) -> str:
    """Retourne le texte INI d'un document."""
    return IniSerializer(sort_sections=sort_sections).serialize(document)
