"""Module codec : lecture et écriture du texte INI.

Classes principales:
    - IniParser: Analyse un flux en Document
    - IniSerializer: Sérialise un Document en texte INI

Fonctions utilitaires:
    - load / loads: Analyse un flux ou un texte
    - dump / dumps: Écrit dans un flux ou retourne un texte
    - needs_quoting / format_value / parse_value: Règles d'échappement
"""

from ini_codec.codec.escaping import (
    escape_value,
    format_value,
    needs_quoting,
    parse_value,
    unescape_value,
)
from ini_codec.codec.parser import IniParser, ParseResult
from ini_codec.codec.serializer import IniSerializer
from ini_codec.codec.shortcuts import dump, dumps, load, loads

__all__ = [
    "IniParser",
    "ParseResult",
    "IniSerializer",
    "load",
    "loads",
    "dump",
    "dumps",
    "needs_quoting",
    "escape_value",
    "format_value",
    "parse_value",
    "unescape_value",
]
