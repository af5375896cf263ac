"""Modèle de document INI.

Classes principales:
    - IniDocument: Interface abstraite d'un document INI
    - Document: Document non synchronisé, propriétaire de ses sections
    - Section: Vue en lecture seule d'une section
    - ThreadSafeDocument: Façade protégée par un verrou lecteurs/rédacteur

Example:
    >>> from ini_codec.document import Document
    >>> doc = Document()
    >>> doc.set("main", "name", "demo")
    >>> doc.unset("main", "name")
    >>> doc.has_section("main")
    False
"""

from ini_codec.document.base import IniDocument
from ini_codec.document.document import Document, Section
from ini_codec.document.names import ROOT_SECTION, normalize_name
from ini_codec.document.safe import ReadWriteLock, ThreadSafeDocument

__all__ = [
    "IniDocument",
    "Document",
    "Section",
    "ThreadSafeDocument",
    "ReadWriteLock",
    "ROOT_SECTION",
    "normalize_name",
]
