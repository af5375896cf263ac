"""Modèle en mémoire d'un fichier INI.

Un Document possède ses sections ; chaque Section possède ses paires
clé=valeur. Les sections sont en lecture seule vues de l'extérieur :
toute modification passe par le Document, qui garantit qu'aucune
section vide n'y subsiste.
"""

from collections.abc import Iterator, Mapping
from typing import IO, Any

from ini_codec.document.base import IniDocument
from ini_codec.document.names import normalize_name, validate_name


class Section(Mapping[str, str]):
    """Groupe nommé de paires clé=valeur, clés insensibles à la casse.

    Attributes:
        name: Nom normalisé de la section.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._entries: dict[str, str] = {}

    def __getitem__(self, key: str) -> str:
        return self._entries[normalize_name(key)]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and normalize_name(key) in self._entries

    def __repr__(self) -> str:
        return f"Section({self.name!r}, {self._entries!r})"

    def _store(self, key: str, value: str) -> None:
        self._entries[key] = value

    def _discard(self, key: str) -> None:
        self._entries.pop(key, None)


class Document(IniDocument):
    """Document INI non synchronisé.

    Pour un accès concurrent, voir ThreadSafeDocument.

    Example:
        >>> doc = Document()
        >>> doc.set("Server", "Host", "example.org")
        >>> doc.get("server", "HOST")
        'example.org'
        >>> doc.sections()
        ['server']
    """

    def __init__(self) -> None:
        self._sections: dict[str, Section] = {}

    @classmethod
    def from_dict(cls, data: Mapping[str, Mapping[str, str]]) -> "Document":
        """Crée un document depuis un dictionnaire imbriqué.

        Args:
            data: Dictionnaire {section: {clé: valeur}}.

        Returns:
            Nouveau document ; les sections vides sont ignorées.

        Raises:
            InvalidNameError: Si un nom est invalide.
            TypeError: Si une valeur n'est pas une chaîne.
        """
        document = cls()
        for section, entries in data.items():
            for key, value in entries.items():
                document.set(section, key, value)
        return document

    def to_dict(self) -> dict[str, dict[str, str]]:
        """Retourne une copie du contenu sous forme {section: {clé: valeur}}."""
        return {name: dict(section) for name, section in self._sections.items()}

    def get(self, section: str, key: str) -> str | None:
        current = self._sections.get(normalize_name(section))
        if current is None:
            return None
        return current.get(key)

    def get_default(self, section: str, key: str, default: str) -> str:
        value = self.get(section, key)
        return default if value is None else value

    def set(self, section: str, key: str, value: str) -> None:
        section = validate_name(section, "section")
        key = validate_name(key, "key")
        if not isinstance(value, str):
            raise TypeError(
                f"value for {section}.{key} must be a str, "
                f"got {type(value).__name__}"
            )
        self._store(section, key, value)

    def unset(self, section: str, key: str) -> None:
        section = normalize_name(section)
        current = self._sections.get(section)
        if current is None:
            return
        current._discard(normalize_name(key))
        if not current:
            del self._sections[section]

    def has_section(self, section: str) -> bool:
        return normalize_name(section) in self._sections

    def sections(self) -> list[str]:
        return list(self._sections)

    def keys(self, section: str) -> list[str]:
        current = self._sections.get(normalize_name(section))
        if current is None:
            return []
        return list(current)

    def clear(self) -> None:
        """Supprime toutes les sections."""
        self._sections.clear()

    def copy(self) -> "Document":
        """Retourne une copie indépendante du document."""
        duplicate = Document()
        for name, section in self._sections.items():
            for key, value in section.items():
                duplicate._store(name, key, value)
        return duplicate

    def read_from(self, stream: IO) -> int:
        from ini_codec.codec.parser import IniParser

        return IniParser().parse_into(self, stream)

    def write_to(self, stream: IO) -> int:
        from ini_codec.codec.serializer import IniSerializer

        return IniSerializer().write_to(self, stream)

    def _store(self, section: str, key: str, value: str) -> None:
        """Affecte une valeur dont les noms sont déjà normalisés.

        Utilisé par le parseur, qui applique ses propres règles de
        découpage et ne passe donc pas par ``validate_name``.
        """
        current = self._sections.get(section)
        if current is None:
            current = Section(section)
            self._sections[section] = current
        current._store(key, value)

    def __getitem__(self, section: str) -> Section:
        return self._sections[normalize_name(section)]

    def __contains__(self, section: object) -> bool:
        return isinstance(section, str) and self.has_section(section)

    def __iter__(self) -> Iterator[str]:
        return iter(self._sections)

    def __len__(self) -> int:
        return len(self._sections)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Document):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f"Document({self.to_dict()!r})"
