"""Façade thread-safe autour d'un Document.

Un seul verrou lecteurs/rédacteur protège tout le document : les
lectures (get, has_section, sections, keys) s'exécutent en parallèle ;
les modifications (set, unset, clear) et les opérations complètes sur
flux (read_from, write_to) sont exclusives.
"""

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from typing import IO

from ini_codec.document.base import IniDocument
from ini_codec.document.document import Document


class ReadWriteLock:
    """Verrou lecteurs/rédacteur donnant la priorité aux rédacteurs.

    Dès qu'un rédacteur attend, les nouveaux lecteurs sont mis en
    attente afin qu'un flux continu de lectures ne bloque pas les
    écritures indéfiniment. Non réentrant.
    """

    def __init__(self) -> None:
        self._condition = threading.Condition(threading.Lock())
        self._readers = 0
        self._writers_waiting = 0
        self._writing = False

    def acquire_read(self) -> None:
        with self._condition:
            while self._writing or self._writers_waiting:
                self._condition.wait()
            self._readers += 1

    def release_read(self) -> None:
        with self._condition:
            self._readers -= 1
            if self._readers == 0:
                self._condition.notify_all()

    def acquire_write(self) -> None:
        with self._condition:
            self._writers_waiting += 1
            acquired = False
            try:
                while self._writing or self._readers:
                    self._condition.wait()
                self._writing = True
                acquired = True
            finally:
                self._writers_waiting -= 1
                if not acquired:
                    # Lecteurs en attente de ce rédacteur
                    self._condition.notify_all()

    def release_write(self) -> None:
        with self._condition:
            self._writing = False
            self._condition.notify_all()

    @contextmanager
    def read_locked(self) -> Iterator[None]:
        """Contexte d'accès partagé."""
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def write_locked(self) -> Iterator[None]:
        """Contexte d'accès exclusif."""
        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()


class ThreadSafeDocument(IniDocument):
    """Document INI partageable entre threads.

    Attributes:
        lock: Verrou lecteurs/rédacteur protégeant le document.

    Example:
        >>> shared = ThreadSafeDocument()
        >>> shared.set("cache", "ttl", "60")
        >>> shared.get("CACHE", "ttl")
        '60'
    """

    def __init__(self, document: Document | None = None) -> None:
        """Initialise la façade.

        Args:
            document: Document à protéger. Il ne doit plus être utilisé
                directement ensuite. Si None, un document vide est créé.
        """
        self._document = document if document is not None else Document()
        self.lock = ReadWriteLock()

    def get(self, section: str, key: str) -> str | None:
        with self.lock.read_locked():
            return self._document.get(section, key)

    def get_default(self, section: str, key: str, default: str) -> str:
        with self.lock.read_locked():
            return self._document.get_default(section, key, default)

    def set(self, section: str, key: str, value: str) -> None:
        with self.lock.write_locked():
            self._document.set(section, key, value)

    def unset(self, section: str, key: str) -> None:
        with self.lock.write_locked():
            self._document.unset(section, key)

    def has_section(self, section: str) -> bool:
        with self.lock.read_locked():
            return self._document.has_section(section)

    def sections(self) -> list[str]:
        with self.lock.read_locked():
            return self._document.sections()

    def keys(self, section: str) -> list[str]:
        with self.lock.read_locked():
            return self._document.keys(section)

    def clear(self) -> None:
        """Supprime toutes les sections."""
        with self.lock.write_locked():
            self._document.clear()

    def to_dict(self) -> dict[str, dict[str, str]]:
        """Retourne une copie cohérente du contenu."""
        with self.lock.read_locked():
            return self._document.to_dict()

    def snapshot(self) -> Document:
        """Retourne une copie indépendante du document protégé."""
        with self.lock.read_locked():
            return self._document.copy()

    def read_from(self, stream: IO) -> int:
        with self.lock.write_locked():
            return self._document.read_from(stream)

    def write_to(self, stream: IO) -> int:
        with self.lock.write_locked():
            return self._document.write_to(stream)
