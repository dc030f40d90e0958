"""Modèle de données ordonné : entrées, sections et lignes de commentaire.

Le store possède ses éléments de premier niveau (Section ou CommentLine)
dans une seule séquence ordonnée ; chaque Section possède ses Entry.
Aucun partage, aucun cycle.
"""

from dataclasses import dataclass, field
from typing import Optional, Union

COMMENT_PREFIX = "#"


@dataclass
class Entry:
    """Paire clé/valeur d'une section."""

    key: str
    value: str


@dataclass
class Section:
    """Section nommée [name] avec ses entrées dans l'ordre d'ajout."""

    name: str
    entries: list[Entry] = field(default_factory=list)

    def find(self, key: str) -> Optional[Entry]:
        """Retourne l'entrée portant cette clé, ou None."""
        for entry in self.entries:
            if entry.key == key:
                return entry
        return None

    def set(self, key: str, value: str) -> None:
        """Remplace la valeur en place, ou ajoute l'entrée en fin."""
        entry = self.find(key)
        if entry is None:
            self.entries.append(Entry(key, value))
        else:
            entry.value = value

    def remove(self, key: str) -> bool:
        entry = self.find(key)
        if entry is None:
            return False
        self.entries.remove(entry)
        return True


@dataclass
class CommentLine:
    """Ligne de commentaire conservée telle quelle entre deux sections.

    Se comporte comme une section sans entrée dont le nom est le texte
    du commentaire.
    """

    text: str

    @property
    def name(self) -> str:
        return self.text

    @property
    def entries(self) -> list[Entry]:
        return []


Item = Union[Section, CommentLine]


@dataclass(frozen=True)
class SectionHandle:
    """Vue en lecture seule d'un élément lors de l'itération."""

    name: str
