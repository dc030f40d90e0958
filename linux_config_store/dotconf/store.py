"""Store de configuration ordonné, adossé à un fichier INI.

Le store n'est pas synchronisé : un seul propriétaire le modifie
à la fois.
"""

from pathlib import Path
from typing import Callable, Iterator, Optional, Union

from linux_config_store.config.settings import StoreSettings
from linux_config_store.dotconf.accessors import TypedAccessors
from linux_config_store.dotconf.model import (
    COMMENT_PREFIX,
    CommentLine,
    Item,
    Section,
    SectionHandle,
)
from linux_config_store.dotconf.parser import IniStoreParser, ParseReport
from linux_config_store.dotconf.serializer import serialize_items
from linux_config_store.errors.exceptions import FileConfigurationError
from linux_config_store.filesystem.atomic import LinuxAtomicStoreWriter
from linux_config_store.logging.base import Logger
from linux_config_store.logging.standard_logger import StandardLogger

LINE_BREAKS = frozenset("\r\n")


def _require_str(**arguments: object) -> None:
    for name, value in arguments.items():
        if not isinstance(value, str):
            raise TypeError(f"{name} doit être une chaîne, reçu : {value!r}")


def _require_single_line(**arguments: str) -> None:
    for name, value in arguments.items():
        if LINE_BREAKS & set(value):
            raise ValueError(f"{name} ne doit pas contenir de saut de ligne")


class ConfigStore(TypedAccessors):
    """Collection ordonnée de sections et de lignes de commentaire.

    L'ordre des sections et des entrées est l'ordre d'ajout. La
    recherche par nom retourne le premier élément correspondant.

    Attributes:
        logger: Puits des diagnostics (troncature de valeur, parsing).
        settings: Réglages partagés avec le parser et le writer.
        last_report: Bilan du dernier parsing (None pour un store vide).

    Example:
        >>> store = ConfigStore()
        >>> store.set_bool("Adapter", "Discoverable", True)
        >>> store.get_bool("Adapter", "Discoverable", False)
        True
        >>> store.get_int("Adapter", "Missing", 7)
        7
    """

    def __init__(
        self,
        logger: Optional[Logger] = None,
        settings: Optional[StoreSettings] = None,
    ) -> None:
        """
        Crée un store vide.

        Args:
            logger: Instance de Logger (StandardLogger par défaut)
            settings: Réglages (valeurs par défaut si None)
        """
        self.logger = logger or StandardLogger()
        self.settings = settings or StoreSettings()
        self.last_report: Optional[ParseReport] = None
        self._items: list[Item] = []

    @classmethod
    def from_file(
        cls,
        path: Union[str, Path],
        logger: Optional[Logger] = None,
        settings: Optional[StoreSettings] = None,
    ) -> "ConfigStore":
        """Charge un store depuis un fichier.

        Un fichier lisible donne toujours un store, les lignes mal
        formées étant ignorées (voir last_report).

        Args:
            path: Fichier à lire.
            logger: Instance de Logger.
            settings: Réglages du parser.

        Returns:
            Le store chargé.

        Raises:
            FileConfigurationError: Si le fichier ne peut pas être ouvert.
        """
        store = cls(logger, settings)
        try:
            with open(path, "rb") as f:
                store.last_report = IniStoreParser(
                    store.logger, store.settings
                ).parse(f, store)
        except OSError as e:
            store.logger.log_error(
                f"Impossible d'ouvrir le fichier '{path}' : {e}"
            )
            raise FileConfigurationError(str(path), str(e)) from e
        return store

    @classmethod
    def from_string(
        cls,
        text: str,
        logger: Optional[Logger] = None,
        settings: Optional[StoreSettings] = None,
    ) -> "ConfigStore":
        """Construit un store depuis un contenu INI en mémoire."""
        store = cls(logger, settings)
        store.last_report = IniStoreParser(
            store.logger, store.settings
        ).parse_string(text, store)
        return store

    @classmethod
    def clone(cls, source: "ConfigStore") -> "ConfigStore":
        """Copie profonde par réinsertion de chaque triplet.

        Les sections vides et les commentaires ne portent aucun
        triplet et ne sont donc pas copiés.
        """
        copy = cls(source.logger, source.settings)
        for item in source._items:
            for entry in item.entries:
                copy.set_string(item.name, entry.key, entry.value)
        return copy

    def copy(self) -> "ConfigStore":
        return self.clone(self)

    # Recherche

    def _find_item(self, name: str) -> Optional[Item]:
        for item in self._items:
            if item.name == name:
                return item
        return None

    def _find_section(self, name: str) -> Optional[Section]:
        for item in self._items:
            if isinstance(item, Section) and item.name == name:
                return item
        return None

    def has_section(self, section: str) -> bool:
        _require_str(section=section)
        return self._find_item(section) is not None

    def has_key(self, section: str, key: str) -> bool:
        _require_str(section=section, key=key)
        sec = self._find_section(section)
        return sec is not None and sec.find(key) is not None

    def get_string(
        self, section: str, key: str, default: Optional[str]
    ) -> Optional[str]:
        """Retourne la valeur stockée, ou default si absente."""
        _require_str(section=section, key=key)
        sec = self._find_section(section)
        entry = sec.find(key) if sec is not None else None
        return default if entry is None else entry.value

    # Mutation

    def set_string(self, section: str, key: str, value: str) -> None:
        """Crée ou remplace une entrée, en créant la section si besoin.

        Une valeur contenant un saut de ligne est tronquée avant
        celui-ci ; l'événement est signalé au logger.

        Raises:
            ValueError: Si la clé est vide, ou si la section ou la clé
                contient un saut de ligne.
        """
        _require_str(section=section, key=key, value=value)
        if not key:
            raise ValueError("La clé ne peut pas être vide")
        _require_single_line(section=section, key=key)

        if "\n" in value:
            value = value.split("\n", 1)[0]
            self.logger.log_warning(
                f"Valeur tronquée au premier saut de ligne : "
                f"[{section}] {key}"
            )

        sec = self._find_section(section)
        if sec is None:
            sec = Section(section)
            self._items.append(sec)
        sec.set(key, value)

    def add_comment(self, text: str) -> bool:
        """Ajoute une ligne de commentaire si elle n'existe pas déjà.

        Returns:
            True si la ligne a été ajoutée.

        Raises:
            ValueError: Si le texte ne commence pas par "#" ou contient
                un saut de ligne.
        """
        _require_str(text=text)
        if not text.startswith(COMMENT_PREFIX):
            raise ValueError(f"Un commentaire commence par {COMMENT_PREFIX!r}")
        _require_single_line(text=text)
        if self._find_item(text) is not None:
            return False
        self._items.append(CommentLine(text))
        return True

    def remove_section(self, section: str) -> bool:
        """Supprime la section (ou le commentaire) et ses entrées."""
        _require_str(section=section)
        item = self._find_item(section)
        if item is None:
            return False
        self._items.remove(item)
        return True

    def remove_key(self, section: str, key: str) -> bool:
        _require_str(section=section, key=key)
        sec = self._find_section(section)
        return sec is not None and sec.remove(key)

    def sort_entries_by_key(
        self, key: Optional[Callable[[str], object]] = None
    ) -> None:
        """Trie les entrées de chaque section par clé (tri stable).

        Args:
            key: Fonction de tri appliquée aux clés (ordre lexical si None).
        """
        sort_key = key or (lambda k: k)
        for item in self._items:
            if isinstance(item, Section):
                item.entries.sort(key=lambda entry: sort_key(entry.key))

    # Itération et lecture

    def iter_sections(self) -> Iterator[SectionHandle]:
        """Itérateur avant, non réinitialisable, sur les noms d'éléments."""
        return (SectionHandle(item.name) for item in list(self._items))

    def __iter__(self) -> Iterator[SectionHandle]:
        return self.iter_sections()

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, section: object) -> bool:
        return isinstance(section, str) and self.has_section(section)

    def sections(self) -> list[str]:
        return [item.name for item in self._items]

    def keys(self, section: str) -> list[str]:
        sec = self._find_section(section)
        return [] if sec is None else [e.key for e in sec.entries]

    def items(self, section: str) -> list[tuple[str, str]]:
        sec = self._find_section(section)
        return [] if sec is None else [(e.key, e.value) for e in sec.entries]

    def iter_items(self) -> Iterator[Item]:
        """Éléments dans l'ordre, pour la sérialisation."""
        return iter(self._items)

    # Persistance

    def to_ini(self) -> str:
        return serialize_items(self._items)

    def save(self, path: Union[str, Path]) -> bool:
        """Sauvegarde atomique du store dans path.

        Returns:
            True si le fichier contient désormais ce store.
        """
        writer = LinuxAtomicStoreWriter(self.logger, self.settings)
        return writer.save(self, path)


def load_config_store(
    path: Union[str, Path],
    logger: Optional[Logger] = None,
    settings: Optional[StoreSettings] = None,
) -> Optional[ConfigStore]:
    """Variante de ConfigStore.from_file retournant None si illisible.

    Un None signifie « pas de configuration », jamais « configuration
    vide valide ».
    """
    try:
        return ConfigStore.from_file(path, logger, settings)
    except FileConfigurationError:
        return None
