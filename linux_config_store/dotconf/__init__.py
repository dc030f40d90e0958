"""Module DotConf : store ordonné de sections INI.

Ce module fournit :
- le modèle ordonné sections/entrées/commentaires
- le parser ligne à ligne tolérant aux lignes mal formées
- les accesseurs typés (int, uint16, uint64, bool) au-dessus des chaînes

Classes principales:
    - ConfigStore: Racine de l'agrégat, point d'entrée des appelants
    - IniStoreParser: Parser mono-passe alimentant un store
    - ParseReport / ParseWarning: Diagnostics de parsing

Example:
    >>> from linux_config_store.dotconf import load_config_store
    >>> store = load_config_store("/data/misc/bt_config.conf")
    >>> if store is not None:
    ...     store.set_uint16("Adapter", "ScanMode", 2)
    ...     store.save("/data/misc/bt_config.conf")
"""

from linux_config_store.dotconf.model import (
    CommentLine,
    Entry,
    Section,
    SectionHandle,
)
from linux_config_store.dotconf.parser import (
    IniStoreParser,
    ParseReport,
    ParseWarning,
    WarningKind,
)
from linux_config_store.dotconf.serializer import serialize_items
from linux_config_store.dotconf.store import ConfigStore, load_config_store

__all__ = [
    # Modèle
    "Entry",
    "Section",
    "CommentLine",
    "SectionHandle",
    # Store
    "ConfigStore",
    "load_config_store",
    # Parsing
    "IniStoreParser",
    "ParseReport",
    "ParseWarning",
    "WarningKind",
    # Rendu
    "serialize_items",
]
