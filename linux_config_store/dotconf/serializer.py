"""Rendu texte d'un store.

Chaque élément est suivi d'un unique '\\n' s'il n'est pas le dernier :
après une section cela donne la ligne vide de séparation, après un
commentaire cela termine la ligne, qui reste donc collée à l'en-tête
suivant. Pas de ligne vide finale.
"""

from typing import Iterable, Iterator

from linux_config_store.dotconf.model import CommentLine, Item


def render_item(item: Item) -> str:
    if isinstance(item, CommentLine):
        return item.text
    lines = [f"[{item.name}]\n"]
    lines.extend(f"{entry.key} = {entry.value}\n" for entry in item.entries)
    return "".join(lines)


def iter_chunks(items: Iterable[Item]) -> Iterator[str]:
    """Produit le contenu du fichier morceau par morceau."""
    items = list(items)
    for index, item in enumerate(items):
        yield render_item(item)
        is_last = index == len(items) - 1
        if not is_last or isinstance(item, CommentLine):
            yield "\n"


def serialize_items(items: Iterable[Item]) -> str:
    return "".join(iter_chunks(items))
