"""Interface abstraite pour la persistance d'un store."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable, Protocol, Union

from linux_config_store.dotconf.model import Item


class SerializableStore(Protocol):
    """Store dont on peut parcourir les éléments dans l'ordre."""

    def iter_items(self) -> Iterable[Item]: ...


class StoreWriter(ABC):
    """Interface pour l'écriture d'un store sur disque."""

    @abstractmethod
    def save(
        self, store: SerializableStore, path: Union[str, Path]
    ) -> bool:
        """
        Remplace le contenu de path par la sérialisation du store.

        Args:
            store: Store à écrire
            path: Fichier de destination

        Returns:
            True si le nouveau contenu est en place, False sinon.
            En cas d'échec le fichier de destination n'est pas modifié.
        """
        pass
