"""Lecture des fichiers de réglages TOML et JSON.

Un fichier de réglages est un document dont une table (par exemple
[store]) porte les valeurs d'un modèle pydantic. Un document sans
cette table est lu comme la table elle-même.
"""

import json
import tomllib
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Callable, Dict, TypeVar, Union

from pydantic import BaseModel

M = TypeVar("M", bound=BaseModel)


def _read_toml(path: Path) -> Any:
    with open(path, "rb") as f:
        return tomllib.load(f)


def _read_json(path: Path) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


READERS: Dict[str, Callable[[Path], Any]] = {
    ".toml": _read_toml,
    ".json": _read_json,
}


def validate_with_schema(data: Any, schema: type[M]) -> M:
    """Construit une instance de schema à partir de données brutes.

    Raises:
        TypeError: Si schema n'est pas une sous-classe de BaseModel.
        pydantic.ValidationError: Si les données sont invalides.
    """
    if not (isinstance(schema, type) and issubclass(schema, BaseModel)):
        raise TypeError(
            f"Le schema doit hériter de pydantic.BaseModel : {schema!r}"
        )
    return schema.model_validate(data)


class ConfigLoader(ABC):
    """
    Source de documents de réglages.

    Une implémentation fournit read() ; la sélection de la table et
    la validation sont communes.
    """

    @abstractmethod
    def read(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """
        Lit un document de réglages.

        Args:
            config_path: Chemin du document

        Returns:
            Contenu du document, dont la racine est une table

        Raises:
            FileNotFoundError: Si le document n'existe pas
            ValueError: Si le format est inconnu ou le contenu illisible
        """
        pass

    def load_section(
        self,
        config_path: Union[str, Path],
        section: str,
        schema: type[M],
    ) -> M:
        """
        Valide une table du document avec un modèle pydantic.

        Args:
            config_path: Chemin du document
            section: Nom de la table ; absente, le document entier
                est validé
            schema: Modèle pydantic cible

        Returns:
            Instance validée de schema

        Raises:
            ValueError: Si la table n'est pas une table, ou si la
                validation échoue (pydantic.ValidationError)
        """
        document = self.read(config_path)
        data = document.get(section, document)
        if not isinstance(data, dict):
            raise ValueError(
                f"'{section}' doit être une table dans {config_path}"
            )
        return validate_with_schema(data, schema)


class FileConfigLoader(ConfigLoader):
    """Lecture de documents TOML ou JSON, choisie par l'extension."""

    def read(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        path = Path(config_path)
        reader = READERS.get(path.suffix.lower())
        if reader is None:
            raise ValueError(
                f"Extension non supportée : {path.suffix or '(aucune)'}. "
                f"Formats acceptés : {', '.join(sorted(READERS))}"
            )
        if not path.is_file():
            raise FileNotFoundError(f"Fichier de réglages absent : {path}")

        document = reader(path)
        if not isinstance(document, dict):
            raise ValueError(f"La racine de {path} doit être une table")
        return document
