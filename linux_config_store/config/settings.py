"""Réglages du store : parsing et sauvegarde atomique.

Les réglages peuvent être chargés depuis une table [store] d'un
fichier TOML (ou d'un objet "store" JSON) :

    [store]
    default_section = "Global"
    max_line_length = 1024
    temp_suffix = ".new"
    file_mode = 0o660
    sync_storage = true
"""

from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator

from linux_config_store.config.loader import ConfigLoader, FileConfigLoader
from linux_config_store.errors.exceptions import FileConfigurationError

DEFAULT_SECTION = "Global"
MAX_LINE_LENGTH = 1024
TEMP_SUFFIX = ".new"
# rw-rw----
FILE_MODE = 0o660


class StoreSettings(BaseModel):
    """Réglages immuables partagés par le parser et le writer.

    Attributes:
        default_section: Section des entrées précédant tout en-tête.
        max_line_length: Taille max d'une ligne en octets, terminateur
            compris ; au-delà la ligne est ignorée.
        temp_suffix: Suffixe du fichier temporaire de sauvegarde.
        file_mode: Permissions appliquées au fichier sauvegardé.
        sync_storage: Appeler os.sync() après le renommage.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    default_section: str = DEFAULT_SECTION
    max_line_length: int = MAX_LINE_LENGTH
    temp_suffix: str = TEMP_SUFFIX
    file_mode: int = FILE_MODE
    sync_storage: bool = True

    @field_validator("default_section")
    @classmethod
    def _check_default_section(cls, value: str) -> str:
        if "\n" in value or "\r" in value:
            raise ValueError(
                "default_section ne doit pas contenir de saut de ligne"
            )
        return value

    @field_validator("max_line_length")
    @classmethod
    def _check_line_length(cls, value: int) -> int:
        if value < 16:
            raise ValueError(f"max_line_length trop petit : {value}")
        return value

    @field_validator("temp_suffix")
    @classmethod
    def _check_temp_suffix(cls, value: str) -> str:
        if not value or "/" in value:
            raise ValueError(f"temp_suffix invalide : {value!r}")
        return value

    @field_validator("file_mode")
    @classmethod
    def _check_file_mode(cls, value: int) -> int:
        if not 0 <= value <= 0o7777:
            raise ValueError(f"file_mode invalide : {oct(value)}")
        return value


def load_store_settings(
    config_path: Optional[Union[str, Path]] = None,
    section: str = "store",
    config_loader: Optional[ConfigLoader] = None,
) -> StoreSettings:
    """Charge les réglages du store depuis un fichier TOML ou JSON.

    Si la table `section` est absente, le document entier est validé.

    Args:
        config_path: Chemin du fichier. None retourne les valeurs par défaut.
        section: Nom de la table contenant les réglages.
        config_loader: Chargeur injectable (FileConfigLoader par défaut).

    Returns:
        Réglages validés.

    Raises:
        FileConfigurationError: Si le fichier est absent, illisible
            ou si les valeurs sont invalides.
    """
    if config_path is None:
        return StoreSettings()

    loader = config_loader or FileConfigLoader()
    try:
        return loader.load_section(config_path, section, StoreSettings)
    except (OSError, ValueError) as e:
        # pydantic.ValidationError hérite de ValueError
        raise FileConfigurationError(str(config_path), str(e)) from e
