"""Sauvegarde atomique et durable d'un store sous Linux.

Étapes :
1) Écrire dans un fichier temporaire voisin (ex: bt_config.conf.new).
2) fsync() du fichier temporaire.
3) rename() du temporaire sur le fichier cible : mise à jour atomique.
4) fsync() du répertoire, pour que l'entrée de répertoire survive
   à une coupure.
"""

import contextlib
import os
from pathlib import Path
from typing import Optional, TextIO, Union

from linux_config_store.config.settings import StoreSettings
from linux_config_store.dotconf.serializer import iter_chunks
from linux_config_store.errors.context import ErrorContext
from linux_config_store.errors.exceptions import StoreSaveError
from linux_config_store.filesystem.base import SerializableStore, StoreWriter
from linux_config_store.logging.base import Logger
from linux_config_store.logging.standard_logger import StandardLogger


def temp_path_for(path: Path, suffix: str) -> Path:
    return path.with_name(path.name + suffix)


class LinuxAtomicStoreWriter(StoreWriter):
    """
    Writer write-temp / fsync / rename / fsync-dir.

    Les échecs de fsync ne sont que des avertissements : le rename
    reste la frontière de durabilité. Toute autre erreur d'E/S avant
    le rename annule la sauvegarde et supprime le fichier temporaire.
    """

    def __init__(
        self,
        logger: Optional[Logger] = None,
        settings: Optional[StoreSettings] = None,
    ) -> None:
        """
        Initialise le writer.

        Args:
            logger: Instance de Logger (StandardLogger par défaut)
            settings: Suffixe temporaire, permissions, sync final
        """
        self.logger = logger or StandardLogger()
        self.settings = settings or StoreSettings()

    def save(
        self, store: SerializableStore, path: Union[str, Path]
    ) -> bool:
        target = Path(path)
        if not target.name:
            raise ValueError(f"Chemin de destination invalide : {path!r}")
        temp_path = temp_path_for(target, self.settings.temp_suffix)
        directory = target.parent

        context = ErrorContext(self.logger)
        dir_fd: Optional[int] = None
        fp: Optional[TextIO] = None
        step = "ouverture du répertoire"
        failed_path = directory
        try:
            dir_fd = os.open(directory, os.O_RDONLY)

            step, failed_path = "écriture du fichier", temp_path
            context.add_rollback_action(
                lambda: temp_path.unlink(missing_ok=True),
                f"suppression de {temp_path}",
            )
            fp = open(temp_path, "w", encoding="utf-8", newline="\n")
            for chunk in iter_chunks(store.iter_items()):
                fp.write(chunk)
            fp.flush()
            self._fsync(fp.fileno(), f"fichier '{temp_path}'")

            step = "fermeture du fichier"
            temp_file, fp = fp, None
            temp_file.close()

            step = "modification des permissions de"
            os.chmod(temp_path, self.settings.file_mode)

            step, failed_path = "validation du fichier", target
            os.replace(temp_path, target)
            context.clear_rollback_actions()

            self._fsync(dir_fd, f"répertoire '{directory}'")
            step, failed_path = "fermeture du répertoire", directory
            fd, dir_fd = dir_fd, None
            os.close(fd)
        except (OSError, UnicodeError) as e:
            context.handle_error_with_rollback(
                StoreSaveError(step, str(failed_path), e)
            )
            return False
        finally:
            if fp is not None:
                with contextlib.suppress(OSError):
                    fp.close()
            if dir_fd is not None:
                with contextlib.suppress(OSError):
                    os.close(dir_fd)

        if self.settings.sync_storage:
            os.sync()
        self.logger.log_info(f"Configuration sauvegardée dans {target}.")
        return True

    def _fsync(self, fd: int, label: str) -> None:
        try:
            os.fsync(fd)
        except OSError as e:
            self.logger.log_warning(f"fsync impossible sur le {label} : {e}")
