"""Adaptateur du Logger vers le module logging standard."""

import logging
from typing import Optional

from linux_config_store.logging.base import Logger

DEFAULT_LOGGER_NAME = "linux_config_store"


class StandardLogger(Logger):
    """
    Logger qui délègue à logging.getLogger(name).

    Aucun handler n'est installé : l'application hôte configure
    le logging comme elle l'entend. C'est le puits par défaut
    du store, du parser et du writer.
    """

    def __init__(
        self,
        name: str = DEFAULT_LOGGER_NAME,
        logger: Optional[logging.Logger] = None
    ) -> None:
        """
        Initialise l'adaptateur.

        Args:
            name: Nom du logger standard
            logger: Logger standard déjà construit (prioritaire sur name)
        """
        self.logger = logger or logging.getLogger(name)

    def log_debug(self, message: str) -> None:
        self.logger.debug(message)

    def log_info(self, message: str) -> None:
        self.logger.info(message)

    def log_warning(self, message: str) -> None:
        self.logger.warning(message)

    def log_error(self, message: str) -> None:
        self.logger.error(message)
