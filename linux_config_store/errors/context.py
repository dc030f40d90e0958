from typing import Callable

from linux_config_store.errors.exceptions import RollbackError
from linux_config_store.logging.base import Logger


class ErrorContext:
    """Contexte pour la gestion des erreurs avec rollback.

    Maintient une liste d'actions de rollback à exécuter en cas
    d'erreur pendant une opération en plusieurs étapes (ex: sauvegarde
    atomique via fichier temporaire).
    """

    def __init__(self, logger: Logger):
        """Initialise le contexte de rollback.

        Args:
            logger: Instance de Logger pour tracer les opérations de rollback.
        """
        self.logger = logger
        self.rollback_actions: list[tuple[Callable[[], object], str]] = []

    def add_rollback_action(
        self, action: Callable[[], object], label: str
    ) -> None:
        """Ajoute une action de rollback avec un libellé descriptif.

        Args:
            action: Callable à exécuter lors du rollback.
            label: Description de l'action pour les logs.
        """
        self.rollback_actions.append((action, label))

    def execute_rollback(self) -> None:
        """Exécute toutes les actions de rollback en ordre inverse.

        Toutes les actions sont tentées même si certaines échouent.

        Raises:
            RollbackError: Si une ou plusieurs actions de rollback échouent.
        """
        self.logger.log_debug("Début du rollback...")

        rollback_errors: list[str] = []
        for action, label in reversed(self.rollback_actions):
            try:
                action()
                self.logger.log_debug(f"Rollback réussi: {label}")
            except Exception as e:
                rollback_errors.append(str(e))
                self.logger.log_error(f"Échec du rollback ({label}): {e}")

        if rollback_errors:
            raise RollbackError(
                f"Rollback partiel : {len(rollback_errors)} action(s) en échec"
            )

    def handle_error_with_rollback(self, error: Exception) -> None:
        """Log l'erreur et exécute le rollback.

        Le RollbackError éventuel n'est pas propagé : chaque échec
        a déjà été loggé dans execute_rollback.

        Args:
            error: L'exception ayant déclenché le rollback.
        """
        self.logger.log_error(f"{type(error).__name__}: {error}")

        if not self.rollback_actions:
            return
        try:
            self.execute_rollback()
        except RollbackError as rollback_error:
            self.logger.log_warning(str(rollback_error))

    def clear_rollback_actions(self) -> None:
        """Efface toutes les actions de rollback enregistrées."""
        self.rollback_actions.clear()
