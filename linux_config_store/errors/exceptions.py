"""
Module contenant les exceptions personnalisées du store de configuration.

Les avertissements de parsing ne sont pas des exceptions : ils sont
collectés dans un ParseReport (voir dotconf.parser).
"""


class ApplicationError(Exception):
    """Exception de base pour toute la bibliothèque."""
    pass


class ConfigurationError(ApplicationError):
    """Exception de base pour les erreurs de configuration."""
    pass


class FileConfigurationError(ConfigurationError):
    """Fichier de configuration illisible ou invalide."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class PersistenceError(ApplicationError):
    """Exception de base pour les écritures sur disque."""
    pass


class StoreSaveError(PersistenceError):
    """Échec d'une étape bloquante de la sauvegarde atomique."""

    def __init__(self, step: str, path: str, cause: BaseException) -> None:
        self.step = step
        self.path = path
        self.cause = cause
        super().__init__(f"{step} '{path}' impossible : {cause}")


class RollbackError(ApplicationError):
    """Une ou plusieurs actions de rollback ont échoué."""
    pass
