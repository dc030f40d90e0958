"""Module de gestion des erreurs."""

from linux_config_store.errors.exceptions import (ApplicationError,
                                                  ConfigurationError,
                                                  FileConfigurationError,
                                                  PersistenceError,
                                                  StoreSaveError,
                                                  RollbackError)
from linux_config_store.errors.context import ErrorContext


__all__ = [
    "ApplicationError",
    "ConfigurationError",
    "FileConfigurationError",
    "PersistenceError",
    "StoreSaveError",
    "RollbackError",
    "ErrorContext",
]
