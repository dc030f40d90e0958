"""
Linux Config Store - Store de configuration INI ordonné et durable.

Modules disponibles:
- logging: Puits de diagnostics (Logger, FileLogger, StandardLogger)
- errors: Exceptions et contexte de rollback (ErrorContext)
- config: Réglages du store (StoreSettings, chargement TOML/JSON)
- dotconf: Modèle ordonné, parser et accesseurs typés (ConfigStore)
- filesystem: Sauvegarde atomique (LinuxAtomicStoreWriter)
"""

__version__ = "1.0.0"

from linux_config_store.logging import Logger, FileLogger, StandardLogger
from linux_config_store.errors import (
    ApplicationError,
    ConfigurationError,
    FileConfigurationError,
    PersistenceError,
    StoreSaveError,
    RollbackError,
    ErrorContext,
)
from linux_config_store.config import (
    ConfigLoader,
    FileConfigLoader,
    DEFAULT_SECTION,
    MAX_LINE_LENGTH,
    StoreSettings,
    load_store_settings,
)
from linux_config_store.dotconf import (
    Entry,
    Section,
    CommentLine,
    SectionHandle,
    ConfigStore,
    load_config_store,
    IniStoreParser,
    ParseReport,
    ParseWarning,
    WarningKind,
    serialize_items,
)
from linux_config_store.filesystem import (
    StoreWriter,
    LinuxAtomicStoreWriter,
)

__all__ = [
    # Logging
    "Logger",
    "FileLogger",
    "StandardLogger",
    # Errors
    "ApplicationError",
    "ConfigurationError",
    "FileConfigurationError",
    "PersistenceError",
    "StoreSaveError",
    "RollbackError",
    "ErrorContext",
    # Config
    "ConfigLoader",
    "FileConfigLoader",
    "DEFAULT_SECTION",
    "MAX_LINE_LENGTH",
    "StoreSettings",
    "load_store_settings",
    # DotConf
    "Entry",
    "Section",
    "CommentLine",
    "SectionHandle",
    "ConfigStore",
    "load_config_store",
    "IniStoreParser",
    "ParseReport",
    "ParseWarning",
    "WarningKind",
    "serialize_items",
    # Filesystem
    "StoreWriter",
    "LinuxAtomicStoreWriter",
]
