"""Module de configuration."""

from linux_config_store.config.loader import (
    ConfigLoader,
    FileConfigLoader,
)
from linux_config_store.config.settings import (
    DEFAULT_SECTION,
    MAX_LINE_LENGTH,
    StoreSettings,
    load_store_settings,
)

__all__ = [
    "ConfigLoader",
    "FileConfigLoader",
    "DEFAULT_SECTION",
    "MAX_LINE_LENGTH",
    "StoreSettings",
    "load_store_settings",
]
