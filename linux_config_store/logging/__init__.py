"""Module de logging."""

from linux_config_store.logging.base import Logger
from linux_config_store.logging.file_logger import FileLogger
from linux_config_store.logging.standard_logger import (
    DEFAULT_LOGGER_NAME,
    StandardLogger,
)

__all__ = [
    "Logger",
    "FileLogger",
    "StandardLogger",
    "DEFAULT_LOGGER_NAME",
]
