"""Module de persistance des stores sur disque."""

from linux_config_store.filesystem.base import SerializableStore, StoreWriter
from linux_config_store.filesystem.atomic import (
    LinuxAtomicStoreWriter,
    temp_path_for,
)

__all__ = [
    "SerializableStore",
    "StoreWriter",
    "LinuxAtomicStoreWriter",
    "temp_path_for",
]
