"""Data storage layer."""

from yuzuorders.storage.local_store import DEFAULT_STORAGE_PATH, STORAGE_KEY, LocalOrderStorage

__all__ = [
    "DEFAULT_STORAGE_PATH",
    "STORAGE_KEY",
    "LocalOrderStorage",
]
