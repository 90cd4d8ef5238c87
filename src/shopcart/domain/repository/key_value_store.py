"""Abstract key-value store holding serialized blobs."""

from __future__ import annotations

from abc import ABC, abstractmethod


class KeyValueStore(ABC):

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the blob stored under *key*, or None if absent."""

    @abstractmethod
    def set(self, key: str, blob: str) -> None:
        """Store *blob* under *key*, replacing any previous value.

        Raises StorageError if the write fails.
        """
