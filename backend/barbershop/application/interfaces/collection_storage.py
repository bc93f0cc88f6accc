"""Abstract storage interface (port) for whole-collection key-value persistence."""

from abc import ABC, abstractmethod
from typing import Any


class CollectionStorage(ABC):
    """Port for the key-value store behind BarberStore — implemented in the infrastructure layer.

    Each key holds one full serialized collection. Writes replace the stored
    collection wholesale; there is no incremental or append format.
    """

    @abstractmethod
    async def load(self, key: str) -> list[dict[str, Any]] | None:
        """Return the collection stored under ``key``, or None if the key is absent."""
        ...

    @abstractmethod
    async def save(self, key: str, items: list[dict[str, Any]]) -> None:
        """Overwrite the collection stored under ``key``."""
        ...

    @abstractmethod
    async def save_many(self, entries: dict[str, list[dict[str, Any]]]) -> None:
        """Overwrite several collections in one transaction — all or nothing."""
        ...
