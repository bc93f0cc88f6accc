"""Concrete CollectionStorage backed by a SQLAlchemy key-value table."""

from datetime import datetime, timezone
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from barbershop.application.interfaces import CollectionStorage
from barbershop.infrastructure.database.models import StoreEntryModel


class SQLAlchemyCollectionStorage(CollectionStorage):
    """Implements the CollectionStorage port on the 'store_entries' table.

    The store outlives any single request, so each call opens its own
    session from the factory instead of borrowing a request-scoped one.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def load(self, key: str) -> list[dict[str, Any]] | None:
        async with self._session_factory() as session:
            model = await session.get(StoreEntryModel, key)
            return list(model.data) if model is not None else None

    async def save(self, key: str, items: list[dict[str, Any]]) -> None:
        await self.save_many({key: items})

    async def save_many(self, entries: dict[str, list[dict[str, Any]]]) -> None:
        async with self._session_factory() as session:
            async with session.begin():
                for key, items in entries.items():
                    model = await session.get(StoreEntryModel, key)
                    if model is None:
                        session.add(StoreEntryModel(key=key, data=list(items)))
                    else:
                        model.data = list(items)
                        model.updated_at = datetime.now(timezone.utc)
