"""SQLAlchemy ORM model for the key-value entries behind BarberStore."""

from datetime import datetime, timezone

from sqlalchemy import JSON, DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from barbershop.infrastructure.database.base import Base


class StoreEntryModel(Base):
    """ORM model — maps to the 'store_entries' table.

    One row per collection key; ``data`` holds the whole serialized collection.
    """

    __tablename__ = "store_entries"

    key: Mapped[str] = mapped_column(String(100), primary_key=True)
    data: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<StoreEntryModel(key='{self.key}', items={len(self.data or [])})>"
