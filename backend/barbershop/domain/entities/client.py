"""Domain entity — a person who receives services at the shop."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any
from uuid import uuid4


@dataclass
class Client:
    """Core domain entity representing a registered client."""

    name: str
    phone: str
    email: str | None = None
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "phone": self.phone,
            "email": self.email,
            "created_at": self.created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Client":
        return cls(
            id=data["id"],
            name=data["name"],
            phone=data["phone"],
            email=data.get("email"),
            created_at=datetime.fromisoformat(data["created_at"]),
        )
