"""Domain entity — a priced, timed offering such as a haircut."""

from dataclasses import dataclass, field
from typing import Any
from uuid import uuid4


@dataclass
class Service:
    """A service on the shop's menu.

    ``price`` is a non-negative currency amount and ``duration`` is a
    positive number of minutes.
    """

    name: str
    price: float
    duration: int
    description: str | None = None
    id: str = field(default_factory=lambda: str(uuid4()))

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "price": self.price,
            "duration": self.duration,
            "description": self.description,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Service":
        return cls(
            id=data["id"],
            name=data["name"],
            price=data["price"],
            duration=data["duration"],
            description=data.get("description"),
        )
