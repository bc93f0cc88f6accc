"""Domain entity for payments — money received for one appointment."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any
from uuid import uuid4


class PaymentMethod(str, Enum):
    """Accepted payment methods."""

    CASH = "cash"
    PIX = "pix"
    CREDIT_CARD = "credit"
    DEBIT_CARD = "debit"


@dataclass
class Payment:
    """A monetary transaction correlated to one appointment by ``appointment_id``."""

    appointment_id: str
    amount: float
    method: PaymentMethod
    date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    id: str = field(default_factory=lambda: str(uuid4()))

    def __post_init__(self) -> None:
        # Naive timestamps are taken as UTC so every payment date stays comparable.
        if self.date.tzinfo is None:
            self.date = self.date.replace(tzinfo=timezone.utc)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "appointment_id": self.appointment_id,
            "amount": self.amount,
            "method": self.method.value,
            "date": self.date.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Payment":
        return cls(
            id=data["id"],
            appointment_id=data["appointment_id"],
            amount=data["amount"],
            method=PaymentMethod(data["method"]),
            date=datetime.fromisoformat(data["date"]),
        )
