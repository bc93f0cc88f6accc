"""Domain entity for appointments — a booking of a service for a client."""

from dataclasses import dataclass, field
from datetime import date, datetime, time
from enum import Enum
from typing import Any
from uuid import uuid4


class AppointmentStatus(str, Enum):
    """Lifecycle states of an appointment.

    Allowed transitions are scheduled → completed and scheduled → cancelled.
    """

    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


@dataclass
class Appointment:
    """A scheduled or performed booking.

    ``client_id`` and ``service_id`` are plain references; nothing guarantees
    that they still resolve to a stored record.
    """

    client_id: str
    service_id: str
    date: date
    time: time
    status: AppointmentStatus = AppointmentStatus.SCHEDULED
    notes: str | None = None
    id: str = field(default_factory=lambda: str(uuid4()))

    @property
    def starts_at(self) -> datetime:
        return datetime.combine(self.date, self.time)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "client_id": self.client_id,
            "service_id": self.service_id,
            "date": self.date.isoformat(),
            "time": self.time.isoformat(),
            "status": self.status.value,
            "notes": self.notes,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Appointment":
        return cls(
            id=data["id"],
            client_id=data["client_id"],
            service_id=data["service_id"],
            date=date.fromisoformat(data["date"]),
            time=time.fromisoformat(data["time"]),
            status=AppointmentStatus(data["status"]),
            notes=data.get("notes"),
        )
