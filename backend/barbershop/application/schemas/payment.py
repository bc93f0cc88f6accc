"""Pydantic DTOs (Data Transfer Objects) for the Payment feature."""

from datetime import datetime

from pydantic import BaseModel, Field

from barbershop.domain.entities import PaymentMethod


class PaymentUpdate(BaseModel):
    """Schema for correcting a recorded payment — all fields optional."""

    method: PaymentMethod | None = None
    amount: float | None = Field(None, ge=0)
    date: datetime | None = None


class PaymentResponse(BaseModel):
    """Schema returned to the client."""

    id: str
    appointment_id: str
    amount: float
    method: PaymentMethod
    date: datetime

    model_config = {"from_attributes": True}
