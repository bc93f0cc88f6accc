"""Pydantic DTOs (Data Transfer Objects) for the Client feature."""

from datetime import datetime

from pydantic import BaseModel, Field

from barbershop.application.schemas.appointment import AppointmentResponse
from barbershop.application.schemas.payment import PaymentResponse


class ClientCreate(BaseModel):
    """Schema for registering a new client — name and phone are required."""

    name: str = Field(..., min_length=1, max_length=255, examples=["João Silva"])
    phone: str = Field(..., min_length=1, max_length=50, examples=["(11) 98765-4321"])
    email: str | None = Field(None, max_length=255, examples=["joao@example.com"])


class ClientUpdate(BaseModel):
    """Schema for updating an existing client — all fields optional."""

    name: str | None = Field(None, min_length=1, max_length=255)
    phone: str | None = Field(None, min_length=1, max_length=50)
    email: str | None = Field(None, max_length=255)


class ClientResponse(BaseModel):
    """Schema returned to the client."""

    id: str
    name: str
    phone: str
    email: str | None
    created_at: datetime

    model_config = {"from_attributes": True}


class ClientOverviewResponse(ClientResponse):
    """A client together with their visit count and lifetime spending."""

    appointment_count: int
    total_spent: float
    total_spent_display: str


class ClientHistoryEntryResponse(BaseModel):
    appointment: AppointmentResponse
    service_name: str
    payment: PaymentResponse | None
    amount: float
    amount_display: str


class ClientHistoryResponse(BaseModel):
    """A client's appointments, most recent first, with spending totals."""

    client: ClientResponse
    appointment_count: int
    total_spent: float
    total_spent_display: str
    entries: list[ClientHistoryEntryResponse]
