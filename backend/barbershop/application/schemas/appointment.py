"""Pydantic DTOs (Data Transfer Objects) for the Appointment feature."""

import datetime as dt

from pydantic import BaseModel, Field

from barbershop.application.schemas.payment import PaymentResponse
from barbershop.domain.entities import AppointmentStatus, PaymentMethod


class AppointmentCreate(BaseModel):
    """Schema for booking an appointment — client, service, date and time are required."""

    client_id: str = Field(..., min_length=1)
    service_id: str = Field(..., min_length=1)
    date: dt.date
    time: dt.time
    notes: str | None = None


class AppointmentUpdate(BaseModel):
    """Schema for updating an existing appointment — all fields optional."""

    client_id: str | None = Field(None, min_length=1)
    service_id: str | None = Field(None, min_length=1)
    date: dt.date | None = None
    time: dt.time | None = None
    status: AppointmentStatus | None = None
    notes: str | None = None


class CompleteAppointmentRequest(BaseModel):
    """Payment details captured when an appointment is finished.

    Leave ``amount`` out (or 0) to charge the service's list price.
    """

    method: PaymentMethod = PaymentMethod.CASH
    amount: float | None = Field(None, ge=0)


class VisitCreate(AppointmentCreate):
    """A walk-in service already performed, recorded with its payment."""

    method: PaymentMethod = PaymentMethod.CASH
    amount: float | None = Field(None, ge=0)


class AppointmentResponse(BaseModel):
    """Schema returned to the client."""

    id: str
    client_id: str
    service_id: str
    date: dt.date
    time: dt.time
    status: AppointmentStatus
    notes: str | None

    model_config = {"from_attributes": True}


class AppointmentDetailResponse(BaseModel):
    """An appointment with client and service names resolved and its payment attached."""

    appointment: AppointmentResponse
    client_name: str
    service_name: str
    service_price: float
    amount: float
    payment: PaymentResponse | None

    model_config = {"from_attributes": True}


class VisitResponse(BaseModel):
    appointment: AppointmentResponse
    payment: PaymentResponse
