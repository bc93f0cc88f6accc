"""Pydantic schemas for the dashboard and payment reports."""

from pydantic import BaseModel

from barbershop.application.schemas.appointment import (
    AppointmentDetailResponse,
    AppointmentResponse,
)
from barbershop.application.schemas.payment import PaymentResponse
from barbershop.application.schemas.service import ServiceResponse
from barbershop.domain.entities import PaymentMethod


class RevenueSummaryResponse(BaseModel):
    revenue: float
    count: int
    revenue_display: str
    count_display: str


class ServicePopularityResponse(BaseModel):
    service: ServiceResponse
    appointment_count: int

    model_config = {"from_attributes": True}


class DashboardResponse(BaseModel):
    """Revenue for today, this week and this month plus the overview lists."""

    today: RevenueSummaryResponse
    week: RevenueSummaryResponse
    month: RevenueSummaryResponse
    total_clients: int
    upcoming: list[AppointmentDetailResponse]
    popular_services: list[ServicePopularityResponse]


# ── Payment reports ──────────────────────────────────────────────────


class PaymentDetailResponse(BaseModel):
    """A payment with the appointment, client and service it belongs to."""

    payment: PaymentResponse
    appointment: AppointmentResponse | None
    client_name: str | None
    service_name: str | None


class PaymentListResponse(BaseModel):
    """Filtered payments (newest first) with totals.

    ``by_method`` covers every recorded payment, regardless of the filters.
    """

    total: float
    count: int
    total_display: str
    by_method: dict[PaymentMethod, float]
    payments: list[PaymentDetailResponse]
