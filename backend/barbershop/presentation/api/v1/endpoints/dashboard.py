"""Dashboard endpoint — revenue by period, upcoming appointments and popular services."""

from datetime import datetime

from fastapi import APIRouter, Depends, Query

from barbershop.application.schemas import (
    AppointmentDetailResponse,
    DashboardResponse,
    RevenueSummaryResponse,
    ServicePopularityResponse,
)
from barbershop.application.services import BarberStore
from barbershop.config import Settings
from barbershop.domain import reports
from barbershop.infrastructure.dependencies import get_app_settings, get_barber_store, get_now
from barbershop.presentation.formatting import format_count, format_currency

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


def _summary_response(
    summary: reports.RevenueSummary, privacy: bool, symbol: str
) -> RevenueSummaryResponse:
    return RevenueSummaryResponse(
        revenue=summary.revenue,
        count=summary.count,
        revenue_display=format_currency(summary.revenue, privacy, symbol),
        count_display=format_count(summary.count, privacy),
    )


@router.get("", response_model=DashboardResponse)
async def get_dashboard(
    privacy: bool = Query(False, description="Mask money values and counts"),
    store: BarberStore = Depends(get_barber_store),
    settings: Settings = Depends(get_app_settings),
    now: datetime = Depends(get_now),
) -> DashboardResponse:
    """Revenue for today, this week (from Sunday) and this month, computed at request time."""
    clients, services = store.clients, store.services
    appointments, payments = store.appointments, store.payments
    summary = reports.dashboard_summary(clients, appointments, payments, now)
    upcoming = reports.upcoming_appointments(
        appointments, clients, services, payments, now, limit=settings.upcoming_limit
    )
    popular = reports.service_popularity(
        services, appointments, limit=settings.popular_services_limit
    )

    symbol = settings.currency_symbol
    return DashboardResponse(
        today=_summary_response(summary.today, privacy, symbol),
        week=_summary_response(summary.week, privacy, symbol),
        month=_summary_response(summary.month, privacy, symbol),
        total_clients=summary.total_clients,
        upcoming=[
            AppointmentDetailResponse.model_validate(d, from_attributes=True) for d in upcoming
        ],
        popular_services=[
            ServicePopularityResponse.model_validate(p, from_attributes=True) for p in popular
        ],
    )
