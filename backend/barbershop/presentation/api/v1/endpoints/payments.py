"""Payment endpoints — filtered listing with totals and method corrections."""

from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, Query, status

from barbershop.application.schemas import (
    AppointmentResponse,
    PaymentDetailResponse,
    PaymentListResponse,
    PaymentResponse,
    PaymentUpdate,
)
from barbershop.application.services import BarberStore
from barbershop.config import Settings
from barbershop.domain import reports
from barbershop.domain.entities import PaymentMethod
from barbershop.domain.exceptions import EntityNotFoundError
from barbershop.domain.reports import Period
from barbershop.infrastructure.dependencies import get_app_settings, get_barber_store, get_now
from barbershop.presentation.formatting import format_currency

router = APIRouter(prefix="/payments", tags=["Payments"])


def _detail_response(detail: reports.PaymentDetail) -> PaymentDetailResponse:
    return PaymentDetailResponse(
        payment=PaymentResponse.model_validate(detail.payment, from_attributes=True),
        appointment=(
            AppointmentResponse.model_validate(detail.appointment, from_attributes=True)
            if detail.appointment
            else None
        ),
        client_name=detail.client.name if detail.client else None,
        service_name=detail.service.name if detail.service else None,
    )


@router.get("", response_model=PaymentListResponse)
async def list_payments(
    method: PaymentMethod | None = Query(None, description="Only payments made this way"),
    period: Period = Query(Period.ALL, description="Only payments inside this period"),
    privacy: bool = Query(False, description="Mask money values"),
    store: BarberStore = Depends(get_barber_store),
    settings: Settings = Depends(get_app_settings),
    now: datetime = Depends(get_now),
) -> PaymentListResponse:
    """Filtered payments, newest first, with the filtered total and per-method totals."""
    payments = store.payments
    stats = reports.payment_stats(payments, method=method, period=period, now=now)
    filtered = reports.filter_payments(payments, method=method, period=period, now=now)
    appointments, clients, services = store.appointments, store.clients, store.services
    return PaymentListResponse(
        total=stats.total,
        count=stats.count,
        total_display=format_currency(stats.total, privacy, settings.currency_symbol),
        by_method=stats.by_method,
        payments=[
            _detail_response(reports.payment_detail(p, appointments, clients, services))
            for p in filtered
        ],
    )


@router.get("/{payment_id}", response_model=PaymentDetailResponse)
async def get_payment(
    payment_id: str,
    store: BarberStore = Depends(get_barber_store),
) -> PaymentDetailResponse:
    """Retrieve a single payment with its appointment context."""
    payment = reports.find_payment_by_id(store.payments, payment_id)
    if payment is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(EntityNotFoundError("Payment", payment_id)),
        )
    detail = reports.payment_detail(payment, store.appointments, store.clients, store.services)
    return _detail_response(detail)


@router.put("/{payment_id}", response_model=PaymentResponse)
async def update_payment(
    payment_id: str,
    data: PaymentUpdate,
    store: BarberStore = Depends(get_barber_store),
) -> PaymentResponse:
    """Correct a payment's method, amount or date."""
    changes = data.model_dump(exclude_unset=True, exclude_none=True)
    payment = await store.update_payment(payment_id, changes)
    if payment is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(EntityNotFoundError("Payment", payment_id)),
        )
    return PaymentResponse.model_validate(payment, from_attributes=True)
