"""Appointment endpoints — booking, edits, completion with payment, cancellation and walk-in visits."""

from fastapi import APIRouter, Depends, HTTPException, status

from barbershop.application.schemas import (
    AppointmentCreate,
    AppointmentDetailResponse,
    AppointmentResponse,
    AppointmentUpdate,
    CompleteAppointmentRequest,
    PaymentResponse,
    VisitCreate,
    VisitResponse,
)
from barbershop.application.services import BarberStore
from barbershop.domain import reports
from barbershop.domain.exceptions import EntityNotFoundError, InvalidStatusTransitionError
from barbershop.infrastructure.dependencies import get_barber_store

router = APIRouter(prefix="/appointments", tags=["Appointments"])


def _not_found(appointment_id: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=str(EntityNotFoundError("Appointment", appointment_id)),
    )


@router.get("", response_model=list[AppointmentDetailResponse])
async def list_appointments(
    store: BarberStore = Depends(get_barber_store),
) -> list[AppointmentDetailResponse]:
    """Every appointment, latest date and time first, with names and payment resolved."""
    details = reports.appointment_details(
        store.appointments, store.clients, store.services, store.payments
    )
    return [AppointmentDetailResponse.model_validate(d, from_attributes=True) for d in details]


@router.get("/{appointment_id}", response_model=AppointmentDetailResponse)
async def get_appointment(
    appointment_id: str,
    store: BarberStore = Depends(get_barber_store),
) -> AppointmentDetailResponse:
    """Retrieve a single appointment by ID."""
    appointment = reports.find_appointment(store.appointments, appointment_id)
    if appointment is None:
        raise _not_found(appointment_id)
    detail = reports.appointment_detail(
        appointment, store.clients, store.services, store.payments
    )
    return AppointmentDetailResponse.model_validate(detail, from_attributes=True)


@router.post("", response_model=AppointmentResponse, status_code=status.HTTP_201_CREATED)
async def create_appointment(
    data: AppointmentCreate,
    store: BarberStore = Depends(get_barber_store),
) -> AppointmentResponse:
    """Book a new appointment in the scheduled status."""
    appointment = await store.add_appointment(
        client_id=data.client_id,
        service_id=data.service_id,
        date=data.date,
        time=data.time,
        notes=data.notes,
    )
    return AppointmentResponse.model_validate(appointment, from_attributes=True)


@router.put("/{appointment_id}", response_model=AppointmentResponse)
async def update_appointment(
    appointment_id: str,
    data: AppointmentUpdate,
    store: BarberStore = Depends(get_barber_store),
) -> AppointmentResponse:
    """Update the fields sent in the body; the rest are kept."""
    changes = data.model_dump(exclude_unset=True, exclude_none=True)
    appointment = await store.update_appointment(appointment_id, changes)
    if appointment is None:
        raise _not_found(appointment_id)
    return AppointmentResponse.model_validate(appointment, from_attributes=True)


@router.post(
    "/{appointment_id}/complete",
    response_model=PaymentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def complete_appointment(
    appointment_id: str,
    data: CompleteAppointmentRequest,
    store: BarberStore = Depends(get_barber_store),
) -> PaymentResponse:
    """Finish a scheduled appointment and record its payment.

    Without an amount the service's list price is charged.
    """
    try:
        payment = await store.complete_appointment(
            appointment_id, method=data.method, amount=data.amount
        )
    except InvalidStatusTransitionError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    if payment is None:
        raise _not_found(appointment_id)
    return PaymentResponse.model_validate(payment, from_attributes=True)


@router.post("/{appointment_id}/cancel", response_model=AppointmentResponse)
async def cancel_appointment(
    appointment_id: str,
    store: BarberStore = Depends(get_barber_store),
) -> AppointmentResponse:
    """Cancel a scheduled appointment."""
    try:
        appointment = await store.cancel_appointment(appointment_id)
    except InvalidStatusTransitionError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    if appointment is None:
        raise _not_found(appointment_id)
    return AppointmentResponse.model_validate(appointment, from_attributes=True)


@router.post("/visits", response_model=VisitResponse, status_code=status.HTTP_201_CREATED)
async def register_visit(
    data: VisitCreate,
    store: BarberStore = Depends(get_barber_store),
) -> VisitResponse:
    """Record a service already performed together with its payment."""
    appointment, payment = await store.register_visit(
        client_id=data.client_id,
        service_id=data.service_id,
        date=data.date,
        time=data.time,
        method=data.method,
        amount=data.amount,
        notes=data.notes,
    )
    return VisitResponse(
        appointment=AppointmentResponse.model_validate(appointment, from_attributes=True),
        payment=PaymentResponse.model_validate(payment, from_attributes=True),
    )
