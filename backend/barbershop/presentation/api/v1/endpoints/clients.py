"""Client endpoints — registration, edits and per-client history."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from barbershop.application.schemas import (
    ClientCreate,
    ClientHistoryEntryResponse,
    ClientHistoryResponse,
    ClientOverviewResponse,
    ClientResponse,
    ClientUpdate,
)
from barbershop.application.services import BarberStore
from barbershop.config import Settings
from barbershop.domain import reports
from barbershop.domain.entities import Client
from barbershop.domain.exceptions import EntityNotFoundError
from barbershop.infrastructure.dependencies import get_app_settings, get_barber_store
from barbershop.presentation.formatting import format_currency

router = APIRouter(prefix="/clients", tags=["Clients"])


def _not_found(client_id: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=str(EntityNotFoundError("Client", client_id)),
    )


def _overview(
    client: Client, store: BarberStore, privacy: bool, symbol: str
) -> ClientOverviewResponse:
    appointments = store.appointments
    spent = reports.total_spent(client.id, appointments, store.payments)
    return ClientOverviewResponse(
        **ClientResponse.model_validate(client, from_attributes=True).model_dump(),
        appointment_count=reports.appointment_count(client.id, appointments),
        total_spent=spent,
        total_spent_display=format_currency(spent, privacy, symbol),
    )


@router.get("", response_model=list[ClientOverviewResponse])
async def list_clients(
    privacy: bool = Query(False, description="Mask money values"),
    store: BarberStore = Depends(get_barber_store),
    settings: Settings = Depends(get_app_settings),
) -> list[ClientOverviewResponse]:
    """Retrieve every client with appointment count and total spent."""
    return [
        _overview(c, store, privacy, settings.currency_symbol) for c in store.clients
    ]


@router.get("/{client_id}", response_model=ClientOverviewResponse)
async def get_client(
    client_id: str,
    privacy: bool = Query(False, description="Mask money values"),
    store: BarberStore = Depends(get_barber_store),
    settings: Settings = Depends(get_app_settings),
) -> ClientOverviewResponse:
    """Retrieve a single client by ID."""
    client = reports.find_client(store.clients, client_id)
    if client is None:
        raise _not_found(client_id)
    return _overview(client, store, privacy, settings.currency_symbol)


@router.post("", response_model=ClientResponse, status_code=status.HTTP_201_CREATED)
async def create_client(
    data: ClientCreate,
    store: BarberStore = Depends(get_barber_store),
) -> ClientResponse:
    """Register a new client."""
    client = await store.add_client(name=data.name, phone=data.phone, email=data.email)
    return ClientResponse.model_validate(client, from_attributes=True)


@router.put("/{client_id}", response_model=ClientResponse)
async def update_client(
    client_id: str,
    data: ClientUpdate,
    store: BarberStore = Depends(get_barber_store),
) -> ClientResponse:
    """Update the fields sent in the body; the rest are kept."""
    changes = data.model_dump(exclude_unset=True, exclude_none=True)
    client = await store.update_client(client_id, changes)
    if client is None:
        raise _not_found(client_id)
    return ClientResponse.model_validate(client, from_attributes=True)


@router.get("/{client_id}/history", response_model=ClientHistoryResponse)
async def get_client_history(
    client_id: str,
    privacy: bool = Query(False, description="Mask money values"),
    store: BarberStore = Depends(get_barber_store),
    settings: Settings = Depends(get_app_settings),
) -> ClientHistoryResponse:
    """A client's appointments, latest first, with service, payment and amount."""
    client = reports.find_client(store.clients, client_id)
    if client is None:
        raise _not_found(client_id)

    symbol = settings.currency_symbol
    appointments = store.appointments
    history = reports.client_history(client_id, appointments, store.services, store.payments)
    spent = reports.total_spent(client_id, appointments, store.payments)

    entries = [
        ClientHistoryEntryResponse.model_validate(
            {
                "appointment": entry.appointment,
                "service_name": entry.service.name if entry.service else reports.SERVICE_NOT_FOUND,
                "payment": entry.payment,
                "amount": entry.amount,
                "amount_display": format_currency(entry.amount, privacy, symbol),
            },
            from_attributes=True,
        )
        for entry in history
    ]
    return ClientHistoryResponse(
        client=ClientResponse.model_validate(client, from_attributes=True),
        appointment_count=len(history),
        total_spent=spent,
        total_spent_display=format_currency(spent, privacy, symbol),
        entries=entries,
    )
