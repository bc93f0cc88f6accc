"""Service menu endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from barbershop.application.schemas import ServiceCreate, ServiceResponse, ServiceUpdate
from barbershop.application.services import BarberStore
from barbershop.domain import reports
from barbershop.domain.exceptions import EntityNotFoundError
from barbershop.infrastructure.dependencies import get_barber_store

router = APIRouter(prefix="/services", tags=["Services"])


@router.get("", response_model=list[ServiceResponse])
async def list_services(
    store: BarberStore = Depends(get_barber_store),
) -> list[ServiceResponse]:
    """Retrieve every service in menu order."""
    return [ServiceResponse.model_validate(s, from_attributes=True) for s in store.services]


@router.get("/{service_id}", response_model=ServiceResponse)
async def get_service(
    service_id: str,
    store: BarberStore = Depends(get_barber_store),
) -> ServiceResponse:
    """Retrieve a single service by ID."""
    service = reports.find_service(store.services, service_id)
    if service is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(EntityNotFoundError("Service", service_id)),
        )
    return ServiceResponse.model_validate(service, from_attributes=True)


@router.post("", response_model=ServiceResponse, status_code=status.HTTP_201_CREATED)
async def create_service(
    data: ServiceCreate,
    store: BarberStore = Depends(get_barber_store),
) -> ServiceResponse:
    """Add a service to the menu."""
    service = await store.add_service(
        name=data.name,
        price=data.price,
        duration=data.duration,
        description=data.description,
    )
    return ServiceResponse.model_validate(service, from_attributes=True)


@router.put("/{service_id}", response_model=ServiceResponse)
async def update_service(
    service_id: str,
    data: ServiceUpdate,
    store: BarberStore = Depends(get_barber_store),
) -> ServiceResponse:
    """Update the fields sent in the body; the rest are kept."""
    changes = data.model_dump(exclude_unset=True, exclude_none=True)
    service = await store.update_service(service_id, changes)
    if service is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(EntityNotFoundError("Service", service_id)),
        )
    return ServiceResponse.model_validate(service, from_attributes=True)
