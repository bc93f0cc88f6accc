"""V1 API router — aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from barbershop.presentation.api.v1.endpoints.health import router as health_router
from barbershop.presentation.api.v1.endpoints.dashboard import router as dashboard_router
from barbershop.presentation.api.v1.endpoints.clients import router as clients_router
from barbershop.presentation.api.v1.endpoints.services import router as services_router
from barbershop.presentation.api.v1.endpoints.appointments import router as appointments_router
from barbershop.presentation.api.v1.endpoints.payments import router as payments_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(dashboard_router)
router.include_router(clients_router)
router.include_router(services_router)
router.include_router(appointments_router)
router.include_router(payments_router)
