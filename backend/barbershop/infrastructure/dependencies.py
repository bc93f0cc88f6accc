"""FastAPI dependency injection — wires the application-owned store into endpoints."""

from datetime import datetime

from fastapi import Request

from barbershop.application.services import BarberStore
from barbershop.config import Settings, get_settings


def get_barber_store(request: Request) -> BarberStore:
    """The BarberStore created in the lifespan and attached to ``app.state``."""
    return request.app.state.store


def get_now() -> datetime:
    """Timezone-aware local "now" that anchors every reporting period."""
    return datetime.now().astimezone()


def get_app_settings() -> Settings:
    return get_settings()
