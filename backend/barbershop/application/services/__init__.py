from .barber_store import (
    APPOINTMENTS_KEY,
    CLIENTS_KEY,
    DEFAULT_SERVICES,
    PAYMENTS_KEY,
    SERVICES_KEY,
    BarberStore,
)

__all__ = [
    "BarberStore",
    "DEFAULT_SERVICES",
    "CLIENTS_KEY",
    "SERVICES_KEY",
    "APPOINTMENTS_KEY",
    "PAYMENTS_KEY",
]
