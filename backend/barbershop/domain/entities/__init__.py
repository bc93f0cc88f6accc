from .client import Client
from .service import Service
from .appointment import Appointment, AppointmentStatus
from .payment import Payment, PaymentMethod

__all__ = [
    "Client",
    "Service",
    "Appointment",
    "AppointmentStatus",
    "Payment",
    "PaymentMethod",
]
