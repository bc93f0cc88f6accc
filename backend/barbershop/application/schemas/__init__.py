from .client import (
    ClientCreate,
    ClientUpdate,
    ClientResponse,
    ClientOverviewResponse,
    ClientHistoryEntryResponse,
    ClientHistoryResponse,
)
from .service import ServiceCreate, ServiceUpdate, ServiceResponse
from .payment import PaymentUpdate, PaymentResponse
from .appointment import (
    AppointmentCreate,
    AppointmentUpdate,
    AppointmentResponse,
    AppointmentDetailResponse,
    CompleteAppointmentRequest,
    VisitCreate,
    VisitResponse,
)
from .dashboard import (
    RevenueSummaryResponse,
    ServicePopularityResponse,
    DashboardResponse,
    PaymentDetailResponse,
    PaymentListResponse,
)

__all__ = [
    "ClientCreate",
    "ClientUpdate",
    "ClientResponse",
    "ClientOverviewResponse",
    "ClientHistoryEntryResponse",
    "ClientHistoryResponse",
    "ServiceCreate",
    "ServiceUpdate",
    "ServiceResponse",
    "PaymentUpdate",
    "PaymentResponse",
    "AppointmentCreate",
    "AppointmentUpdate",
    "AppointmentResponse",
    "AppointmentDetailResponse",
    "CompleteAppointmentRequest",
    "VisitCreate",
    "VisitResponse",
    "RevenueSummaryResponse",
    "ServicePopularityResponse",
    "DashboardResponse",
    "PaymentDetailResponse",
    "PaymentListResponse",
]
