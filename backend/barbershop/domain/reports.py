"""Derived views — joins, filters and revenue aggregates over the record collections.

Every function here is pure: it takes the collections it needs as arguments
and recomputes its result from scratch on each call. Lookups against missing
references never raise; they degrade to ``None``, a placeholder label or a
zero amount.

Periods are anchored on a caller-supplied ``now``:

    today  — the calendar day of ``now``
    week   — Sunday through Saturday of the week containing ``now``
    month  — day 1 through the last day of the month of ``now``
"""

import calendar
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from enum import Enum

from barbershop.domain.entities import (
    Appointment,
    Client,
    Payment,
    PaymentMethod,
    Service,
)

CLIENT_NOT_FOUND = "Client not found"
SERVICE_NOT_FOUND = "Service not found"


class Period(str, Enum):
    """Reporting windows used to bucket revenue and payments."""

    ALL = "all"
    TODAY = "today"
    WEEK = "week"
    MONTH = "month"


# ── Result types ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class RevenueSummary:
    """Revenue collected for the appointments of one period."""

    revenue: float
    count: int


@dataclass
class PaymentStats:
    """Totals for a filtered payment list plus per-method totals over all payments."""

    total: float
    count: int
    by_method: dict[PaymentMethod, float] = field(default_factory=dict)


@dataclass
class AppointmentDetail:
    """An appointment joined with its client, service and payment."""

    appointment: Appointment
    client_name: str
    service_name: str
    service_price: float
    payment: Payment | None = None

    @property
    def amount(self) -> float:
        return self.payment.amount if self.payment else self.service_price


@dataclass
class HistoryEntry:
    """One line of a client's history."""

    appointment: Appointment
    service: Service | None
    payment: Payment | None

    @property
    def amount(self) -> float:
        if self.payment is not None:
            return self.payment.amount
        if self.service is not None:
            return self.service.price
        return 0.0


@dataclass
class PaymentDetail:
    """A payment joined with the appointment, client and service behind it."""

    payment: Payment
    appointment: Appointment | None
    client: Client | None
    service: Service | None


@dataclass(frozen=True)
class ServicePopularity:
    service: Service
    appointment_count: int


@dataclass(frozen=True)
class DashboardSummary:
    today: RevenueSummary
    week: RevenueSummary
    month: RevenueSummary
    total_clients: int


# ── Periods ──────────────────────────────────────────────────────────


def period_bounds(period: Period, today: date) -> tuple[date, date] | None:
    """Return the inclusive (first, last) days of ``period``, or None for ALL."""
    if period is Period.TODAY:
        return today, today
    if period is Period.WEEK:
        # date.weekday() is 0 for Monday; weeks here start on Sunday.
        start = today - timedelta(days=(today.weekday() + 1) % 7)
        return start, start + timedelta(days=6)
    if period is Period.MONTH:
        last_day = calendar.monthrange(today.year, today.month)[1]
        return today.replace(day=1), today.replace(day=last_day)
    return None


def in_period(day: date, period: Period, today: date) -> bool:
    bounds = period_bounds(period, today)
    if bounds is None:
        return True
    first, last = bounds
    return first <= day <= last


def local_day(moment: datetime, now: datetime) -> date:
    """Calendar day of ``moment`` as seen from the timezone of ``now``."""
    if moment.tzinfo is not None and now.tzinfo is not None:
        return moment.astimezone(now.tzinfo).date()
    return moment.date()


# ── Lookups ──────────────────────────────────────────────────────────


def find_client(clients: Iterable[Client], client_id: str) -> Client | None:
    return next((c for c in clients if c.id == client_id), None)


def find_service(services: Iterable[Service], service_id: str) -> Service | None:
    return next((s for s in services if s.id == service_id), None)


def find_appointment(
    appointments: Iterable[Appointment], appointment_id: str
) -> Appointment | None:
    return next((a for a in appointments if a.id == appointment_id), None)


def find_payment_by_id(payments: Iterable[Payment], payment_id: str) -> Payment | None:
    return next((p for p in payments if p.id == payment_id), None)


def find_payment(payments: Iterable[Payment], appointment_id: str) -> Payment | None:
    """First payment correlated to ``appointment_id``; later duplicates are ignored."""
    return next((p for p in payments if p.appointment_id == appointment_id), None)


def client_name(clients: Iterable[Client], client_id: str) -> str:
    client = find_client(clients, client_id)
    return client.name if client else CLIENT_NOT_FOUND


def service_name(services: Iterable[Service], service_id: str) -> str:
    service = find_service(services, service_id)
    return service.name if service else SERVICE_NOT_FOUND


def service_price(services: Iterable[Service], service_id: str) -> float:
    service = find_service(services, service_id)
    return service.price if service else 0.0


# ── Aggregates ───────────────────────────────────────────────────────


def revenue_summary(
    appointments: Sequence[Appointment],
    payments: Sequence[Payment],
    period: Period,
    now: datetime,
) -> RevenueSummary:
    """Sum the correlated payments of the appointments dated inside ``period``.

    Appointments without a payment still count, contributing zero revenue.
    """
    today = now.date()
    selected = [a for a in appointments if in_period(a.date, period, today)]
    revenue = 0.0
    for appointment in selected:
        payment = find_payment(payments, appointment.id)
        revenue += payment.amount if payment else 0.0
    return RevenueSummary(revenue=round(revenue, 2), count=len(selected))


def filter_payments(
    payments: Iterable[Payment],
    method: PaymentMethod | None = None,
    period: Period = Period.ALL,
    now: datetime | None = None,
) -> list[Payment]:
    """Apply the optional method and period filters, newest first."""
    filtered = list(payments)
    if method is not None:
        filtered = [p for p in filtered if p.method == method]
    if period is not Period.ALL:
        if now is None:
            raise ValueError("now is required to filter payments by period")
        today = now.date()
        filtered = [p for p in filtered if in_period(local_day(p.date, now), period, today)]
    return sorted(filtered, key=lambda p: p.date, reverse=True)


def totals_by_method(payments: Iterable[Payment]) -> dict[PaymentMethod, float]:
    totals = {method: 0.0 for method in PaymentMethod}
    for payment in payments:
        totals[payment.method] = round(totals[payment.method] + payment.amount, 2)
    return totals


def payment_stats(
    payments: Sequence[Payment],
    method: PaymentMethod | None = None,
    period: Period = Period.ALL,
    now: datetime | None = None,
) -> PaymentStats:
    """Totals over the filtered list; ``by_method`` always covers every payment."""
    filtered = filter_payments(payments, method=method, period=period, now=now)
    return PaymentStats(
        total=round(sum(p.amount for p in filtered), 2),
        count=len(filtered),
        by_method=totals_by_method(payments),
    )


def client_appointments(
    client_id: str, appointments: Iterable[Appointment]
) -> list[Appointment]:
    return [a for a in appointments if a.client_id == client_id]


def appointment_count(client_id: str, appointments: Iterable[Appointment]) -> int:
    return len(client_appointments(client_id, appointments))


def total_spent(
    client_id: str,
    appointments: Iterable[Appointment],
    payments: Sequence[Payment],
) -> float:
    """Sum of the payments correlated to the client's appointments."""
    total = 0.0
    for appointment in client_appointments(client_id, appointments):
        payment = find_payment(payments, appointment.id)
        if payment is not None:
            total += payment.amount
    return round(total, 2)


def client_history(
    client_id: str,
    appointments: Iterable[Appointment],
    services: Sequence[Service],
    payments: Sequence[Payment],
) -> list[HistoryEntry]:
    """The client's appointments with service and payment, most recent date first."""
    entries = [
        HistoryEntry(
            appointment=a,
            service=find_service(services, a.service_id),
            payment=find_payment(payments, a.id),
        )
        for a in client_appointments(client_id, appointments)
    ]
    return sorted(entries, key=lambda e: e.appointment.date, reverse=True)


def display_amount(
    appointment: Appointment,
    services: Sequence[Service],
    payments: Sequence[Payment],
) -> float:
    """Amount shown for an appointment: what was paid, else the list price."""
    payment = find_payment(payments, appointment.id)
    if payment is not None:
        return payment.amount
    return service_price(services, appointment.service_id)


def sorted_appointments(appointments: Iterable[Appointment]) -> list[Appointment]:
    """Appointments ordered by date and time, latest first."""
    return sorted(appointments, key=lambda a: a.starts_at, reverse=True)


def appointment_detail(
    appointment: Appointment,
    clients: Sequence[Client],
    services: Sequence[Service],
    payments: Sequence[Payment],
) -> AppointmentDetail:
    return AppointmentDetail(
        appointment=appointment,
        client_name=client_name(clients, appointment.client_id),
        service_name=service_name(services, appointment.service_id),
        service_price=service_price(services, appointment.service_id),
        payment=find_payment(payments, appointment.id),
    )


def appointment_details(
    appointments: Iterable[Appointment],
    clients: Sequence[Client],
    services: Sequence[Service],
    payments: Sequence[Payment],
) -> list[AppointmentDetail]:
    return [
        appointment_detail(a, clients, services, payments)
        for a in sorted_appointments(appointments)
    ]


def upcoming_appointments(
    appointments: Iterable[Appointment],
    clients: Sequence[Client],
    services: Sequence[Service],
    payments: Sequence[Payment],
    now: datetime,
    limit: int = 5,
) -> list[AppointmentDetail]:
    """Appointments dated today or later, in stored order, at most ``limit``."""
    today = now.date()
    upcoming = [a for a in appointments if a.date >= today][:limit]
    return [appointment_detail(a, clients, services, payments) for a in upcoming]


def service_popularity(
    services: Sequence[Service],
    appointments: Sequence[Appointment],
    limit: int = 5,
) -> list[ServicePopularity]:
    """Appointment counts for the first ``limit`` services."""
    return [
        ServicePopularity(
            service=service,
            appointment_count=sum(1 for a in appointments if a.service_id == service.id),
        )
        for service in services[:limit]
    ]


def payment_detail(
    payment: Payment,
    appointments: Sequence[Appointment],
    clients: Sequence[Client],
    services: Sequence[Service],
) -> PaymentDetail:
    appointment = find_appointment(appointments, payment.appointment_id)
    if appointment is None:
        return PaymentDetail(payment=payment, appointment=None, client=None, service=None)
    return PaymentDetail(
        payment=payment,
        appointment=appointment,
        client=find_client(clients, appointment.client_id),
        service=find_service(services, appointment.service_id),
    )


def dashboard_summary(
    clients: Sequence[Client],
    appointments: Sequence[Appointment],
    payments: Sequence[Payment],
    now: datetime,
) -> DashboardSummary:
    return DashboardSummary(
        today=revenue_summary(appointments, payments, Period.TODAY, now),
        week=revenue_summary(appointments, payments, Period.WEEK, now),
        month=revenue_summary(appointments, payments, Period.MONTH, now),
        total_clients=len(clients),
    )
