"""Record store — the shop's four collections, mirrored to key-value storage.

The store is the single owner of clients, services, appointments and
payments for the lifetime of the process. It is created once at startup,
hydrated from storage with ``load()``, and changed only through its
mutation methods. Every mutation persists the full contents of each
collection it touched before returning.

Composite operations (completing an appointment, registering a visit)
write the appointment and the payment collections in a single storage
transaction. If that write fails, both in-memory collections are restored
and the error propagates, so either both records exist or neither does.
"""

import asyncio
import logging
from collections.abc import AsyncIterator, Mapping
from contextlib import asynccontextmanager
from dataclasses import replace
from datetime import date, datetime, time
from typing import Any

from barbershop.application.interfaces import CollectionStorage
from barbershop.domain.entities import (
    Appointment,
    AppointmentStatus,
    Client,
    Payment,
    PaymentMethod,
    Service,
)
from barbershop.domain.exceptions import InvalidStatusTransitionError
from barbershop.domain.reports import find_service, service_price

logger = logging.getLogger(__name__)

CLIENTS_KEY = "barber_clients"
SERVICES_KEY = "barber_services"
APPOINTMENTS_KEY = "barber_appointments"
PAYMENTS_KEY = "barber_payments"

_ENTITY_TYPES: dict[str, type] = {
    CLIENTS_KEY: Client,
    SERVICES_KEY: Service,
    APPOINTMENTS_KEY: Appointment,
    PAYMENTS_KEY: Payment,
}

# Written on first run, when no service collection has ever been stored.
DEFAULT_SERVICES: tuple[dict[str, Any], ...] = (
    {"name": "Corte Masculino", "price": 25.00, "duration": 30},
    {"name": "Barba", "price": 15.00, "duration": 20},
    {"name": "Corte + Barba", "price": 35.00, "duration": 45},
    {"name": "Sobrancelha", "price": 10.00, "duration": 15},
)


def _index_of(records: list[Any], record_id: str) -> int | None:
    for index, record in enumerate(records):
        if record.id == record_id:
            return index
    return None


def _check_transition(appointment: Appointment, target: AppointmentStatus) -> None:
    if appointment.status is not AppointmentStatus.SCHEDULED:
        raise InvalidStatusTransitionError(
            appointment.id, appointment.status.value, target.value
        )


class BarberStore:
    """In-memory record collections plus the mutation API over them.

    Reads return copies of the collection lists. Updates against an unknown
    id are no-ops that return None.
    """

    def __init__(self, storage: CollectionStorage):
        self._storage = storage
        self._collections: dict[str, list[Any]] = {key: [] for key in _ENTITY_TYPES}
        self._lock = asyncio.Lock()

    # ── Collections ──────────────────────────────────────────────────

    @property
    def clients(self) -> list[Client]:
        return list(self._collections[CLIENTS_KEY])

    @property
    def services(self) -> list[Service]:
        return list(self._collections[SERVICES_KEY])

    @property
    def appointments(self) -> list[Appointment]:
        return list(self._collections[APPOINTMENTS_KEY])

    @property
    def payments(self) -> list[Payment]:
        return list(self._collections[PAYMENTS_KEY])

    # ── Startup ──────────────────────────────────────────────────────

    async def load(self) -> None:
        """Hydrate every collection from storage and seed default services once.

        Stored payloads are deserialized as they are; no validation pass runs.
        """
        missing: set[str] = set()
        async with self._lock:
            for key, entity_type in _ENTITY_TYPES.items():
                stored = await self._storage.load(key)
                if stored is None:
                    missing.add(key)
                    continue
                self._collections[key] = [entity_type.from_dict(item) for item in stored]
                logger.info("Loaded %d record(s) from '%s'", len(stored), key)

            if SERVICES_KEY in missing:
                async with self._writing(SERVICES_KEY):
                    self._collections[SERVICES_KEY] = [
                        Service(**fields) for fields in DEFAULT_SERVICES
                    ]
                logger.info("Seeded %d default services", len(DEFAULT_SERVICES))

    # ── Clients ──────────────────────────────────────────────────────

    async def add_client(self, name: str, phone: str, email: str | None = None) -> Client:
        return await self._add(
            CLIENTS_KEY, Client(name=name, phone=phone, email=email or None)
        )

    async def update_client(
        self, client_id: str, changes: Mapping[str, Any]
    ) -> Client | None:
        """Merge ``changes`` into the client; a blank email clears it."""
        if "email" in changes:
            changes = {**changes, "email": changes["email"] or None}
        return await self._update(CLIENTS_KEY, client_id, changes)

    # ── Services ─────────────────────────────────────────────────────

    async def add_service(
        self,
        name: str,
        price: float,
        duration: int,
        description: str | None = None,
    ) -> Service:
        service = Service(
            name=name,
            price=price,
            duration=duration,
            description=description or None,
        )
        return await self._add(SERVICES_KEY, service)

    async def update_service(
        self, service_id: str, changes: Mapping[str, Any]
    ) -> Service | None:
        return await self._update(SERVICES_KEY, service_id, changes)

    # ── Appointments ─────────────────────────────────────────────────

    async def add_appointment(
        self,
        client_id: str,
        service_id: str,
        date: date,
        time: time,
        notes: str | None = None,
        status: AppointmentStatus = AppointmentStatus.SCHEDULED,
    ) -> Appointment:
        appointment = Appointment(
            client_id=client_id,
            service_id=service_id,
            date=date,
            time=time,
            status=status,
            notes=notes or None,
        )
        return await self._add(APPOINTMENTS_KEY, appointment)

    async def update_appointment(
        self, appointment_id: str, changes: Mapping[str, Any]
    ) -> Appointment | None:
        return await self._update(APPOINTMENTS_KEY, appointment_id, changes)

    async def cancel_appointment(self, appointment_id: str) -> Appointment | None:
        """Move a scheduled appointment to cancelled.

        Raises InvalidStatusTransitionError if it is not scheduled.
        """
        async with self._lock:
            appointments = self._collections[APPOINTMENTS_KEY]
            index = _index_of(appointments, appointment_id)
            if index is None:
                logger.debug("No appointment %s; cancel ignored", appointment_id)
                return None
            _check_transition(appointments[index], AppointmentStatus.CANCELLED)
            cancelled = replace(appointments[index], status=AppointmentStatus.CANCELLED)
            async with self._writing(APPOINTMENTS_KEY):
                appointments[index] = cancelled
        logger.info("Cancelled appointment %s", appointment_id)
        return cancelled

    async def complete_appointment(
        self,
        appointment_id: str,
        method: PaymentMethod = PaymentMethod.CASH,
        amount: float | None = None,
    ) -> Payment | None:
        """Mark a scheduled appointment completed and record its payment atomically.

        The payment amount is ``amount`` when it is non-zero, otherwise the
        service's list price. Returns None, changing nothing, when the
        appointment or its service cannot be found.
        """
        async with self._lock:
            appointments = self._collections[APPOINTMENTS_KEY]
            index = _index_of(appointments, appointment_id)
            if index is None:
                logger.debug("No appointment %s; completion ignored", appointment_id)
                return None
            appointment = appointments[index]
            service = find_service(self._collections[SERVICES_KEY], appointment.service_id)
            if service is None:
                logger.debug(
                    "Service %s of appointment %s not found; completion ignored",
                    appointment.service_id,
                    appointment_id,
                )
                return None
            _check_transition(appointment, AppointmentStatus.COMPLETED)

            payment = Payment(
                appointment_id=appointment.id,
                amount=amount or service.price,
                method=method,
            )
            async with self._writing(APPOINTMENTS_KEY, PAYMENTS_KEY):
                appointments[index] = replace(appointment, status=AppointmentStatus.COMPLETED)
                self._collections[PAYMENTS_KEY].append(payment)

        logger.info(
            "Completed appointment %s with %s payment of %.2f",
            appointment_id,
            method.value,
            payment.amount,
        )
        return payment

    async def register_visit(
        self,
        client_id: str,
        service_id: str,
        date: date,
        time: time,
        method: PaymentMethod = PaymentMethod.CASH,
        amount: float | None = None,
        notes: str | None = None,
    ) -> tuple[Appointment, Payment]:
        """Record a service already performed together with its payment, atomically.

        The appointment is stored as completed. The payment falls back to the
        service's list price (0 if the service is unknown) when ``amount`` is
        absent or zero.
        """
        async with self._lock:
            appointment = Appointment(
                client_id=client_id,
                service_id=service_id,
                date=date,
                time=time,
                status=AppointmentStatus.COMPLETED,
                notes=notes or None,
            )
            payment = Payment(
                appointment_id=appointment.id,
                amount=amount or service_price(self._collections[SERVICES_KEY], service_id),
                method=method,
            )
            async with self._writing(APPOINTMENTS_KEY, PAYMENTS_KEY):
                self._collections[APPOINTMENTS_KEY].append(appointment)
                self._collections[PAYMENTS_KEY].append(payment)

        logger.info("Registered visit %s for client %s", appointment.id, client_id)
        return appointment, payment

    # ── Payments ─────────────────────────────────────────────────────

    async def add_payment(
        self,
        appointment_id: str,
        amount: float,
        method: PaymentMethod,
        date: datetime | None = None,
    ) -> Payment:
        payment = Payment(appointment_id=appointment_id, amount=amount, method=method)
        if date is not None:
            payment = replace(payment, date=date)
        return await self._add(PAYMENTS_KEY, payment)

    async def update_payment(
        self, payment_id: str, changes: Mapping[str, Any]
    ) -> Payment | None:
        return await self._update(PAYMENTS_KEY, payment_id, changes)

    # ── Internals ────────────────────────────────────────────────────

    async def _add(self, key: str, record: Any) -> Any:
        async with self._lock:
            async with self._writing(key):
                self._collections[key].append(record)
        logger.debug("Added %s %s", type(record).__name__, record.id)
        return record

    async def _update(
        self, key: str, record_id: str, changes: Mapping[str, Any]
    ) -> Any | None:
        fields = {name: value for name, value in changes.items() if name != "id"}
        async with self._lock:
            records = self._collections[key]
            index = _index_of(records, record_id)
            if index is None:
                logger.debug("No record %s in '%s'; update ignored", record_id, key)
                return None
            updated = replace(records[index], **fields)
            async with self._writing(key):
                records[index] = updated
        return updated

    @asynccontextmanager
    async def _writing(self, *keys: str) -> AsyncIterator[None]:
        """Persist ``keys`` after the block's in-memory changes.

        On any failure the touched collections are restored before the
        exception propagates. Callers hold ``self._lock``.
        """
        snapshot = {key: list(self._collections[key]) for key in keys}
        try:
            yield
            await self._persist(keys)
        except Exception:
            for key, records in snapshot.items():
                self._collections[key] = records
            logger.warning("Write to %s failed; in-memory state restored", ", ".join(keys))
            raise

    async def _persist(self, keys: tuple[str, ...]) -> None:
        entries = {
            key: [record.to_dict() for record in self._collections[key]] for key in keys
        }
        if len(entries) == 1:
            (key, items), = entries.items()
            await self._storage.save(key, items)
        else:
            await self._storage.save_many(entries)
        logger.debug(
            "Persisted %s",
            ", ".join(f"{key}={len(items)}" for key, items in entries.items()),
        )
