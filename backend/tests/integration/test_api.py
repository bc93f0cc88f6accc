"""End-to-end tests for the REST endpoints over an in-memory store."""

from datetime import datetime, timezone
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient

from barbershop.application.interfaces import CollectionStorage
from barbershop.application.services import BarberStore
from barbershop.infrastructure.dependencies import get_barber_store, get_now
from barbershop.main import app

NOW = datetime(2024, 1, 10, 15, 0, tzinfo=timezone.utc)


class InMemoryCollectionStorage(CollectionStorage):
    def __init__(self):
        self.entries: dict[str, list[dict[str, Any]]] = {}

    async def load(self, key: str) -> list[dict[str, Any]] | None:
        return self.entries.get(key)

    async def save(self, key: str, items: list[dict[str, Any]]) -> None:
        self.entries[key] = list(items)

    async def save_many(self, entries: dict[str, list[dict[str, Any]]]) -> None:
        for key, items in entries.items():
            self.entries[key] = list(items)


@pytest.fixture
async def client():
    store = BarberStore(InMemoryCollectionStorage())
    await store.load()
    app.dependency_overrides[get_barber_store] = lambda: store
    app.dependency_overrides[get_now] = lambda: NOW

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as http:
        yield http

    app.dependency_overrides.clear()


async def _service_id(client: AsyncClient, name: str) -> str:
    response = await client.get("/api/v1/services")
    return next(s["id"] for s in response.json() if s["name"] == name)


async def _new_client(client: AsyncClient, name: str = "Ana") -> str:
    response = await client.post("/api/v1/clients", json={"name": name, "phone": "555-0101"})
    assert response.status_code == 201
    return response.json()["id"]


async def _book(client: AsyncClient, client_id: str, service_id: str, day: str = "2024-01-10"):
    response = await client.post(
        "/api/v1/appointments",
        json={"client_id": client_id, "service_id": service_id, "date": day, "time": "14:00"},
    )
    assert response.status_code == 201
    return response.json()


@pytest.mark.asyncio
async def test_default_services_are_listed(client: AsyncClient):
    response = await client.get("/api/v1/services")

    assert response.status_code == 200
    assert [s["name"] for s in response.json()] == [
        "Corte Masculino",
        "Barba",
        "Corte + Barba",
        "Sobrancelha",
    ]


@pytest.mark.asyncio
async def test_create_and_update_service(client: AsyncClient):
    response = await client.post(
        "/api/v1/services", json={"name": "Luzes", "price": 80, "duration": 90}
    )
    assert response.status_code == 201
    service_id = response.json()["id"]

    response = await client.put(f"/api/v1/services/{service_id}", json={"price": 85.5})
    assert response.status_code == 200
    assert response.json()["price"] == 85.5
    assert response.json()["name"] == "Luzes"


@pytest.mark.asyncio
async def test_service_validation_rejects_zero_duration(client: AsyncClient):
    response = await client.post(
        "/api/v1/services", json={"name": "Nada", "price": 10, "duration": 0}
    )
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_client_requires_name_and_phone(client: AsyncClient):
    response = await client.post("/api/v1/clients", json={"name": "", "phone": "555"})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_unknown_records_return_404(client: AsyncClient):
    assert (await client.get("/api/v1/clients/missing")).status_code == 404
    assert (await client.put("/api/v1/clients/missing", json={"name": "X"})).status_code == 404
    assert (await client.get("/api/v1/services/missing")).status_code == 404
    assert (await client.get("/api/v1/appointments/missing")).status_code == 404
    assert (await client.get("/api/v1/payments/missing")).status_code == 404


@pytest.mark.asyncio
async def test_complete_appointment_flow(client: AsyncClient):
    client_id = await _new_client(client)
    service_id = await _service_id(client, "Corte Masculino")
    appointment = await _book(client, client_id, service_id)

    response = await client.post(
        f"/api/v1/appointments/{appointment['id']}/complete", json={"method": "pix"}
    )
    assert response.status_code == 201
    payment = response.json()
    assert payment["amount"] == 25.0
    assert payment["method"] == "pix"

    response = await client.get(f"/api/v1/appointments/{appointment['id']}")
    detail = response.json()
    assert detail["appointment"]["status"] == "completed"
    assert detail["client_name"] == "Ana"
    assert detail["payment"]["id"] == payment["id"]

    response = await client.post(f"/api/v1/appointments/{appointment['id']}/complete", json={})
    assert response.status_code == 409


@pytest.mark.asyncio
async def test_cancel_appointment(client: AsyncClient):
    client_id = await _new_client(client)
    service_id = await _service_id(client, "Barba")
    appointment = await _book(client, client_id, service_id)

    response = await client.post(f"/api/v1/appointments/{appointment['id']}/cancel")
    assert response.status_code == 200
    assert response.json()["status"] == "cancelled"

    response = await client.post(f"/api/v1/appointments/{appointment['id']}/cancel")
    assert response.status_code == 409


@pytest.mark.asyncio
async def test_register_visit_and_client_history(client: AsyncClient):
    client_id = await _new_client(client)
    service_id = await _service_id(client, "Corte + Barba")

    response = await client.post(
        "/api/v1/appointments/visits",
        json={
            "client_id": client_id,
            "service_id": service_id,
            "date": "2024-01-09",
            "time": "10:30",
            "method": "debit",
            "amount": 30,
        },
    )
    assert response.status_code == 201
    visit = response.json()
    assert visit["appointment"]["status"] == "completed"
    assert visit["payment"]["appointment_id"] == visit["appointment"]["id"]

    response = await client.get(f"/api/v1/clients/{client_id}/history")
    history = response.json()
    assert history["appointment_count"] == 1
    assert history["total_spent"] == 30.0
    assert history["total_spent_display"] == "R$ 30.00"
    assert history["entries"][0]["service_name"] == "Corte + Barba"

    response = await client.get(f"/api/v1/clients/{client_id}/history", params={"privacy": True})
    assert response.json()["total_spent_display"] == "***"


@pytest.mark.asyncio
async def test_payments_listing_filters_and_totals(client: AsyncClient):
    client_id = await _new_client(client)
    cut = await _service_id(client, "Corte Masculino")
    beard = await _service_id(client, "Barba")
    first = await _book(client, client_id, cut)
    second = await _book(client, client_id, beard)
    await client.post(f"/api/v1/appointments/{first['id']}/complete", json={"method": "pix"})
    await client.post(f"/api/v1/appointments/{second['id']}/complete", json={"method": "cash"})

    response = await client.get("/api/v1/payments", params={"method": "pix"})
    body = response.json()

    assert response.status_code == 200
    assert body["count"] == 1
    assert body["total"] == 25.0
    assert body["payments"][0]["service_name"] == "Corte Masculino"
    assert body["by_method"] == {"cash": 15.0, "pix": 25.0, "credit": 0.0, "debit": 0.0}

    payment_id = body["payments"][0]["payment"]["id"]
    response = await client.put(f"/api/v1/payments/{payment_id}", json={"method": "credit"})
    assert response.json()["method"] == "credit"


@pytest.mark.asyncio
async def test_dashboard_revenue_and_privacy(client: AsyncClient):
    client_id = await _new_client(client)
    cut = await _service_id(client, "Corte Masculino")
    combo = await _service_id(client, "Corte + Barba")
    beard = await _service_id(client, "Barba")
    for service_id in (cut, combo):
        appointment = await _book(client, client_id, service_id)
        await client.post(f"/api/v1/appointments/{appointment['id']}/complete", json={})
    await _book(client, client_id, beard)

    response = await client.get("/api/v1/dashboard")
    body = response.json()

    assert response.status_code == 200
    assert body["today"]["revenue"] == 60.0
    assert body["today"]["count"] == 3
    assert body["today"]["revenue_display"] == "R$ 60.00"
    assert body["total_clients"] == 1
    assert len(body["upcoming"]) == 3
    assert body["popular_services"][0]["appointment_count"] == 1

    response = await client.get("/api/v1/dashboard", params={"privacy": True})
    masked = response.json()["today"]
    assert masked["revenue_display"] == "***"
    assert masked["count_display"] == "***"


@pytest.mark.asyncio
async def test_created_client_matches_input(client: AsyncClient):
    before = datetime.now(timezone.utc)
    response = await client.post(
        "/api/v1/clients",
        json={"name": "Ana Souza", "phone": "(11) 98765-4321", "email": "ana@example.com"},
    )
    after = datetime.now(timezone.utc)

    assert response.status_code == 201
    created = response.json()
    assert created["name"] == "Ana Souza"
    assert created["phone"] == "(11) 98765-4321"
    assert created["email"] == "ana@example.com"
    assert before <= datetime.fromisoformat(created["created_at"]) <= after

    response = await client.get(f"/api/v1/clients/{created['id']}")
    stored = response.json()
    assert {k: stored[k] for k in created} == created
    assert stored["appointment_count"] == 0
    assert stored["total_spent"] == 0.0


@pytest.mark.asyncio
async def test_update_client_with_blank_email_clears_it(client: AsyncClient):
    response = await client.post(
        "/api/v1/clients", json={"name": "Ana", "phone": "555-0101", "email": "ana@example.com"}
    )
    client_id = response.json()["id"]

    response = await client.put(f"/api/v1/clients/{client_id}", json={"email": ""})

    assert response.status_code == 200
    assert response.json()["email"] is None
    assert response.json()["name"] == "Ana"


@pytest.mark.asyncio
async def test_update_appointment(client: AsyncClient):
    client_id = await _new_client(client)
    cut = await _service_id(client, "Corte Masculino")
    beard = await _service_id(client, "Barba")
    appointment = await _book(client, client_id, cut)

    response = await client.put(
        f"/api/v1/appointments/{appointment['id']}",
        json={"service_id": beard, "date": "2024-01-12", "time": "16:45:30", "notes": "Navalha"},
    )

    assert response.status_code == 200
    updated = response.json()
    assert updated["id"] == appointment["id"]
    assert updated["service_id"] == beard
    assert updated["date"] == "2024-01-12"
    assert updated["time"] == "16:45:30"
    assert updated["notes"] == "Navalha"
    assert updated["status"] == "scheduled"

    response = await client.put("/api/v1/appointments/missing", json={"notes": "x"})
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_payment_date_update_keeps_listing_sorted(client: AsyncClient):
    client_id = await _new_client(client)
    cut = await _service_id(client, "Corte Masculino")
    beard = await _service_id(client, "Barba")
    first = await _book(client, client_id, cut)
    second = await _book(client, client_id, beard)
    paid_first = await client.post(f"/api/v1/appointments/{first['id']}/complete", json={})
    await client.post(f"/api/v1/appointments/{second['id']}/complete", json={})
    payment_id = paid_first.json()["id"]

    response = await client.put(
        f"/api/v1/payments/{payment_id}", json={"date": "2024-01-09T10:00:00"}
    )
    assert response.status_code == 200
    assert datetime.fromisoformat(response.json()["date"]) == datetime(
        2024, 1, 9, 10, 0, tzinfo=timezone.utc
    )

    response = await client.get("/api/v1/payments")

    assert response.status_code == 200
    ids = [p["payment"]["id"] for p in response.json()["payments"]]
    assert ids[-1] == payment_id
    assert len(ids) == 2
