"""Shared fixtures for the BarberHub test suite."""

from datetime import date

import pytest
from fastapi.testclient import TestClient

from barberhub.infrastructure.store import BarbershopStore, build_store
from barberhub.main import create_app

TODAY = date(2024, 5, 20)


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def store() -> BarbershopStore:
    """An empty, isolated store."""
    return BarbershopStore()


@pytest.fixture
def seeded_store() -> BarbershopStore:
    """A store holding the demo data, dated TODAY."""
    return build_store(seed=True, today=TODAY)


@pytest.fixture
def shop(store):
    """One barber, one service priced 40.0 and one client in an empty store."""
    barber = store.barbers.create({
        "name": "Marcos Oliveira",
        "position": "Barbeiro Senior",
        "phone": "(11) 98765-4321",
        "email": "marcos@barberhub.com",
        "status": "active",
    })
    service = store.services.create({
        "name": "Corte Degradê",
        "duration": 30,
        "price": 40.0,
        "status": "active",
    })
    client = store.clients.create({"name": "João Silva", "phone": "(11) 91234-5678"})
    return {"store": store, "barber": barber, "service": service, "client": client}


@pytest.fixture
def make_appointment(shop):
    """Create appointments against the ``shop`` fixture's records."""
    def _make(**overrides):
        data = {
            "client_id": shop["client"].id,
            "barber_id": shop["barber"].id,
            "service_id": shop["service"].id,
            "date": TODAY.isoformat(),
            "time": "10:00",
            "status": "scheduled",
        }
        data.update(overrides)
        return shop["store"].appointments.create(data)
    return _make


@pytest.fixture
def make_sale(store):
    def _make(**overrides):
        data = {
            "quantity": 1,
            "total_price": 10.0,
            "date": TODAY.isoformat(),
            "payment_method": "cash",
        }
        data.update(overrides)
        return store.sales.create(data)
    return _make


@pytest.fixture
def api(store) -> TestClient:
    """HTTP client over an app wired to the empty ``store`` fixture."""
    return TestClient(create_app(store))


@pytest.fixture
def seeded_api(seeded_store) -> TestClient:
    return TestClient(create_app(seeded_store))
