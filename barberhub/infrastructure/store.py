"""In-memory barbershop store — one repository per entity kind."""

from datetime import date
from typing import Optional

import structlog

from barberhub.domain.schemas.appointment import Appointment
from barberhub.domain.schemas.barber import Barber
from barberhub.domain.schemas.product import Product
from barberhub.domain.schemas.sale import Sale
from barberhub.domain.schemas.service import Service
from barberhub.infrastructure.repositories.base_repository import InMemoryRepository
from barberhub.infrastructure.repositories.client_repository import InMemoryClientRepository
from barberhub.infrastructure.seed import seed_store

logger = structlog.get_logger(__name__)


class BarbershopStore:
    """Holds the six collections of the application.

    Each repository keeps its own id counter, so ids are only unique
    within one entity kind. Nothing cascades: deleting a barber leaves
    appointments that point at it untouched.
    """

    def __init__(self):
        self.barbers = InMemoryRepository(Barber)
        self.services = InMemoryRepository(Service)
        self.clients = InMemoryClientRepository()
        self.appointments = InMemoryRepository(Appointment)
        self.products = InMemoryRepository(Product)
        self.sales = InMemoryRepository(Sale)

    def counts(self) -> dict[str, int]:
        return {
            "barbers": len(self.barbers),
            "services": len(self.services),
            "clients": len(self.clients),
            "appointments": len(self.appointments),
            "products": len(self.products),
            "sales": len(self.sales),
        }


def build_store(seed: bool = False, today: Optional[date] = None) -> BarbershopStore:
    """Create a store, optionally filled with the demo data set."""
    store = BarbershopStore()
    if seed:
        seed_store(store, today or date.today())
        logger.info("Demo data loaded", **store.counts())
    return store
