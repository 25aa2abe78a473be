"""Detail service — joins appointments and sales with the records they reference.

A reference that does not resolve (a client deleted after booking, for
instance) raises ``DanglingReferenceException`` instead of yielding a
partial view.
"""

from typing import List, Optional

import structlog

from barberhub.core.exceptions import DanglingReferenceException
from barberhub.domain.schemas.appointment import Appointment, AppointmentWithDetails
from barberhub.domain.schemas.sale import Sale, SaleWithDetails
from barberhub.infrastructure.store import BarbershopStore

logger = structlog.get_logger(__name__)


def _resolve(repo, owner: str, owner_id: int, entity: str, entity_id: int):
    record = repo.get_by_id(entity_id)
    if record is None:
        logger.warning(
            "Dangling reference",
            owner=owner, owner_id=owner_id, entity=entity, entity_id=entity_id,
        )
        raise DanglingReferenceException(owner, owner_id, entity, entity_id)
    return record


def appointment_with_details(store: BarbershopStore, appointment: Appointment) -> AppointmentWithDetails:
    """Attach client, barber and service to an appointment."""
    client = _resolve(store.clients, "Appointment", appointment.id, "Client", appointment.client_id)
    barber = _resolve(store.barbers, "Appointment", appointment.id, "Barber", appointment.barber_id)
    service = _resolve(store.services, "Appointment", appointment.id, "Service", appointment.service_id)

    return AppointmentWithDetails.model_construct(
        **appointment.model_dump(),
        client=client,
        barber=barber,
        service=service,
    )


def get_appointment_with_details(store: BarbershopStore, id: int) -> Optional[AppointmentWithDetails]:
    appointment = store.appointments.get_by_id(id)
    if appointment is None:
        return None
    return appointment_with_details(store, appointment)


def list_appointments_with_details(store: BarbershopStore) -> List[AppointmentWithDetails]:
    return [appointment_with_details(store, a) for a in store.appointments.list()]


def appointments_by_date(store: BarbershopStore, date: str) -> List[AppointmentWithDetails]:
    """Joined appointments whose date is exactly ``date`` ("YYYY-MM-DD")."""
    return [appointment_with_details(store, a) for a in store.appointments.list() if a.date == date]


def sale_with_details(store: BarbershopStore, sale: Sale) -> SaleWithDetails:
    """Attach whichever of client, product and appointment the sale links.

    The three links are independent; a sale carrying both a product and an
    appointment gets both attached.
    """
    extra = {}

    if sale.client_id is not None:
        extra["client"] = _resolve(store.clients, "Sale", sale.id, "Client", sale.client_id)

    if sale.product_id is not None:
        extra["product"] = _resolve(store.products, "Sale", sale.id, "Product", sale.product_id)

    if sale.appointment_id is not None:
        appointment = _resolve(store.appointments, "Sale", sale.id, "Appointment", sale.appointment_id)
        extra["appointment"] = appointment_with_details(store, appointment)

    return SaleWithDetails.model_construct(**sale.model_dump(), **extra)


def get_sale_with_details(store: BarbershopStore, id: int) -> Optional[SaleWithDetails]:
    sale = store.sales.get_by_id(id)
    if sale is None:
        return None
    return sale_with_details(store, sale)


def list_sales_with_details(store: BarbershopStore) -> List[SaleWithDetails]:
    return [sale_with_details(store, s) for s in store.sales.list()]


def sales_by_date(store: BarbershopStore, date: str) -> List[SaleWithDetails]:
    """Joined sales whose date is exactly ``date`` ("YYYY-MM-DD")."""
    return [sale_with_details(store, s) for s in store.sales.list() if s.date == date]
