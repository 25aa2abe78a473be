"""Appointments API routes — CRUD plus joined and per-day views."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status

from barberhub.application.services.detail_service import (
    appointments_by_date,
    get_appointment_with_details,
    list_appointments_with_details,
)
from barberhub.core.exceptions import EntityNotFoundException
from barberhub.domain.schemas.appointment import (
    Appointment,
    AppointmentCreate,
    AppointmentUpdate,
)
from barberhub.domain.schemas.common import DateStr
from barberhub.infrastructure.store import BarbershopStore
from barberhub.interfaces.deps import get_store

router = APIRouter(prefix="/api/appointments", tags=["Appointments"])


def _not_found(id: int) -> EntityNotFoundException:
    return EntityNotFoundException("Agendamento não encontrado", {"id": id})


@router.get("", response_model=None)
def list_appointments(
    details: bool = False,
    date: Optional[DateStr] = Query(None, description="Only honoured together with details=true"),
    store: BarbershopStore = Depends(get_store),
):
    """List appointments, joined with client/barber/service when ``details`` is set."""
    if details and date:
        return appointments_by_date(store, date)
    if details:
        return list_appointments_with_details(store)
    return store.appointments.list()


@router.get("/{id}", response_model=None)
def get_appointment(id: int, details: bool = False, store: BarbershopStore = Depends(get_store)):
    if details:
        appointment = get_appointment_with_details(store, id)
    else:
        appointment = store.appointments.get_by_id(id)
    if appointment is None:
        raise _not_found(id)
    return appointment


@router.post("", response_model=Appointment, status_code=status.HTTP_201_CREATED)
def create_appointment(payload: AppointmentCreate, store: BarbershopStore = Depends(get_store)):
    return store.appointments.create(payload)


@router.patch("/{id}", response_model=Appointment)
def update_appointment(id: int, payload: AppointmentUpdate, store: BarbershopStore = Depends(get_store)):
    appointment = store.appointments.update(id, payload)
    if appointment is None:
        raise _not_found(id)
    return appointment


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_appointment(id: int, store: BarbershopStore = Depends(get_store)):
    if not store.appointments.delete(id):
        raise _not_found(id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
