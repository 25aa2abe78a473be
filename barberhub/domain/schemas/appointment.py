"""Pydantic schemas for Appointment domain."""

from pydantic import BaseModel, field_validator
from typing import Optional

from barberhub.domain.schemas.barber import Barber
from barberhub.domain.schemas.client import Client
from barberhub.domain.schemas.common import AppointmentStatus, DateStr, TimeStr, reject_null
from barberhub.domain.schemas.service import Service


class AppointmentBase(BaseModel):
    client_id: int
    barber_id: int
    service_id: int
    date: DateStr
    time: TimeStr
    # scheduled -> confirmed -> waiting -> completed, cancelled from any open state.
    # Transitions are not enforced here.
    status: AppointmentStatus = "scheduled"
    notes: Optional[str] = None


class AppointmentCreate(AppointmentBase):
    pass


class AppointmentUpdate(BaseModel):
    client_id: Optional[int] = None
    barber_id: Optional[int] = None
    service_id: Optional[int] = None
    date: Optional[DateStr] = None
    time: Optional[TimeStr] = None
    status: Optional[AppointmentStatus] = None
    notes: Optional[str] = None

    @field_validator("client_id", "barber_id", "service_id", "date", "time", "status")
    @classmethod
    def required_fields_not_null(cls, value):
        return reject_null(value)


class Appointment(AppointmentBase):
    id: int

    model_config = {"from_attributes": True}


class AppointmentWithDetails(Appointment):
    """Appointment joined with the client, barber and service it points at."""

    client: Client
    barber: Barber
    service: Service
