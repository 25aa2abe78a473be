"""Pydantic schemas for Barber domain."""

from pydantic import BaseModel, field_validator
from typing import Optional

from barberhub.domain.schemas.common import ActiveStatus, DateStr, reject_null


class BarberBase(BaseModel):
    name: str
    position: str
    phone: str
    email: str
    specialty: Optional[str] = None
    start_date: Optional[DateStr] = None
    about: Optional[str] = None
    status: ActiveStatus = "active"


class BarberCreate(BarberBase):
    pass


class BarberUpdate(BaseModel):
    name: Optional[str] = None
    position: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    specialty: Optional[str] = None
    start_date: Optional[DateStr] = None
    about: Optional[str] = None
    status: Optional[ActiveStatus] = None

    @field_validator("name", "position", "phone", "email", "status")
    @classmethod
    def required_fields_not_null(cls, value):
        return reject_null(value)


class Barber(BarberBase):
    id: int

    model_config = {"from_attributes": True}
