"""Pydantic schemas for the services a barbershop offers."""

from pydantic import BaseModel, Field, field_validator
from typing import Optional

from barberhub.domain.schemas.common import ActiveStatus, reject_null


class ServiceBase(BaseModel):
    name: str
    description: Optional[str] = None
    duration: int = Field(..., gt=0, description="Duration in minutes")
    price: float = Field(..., ge=0)
    status: ActiveStatus = "active"


class ServiceCreate(ServiceBase):
    pass


class ServiceUpdate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    duration: Optional[int] = Field(None, gt=0)
    price: Optional[float] = Field(None, ge=0)
    status: Optional[ActiveStatus] = None

    @field_validator("name", "duration", "price", "status")
    @classmethod
    def required_fields_not_null(cls, value):
        return reject_null(value)


class Service(ServiceBase):
    id: int

    model_config = {"from_attributes": True}
