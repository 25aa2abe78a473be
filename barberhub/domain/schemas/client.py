"""Pydantic schemas for Client domain."""

from pydantic import BaseModel, field_validator
from datetime import datetime
from typing import Optional

from barberhub.domain.schemas.common import DateStr, reject_null


class ClientBase(BaseModel):
    name: str
    phone: str
    email: Optional[str] = None
    birthdate: Optional[DateStr] = None
    notes: Optional[str] = None


class ClientCreate(ClientBase):
    pass


class ClientUpdate(BaseModel):
    name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    birthdate: Optional[DateStr] = None
    notes: Optional[str] = None

    @field_validator("name", "phone")
    @classmethod
    def required_fields_not_null(cls, value):
        return reject_null(value)


class Client(ClientBase):
    id: int
    created_at: datetime

    model_config = {"from_attributes": True}
