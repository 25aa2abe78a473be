"""Pydantic schemas for Sale domain.

A sale is either a product sale (``product_id``) or the payment of a
service (``appointment_id``). ``client_id`` may be set on its own in both
cases. The create schema rejects a sale that carries both links; the
store itself accepts whatever it is given.
"""

from pydantic import BaseModel, Field, field_validator, model_validator
from typing import Optional

from barberhub.domain.schemas.appointment import AppointmentWithDetails
from barberhub.domain.schemas.client import Client
from barberhub.domain.schemas.common import DateStr, PaymentMethod, reject_null
from barberhub.domain.schemas.product import Product


class SaleBase(BaseModel):
    client_id: Optional[int] = None
    product_id: Optional[int] = None
    appointment_id: Optional[int] = None
    quantity: int = Field(1, ge=1)
    total_price: float = Field(..., ge=0)
    date: DateStr
    payment_method: PaymentMethod
    notes: Optional[str] = None


class SaleCreate(SaleBase):

    @model_validator(mode="after")
    def check_single_link(self) -> "SaleCreate":
        if self.product_id is not None and self.appointment_id is not None:
            raise ValueError("A sale links either a product or an appointment, not both")
        return self


class SaleUpdate(BaseModel):
    client_id: Optional[int] = None
    product_id: Optional[int] = None
    appointment_id: Optional[int] = None
    quantity: Optional[int] = Field(None, ge=1)
    total_price: Optional[float] = Field(None, ge=0)
    date: Optional[DateStr] = None
    payment_method: Optional[PaymentMethod] = None
    notes: Optional[str] = None

    @field_validator("quantity", "total_price", "date", "payment_method")
    @classmethod
    def required_fields_not_null(cls, value):
        return reject_null(value)


class Sale(SaleBase):
    id: int

    model_config = {"from_attributes": True}


class SaleWithDetails(Sale):
    """Sale joined with whichever of client, product and appointment it links."""

    client: Optional[Client] = None
    product: Optional[Product] = None
    appointment: Optional[AppointmentWithDetails] = None
