"""Pydantic schemas for Product domain."""

from pydantic import BaseModel, Field, field_validator
from typing import Optional

from barberhub.domain.schemas.common import ActiveStatus, reject_null


class ProductBase(BaseModel):
    name: str
    description: Optional[str] = None
    price: float = Field(..., ge=0)
    stock: int = Field(0, ge=0)
    category: Optional[str] = None
    status: ActiveStatus = "active"


class ProductCreate(ProductBase):
    pass


class ProductUpdate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = Field(None, ge=0)
    stock: Optional[int] = Field(None, ge=0)
    category: Optional[str] = None
    status: Optional[ActiveStatus] = None

    @field_validator("name", "price", "stock", "status")
    @classmethod
    def required_fields_not_null(cls, value):
        return reject_null(value)


class Product(ProductBase):
    id: int

    model_config = {"from_attributes": True}
