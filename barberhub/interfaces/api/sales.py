"""Sales API routes — CRUD plus joined and per-day views."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status

from barberhub.application.services.detail_service import (
    get_sale_with_details,
    list_sales_with_details,
    sales_by_date,
)
from barberhub.core.exceptions import EntityNotFoundException
from barberhub.domain.schemas.common import DateStr
from barberhub.domain.schemas.sale import Sale, SaleCreate, SaleUpdate
from barberhub.infrastructure.store import BarbershopStore
from barberhub.interfaces.deps import get_store

router = APIRouter(prefix="/api/sales", tags=["Sales"])


def _not_found(id: int) -> EntityNotFoundException:
    return EntityNotFoundException("Venda não encontrada", {"id": id})


@router.get("", response_model=None)
def list_sales(
    details: bool = False,
    date: Optional[DateStr] = Query(None, description="Only honoured together with details=true"),
    store: BarbershopStore = Depends(get_store),
):
    """List sales, joined with client/product/appointment when ``details`` is set."""
    if details and date:
        return sales_by_date(store, date)
    if details:
        return list_sales_with_details(store)
    return store.sales.list()


@router.get("/{id}", response_model=None)
def get_sale(id: int, details: bool = False, store: BarbershopStore = Depends(get_store)):
    sale = get_sale_with_details(store, id) if details else store.sales.get_by_id(id)
    if sale is None:
        raise _not_found(id)
    return sale


@router.post("", response_model=Sale, status_code=status.HTTP_201_CREATED)
def create_sale(payload: SaleCreate, store: BarbershopStore = Depends(get_store)):
    """Record a sale. Product stock is not touched."""
    return store.sales.create(payload)


@router.patch("/{id}", response_model=Sale)
def update_sale(id: int, payload: SaleUpdate, store: BarbershopStore = Depends(get_store)):
    sale = store.sales.update(id, payload)
    if sale is None:
        raise _not_found(id)
    return sale


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_sale(id: int, store: BarbershopStore = Depends(get_store)):
    if not store.sales.delete(id):
        raise _not_found(id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
