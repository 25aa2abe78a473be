"""Products API routes — CRUD for retail products."""

from typing import List

from fastapi import APIRouter, Depends, Response, status

from barberhub.core.exceptions import EntityNotFoundException
from barberhub.domain.schemas.product import Product, ProductCreate, ProductUpdate
from barberhub.infrastructure.store import BarbershopStore
from barberhub.interfaces.deps import get_store

router = APIRouter(prefix="/api/products", tags=["Products"])


def _not_found(id: int) -> EntityNotFoundException:
    return EntityNotFoundException("Produto não encontrado", {"id": id})


@router.get("", response_model=List[Product])
def list_products(store: BarbershopStore = Depends(get_store)):
    return store.products.list()


@router.get("/{id}", response_model=Product)
def get_product(id: int, store: BarbershopStore = Depends(get_store)):
    product = store.products.get_by_id(id)
    if product is None:
        raise _not_found(id)
    return product


@router.post("", response_model=Product, status_code=status.HTTP_201_CREATED)
def create_product(payload: ProductCreate, store: BarbershopStore = Depends(get_store)):
    return store.products.create(payload)


@router.patch("/{id}", response_model=Product)
def update_product(id: int, payload: ProductUpdate, store: BarbershopStore = Depends(get_store)):
    product = store.products.update(id, payload)
    if product is None:
        raise _not_found(id)
    return product


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(id: int, store: BarbershopStore = Depends(get_store)):
    if not store.products.delete(id):
        raise _not_found(id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
