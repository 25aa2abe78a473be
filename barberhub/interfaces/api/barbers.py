"""Barbers API routes — CRUD."""

from typing import List

from fastapi import APIRouter, Depends, Response, status

from barberhub.core.exceptions import EntityNotFoundException
from barberhub.domain.schemas.barber import Barber, BarberCreate, BarberUpdate
from barberhub.infrastructure.store import BarbershopStore
from barberhub.interfaces.deps import get_store

router = APIRouter(prefix="/api/barbers", tags=["Barbers"])


def _not_found(id: int) -> EntityNotFoundException:
    return EntityNotFoundException("Barbeiro não encontrado", {"id": id})


@router.get("", response_model=List[Barber])
def list_barbers(store: BarbershopStore = Depends(get_store)):
    return store.barbers.list()


@router.get("/{id}", response_model=Barber)
def get_barber(id: int, store: BarbershopStore = Depends(get_store)):
    barber = store.barbers.get_by_id(id)
    if barber is None:
        raise _not_found(id)
    return barber


@router.post("", response_model=Barber, status_code=status.HTTP_201_CREATED)
def create_barber(payload: BarberCreate, store: BarbershopStore = Depends(get_store)):
    return store.barbers.create(payload)


@router.patch("/{id}", response_model=Barber)
def update_barber(id: int, payload: BarberUpdate, store: BarbershopStore = Depends(get_store)):
    barber = store.barbers.update(id, payload)
    if barber is None:
        raise _not_found(id)
    return barber


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_barber(id: int, store: BarbershopStore = Depends(get_store)):
    if not store.barbers.delete(id):
        raise _not_found(id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
