"""Services API routes — CRUD for the services on the menu."""

from typing import List

from fastapi import APIRouter, Depends, Response, status

from barberhub.core.exceptions import EntityNotFoundException
from barberhub.domain.schemas.service import Service, ServiceCreate, ServiceUpdate
from barberhub.infrastructure.store import BarbershopStore
from barberhub.interfaces.deps import get_store

router = APIRouter(prefix="/api/services", tags=["Services"])


def _not_found(id: int) -> EntityNotFoundException:
    return EntityNotFoundException("Serviço não encontrado", {"id": id})


@router.get("", response_model=List[Service])
def list_services(store: BarbershopStore = Depends(get_store)):
    return store.services.list()


@router.get("/{id}", response_model=Service)
def get_service(id: int, store: BarbershopStore = Depends(get_store)):
    service = store.services.get_by_id(id)
    if service is None:
        raise _not_found(id)
    return service


@router.post("", response_model=Service, status_code=status.HTTP_201_CREATED)
def create_service(payload: ServiceCreate, store: BarbershopStore = Depends(get_store)):
    return store.services.create(payload)


@router.patch("/{id}", response_model=Service)
def update_service(id: int, payload: ServiceUpdate, store: BarbershopStore = Depends(get_store)):
    service = store.services.update(id, payload)
    if service is None:
        raise _not_found(id)
    return service


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_service(id: int, store: BarbershopStore = Depends(get_store)):
    if not store.services.delete(id):
        raise _not_found(id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
