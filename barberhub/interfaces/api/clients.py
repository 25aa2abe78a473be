"""Client API routes — CRUD for the shop's clients."""

from typing import List

from fastapi import APIRouter, Depends, Response, status

from barberhub.core.exceptions import EntityNotFoundException
from barberhub.domain.schemas.client import Client, ClientCreate, ClientUpdate
from barberhub.infrastructure.store import BarbershopStore
from barberhub.interfaces.deps import get_store

router = APIRouter(prefix="/api/clients", tags=["Clients"])


def _not_found(id: int) -> EntityNotFoundException:
    return EntityNotFoundException("Cliente não encontrado", {"id": id})


@router.get("", response_model=List[Client])
def list_clients(store: BarbershopStore = Depends(get_store)):
    return store.clients.list()


@router.get("/{id}", response_model=Client)
def get_client(id: int, store: BarbershopStore = Depends(get_store)):
    client = store.clients.get_by_id(id)
    if client is None:
        raise _not_found(id)
    return client


@router.post("", response_model=Client, status_code=status.HTTP_201_CREATED)
def create_client(payload: ClientCreate, store: BarbershopStore = Depends(get_store)):
    """Register a client; ``created_at`` is stamped by the store."""
    return store.clients.create(payload)


@router.patch("/{id}", response_model=Client)
def update_client(id: int, payload: ClientUpdate, store: BarbershopStore = Depends(get_store)):
    client = store.clients.update(id, payload)
    if client is None:
        raise _not_found(id)
    return client


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_client(id: int, store: BarbershopStore = Depends(get_store)):
    """Delete a client. Appointments and sales pointing at it are kept."""
    if not store.clients.delete(id):
        raise _not_found(id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
