"""
In-memory Client repository.
"""

from datetime import datetime, timezone
from typing import Any, Dict

from barberhub.domain.schemas.client import Client
from barberhub.infrastructure.repositories.base_repository import InMemoryRepository


class InMemoryClientRepository(InMemoryRepository[Client]):
    """Clients get a ``created_at`` stamp on insert that patches cannot change."""

    protected_fields = frozenset({"id", "created_at"})

    def __init__(self):
        super().__init__(Client)

    def build(self, id: int, data: Dict[str, Any]) -> Client:
        data["created_at"] = datetime.now(timezone.utc)
        return super().build(id, data)
