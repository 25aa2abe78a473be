"""
In-memory implementation of the Base Repository.
"""

import threading
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

import structlog
from pydantic import BaseModel

from barberhub.domain.repositories.base import BaseRepository

ModelType = TypeVar("ModelType", bound=BaseModel)

logger = structlog.get_logger(__name__)


def to_data(obj_in: Any) -> Dict[str, Any]:
    """Turn a pydantic model or a dict into the fields the caller supplied."""
    if hasattr(obj_in, "model_dump"):
        return obj_in.model_dump(exclude_unset=True)
    return dict(obj_in)


class InMemoryRepository(BaseRepository[ModelType], Generic[ModelType]):
    """Generic repository keeping records of one entity kind in a dict.

    IDs start at 1 and are never reused, even after a delete. Records are
    built with ``model_construct`` so nothing is validated here; payloads
    are expected to be checked before they reach the store.
    """

    # Fields a patch may never overwrite
    protected_fields = frozenset({"id"})

    def __init__(self, model: Type[ModelType]):
        self.model = model
        self.entity = model.__name__
        self._records: Dict[int, ModelType] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def get_by_id(self, id: int) -> Optional[ModelType]:
        return self._records.get(id)

    def list(self) -> List[ModelType]:
        with self._lock:
            return list(self._records.values())

    def build(self, id: int, data: Dict[str, Any]) -> ModelType:
        return self.model.model_construct(**data, id=id)

    def create(self, obj_in: Any) -> ModelType:
        data = to_data(obj_in)
        data.pop("id", None)
        with self._lock:
            id = self._next_id
            self._next_id += 1
            record = self.build(id, data)
            self._records[id] = record
        logger.debug("Entity created", entity=self.entity, id=id)
        return record

    def update(self, id: int, obj_in: Any) -> Optional[ModelType]:
        update_data = {
            field: value
            for field, value in to_data(obj_in).items()
            if field not in self.protected_fields
        }
        with self._lock:
            existing = self._records.get(id)
            if existing is None:
                return None
            record = existing.model_copy(update=update_data)
            self._records[id] = record
        logger.debug("Entity updated", entity=self.entity, id=id, fields=sorted(update_data))
        return record

    def delete(self, id: int) -> bool:
        with self._lock:
            removed = self._records.pop(id, None) is not None
        if removed:
            logger.debug("Entity deleted", entity=self.entity, id=id)
        return removed

    def __len__(self) -> int:
        return len(self._records)
