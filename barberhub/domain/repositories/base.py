"""
Base Repository Interface.
Defines the standard contract for data access operations.
"""

from typing import TypeVar, List, Optional, Any, Protocol

T = TypeVar("T")


class BaseRepository(Protocol[T]):
    """Interface for generic CRUD operations."""

    def get_by_id(self, id: int) -> Optional[T]:
        """Get a single entity by ID, or None when it does not exist."""
        ...

    def list(self) -> List[T]:
        """List all entities in insertion order."""
        ...

    def create(self, obj_in: Any) -> T:
        """Create a new entity with the next sequential ID."""
        ...

    def update(self, id: int, obj_in: Any) -> Optional[T]:
        """Merge the supplied fields into an entity, or None when it does not exist."""
        ...

    def delete(self, id: int) -> bool:
        """Delete an entity by ID; True only if something was removed."""
        ...
