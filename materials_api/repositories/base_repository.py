"""
Base Repository class providing common CRUD operations.
Implements the Repository pattern over a process-local, ordered list.
"""
from typing import Callable, Generic, List, Optional, TypeVar

T = TypeVar('T')


class BaseRepository(Generic[T]):
    """Base repository keeping entities in insertion order.

    Entities must expose an ``id`` attribute. The repository does no locking
    of its own; callers serialize access.
    """

    def __init__(self):
        self._items: List[T] = []

    def create(self, entity: T) -> T:
        """Append a new entity."""
        self._items.append(entity)
        return entity

    def get_all(self) -> List[T]:
        """Snapshot of all entities, in insertion order."""
        return list(self._items)

    def index_of(self, entity_id: int) -> Optional[int]:
        """Position of the entity with the given ID, or None."""
        for index, item in enumerate(self._items):
            if item.id == entity_id:
                return index
        return None

    def find_one_by(self, predicate: Callable[[T], bool]) -> Optional[T]:
        """Find first entity matching a predicate."""
        for item in self._items:
            if predicate(item):
                return item
        return None

    def replace(self, index: int, entity: T) -> T:
        """Replace the entity at ``index``, keeping its position."""
        self._items[index] = entity
        return entity

    def delete_by_id(self, entity_id: int) -> bool:
        """Delete entity by ID. Returns True if deleted, False if not found."""
        index = self.index_of(entity_id)
        if index is None:
            return False
        del self._items[index]
        return True

    def count(self) -> int:
        return len(self._items)

