"""In-memory snapshot store for tests and embedding."""

from typing import Optional

from ee_draws.models.draw import DrawCollection
from ee_draws.store.json_store import SnapshotStore


class InMemorySnapshotStore(SnapshotStore):
    """Keeps a private deep copy so no two callers share a mutable collection."""

    def __init__(self, collection: Optional[DrawCollection] = None):
        self._collection: Optional[DrawCollection] = None
        if collection is not None:
            self.save(collection)

    def load(self) -> Optional[DrawCollection]:
        if self._collection is None:
            return None
        return self._collection.model_copy(deep=True)

    def save(self, collection: DrawCollection) -> None:
        self._collection = collection.model_copy(deep=True)
