"""Local storage for the draw snapshot."""

from ee_draws.store.json_store import JsonSnapshotStore, SnapshotStore
from ee_draws.store.memory_store import InMemorySnapshotStore

__all__ = [
    "InMemorySnapshotStore",
    "JsonSnapshotStore",
    "SnapshotStore",
]
