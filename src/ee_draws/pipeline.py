"""Pipeline orchestration: fetch → normalize → save, and snapshot loading."""

import logging
from datetime import datetime, timezone

from pydantic import BaseModel, Field

from ee_draws.connectors.base import BaseConnector
from ee_draws.errors import MissingSnapshotError
from ee_draws.models.draw import DrawCollection
from ee_draws.store import SnapshotStore

logger = logging.getLogger(__name__)


class IngestResult(BaseModel):
    """Summary of one ingest run."""

    success: bool = True
    fetched: int = Field(..., description="Rounds in the upstream payload")
    saved: int = Field(..., description="Valid draws written to the snapshot")
    dropped: int = 0
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


def run_ingest(connector: BaseConnector, store: SnapshotStore) -> IngestResult:
    """
    Fetch the feed, normalize it and replace the stored snapshot.
    Structural feed errors propagate before anything is saved, so a good
    snapshot is never overwritten by a failed run.
    """
    raw_list = connector.search()
    collection = connector.normalize_many(raw_list)
    store.save(collection)
    logger.info("Saved %d draws (last updated %s)", collection.total_draws, collection.last_updated.isoformat())
    return IngestResult(
        fetched=len(raw_list),
        saved=collection.total_draws,
        dropped=len(raw_list) - collection.total_draws,
    )


def load_snapshot(store: SnapshotStore) -> DrawCollection:
    """Load the current snapshot; never-fetched is an error, an empty snapshot is not."""
    collection = store.load()
    if collection is None:
        raise MissingSnapshotError("No data available")
    return collection
