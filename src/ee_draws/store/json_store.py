"""Snapshot stores: the load/save seam between ingest and queries."""

import json
import logging
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from ee_draws.errors import SnapshotStoreError
from ee_draws.models.draw import DrawCollection

logger = logging.getLogger(__name__)


class SnapshotStore(ABC):
    """
    Holds at most one DrawCollection snapshot.
    load() returns None when nothing has ever been saved, which is distinct
    from a saved collection with no draws.
    """

    @abstractmethod
    def load(self) -> Optional[DrawCollection]:
        pass

    @abstractmethod
    def save(self, collection: DrawCollection) -> None:
        pass


class JsonSnapshotStore(SnapshotStore):
    """
    Single JSON file snapshot (e.g. database/draws.json).
    save() writes a temp file next to the target and swaps it in with os.replace,
    so readers see either the old or the new snapshot.
    """

    def __init__(self, path: str | Path = "database/draws.json"):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> Optional[DrawCollection]:
        if not self._path.exists():
            return None
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
            return DrawCollection.model_validate(data)
        except (OSError, ValueError, ValidationError) as e:
            raise SnapshotStoreError(f"Cannot read snapshot {self._path}: {e}") from e

    def save(self, collection: DrawCollection) -> None:
        payload = json.dumps(collection.to_snapshot(), indent=2)
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self._path.name}.",
                suffix=".tmp",
                dir=self._path.parent,
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(payload)
                os.replace(tmp_name, self._path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise SnapshotStoreError(f"Cannot write snapshot {self._path}: {e}") from e
        logger.debug("Wrote %d draws to %s", collection.total_draws, self._path)
