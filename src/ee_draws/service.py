"""Request-facing service: response envelopes over a fresh snapshot per call."""

import logging
from typing import Any, Optional

from ee_draws.errors import (
    EeDrawsError,
    InvalidQueryInputError,
    InvalidUpstreamFormatError,
    MissingSnapshotError,
    NoDataError,
    NotFoundError,
    UpstreamFetchError,
)
from ee_draws.pipeline import load_snapshot
from ee_draws.query import QueryEngine
from ee_draws.store import SnapshotStore

logger = logging.getLogger(__name__)

FETCH_FIRST_MESSAGE = "Please fetch data first using the ingest command"


class DrawsService:
    """
    Thin layer an HTTP handler or CLI calls into.
    Each call loads its own snapshot, so concurrent callers never share one.
    """

    def __init__(self, store: SnapshotStore):
        self._store = store

    def _engine(self) -> QueryEngine:
        return QueryEngine(load_snapshot(self._store))

    def list_draws(
        self,
        year: Optional[str] = None,
        category: Optional[str] = None,
        limit: Any = None,
    ) -> dict:
        engine = self._engine()
        draws = [v.to_response() for v in engine.filter(year=year, category=category, limit=limit)]
        return {
            "draws": draws,
            "count": len(draws),
            "filters": {"year": year, "category": category, "limit": limit},
            "lastUpdated": engine.collection.to_snapshot()["lastUpdated"],
        }

    def get_draw(self, draw_id: Any) -> dict:
        return self._engine().lookup(draw_id).to_response()

    def latest_draw(self) -> dict:
        return self._engine().latest().to_response()

    def stats(self, year: Optional[str] = None) -> dict:
        return self._engine().statistics(year=year).to_response()


def error_payload(exc: EeDrawsError) -> tuple[int, dict]:
    """Map a domain error to (status code, JSON body)."""
    if isinstance(exc, InvalidQueryInputError):
        return 400, {"error": str(exc)}
    if isinstance(exc, MissingSnapshotError):
        return 404, {"error": str(exc), "message": FETCH_FIRST_MESSAGE}
    if isinstance(exc, (NotFoundError, NoDataError)):
        return 404, {"error": str(exc)}
    if isinstance(exc, (UpstreamFetchError, InvalidUpstreamFormatError)):
        return 502, {"error": "Upstream error", "message": str(exc)}
    logger.error("Unhandled error: %s", exc)
    return 500, {"error": "Internal server error", "message": str(exc)}
