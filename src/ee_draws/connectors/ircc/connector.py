"""IRCC connector using the official Express Entry rounds JSON feed."""

import logging
from typing import Any, Optional

import httpx

from ee_draws.connectors.base import BaseConnector
from ee_draws.errors import InvalidUpstreamFormatError, UpstreamFetchError
from ee_draws.models.draw import DrawCollection, DrawRecord
from ee_draws.models.raw import RawDrawEntry

from .constants import IRCC_ROUNDS_URL, ROUNDS_KEY
from .normalizer import normalize_entry, normalize_rounds

logger = logging.getLogger(__name__)


class IrccConnector(BaseConnector):
    """
    Connector for IRCC Express Entry rounds.
    Fetches the published rounds JSON and normalizes each round to a DrawRecord.
    """

    source_id = "ircc"

    DEFAULT_HEADERS = {
        "User-Agent": "ee-draws/0.1 (Express Entry draws snapshot; Open Government Licence)",
        "Accept": "application/json, */*",
    }

    def __init__(
        self,
        url: Optional[str] = None,
        timeout: float = 60.0,
        client: Optional[httpx.Client] = None,
    ):
        self.source_url = url or IRCC_ROUNDS_URL
        # An injected client belongs to the caller and is left open
        self._owns_client = client is None
        self._client = client or httpx.Client(
            timeout=timeout,
            follow_redirects=True,
            headers=self.DEFAULT_HEADERS,
        )

    def _fetch_json(self, url: str) -> Any:
        """Fetch and decode the feed payload."""
        try:
            response = self._client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise UpstreamFetchError(
                f"IRCC API returned {e.response.status_code}: {e.response.reason_phrase}"
            ) from e
        except httpx.RequestError as e:
            raise UpstreamFetchError(f"IRCC API request failed: {e}") from e
        try:
            return response.json()
        except ValueError as e:
            raise InvalidUpstreamFormatError("IRCC API returned a non-JSON body") from e

    def extract_rounds(self, payload: Any) -> list[RawDrawEntry]:
        """Pull the `rounds` array out of a feed payload; anything else is fatal."""
        rounds = payload.get(ROUNDS_KEY) if isinstance(payload, dict) else None
        if not isinstance(rounds, list):
            raise InvalidUpstreamFormatError("Invalid data format from IRCC API: missing 'rounds' list")
        return [
            RawDrawEntry.model_validate(r) if isinstance(r, dict) else RawDrawEntry()
            for r in rounds
        ]

    def search(self) -> list[RawDrawEntry]:
        """Fetch all rounds from the feed, in upstream order."""
        payload = self._fetch_json(self.source_url)
        raw_list = self.extract_rounds(payload)
        logger.info("Fetched %d draws from %s", len(raw_list), self.source_url)
        return raw_list

    def normalize(self, raw: RawDrawEntry) -> Optional[DrawRecord]:
        """Convert one feed round to a DrawRecord; None when invalid."""
        return normalize_entry(raw)

    def normalize_many(self, raw_list: list[RawDrawEntry]) -> DrawCollection:
        """Normalize all rounds, logging how many were dropped."""
        return normalize_rounds(raw_list, source=self.source_url)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()
