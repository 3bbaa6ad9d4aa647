"""Abstract base class for draw source connectors."""

from abc import ABC, abstractmethod
from typing import Optional

from ee_draws.models.draw import DrawCollection, DrawRecord
from ee_draws.models.raw import RawDrawEntry


class BaseConnector(ABC):
    """
    Standard interface for draw feed connectors.
    All connectors must implement search (fetch raw entries) and normalize.
    """

    source_id: str = ""
    source_url: str = ""

    @abstractmethod
    def search(self) -> list[RawDrawEntry]:
        """
        Fetch the raw feed; returns entries in upstream order.
        Raises InvalidUpstreamFormatError when the payload is structurally wrong.
        """
        pass

    @abstractmethod
    def normalize(self, raw: RawDrawEntry) -> Optional[DrawRecord]:
        """
        Convert one raw entry to a DrawRecord, or None when the entry is invalid.
        """
        pass

    def normalize_many(self, raw_list: list[RawDrawEntry]) -> DrawCollection:
        """
        Normalize entries, dropping invalid ones, and wrap them as a fresh collection.
        Upstream order is preserved.
        """
        draws = [d for d in (self.normalize(r) for r in raw_list) if d is not None]
        return DrawCollection.from_draws(draws, source=self.source_url)

    def fetch_all(self) -> DrawCollection:
        """
        Fetch everything and return a normalized collection.
        Default implementation: search, then normalize_many.
        """
        return self.normalize_many(self.search())

    def close(self) -> None:
        """Release any network resources. No-op for connectors that hold none."""

    def __enter__(self) -> "BaseConnector":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
