"""Lookup of draw feed connectors by source id (the CLI's --source)."""

from typing import Type

from ee_draws.connectors.base import BaseConnector
from ee_draws.connectors.ircc import IrccConnector


class ConnectorRegistry:
    """Maps a feed source id such as "ircc" to the connector that ingests it."""

    _connectors: dict[str, Type[BaseConnector]] = {
        IrccConnector.source_id: IrccConnector,
    }

    @classmethod
    def get(cls, source_id: str, **kwargs) -> BaseConnector:
        """Build the connector for a feed; kwargs (url, timeout, client) go to its constructor."""
        connector_cls = cls._connectors.get(source_id.strip().lower())
        if not connector_cls:
            raise ValueError(f"Unknown source: {source_id}. Available: {cls.available_sources()}")
        return connector_cls(**kwargs)

    @classmethod
    def available_sources(cls) -> list[str]:
        return sorted(cls._connectors)
