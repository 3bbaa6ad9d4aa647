"""Source connectors for draw ingestion."""

from ee_draws.connectors.base import BaseConnector
from ee_draws.connectors.registry import ConnectorRegistry

__all__ = ["BaseConnector", "ConnectorRegistry"]
