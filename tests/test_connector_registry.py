"""Unit tests for ConnectorRegistry."""

import pytest

from ee_draws.connectors.ircc import IrccConnector
from ee_draws.connectors.registry import ConnectorRegistry


class TestConnectorRegistry:
    """Tests for ConnectorRegistry."""

    def test_get_ircc(self) -> None:
        """Registry returns the IRCC connector for 'ircc'."""
        connector = ConnectorRegistry.get("ircc")
        assert isinstance(connector, IrccConnector)
        assert connector.source_id == "ircc"

    def test_get_case_insensitive(self) -> None:
        """Registry is case-insensitive."""
        assert ConnectorRegistry.get("IRCC").source_id == "ircc"

    def test_kwargs_passed_to_connector(self) -> None:
        connector = ConnectorRegistry.get("ircc", url="https://example.com/rounds.json")
        assert connector.source_url == "https://example.com/rounds.json"

    def test_unknown_source_raises(self) -> None:
        """Unknown source raises ValueError."""
        with pytest.raises(ValueError, match="Unknown source: cic"):
            ConnectorRegistry.get("cic")

    def test_available_sources(self) -> None:
        assert ConnectorRegistry.available_sources() == ["ircc"]

    def test_source_id_is_trimmed(self) -> None:
        """Whitespace around a source id from the command line is ignored."""
        assert ConnectorRegistry.get(" ircc ").source_id == "ircc"

    def test_registered_under_connector_source_id(self) -> None:
        for source_id in ConnectorRegistry.available_sources():
            assert ConnectorRegistry.get(source_id).source_id == source_id
