"""Pytest fixtures for ee-draws tests."""

from unittest.mock import patch

import pytest

from ee_draws.connectors.ircc import normalize_rounds
from ee_draws.models.draw import DrawCollection
from ee_draws.models.raw import RawDrawEntry
from ee_draws.store import InMemorySnapshotStore


@pytest.fixture
def sample_rounds() -> list[dict]:
    """Rounds as the IRCC feed publishes them: six valid, three invalid."""
    return [
        {
            "drawNumber": "340",
            "drawDate": "2025-03-21",
            "drawSize": "7,500",
            "drawCRS": "379",
            "drawName": "Canadian Experience Class",
            "drawDateFull": "March 21, 2025",
        },
        {
            "drawNumber": "339",
            "drawDate": "2025-03-17",
            "drawSize": "536",
            "drawCRS": "752",
            "drawName": "Provincial Nominee Program",
        },
        {
            "drawNumber": "338",
            "drawDate": "2025-03-06",
            "drawSize": "4,500",
            "drawCRS": "410",
            "drawName": "French language proficiency (Version 1)",
        },
        {
            "drawNumber": "337",
            "drawDate": "2025-02-19",
            "drawSize": "6,500",
            "drawCRS": "510",
            "drawName": "Healthcare and social services occupations (Version 2)",
        },
        {
            "drawNumber": "330",
            "drawDate": "2024-12-02",
            "drawSize": "800",
            "drawCRS": "720",
            "drawName": "Provincial Nominee Program",
        },
        {
            "drawNumber": "325",
            "drawDate": "2024-10-23",
            "drawSize": "400",
            "drawCRS": "535",
            "drawName": "No Program Specified",
        },
        {
            "drawNumber": "abc",
            "drawDate": "2024-10-01",
            "drawSize": "100",
            "drawCRS": "500",
            "drawName": "No Program Specified",
        },
        {
            "drawNumber": "320",
            "drawDate": "",
            "drawSize": "100",
            "drawCRS": "500",
            "drawName": "No Program Specified",
        },
        {
            "drawNumber": "319",
            "drawDate": "2024-09-01",
            "drawSize": "100",
            "drawCRS": "",
            "drawName": "No Program Specified",
        },
    ]


@pytest.fixture
def sample_payload(sample_rounds: list[dict]) -> dict:
    """Full feed payload with the `rounds` array."""
    return {"classes": "", "rounds": sample_rounds}


@pytest.fixture
def raw_entries(sample_rounds: list[dict]) -> list[RawDrawEntry]:
    return [RawDrawEntry.model_validate(r) for r in sample_rounds]


@pytest.fixture
def collection(raw_entries: list[RawDrawEntry]) -> DrawCollection:
    """Normalized collection of the six valid sample rounds."""
    return normalize_rounds(raw_entries)


@pytest.fixture
def memory_store(collection: DrawCollection) -> InMemorySnapshotStore:
    return InMemorySnapshotStore(collection)


@pytest.fixture
def ircc_connector_patched(sample_payload: dict):
    """Context manager that patches IrccConnector._fetch_json with the sample payload."""
    return patch(
        "ee_draws.connectors.ircc.connector.IrccConnector._fetch_json",
        return_value=sample_payload,
    )
