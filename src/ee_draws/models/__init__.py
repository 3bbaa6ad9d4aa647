"""Data models for raw feed entries, canonical draws and statistics."""

from ee_draws.models.draw import (
    DATA_SOURCE_IRCC,
    DrawCollection,
    DrawRecord,
    DrawView,
    ProgramCategory,
    RoundType,
)
from ee_draws.models.raw import RawDrawEntry
from ee_draws.models.stats import (
    CrsSummary,
    DateRange,
    GroupStats,
    InvitationSummary,
    StatsSummary,
    YearStats,
)

__all__ = [
    "DATA_SOURCE_IRCC",
    "CrsSummary",
    "DateRange",
    "DrawCollection",
    "DrawRecord",
    "DrawView",
    "GroupStats",
    "InvitationSummary",
    "ProgramCategory",
    "RawDrawEntry",
    "RoundType",
    "StatsSummary",
    "YearStats",
]
