"""Aggregation helpers for draw statistics."""

import math
from typing import Callable, Optional

from ee_draws.models.draw import DrawRecord
from ee_draws.models.stats import GroupStats, YearStats

NOT_SPECIFIED = "Not specified"
UNKNOWN_YEAR = "Unknown"


def round_half_up(value: float) -> int:
    """Round .5 upwards (350.5 -> 351), unlike Python's round-half-to-even."""
    return int(math.floor(value + 0.5))


def mean_rounded(values: list[int]) -> int:
    return round_half_up(sum(values) / len(values))


def median(values: list[int]) -> int:
    """Middle value; for an even count, the rounded average of the two middle values."""
    ordered = sorted(values)
    mid = len(ordered) // 2
    if len(ordered) % 2 == 0:
        return round_half_up((ordered[mid - 1] + ordered[mid]) / 2)
    return ordered[mid]


def group_by_field(
    draws: list[DrawRecord],
    key_fn: Callable[[DrawRecord], Optional[str]],
) -> dict[str, GroupStats]:
    """
    Bucket draws by key (missing -> "Not specified") with count,
    total invitations and rounded average CRS. Buckets appear in first-seen order.
    """
    buckets: dict[str, list[DrawRecord]] = {}
    for draw in draws:
        buckets.setdefault(key_fn(draw) or NOT_SPECIFIED, []).append(draw)

    return {
        key: GroupStats(
            count=len(group),
            total_invitations=sum(d.invitations_issued for d in group),
            avg_crs=mean_rounded([d.crs_score for d in group]),
        )
        for key, group in buckets.items()
    }


def group_by_year(draws: list[DrawRecord]) -> dict[str, YearStats]:
    """Count and total invitations per year segment of draw_date ("Unknown" when missing)."""
    years: dict[str, YearStats] = {}
    for draw in draws:
        stats = years.setdefault(draw.year or UNKNOWN_YEAR, YearStats())
        stats.count += 1
        stats.total_invitations += draw.invitations_issued
    return years
