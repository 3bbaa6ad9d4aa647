"""Query engine over a loaded draw snapshot."""

from typing import Any, Optional, Union

from ee_draws.errors import NoDataError, NotFoundError
from ee_draws.models.draw import DrawCollection, DrawRecord, DrawView
from ee_draws.models.stats import (
    CrsSummary,
    DateRange,
    InvitationSummary,
    StatsSummary,
)

from .rules import (
    matches_category,
    matches_year,
    parse_limit,
    parse_round_number,
    sort_by_date_desc,
)
from .stats import group_by_field, group_by_year, mean_rounded, median


class QueryEngine:
    """
    Read-only queries over one DrawCollection snapshot.
    The collection is never mutated; every call builds new lists.
    """

    def __init__(self, collection: DrawCollection):
        self.collection = collection

    def _select(self, year: Optional[Union[str, int]] = None, category: Optional[str] = None) -> list[DrawRecord]:
        """Draws matching year/category, in collection order."""
        return [
            d
            for d in self.collection.draws
            if matches_year(d, year) and matches_category(d, category)
        ]

    def filter(
        self,
        year: Optional[Union[str, int]] = None,
        category: Optional[str] = None,
        limit: Any = None,
    ) -> list[DrawView]:
        """
        Filter by year prefix and category substring, newest first, then truncate to limit.
        Raises InvalidQueryInputError for a non-positive or non-numeric limit.
        """
        max_items = parse_limit(limit)
        ordered = sort_by_date_desc(self._select(year, category))
        if max_items is not None:
            ordered = ordered[:max_items]
        return [DrawView.from_record(d) for d in ordered]

    def lookup(self, round_number: Any) -> DrawView:
        """First draw with the given round number."""
        number = parse_round_number(round_number)
        for draw in self.collection.draws:
            if draw.round_number == number:
                return DrawView.from_record(draw)
        raise NotFoundError("Draw not found")

    def latest(self) -> DrawView:
        """Most recent draw by date."""
        if not self.collection.draws:
            raise NotFoundError("No draws found")
        return DrawView.from_record(sort_by_date_desc(self.collection.draws)[0])

    def statistics(self, year: Optional[Union[str, int]] = None) -> StatsSummary:
        """
        Descriptive statistics over draws matching the year prefix.
        Raises NoDataError when nothing matches.
        """
        data = self._select(year=year)
        if not data:
            raise NoDataError("No draws found")

        crs_scores = [d.crs_score for d in data]
        invitations = [d.invitations_issued for d in data]
        total_invitations = sum(invitations)
        by_date = sort_by_date_desc(data)

        return StatsSummary(
            total_draws=len(data),
            total_invitations=total_invitations,
            crs=CrsSummary(
                average=mean_rounded(crs_scores),
                minimum=min(crs_scores),
                maximum=max(crs_scores),
                median=median(crs_scores),
            ),
            invitations=InvitationSummary(
                average=mean_rounded(invitations),
                minimum=min(invitations),
                maximum=max(invitations),
                total=total_invitations,
            ),
            by_round_type=group_by_field(data, lambda d: d.round_type),
            by_category=group_by_field(data, lambda d: d.program_category),
            by_year=group_by_year(data),
            date_range=DateRange(earliest=by_date[-1].draw_date, latest=by_date[0].draw_date),
            filter={"year": str(year)} if year not in (None, "") else None,
        )
