"""Query rules: selection predicates, ordering and parameter parsing."""

import re
from typing import Any, Optional, Union

from ee_draws.errors import InvalidQueryInputError
from ee_draws.models.draw import DrawRecord

DIGITS = re.compile(r"[0-9]+")
SIGNED_DIGITS = re.compile(r"[+-]?[0-9]+")


def matches_year(draw: DrawRecord, year: Optional[Union[str, int]]) -> bool:
    """Year filter is a prefix match on the ISO date string, not a parsed-year check."""
    if year is None or year == "":
        return True
    return bool(draw.draw_date) and draw.draw_date.startswith(str(year))


def matches_category(draw: DrawRecord, category: Optional[str]) -> bool:
    """Case-insensitive substring match on program_category; a null category never matches."""
    if not category:
        return True
    return bool(draw.program_category) and category.lower() in draw.program_category.lower()


def sort_by_date_desc(draws: list[DrawRecord]) -> list[DrawRecord]:
    """
    Most recent first. ISO dates sort lexicographically in chronological order.
    Draws without a date go last, keeping their relative order.
    """
    dated = [d for d in draws if d.draw_date]
    undated = [d for d in draws if not d.draw_date]
    dated.sort(key=lambda d: d.draw_date, reverse=True)
    return dated + undated


def parse_limit(limit: Any) -> Optional[int]:
    """
    None or blank means no limit. Otherwise the limit must be a positive
    integer (int or ASCII digit string); anything else is rejected.
    """
    if limit is None:
        return None
    if isinstance(limit, str):
        limit = limit.strip()
        if not limit:
            return None
        if not DIGITS.fullmatch(limit):
            raise InvalidQueryInputError(f"Invalid limit: {limit!r} (expected a positive integer)")
        limit = int(limit)
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
        raise InvalidQueryInputError(f"Invalid limit: {limit!r} (expected a positive integer)")
    return limit


def parse_round_number(value: Any) -> int:
    """Parse a requested round number; non-integers are a client error, not a miss."""
    if isinstance(value, bool):
        raise InvalidQueryInputError("Invalid draw number")
    if isinstance(value, int):
        return value
    text = str(value).strip() if value is not None else ""
    # int() alone would take "1_0" or "²"
    if not SIGNED_DIGITS.fullmatch(text):
        raise InvalidQueryInputError("Invalid draw number")
    return int(text)
