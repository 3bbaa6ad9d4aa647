"""Parsing and classification utilities for IRCC rounds feed values."""

import math
import re
from datetime import datetime
from typing import Any, Optional

from .constants import (
    CATEGORY_RULES,
    PROGRAM_SPECIFIC_MARKER,
    ROUND_TYPE_CATEGORY_BASED,
    ROUND_TYPE_GENERAL,
    ROUND_TYPE_PROGRAM_SPECIFIC,
)

# Optional sign and leading digits; anything after them is ignored ("491 points" -> 491)
LEADING_INT = re.compile(r"^\s*([+-]?\d+)")
# Zero-padded so string order is date order
DRAW_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")
DRAW_DATE_FORMAT = "%Y-%m-%d"


def parse_int(value: Any) -> Optional[int]:
    """
    Parse an integer the way the feed's numbers need: ints pass through,
    finite floats truncate, strings use their leading digits. None if unparsable.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    match = LEADING_INT.match(str(value))
    return int(match.group(1)) if match else None


def parse_draw_size(value: Any) -> Optional[int]:
    """
    Parse invitations issued, stripping thousands separators ("6,000" -> 6000).
    Absent or blank -> 0. A non-blank value that is not a number -> None.
    """
    if value is None:
        return 0
    if isinstance(value, str):
        cleaned = value.replace(",", "").strip()
        if not cleaned:
            return 0
        return parse_int(cleaned)
    return parse_int(value)


def is_draw_date(value: Any) -> bool:
    """True for a non-empty YYYY-MM-DD calendar date."""
    if not isinstance(value, str) or not DRAW_DATE_PATTERN.fullmatch(value):
        return False
    try:
        datetime.strptime(value, DRAW_DATE_FORMAT)
    except ValueError:
        return False
    return True


def classify_category(draw_name: Optional[str]) -> Optional[str]:
    """Map drawName to a program category by ordered substring rules; None if nothing matches."""
    if not draw_name:
        return None
    for keyword, label in CATEGORY_RULES:
        if keyword in draw_name:
            return label
    return None


def classify_round_type(draw_name: Optional[str], category: Optional[str]) -> str:
    """
    Provincial Nominee rounds are program-specific, even when the name also
    mentions another category. Any other category makes the round category-based.
    """
    if draw_name and PROGRAM_SPECIFIC_MARKER in draw_name:
        return ROUND_TYPE_PROGRAM_SPECIFIC
    if category and category != "PNP":
        return ROUND_TYPE_CATEGORY_BASED
    return ROUND_TYPE_GENERAL
