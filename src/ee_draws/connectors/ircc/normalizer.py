"""Pure transform from raw feed entries to canonical draw records."""

import logging
from typing import Iterable, Optional

from ee_draws.models.draw import DATA_SOURCE_IRCC, DrawCollection, DrawRecord
from ee_draws.models.raw import RawDrawEntry

from .constants import IRCC_ROUNDS_URL
from .parsers import (
    classify_category,
    classify_round_type,
    is_draw_date,
    parse_draw_size,
    parse_int,
)

logger = logging.getLogger(__name__)


def normalize_entry(raw: RawDrawEntry) -> Optional[DrawRecord]:
    """
    Convert one raw entry to a DrawRecord.
    Returns None when the round number, invitations or CRS score do not parse
    to non-negative integers, or the draw date is missing or malformed.
    """
    round_number = parse_int(raw.drawNumber)
    invitations = parse_draw_size(raw.drawSize)
    crs_score = parse_int(raw.drawCRS)

    if any(v is None or v < 0 for v in (round_number, invitations, crs_score)):
        return None
    if not is_draw_date(raw.drawDate):
        return None

    draw_name = str(raw.drawName) if raw.drawName is not None else ""
    category = classify_category(draw_name)

    return DrawRecord(
        round_number=round_number,
        draw_date=raw.drawDate,
        round_type=classify_round_type(draw_name, category),
        invitations_issued=invitations,
        crs_score=crs_score,
        program_category=category,
        notes=draw_name,
        data_source=DATA_SOURCE_IRCC,
    )


def normalize_rounds(
    entries: Iterable[RawDrawEntry],
    source: str = IRCC_ROUNDS_URL,
) -> DrawCollection:
    """
    Normalize a feed's rounds into a fresh collection.
    Invalid entries are dropped (count logged); survivors keep upstream order.
    """
    draws: list[DrawRecord] = []
    dropped = 0
    for raw in entries:
        draw = normalize_entry(raw)
        if draw is None:
            dropped += 1
            continue
        draws.append(draw)

    if dropped:
        logger.warning("Dropped %d invalid rounds of %d", dropped, dropped + len(draws))
    logger.info("Normalized %d draws", len(draws))
    return DrawCollection.from_draws(draws, source=source)
