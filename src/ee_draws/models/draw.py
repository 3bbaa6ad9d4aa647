"""Canonical draw record, snapshot collection and response projection."""

from datetime import datetime, timezone
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

RoundType = Literal["General", "Program-specific", "Category-based"]
ProgramCategory = Literal[
    "PNP",
    "CEC",
    "FSW",
    "French-language",
    "Healthcare",
    "STEM",
    "Trade",
    "Transport",
    "Agriculture",
]

DATA_SOURCE_IRCC = "ircc_api"


class DrawRecord(BaseModel):
    """Canonical Express Entry round produced by the normalizer."""

    round_number: int = Field(..., ge=0, description="Round number from the feed")
    draw_date: Optional[str] = Field(default=None, description="ISO date YYYY-MM-DD")
    round_type: RoundType = "General"
    invitations_issued: int = Field(default=0, ge=0)
    crs_score: int = Field(..., ge=0, description="Minimum CRS score of the round")
    program_category: Optional[ProgramCategory] = None
    notes: str = ""
    data_source: str = DATA_SOURCE_IRCC

    @property
    def year(self) -> Optional[str]:
        """Year segment of draw_date, or None when the date is missing."""
        return self.draw_date.split("-")[0] if self.draw_date else None


class DrawCollection(BaseModel):
    """Full snapshot of draws; replaced wholesale on every ingest."""

    model_config = ConfigDict(populate_by_name=True)

    last_updated: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        alias="lastUpdated",
    )
    source: str = ""
    total_draws: int = Field(default=0, alias="totalDraws")
    draws: list[DrawRecord] = Field(default_factory=list)

    @classmethod
    def from_draws(cls, draws: list[DrawRecord], source: str) -> "DrawCollection":
        """Wrap normalized draws with a fresh timestamp and matching count."""
        return cls(source=source, total_draws=len(draws), draws=list(draws))

    def to_snapshot(self) -> dict:
        """Persisted snapshot shape: camelCase envelope, snake_case draw records."""
        return self.model_dump(mode="json", by_alias=True)


class DrawView(BaseModel):
    """Flat per-draw projection returned by list, lookup and latest queries."""

    model_config = ConfigDict(populate_by_name=True)

    draw_number: int = Field(..., alias="drawNumber")
    date: Optional[str] = None
    invitations_issued: int = Field(..., alias="invitationsIssued")
    minimum_crs: int = Field(..., alias="minimumCRS")
    category: Optional[str] = None
    round_type: str = Field(..., alias="roundType")
    year: Optional[str] = None
    notes: str = ""

    @classmethod
    def from_record(cls, draw: DrawRecord) -> "DrawView":
        return cls(
            draw_number=draw.round_number,
            date=draw.draw_date,
            invitations_issued=draw.invitations_issued,
            minimum_crs=draw.crs_score,
            category=draw.program_category,
            round_type=draw.round_type,
            year=draw.year,
            notes=draw.notes,
        )

    def to_response(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)
