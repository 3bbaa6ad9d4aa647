"""Statistics summary models."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class CrsSummary(_CamelModel):
    """CRS score distribution over the selected draws."""

    average: int
    minimum: int
    maximum: int
    median: int


class InvitationSummary(_CamelModel):
    """Invitation counts over the selected draws."""

    average: int
    minimum: int
    maximum: int
    total: int


class GroupStats(_CamelModel):
    """Per round type / per category bucket."""

    count: int = 0
    total_invitations: int = Field(default=0, alias="totalInvitations")
    avg_crs: int = Field(default=0, alias="avgCRS")


class YearStats(_CamelModel):
    count: int = 0
    total_invitations: int = Field(default=0, alias="totalInvitations")


class DateRange(_CamelModel):
    earliest: Optional[str] = None
    latest: Optional[str] = None


class StatsSummary(_CamelModel):
    """Descriptive statistics over a (optionally year-filtered) set of draws."""

    total_draws: int = Field(..., alias="totalDraws")
    total_invitations: int = Field(..., alias="totalInvitations")
    crs: CrsSummary
    invitations: InvitationSummary
    by_round_type: dict[str, GroupStats] = Field(default_factory=dict, alias="byRoundType")
    by_category: dict[str, GroupStats] = Field(default_factory=dict, alias="byCategory")
    by_year: dict[str, YearStats] = Field(default_factory=dict, alias="byYear")
    date_range: DateRange = Field(default_factory=DateRange, alias="dateRange")
    filter: Optional[dict[str, str]] = None

    def to_response(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)
