"""Raw draw representation as published by the IRCC rounds feed."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class RawDrawEntry(BaseModel):
    """
    One element of the feed's `rounds` array, before normalization.
    Values are kept as the feed sends them (strings or numbers); unknown keys are allowed.
    """

    model_config = ConfigDict(extra="allow")

    drawNumber: Optional[Any] = None
    drawDate: Optional[Any] = None
    drawSize: Optional[Any] = None
    drawCRS: Optional[Any] = None
    drawName: Optional[Any] = None
