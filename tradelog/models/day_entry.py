"""DayEntry and Trade data models."""

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class Trade(BaseModel):
    """A single trade recorded against a day entry."""

    symbol: str = Field(..., min_length=1, description="Ticker symbol")
    percent_return: float = Field(
        ..., alias="percentReturn", description="Percentage return of the trade"
    )

    model_config = {"frozen": True, "populate_by_name": True, "allow_inf_nan": False}


class DayEntry(BaseModel):
    """Represents one calendar day of recorded trading activity."""

    id: str = Field(
        ..., pattern=r"^\d{4}-\d{2}-\d{2}$", description="Date key (YYYY-MM-DD)"
    )
    total_pl: float = Field(..., alias="totalPL", description="Total P&L for the day")
    trades: list[Trade] = Field(default_factory=list, description="Trades taken")
    number_of_trades: int = Field(
        default=0, ge=0, alias="numberOfTrades", description="Number of trades"
    )
    notes: str = Field(default="", description="User notes")
    tags: list[str] = Field(default_factory=list, description="Free-text labels")
    falling_knives: Optional[int] = Field(
        default=None,
        ge=0,
        alias="fallingKnives",
        description="Falling knife catches (absent means zero)",
    )

    model_config = {"frozen": True, "populate_by_name": True, "allow_inf_nan": False}

    @field_validator("id")
    @classmethod
    def _check_calendar_date(cls, v: str) -> str:
        # Raises ValueError for ids like 2024-02-30
        date.fromisoformat(v)
        return v

    @property
    def falling_knife_count(self) -> int:
        """Falling knife count with an absent value read as zero."""
        return self.falling_knives or 0
