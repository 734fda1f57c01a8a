"""UserSettings data model."""

from pydantic import BaseModel, Field


class UserSettings(BaseModel):
    """Account-level scalars supplied alongside the day entries."""

    net_worth: float = Field(
        default=10000.0, alias="netWorth", description="Current net worth"
    )
    starting_balance: float = Field(
        default=10000.0,
        alias="startingBalance",
        description="Manual adjustment added to the calculated P&L",
    )

    model_config = {"frozen": True, "populate_by_name": True}
