"""Commission tier table — fleet-size brackets."""

from pydantic import BaseModel, Field


class CommissionTier(BaseModel):
    """One fleet-size bracket and the share of gross revenue the platform keeps."""

    name: str = Field(description="Display name, e.g. 'Gold'")
    min_fleet_size: int = Field(ge=0, description="Active vehicles required to qualify")
    commission_percent: int = Field(ge=0, le=100, description="Platform commission (% of gross)")


# Ordered ascending by min_fleet_size.
DEFAULT_TIERS: list[CommissionTier] = [
    CommissionTier(name="Standard", min_fleet_size=0, commission_percent=25),
    CommissionTier(name="Gold", min_fleet_size=10, commission_percent=20),
    CommissionTier(name="Platinum", min_fleet_size=50, commission_percent=15),
    CommissionTier(name="Diamond", min_fleet_size=100, commission_percent=10),
]
