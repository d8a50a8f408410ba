"""Vehicle deposit configuration — one record per listed vehicle."""

from typing import Literal

from pydantic import BaseModel, Field

DepositMode = Literal["global", "individual"]


class VehicleDepositConfig(BaseModel):
    """The deposit-relevant slice of a vehicle record.

    ``require_deposit`` and ``deposit_amount`` are only read in
    ``individual`` mode.  In ``global`` mode the host-level settings apply.
    """

    id: str = Field(default="", description="Vehicle id")
    make: str = Field(default="", description="Manufacturer, used for per-make deposit overrides")
    model: str = Field(default="", description="Model name")
    year: int | None = Field(default=None, ge=1900, description="Model year")
    daily_rate: float = Field(default=0.0, ge=0, description="Nightly rental price ($)")
    vehicle_deposit_mode: DepositMode = Field(
        default="global",
        description="'global' = defer to host settings; "
                    "'individual' = vehicle carries its own requirement/amount.",
    )
    require_deposit: bool = Field(
        default=True,
        description="Individual mode only. False = this vehicle charges no deposit.",
    )
    deposit_amount: float | None = Field(
        default=None, ge=0,
        description="Individual mode only. None = fall back to the rate-based deposit.",
    )
