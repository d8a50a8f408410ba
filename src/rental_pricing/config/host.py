"""Host-level deposit settings — one singleton per host."""

from typing import Annotated

from pydantic import BaseModel, Field


class HostDepositSettings(BaseModel):
    """Global deposit rules applied to every vehicle in ``global`` mode."""

    require_deposit: bool = Field(
        default=True,
        description="Master switch. False = no global-mode vehicle charges a deposit.",
    )
    default_amount: float = Field(
        default=0.0, ge=0,
        description="Fallback deposit for vehicles without a make override ($). "
                    "0 = not set, fall through to the rate-based deposit.",
    )
    make_deposits: dict[str, Annotated[float, Field(gt=0)]] = Field(
        default_factory=dict,
        description="Per-make override, e.g. {'Tesla': 800}. Keys match vehicle.make exactly; "
                    "amounts must be positive.",
    )
