"""Revenue path selection — how a partner insures their fleet."""

from typing import Literal

from pydantic import BaseModel, Field

RevenuePath = Literal["insurance", "tiers"]
RevenueTier = Literal["p2p", "commercial", "self_manage"]


class RevenueSelection(BaseModel):
    """A partner's persisted (or drafted) revenue path.

    ``tier`` is only meaningful when ``path == 'tiers'``.
    """

    path: RevenuePath | None = Field(
        default=None,
        description="'insurance' = platform provides coverage (40% payout); "
                    "'tiers' = partner brings their own insurance.",
    )
    tier: RevenueTier | None = Field(
        default=None,
        description="Insurance type when path='tiers': 'p2p', 'commercial' or 'self_manage'.",
    )
