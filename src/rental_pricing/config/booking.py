"""Booking request — dates and flags needed to quote a trip."""

from datetime import date

from pydantic import BaseModel, Field, model_validator


class BookingRequest(BaseModel):
    """Guest-selected trip window."""

    start_date: date = Field(description="Pickup date (local, no timezone conversion)")
    end_date: date = Field(description="Return date")
    is_rideshare: bool = Field(
        default=False,
        description="Rideshare vehicles always require at least 3 days.",
    )
    min_trip_days: int = Field(default=1, ge=1, description="Host minimum trip duration (rentals)")
    service_fee_pct: float = Field(default=0.15, ge=0, le=1.0, description="Guest service fee on base price")
    tax_rate: float = Field(default=0.086, ge=0, le=1.0, description="Tax on base price + service fee")

    @model_validator(mode="after")
    def _end_not_before_start(self) -> "BookingRequest":
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self
