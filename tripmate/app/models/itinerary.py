"""Itinerary models - scheduled items making up the trip."""

import uuid

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from tripmate.app.models.common import Category, ClockTime, Location
from tripmate.app.models.transport import TransportDetails


def new_id() -> str:
    """Generate a fresh entity id."""
    return str(uuid.uuid4())


class ItineraryItem(BaseModel):
    """Single timed entry on one day of the trip.

    The day range can only be checked against a trip, so it is enforced by the
    store; everything else is enforced here.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_id, min_length=1)
    day_index: int = Field(..., ge=1, description="1-based day within the trip")
    start_time: ClockTime
    end_time: ClockTime | None = None
    title: str = Field(..., min_length=1)
    description: str | None = None
    category: Category
    location: Location | None = None
    transport_details: TransportDetails | None = None
    cost: float | None = Field(default=None, ge=0, allow_inf_nan=False)
    booking_link: str | None = None
    is_locked: bool = False  # advisory; not enforced by the store

    @field_validator("id", mode="before")
    @classmethod
    def generate_missing_id(cls, v: object) -> object:
        """An explicit null id gets a generated one."""
        return new_id() if v is None else v

    @model_validator(mode="after")
    def validate_time_window(self) -> "ItineraryItem":
        """Ensure end_time >= start_time when both are set."""
        if self.end_time is not None and self.end_time < self.start_time:
            raise ValueError(f"end_time {self.end_time} is before start_time {self.start_time}")
        return self

    @model_validator(mode="after")
    def validate_transport_details(self) -> "ItineraryItem":
        """Transport details are present exactly when category is TRANSPORT."""
        is_transport = self.category == Category.TRANSPORT
        if is_transport and self.transport_details is None:
            raise ValueError("TRANSPORT items require transport_details")
        if not is_transport and self.transport_details is not None:
            raise ValueError(f"{self.category.value} items must not carry transport_details")
        return self


class ItemPatch(BaseModel):
    """Partial update for an itinerary item. Unset fields are left unchanged.

    Setting a field to None explicitly clears it.
    """

    model_config = ConfigDict(extra="forbid")

    day_index: int | None = None
    start_time: ClockTime | None = None
    end_time: ClockTime | None = None
    title: str | None = None
    description: str | None = None
    category: Category | None = None
    location: Location | None = None
    transport_details: TransportDetails | None = None
    cost: float | None = None
    booking_link: str | None = None
    is_locked: bool | None = None
