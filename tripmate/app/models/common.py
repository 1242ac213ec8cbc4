"""Common types and enums shared across all models."""

from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

# Wall-clock time within a day, e.g. "09:30". Zero-padded, so string order is time order.
ClockTime = Annotated[str, Field(pattern=r"^([01]\d|2[0-3]):[0-5]\d$")]

DEFAULT_CURRENCY = "TWD"


class Category(str, Enum):
    """Itinerary item category."""

    TRANSPORT = "TRANSPORT"
    ACTIVITY = "ACTIVITY"
    FOOD = "FOOD"
    ACCOMMODATION = "ACCOMMODATION"


class TransportMode(str, Enum):
    """Transport mode, the discriminant of TransportDetails."""

    FLIGHT = "FLIGHT"
    TRAIN_HSR = "TRAIN_HSR"  # High speed rail
    TRAIN_TRA = "TRAIN_TRA"  # Conventional rail
    METRO = "METRO"
    BUS = "BUS"
    TAXI = "TAXI"
    WALK = "WALK"
    OTHER = "OTHER"


class MetroCity(str, Enum):
    """Metro network a METRO leg runs on."""

    TAIPEI = "TAIPEI"
    TAICHUNG = "TAICHUNG"
    KAOHSIUNG = "KAOHSIUNG"
    TAOYUAN = "TAOYUAN"
    NONE = "NONE"


class Direction(str, Enum):
    """Reorder direction within the global item collection."""

    UP = "up"
    DOWN = "down"


class ReorderPolicy(str, Enum):
    """How a reorder affects the time-sorted day view.

    POSITION swaps collection positions only, so the day view changes only for
    items sharing a start time. SWAP_TIMES also exchanges the time windows of
    two same-day items so the move is visible.
    """

    POSITION = "position"
    SWAP_TIMES = "swap_times"


class Location(BaseModel):
    """Named place, optionally geocoded (WGS84)."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    address: str | None = None
    lat: float | None = Field(default=None, ge=-90, le=90)
    lng: float | None = Field(default=None, ge=-180, le=180)
