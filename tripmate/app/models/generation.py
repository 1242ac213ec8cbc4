"""Generation contract models - request/response of the external itinerary generator."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel

from tripmate.app.models.itinerary import ItineraryItem

UNKNOWN = "Unknown"


class GenerationRequest(BaseModel):
    """What the traveler asked the generator for."""

    destination: str = Field(..., min_length=1)
    days: int = Field(..., gt=0)
    interests: str = ""


class GeneratedItem(BaseModel):
    """One candidate item as returned by a generator (camelCase on the wire).

    Only shape is checked here. Whether the candidate is an acceptable
    itinerary item is decided by the store when it is converted.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    day_index: int
    start_time: str
    end_time: str | None = None
    title: str
    description: str | None = None
    category: str
    cost: float | None = None
    location_name: str | None = None
    transport_type: str | None = None
    transport_provider: str | None = None
    metro_city: str | None = None


class ApplyMode(str, Enum):
    """How confirmed generated items are applied to the store."""

    REPLACE = "replace"
    MERGE = "merge"


class GenerationOutcome(str, Enum):
    """Result of a generation request."""

    PROPOSED = "proposed"  # valid items are pending confirmation
    APPLIED = "applied"
    EMPTY = "empty"  # generator answered but nothing usable came back
    FAILED = "failed"  # external call failed
    BUSY = "busy"  # another request is outstanding
    DISCARDED = "discarded"


class GenerationResult(BaseModel):
    """What the caller is told about a generation request."""

    outcome: GenerationOutcome
    items: list[ItineraryItem] = Field(default_factory=list)
    dropped: int = 0
    message: str = ""

    @computed_field  # type: ignore[prop-decorator]
    @property
    def produced(self) -> int:
        """Number of valid items produced."""
        return len(self.items)


class TravelEstimateRequest(BaseModel):
    origin: str
    destination: str
    mode: str


class TravelEstimate(BaseModel):
    """Best-effort, human-readable travel time and distance."""

    duration: str
    distance: str

    @classmethod
    def unknown(cls) -> "TravelEstimate":
        return cls(duration=UNKNOWN, distance=UNKNOWN)
