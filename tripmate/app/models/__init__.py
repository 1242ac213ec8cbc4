"""Models package - re-exports for convenience."""

from tripmate.app.models.common import (
    Category,
    ClockTime,
    Direction,
    Location,
    MetroCity,
    ReorderPolicy,
    TransportMode,
)
from tripmate.app.models.generation import (
    ApplyMode,
    GeneratedItem,
    GenerationOutcome,
    GenerationRequest,
    GenerationResult,
    TravelEstimate,
    TravelEstimateRequest,
)
from tripmate.app.models.itinerary import ItemPatch, ItineraryItem
from tripmate.app.models.ledger import Balance, Expense, Transfer, Traveler
from tripmate.app.models.transport import (
    BasicDetails,
    FlightDetails,
    MetroDetails,
    PlatformDetails,
    TransportDetails,
    details_for_mode,
)
from tripmate.app.models.trip import TripData

__all__ = [
    # Common
    "Category",
    "ClockTime",
    "Direction",
    "Location",
    "MetroCity",
    "ReorderPolicy",
    "TransportMode",
    # Transport
    "TransportDetails",
    "FlightDetails",
    "PlatformDetails",
    "MetroDetails",
    "BasicDetails",
    "details_for_mode",
    # Itinerary
    "ItineraryItem",
    "ItemPatch",
    # Ledger
    "Traveler",
    "Expense",
    "Balance",
    "Transfer",
    # Trip
    "TripData",
    # Generation
    "GenerationRequest",
    "GeneratedItem",
    "GenerationResult",
    "GenerationOutcome",
    "ApplyMode",
    "TravelEstimateRequest",
    "TravelEstimate",
]
