"""Process-wide trip session - one trip, its store, ledger and generation adapter."""

from dataclasses import dataclass
from functools import lru_cache

from tripmate.app.generation.adapter import GenerationAdapter
from tripmate.app.generation.client import get_generator
from tripmate.app.itinerary.store import ItineraryStore
from tripmate.app.ledger.expenses import ExpenseLedger
from tripmate.app.models.trip import TripData
from tripmate.app.seed import demo_trip


@dataclass
class TripSession:
    """Owner of the trip aggregate. Store and ledger share the same TripData."""

    trip: TripData
    store: ItineraryStore
    ledger: ExpenseLedger
    planner: GenerationAdapter


def build_session(trip: TripData) -> TripSession:
    store = ItineraryStore(trip)
    return TripSession(
        trip=trip,
        store=store,
        ledger=ExpenseLedger(trip),
        planner=GenerationAdapter(store, get_generator()),
    )


@lru_cache
def get_trip_session() -> TripSession:
    """Get the cached session, seeded with the demo trip (no persistence)."""
    return build_session(demo_trip())
