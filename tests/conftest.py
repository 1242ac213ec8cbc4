"""Shared pytest fixtures for all test suites."""

from datetime import date

import pytest

from tripmate.app.itinerary.store import ItineraryStore
from tripmate.app.ledger.expenses import ExpenseLedger
from tripmate.app.models import ReorderPolicy, Traveler, TripData
from tripmate.app.seed import demo_trip


@pytest.fixture
def trip() -> TripData:
    """Fresh demo trip: 5 days, travelers 1/2/3, four day-1 items, two expenses."""
    return demo_trip()


@pytest.fixture
def store(trip: TripData) -> ItineraryStore:
    return ItineraryStore(trip, reorder_policy=ReorderPolicy.SWAP_TIMES)


@pytest.fixture
def ledger(trip: TripData) -> ExpenseLedger:
    return ExpenseLedger(trip)


@pytest.fixture
def empty_trip() -> TripData:
    """Five-day trip with travelers A, B, C and nothing planned."""
    return TripData(
        title="Test trip",
        start_date=date(2025, 6, 10),
        duration_days=5,
        budget=10000,
        travelers=[
            Traveler(id="A", name="Alice"),
            Traveler(id="B", name="Bob"),
            Traveler(id="C", name="Charlie"),
        ],
    )
