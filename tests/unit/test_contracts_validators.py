"""Tests for item, expense and trip model validators."""

from datetime import date

import pytest
from pydantic import ValidationError

from tripmate.app.models import (
    Category,
    Expense,
    FlightDetails,
    ItineraryItem,
    Location,
    Traveler,
    TripData,
)


class TestItineraryItem:
    """ItineraryItem field and cross-field rules."""

    def test_minimal_item_gets_generated_id(self) -> None:
        item = ItineraryItem(day_index=1, start_time="09:00", title="Museum", category=Category.ACTIVITY)
        assert item.id
        assert item.is_locked is False
        assert item.end_time is None

    @pytest.mark.parametrize("value", ["9:00", "24:00", "12:60", "noon", ""])
    def test_start_time_must_be_hh_mm(self, value: str) -> None:
        with pytest.raises(ValidationError):
            ItineraryItem(day_index=1, start_time=value, title="x", category=Category.FOOD)

    def test_end_before_start_rejected(self) -> None:
        with pytest.raises(ValidationError, match="before start_time"):
            ItineraryItem(
                day_index=1, start_time="12:00", end_time="11:59", title="x", category=Category.FOOD
            )

    def test_end_equal_to_start_allowed(self) -> None:
        item = ItineraryItem(
            day_index=1, start_time="12:00", end_time="12:00", title="x", category=Category.FOOD
        )
        assert item.end_time == "12:00"

    def test_transport_without_details_rejected(self) -> None:
        with pytest.raises(ValidationError, match="require transport_details"):
            ItineraryItem(day_index=1, start_time="09:00", title="Flight", category=Category.TRANSPORT)

    def test_non_transport_with_details_rejected(self) -> None:
        with pytest.raises(ValidationError, match="must not carry transport_details"):
            ItineraryItem(
                day_index=1,
                start_time="09:00",
                title="Lunch",
                category=Category.FOOD,
                transport_details=FlightDetails(),
            )

    def test_negative_cost_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ItineraryItem(day_index=1, start_time="09:00", title="x", category=Category.FOOD, cost=-1)

    @pytest.mark.parametrize("cost", [float("inf"), float("nan")])
    def test_non_finite_cost_rejected(self, cost: float) -> None:
        with pytest.raises(ValidationError):
            ItineraryItem(day_index=1, start_time="09:00", title="x", category=Category.FOOD, cost=cost)

    def test_null_id_gets_generated_id(self) -> None:
        item = ItineraryItem.model_validate(
            {"id": None, "day_index": 1, "start_time": "09:00", "title": "x", "category": "FOOD"}
        )
        assert item.id
        assert item.id != "None"

    def test_day_index_is_one_based(self) -> None:
        with pytest.raises(ValidationError):
            ItineraryItem(day_index=0, start_time="09:00", title="x", category=Category.FOOD)

    def test_location_coordinates_bounded(self) -> None:
        with pytest.raises(ValidationError):
            Location(name="Nowhere", lat=91.0)


class TestExpense:
    """Expense amount and split rules."""

    def _expense(self, **overrides) -> Expense:
        data = {
            "amount": 300,
            "category": "Food",
            "payer_id": "A",
            "split_between": ["A", "B"],
            "date": date(2025, 6, 10),
        }
        data.update(overrides)
        return Expense(**data)

    def test_defaults(self) -> None:
        expense = self._expense()
        assert expense.currency == "TWD"
        assert expense.description == ""
        assert expense.id

    @pytest.mark.parametrize("amount", [0, -5])
    def test_amount_must_be_positive(self, amount: float) -> None:
        with pytest.raises(ValidationError):
            self._expense(amount=amount)

    def test_empty_split_rejected(self) -> None:
        with pytest.raises(ValidationError):
            self._expense(split_between=[])

    def test_duplicate_split_member_rejected(self) -> None:
        with pytest.raises(ValidationError, match="duplicate"):
            self._expense(split_between=["A", "A", "B"])


class TestTripData:
    """Aggregate-level reference checks."""

    def _travelers(self) -> list[Traveler]:
        return [Traveler(id="A", name="Alice"), Traveler(id="B", name="Bob")]

    def test_item_beyond_duration_rejected(self) -> None:
        with pytest.raises(ValidationError, match="trip has 2 days"):
            TripData(
                title="t",
                start_date=date(2025, 6, 10),
                duration_days=2,
                travelers=self._travelers(),
                items=[
                    ItineraryItem(day_index=3, start_time="09:00", title="x", category=Category.FOOD)
                ],
            )

    def test_expense_with_unknown_traveler_rejected(self) -> None:
        with pytest.raises(ValidationError, match="unknown travelers"):
            TripData(
                title="t",
                start_date=date(2025, 6, 10),
                duration_days=2,
                travelers=self._travelers(),
                expenses=[
                    Expense(
                        amount=10,
                        category="Food",
                        payer_id="A",
                        split_between=["A", "Z"],
                        date=date(2025, 6, 10),
                    )
                ],
            )

    def test_duplicate_traveler_ids_rejected(self) -> None:
        with pytest.raises(ValidationError, match="traveler ids must be unique"):
            TripData(
                title="t",
                start_date=date(2025, 6, 10),
                duration_days=2,
                travelers=[Traveler(id="A", name="Alice"), Traveler(id="A", name="Again")],
            )

    def test_duration_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            TripData(title="t", start_date=date(2025, 6, 10), duration_days=0)

    def test_round_trips_through_json(self, trip: TripData) -> None:
        """The aggregate serializes and loads back unchanged, variants included."""
        restored = TripData.model_validate_json(trip.model_dump_json())
        assert restored == trip
        assert isinstance(restored.items[0].transport_details, FlightDetails)
