"""Tests for ItineraryStore reads and mutations."""

import pytest

from tripmate.app.errors import ErrorCode, NotFoundError, ValidationError
from tripmate.app.itinerary.store import ItineraryStore
from tripmate.app.models import Category, ItemPatch, ItineraryItem, MetroDetails, TripData


def _food(day: int, start: str, title: str = "Meal", **fields) -> dict:
    return {"day_index": day, "start_time": start, "title": title, "category": "FOOD", **fields}


class TestReads:
    """Day views and lookups."""

    def test_days_cover_trip_duration(self, store: ItineraryStore) -> None:
        assert store.days() == [1, 2, 3, 4, 5]

    def test_items_for_day_sorted_by_start_time(self, store: ItineraryStore) -> None:
        store.add_item(_food(1, "07:30", "Breakfast"))
        store.add_item(_food(1, "11:45", "Snack"))

        times = [item.start_time for item in store.items_for_day(1)]
        assert times == sorted(times)
        assert times[0] == "07:30"

    def test_items_for_day_only_returns_that_day(self, store: ItineraryStore) -> None:
        store.add_item(_food(2, "08:00", "Day two breakfast"))

        assert [i.title for i in store.items_for_day(2)] == ["Day two breakfast"]
        assert all(i.day_index == 1 for i in store.items_for_day(1))
        assert store.items_for_day(3) == []

    def test_equal_start_times_keep_collection_order(self, store: ItineraryStore) -> None:
        first = store.add_item(_food(2, "12:00", "First"))
        second = store.add_item(_food(2, "12:00", "Second"))

        assert [i.id for i in store.items_for_day(2)] == [first.id, second.id]

    def test_previous_item_follows_collection_order(self, store: ItineraryStore) -> None:
        assert store.previous_item("101") is None
        assert store.previous_item("102").id == "101"

    def test_get_item_unknown_raises_not_found(self, store: ItineraryStore) -> None:
        with pytest.raises(NotFoundError) as exc:
            store.get_item("nope")
        assert exc.value.code == ErrorCode.NOT_FOUND


class TestAddItem:
    """add_item validation."""

    def test_add_generates_id_and_appends(self, store: ItineraryStore) -> None:
        item = store.add_item(_food(3, "19:00", "Night market"))

        assert item.id
        assert store.all_items()[-1] == item

    def test_day_outside_trip_rejected(self, store: ItineraryStore, trip: TripData) -> None:
        before = list(trip.items)

        with pytest.raises(ValidationError) as exc:
            store.add_item(_food(6, "09:00"))

        assert exc.value.code == ErrorCode.DAY_OUT_OF_RANGE
        assert trip.items == before

    def test_transport_without_details_rejected(self, store: ItineraryStore) -> None:
        with pytest.raises(ValidationError) as exc:
            store.add_item(
                {"day_index": 1, "start_time": "15:00", "title": "Taxi", "category": "TRANSPORT"}
            )
        assert exc.value.code == ErrorCode.TRANSPORT_MISMATCH

    def test_details_on_non_transport_rejected(self, store: ItineraryStore) -> None:
        with pytest.raises(ValidationError) as exc:
            store.add_item(_food(1, "15:00", transport_details={"mode": "WALK"}))
        assert exc.value.code == ErrorCode.TRANSPORT_MISMATCH

    def test_end_before_start_rejected(self, store: ItineraryStore) -> None:
        with pytest.raises(ValidationError) as exc:
            store.add_item(_food(1, "15:00", end_time="14:00"))
        assert exc.value.code == ErrorCode.VALIDATION_ERROR
        assert "before start_time" in exc.value.message

    def test_duplicate_id_rejected(self, store: ItineraryStore) -> None:
        with pytest.raises(ValidationError) as exc:
            store.add_item(_food(1, "15:00", id="101"))
        assert exc.value.code == ErrorCode.DUPLICATE_ID

    def test_accepts_model_instance(self, store: ItineraryStore) -> None:
        item = ItineraryItem(
            day_index=2,
            start_time="10:00",
            title="MRT",
            category=Category.TRANSPORT,
            transport_details=MetroDetails(metro_city="TAIPEI"),
        )
        assert store.add_item(item) is item


class TestUpdateItem:
    """update_item merge semantics."""

    def test_patch_merges_and_keeps_id(self, store: ItineraryStore) -> None:
        updated = store.update_item("103", {"title": "Dinner", "start_time": "18:00", "end_time": "19:30"})

        assert updated.id == "103"
        assert updated.title == "Dinner"
        assert updated.cost == 1500
        assert store.get_item("103") == updated

    def test_patch_cannot_change_id(self, store: ItineraryStore) -> None:
        with pytest.raises(ValidationError):
            store.update_item("103", {"id": "999"})
        assert store.get_item("103").title == "Lunch at Din Tai Fung"

    def test_invalid_patch_leaves_item_unchanged(self, store: ItineraryStore) -> None:
        before = store.get_item("103")

        with pytest.raises(ValidationError):
            store.update_item("103", ItemPatch(end_time="11:00"))

        assert store.get_item("103") == before

    def test_switching_category_requires_matching_details(self, store: ItineraryStore) -> None:
        with pytest.raises(ValidationError) as exc:
            store.update_item("102", {"category": "FOOD"})
        assert exc.value.code == ErrorCode.TRANSPORT_MISMATCH

        updated = store.update_item("102", {"category": "FOOD", "transport_details": None})
        assert updated.transport_details is None

    def test_patch_day_out_of_range(self, store: ItineraryStore) -> None:
        with pytest.raises(ValidationError) as exc:
            store.update_item("103", {"day_index": 9})
        assert exc.value.code == ErrorCode.DAY_OUT_OF_RANGE


class TestDeleteItem:
    """delete_item and stale ids."""

    def test_delete_then_update_raises_not_found(self, store: ItineraryStore) -> None:
        store.delete_item("103")

        with pytest.raises(NotFoundError):
            store.update_item("103", {"title": "Gone"})
        with pytest.raises(NotFoundError):
            store.delete_item("103")

    def test_delete_leaves_expenses_alone(self, store: ItineraryStore, trip: TripData) -> None:
        expenses = list(trip.expenses)
        store.delete_item("103")
        assert trip.expenses == expenses


class TestBatches:
    """replace_items / merge_items are all-or-nothing."""

    def test_replace_swaps_whole_collection(self, store: ItineraryStore) -> None:
        applied = store.replace_items([_food(2, "08:00"), _food(3, "08:00")])

        assert store.all_items() == applied
        assert len(applied) == 2

    def test_merge_appends(self, store: ItineraryStore) -> None:
        store.merge_items([_food(2, "08:00")])
        assert len(store.all_items()) == 5

    def test_invalid_batch_changes_nothing(self, store: ItineraryStore) -> None:
        before = store.all_items()

        with pytest.raises(ValidationError):
            store.replace_items([_food(2, "08:00"), _food(7, "08:00")])
        with pytest.raises(ValidationError):
            store.merge_items([_food(2, "08:00", id="101")])

        assert store.all_items() == before
