"""Itinerary store - owns the ordered item collection of a trip.

The global collection order is what ``reorder`` moves items through. The
per-day view is derived from it on every read (sorted by start time, ties in
collection order) and never stored.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from tripmate.app.config import get_settings
from tripmate.app.errors import ErrorCode, NotFoundError, ValidationError, from_pydantic_error
from tripmate.app.models.common import Direction, ReorderPolicy
from tripmate.app.models.itinerary import ItemPatch, ItineraryItem
from tripmate.app.models.trip import TripData

logger = logging.getLogger(__name__)

ItemInput = ItineraryItem | Mapping[str, Any]


class ItineraryStore:
    """Typed operations over ``TripData.items``."""

    def __init__(self, trip: TripData, reorder_policy: ReorderPolicy | None = None) -> None:
        self._trip = trip
        self.reorder_policy = reorder_policy or get_settings().reorder_policy

    @property
    def trip(self) -> TripData:
        return self._trip

    # Reads

    def days(self) -> list[int]:
        """Day indexes of the trip, 1-based."""
        return list(range(1, self._trip.duration_days + 1))

    def all_items(self) -> list[ItineraryItem]:
        """Snapshot of the global collection in collection order."""
        return list(self._trip.items)

    def get_item(self, item_id: str) -> ItineraryItem:
        return self._trip.items[self._index_of(item_id)]

    def items_for_day(self, day: int) -> list[ItineraryItem]:
        """Items on ``day`` sorted by start time; ties keep collection order."""
        return sorted(
            (item for item in self._trip.items if item.day_index == day),
            key=lambda item: item.start_time,
        )

    def previous_item(self, item_id: str) -> ItineraryItem | None:
        """Item preceding ``item_id`` in the global collection, if any."""
        index = self._index_of(item_id)
        return self._trip.items[index - 1] if index > 0 else None

    # Validation

    def validate_candidate(self, data: ItemInput) -> ItineraryItem:
        """Apply every add-rule to ``data`` without touching the store.

        Raises:
            ValidationError: malformed fields, time window or transport
                mismatch, or day outside the trip
        """
        if isinstance(data, ItineraryItem):
            item = data
        else:
            try:
                item = ItineraryItem.model_validate(data)
            except PydanticValidationError as e:
                raise from_pydantic_error(e) from e

        if not 1 <= item.day_index <= self._trip.duration_days:
            raise ValidationError(
                f"day_index {item.day_index} is outside 1..{self._trip.duration_days}",
                code=ErrorCode.DAY_OUT_OF_RANGE,
            )
        return item

    # Mutations

    def add_item(self, data: ItemInput) -> ItineraryItem:
        """Validate and append an item. An id is generated when none is given."""
        item = self.validate_candidate(data)
        if self._find(item.id) is not None:
            raise ValidationError(f"item {item.id} already exists", code=ErrorCode.DUPLICATE_ID)

        self._trip.items.append(item)
        logger.debug("Added item %s on day %d", item.id, item.day_index)
        return item

    def update_item(self, item_id: str, patch: ItemPatch | Mapping[str, Any]) -> ItineraryItem:
        """Merge ``patch`` into an item and re-validate; the id never changes."""
        index = self._index_of(item_id)

        if not isinstance(patch, ItemPatch):
            try:
                patch = ItemPatch.model_validate(patch)
            except PydanticValidationError as e:
                raise from_pydantic_error(e) from e

        current = self._trip.items[index]
        merged = {
            **current.model_dump(),
            **patch.model_dump(exclude_unset=True),
            "id": current.id,
        }
        updated = self.validate_candidate(merged)

        self._trip.items[index] = updated
        logger.debug("Updated item %s", item_id)
        return updated

    def delete_item(self, item_id: str) -> None:
        """Remove an item. Expenses are independent and left untouched."""
        index = self._index_of(item_id)
        del self._trip.items[index]
        logger.debug("Deleted item %s", item_id)

    def reorder(self, item_id: str, direction: Direction | str) -> ItineraryItem:
        """Swap an item with its neighbour in the global collection.

        At either end of the collection this is a no-op. Under SWAP_TIMES,
        two items on the same day also exchange their time windows so the
        day view reflects the move. The windows are only exchanged when that
        moves the item the requested way; when the collection is out of time
        order the swap is position-only.

        Returns:
            The moved item as stored after the swap
        """
        index = self._index_of(item_id)
        up = Direction(direction) == Direction.UP
        target = index - 1 if up else index + 1
        items = self._trip.items
        if not 0 <= target < len(items):
            return items[index]

        moving, neighbour = items[index], items[target]
        if up:
            moves_in_direction = neighbour.start_time <= moving.start_time
        else:
            moves_in_direction = neighbour.start_time >= moving.start_time
        if (
            self.reorder_policy == ReorderPolicy.SWAP_TIMES
            and moving.day_index == neighbour.day_index
            and moves_in_direction
        ):
            moving, neighbour = (
                moving.model_copy(
                    update={"start_time": neighbour.start_time, "end_time": neighbour.end_time}
                ),
                neighbour.model_copy(
                    update={"start_time": moving.start_time, "end_time": moving.end_time}
                ),
            )

        items[target], items[index] = moving, neighbour
        return moving

    def replace_items(self, new_items: Iterable[ItemInput]) -> list[ItineraryItem]:
        """Replace the whole collection. Nothing changes if any item is invalid."""
        validated = self._validate_batch(new_items, existing_ids=set())
        self._trip.items[:] = validated
        logger.info("Replaced itinerary with %d items", len(validated))
        return list(validated)

    def merge_items(self, new_items: Iterable[ItemInput]) -> list[ItineraryItem]:
        """Append a batch of items. Nothing changes if any item is invalid."""
        existing = {item.id for item in self._trip.items}
        validated = self._validate_batch(new_items, existing_ids=existing)
        self._trip.items.extend(validated)
        logger.info("Merged %d items into itinerary", len(validated))
        return list(validated)

    # Helpers

    def _validate_batch(
        self, new_items: Iterable[ItemInput], existing_ids: set[str]
    ) -> list[ItineraryItem]:
        seen = set(existing_ids)
        validated: list[ItineraryItem] = []
        for data in new_items:
            item = self.validate_candidate(data)
            if item.id in seen:
                raise ValidationError(f"item {item.id} already exists", code=ErrorCode.DUPLICATE_ID)
            seen.add(item.id)
            validated.append(item)
        return validated

    def _find(self, item_id: str) -> int | None:
        for index, item in enumerate(self._trip.items):
            if item.id == item_id:
                return index
        return None

    def _index_of(self, item_id: str) -> int:
        index = self._find(item_id)
        if index is None:
            raise NotFoundError(f"item {item_id} not found")
        return index
