"""Trip aggregate - the single source of truth for a planning session."""

from datetime import date

from pydantic import BaseModel, Field, model_validator

from tripmate.app.models.itinerary import ItineraryItem
from tripmate.app.models.ledger import Expense, Traveler


class TripData(BaseModel):
    """Aggregate root owning travelers, itinerary items and expenses.

    Only ItineraryStore and ExpenseLedger mutate ``items`` and ``expenses``;
    everything else reads.
    """

    title: str
    start_date: date
    duration_days: int = Field(..., gt=0)
    budget: float = Field(default=0, ge=0)
    travelers: list[Traveler] = Field(default_factory=list)
    items: list[ItineraryItem] = Field(default_factory=list)
    expenses: list[Expense] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_references(self) -> "TripData":
        """Check id uniqueness, day ranges and expense references."""
        traveler_ids = [t.id for t in self.travelers]
        if len(set(traveler_ids)) != len(traveler_ids):
            raise ValueError("traveler ids must be unique")

        item_ids = [i.id for i in self.items]
        if len(set(item_ids)) != len(item_ids):
            raise ValueError("item ids must be unique")
        for item in self.items:
            if item.day_index > self.duration_days:
                raise ValueError(
                    f"item {item.id} is on day {item.day_index}, trip has {self.duration_days} days"
                )

        expense_ids = [e.id for e in self.expenses]
        if len(set(expense_ids)) != len(expense_ids):
            raise ValueError("expense ids must be unique")
        known = set(traveler_ids)
        for expense in self.expenses:
            unknown = ({expense.payer_id} | set(expense.split_between)) - known
            if unknown:
                raise ValueError(f"expense {expense.id} references unknown travelers {sorted(unknown)}")
        return self

    def traveler_ids(self) -> list[str]:
        """Traveler ids in trip order."""
        return [t.id for t in self.travelers]
