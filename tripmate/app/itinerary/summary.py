"""Trip summary - planned spend per category and per day against the budget."""

import math
from collections import defaultdict

from pydantic import BaseModel

from tripmate.app.models.trip import TripData


class DaySpend(BaseModel):
    day_index: int
    amount: float


class TripSummary(BaseModel):
    """Read-only figures derived from a trip.

    Item costs are planning estimates and are unrelated to recorded expenses;
    both totals are reported side by side.
    """

    spend_by_category: dict[str, float]
    spend_by_day: list[DaySpend]
    total_planned: float
    budget: float
    budget_progress_pct: float
    expenses_total: float


def budget_progress(total: float, budget: float) -> float:
    """Share of the budget used, as a percentage capped to 0..100.

    A zero budget counts as fully used once anything is planned.
    """
    if budget <= 0:
        return 100.0 if total > 0 else 0.0
    return min(total / budget * 100, 100.0)


def summarize_trip(trip: TripData) -> TripSummary:
    """Aggregate planned item costs by category and by day."""
    by_category: dict[str, list[float]] = defaultdict(list)
    by_day: dict[int, list[float]] = defaultdict(list)

    for item in trip.items:
        # Zero and missing costs do not contribute a bucket
        if not item.cost:
            continue
        by_category[item.category.value].append(item.cost)
        by_day[item.day_index].append(item.cost)

    spend_by_category = {category: math.fsum(costs) for category, costs in by_category.items()}
    total = math.fsum(spend_by_category.values())

    return TripSummary(
        spend_by_category=spend_by_category,
        spend_by_day=[
            DaySpend(day_index=day, amount=math.fsum(costs)) for day, costs in sorted(by_day.items())
        ],
        total_planned=total,
        budget=trip.budget,
        budget_progress_pct=budget_progress(total, trip.budget),
        expenses_total=math.fsum(e.amount for e in trip.expenses),
    )
