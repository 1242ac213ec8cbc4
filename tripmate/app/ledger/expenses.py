"""Expense ledger - records shared expenses and derives per-traveler balances."""

import logging
import math
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from tripmate.app.errors import ErrorCode, NotFoundError, ValidationError, from_pydantic_error
from tripmate.app.models.ledger import Balance, Expense
from tripmate.app.models.trip import TripData

logger = logging.getLogger(__name__)


class ExpenseLedger:
    """Typed operations over ``TripData.expenses``.

    Balances are recomputed from the recorded expenses on every call, so no
    rounding accumulates between calls.
    """

    def __init__(self, trip: TripData) -> None:
        self._trip = trip

    @property
    def trip(self) -> TripData:
        return self._trip

    def expenses(self) -> list[Expense]:
        return list(self._trip.expenses)

    def record_expense(self, data: Expense | Mapping[str, Any]) -> Expense:
        """Validate and append an expense.

        Raises:
            ValidationError: non-positive amount, empty or duplicated split,
                unknown payer or split traveler, or duplicate id
        """
        if isinstance(data, Expense):
            expense = data
        else:
            try:
                expense = Expense.model_validate(data)
            except PydanticValidationError as e:
                raise from_pydantic_error(e) from e

        known = set(self._trip.traveler_ids())
        if expense.payer_id not in known:
            raise ValidationError(
                f"payer {expense.payer_id} is not a traveler", code=ErrorCode.UNKNOWN_TRAVELER
            )
        unknown = [t for t in expense.split_between if t not in known]
        if unknown:
            raise ValidationError(
                f"split references unknown travelers {unknown}", code=ErrorCode.UNKNOWN_TRAVELER
            )
        if any(e.id == expense.id for e in self._trip.expenses):
            raise ValidationError(f"expense {expense.id} already exists", code=ErrorCode.DUPLICATE_ID)

        self._trip.expenses.append(expense)
        logger.debug("Recorded expense %s: %.2f %s", expense.id, expense.amount, expense.currency)
        return expense

    def remove_expense(self, expense_id: str) -> None:
        for index, expense in enumerate(self._trip.expenses):
            if expense.id == expense_id:
                del self._trip.expenses[index]
                return
        raise NotFoundError(f"expense {expense_id} not found")

    def total_spent(self) -> float:
        return math.fsum(e.amount for e in self._trip.expenses)

    def balances(self) -> list[Balance]:
        """Paid, owed and net balance per traveler, in traveler order.

        paid[t] sums the expenses t paid; owed[t] sums amount / len(split)
        over the expenses t shares. The balances sum to zero up to float error.
        """
        paid: dict[str, list[float]] = {t: [] for t in self._trip.traveler_ids()}
        owed: dict[str, list[float]] = {t: [] for t in self._trip.traveler_ids()}

        for expense in self._trip.expenses:
            paid[expense.payer_id].append(expense.amount)
            share = expense.amount / len(expense.split_between)
            for traveler_id in expense.split_between:
                owed[traveler_id].append(share)

        results = []
        for traveler_id in paid:
            total_paid = math.fsum(paid[traveler_id])
            total_owed = math.fsum(owed[traveler_id])
            results.append(
                Balance(
                    traveler_id=traveler_id,
                    paid=total_paid,
                    owed=total_owed,
                    balance=total_paid - total_owed,
                )
            )
        return results
