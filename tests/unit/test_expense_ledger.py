"""Tests for ExpenseLedger recording and balances."""

import math
from datetime import date

import pytest

from tripmate.app.errors import ErrorCode, NotFoundError, ValidationError
from tripmate.app.ledger.expenses import ExpenseLedger
from tripmate.app.models import TripData


def _expense(payer: str, amount: float, split: list[str], **fields) -> dict:
    return {
        "amount": amount,
        "category": "Food",
        "payer_id": payer,
        "split_between": split,
        "date": date(2025, 6, 10),
        **fields,
    }


def _by_traveler(ledger: ExpenseLedger) -> dict[str, float]:
    return {b.traveler_id: b.balance for b in ledger.balances()}


def test_demo_balances(ledger: ExpenseLedger) -> None:
    """1500 by Alice and 300 by Bob, both split three ways."""
    balances = {b.traveler_id: b for b in ledger.balances()}

    assert balances["1"].paid == pytest.approx(1500)
    assert balances["1"].owed == pytest.approx(600)
    assert balances["1"].balance == pytest.approx(900)
    assert balances["2"].balance == pytest.approx(-300)
    assert balances["3"].balance == pytest.approx(-600)


def test_balances_follow_traveler_order(ledger: ExpenseLedger) -> None:
    assert [b.traveler_id for b in ledger.balances()] == ["1", "2", "3"]


def test_traveler_without_expenses_has_zero_balance(empty_trip: TripData) -> None:
    ledger = ExpenseLedger(empty_trip)
    ledger.record_expense(_expense("A", 100, ["A", "B"]))

    balances = _by_traveler(ledger)
    assert balances["C"] == 0
    assert balances["A"] == pytest.approx(50)


def test_balances_sum_to_zero_with_uneven_splits(empty_trip: TripData) -> None:
    ledger = ExpenseLedger(empty_trip)
    ledger.record_expense(_expense("A", 100, ["A", "B", "C"]))
    ledger.record_expense(_expense("B", 33.33, ["A", "C"]))
    ledger.record_expense(_expense("C", 0.01, ["A", "B", "C"]))
    ledger.record_expense(_expense("A", 1234.567, ["B"]))

    assert math.fsum(_by_traveler(ledger).values()) == pytest.approx(0, abs=1e-9)


def test_payer_need_not_share(empty_trip: TripData) -> None:
    ledger = ExpenseLedger(empty_trip)
    ledger.record_expense(_expense("A", 90, ["B", "C"]))

    assert _by_traveler(ledger) == pytest.approx({"A": 90, "B": -45, "C": -45})


def test_unknown_payer_rejected(ledger: ExpenseLedger) -> None:
    with pytest.raises(ValidationError) as exc:
        ledger.record_expense(_expense("9", 100, ["1"]))
    assert exc.value.code == ErrorCode.UNKNOWN_TRAVELER


def test_unknown_split_member_rejected(ledger: ExpenseLedger) -> None:
    with pytest.raises(ValidationError) as exc:
        ledger.record_expense(_expense("1", 100, ["1", "9"]))
    assert exc.value.code == ErrorCode.UNKNOWN_TRAVELER


@pytest.mark.parametrize(
    "overrides",
    [
        {"amount": 0},
        {"amount": -10},
        {"amount": float("inf")},
        {"amount": float("nan")},
        {"split_between": []},
        {"split_between": ["1", "1"]},
    ],
)
def test_malformed_expense_rejected(ledger: ExpenseLedger, overrides: dict) -> None:
    before = ledger.expenses()
    with pytest.raises(ValidationError) as exc:
        ledger.record_expense({**_expense("1", 100, ["1", "2"]), **overrides})
    assert exc.value.code == ErrorCode.VALIDATION_ERROR
    assert ledger.expenses() == before


def test_infinite_amount_keeps_balances_finite(ledger: ExpenseLedger) -> None:
    """A rejected non-finite amount leaves the balances summing to zero."""
    with pytest.raises(ValidationError):
        ledger.record_expense(_expense("1", float("inf"), ["1", "2"]))

    balances = _by_traveler(ledger)
    assert all(math.isfinite(v) for v in balances.values())
    assert math.fsum(balances.values()) == pytest.approx(0, abs=1e-9)


def test_malformed_expense_message_names_field(ledger: ExpenseLedger) -> None:
    with pytest.raises(ValidationError) as exc:
        ledger.record_expense(_expense("1", 0, ["1"]))
    assert exc.value.message.startswith("amount: ")


def test_recorded_split_cannot_be_mutated(ledger: ExpenseLedger) -> None:
    """Stored expenses share no mutable state with callers."""
    expense = ledger.record_expense(_expense("1", 90, ["1", "2", "3"]))

    assert expense.split_between == ("1", "2", "3")
    with pytest.raises(AttributeError):
        ledger.expenses()[-1].split_between.append("ghost")  # type: ignore[attr-defined]
    assert len(ledger.balances()) == 3


def test_duplicate_expense_id_rejected(ledger: ExpenseLedger) -> None:
    with pytest.raises(ValidationError) as exc:
        ledger.record_expense(_expense("1", 100, ["1"], id="e1"))
    assert exc.value.code == ErrorCode.DUPLICATE_ID


def test_remove_expense_updates_balances(ledger: ExpenseLedger) -> None:
    ledger.remove_expense("e2")

    assert _by_traveler(ledger) == pytest.approx({"1": 1000, "2": -500, "3": -500})
    with pytest.raises(NotFoundError):
        ledger.remove_expense("e2")


def test_total_spent(ledger: ExpenseLedger) -> None:
    assert ledger.total_spent() == pytest.approx(1800)
    ledger.record_expense(_expense("3", 200, ["3"]))
    assert ledger.total_spent() == pytest.approx(2000)
