"""Settlement calculator - turns a balance vector into peer-to-peer transfers.

Greedy matching: repeatedly the traveler with the most negative balance pays
the traveler with the most positive balance ``min(|debt|, credit)``. Every
step clears at least one traveler, so n travelers need at most n - 1
transfers. This is a good, explainable approximation; it is not guaranteed to
find the smallest possible number of transfers (that problem is NP-hard in
general).

Ties on the extreme balance are broken by traveler id, so identical input
always yields the identical transfer list.
"""

from collections.abc import Iterable, Mapping

from tripmate.app.config import get_settings
from tripmate.app.models.ledger import Balance, Transfer

BalanceInput = Iterable[Balance] | Mapping[str, float]


def _as_mapping(balances: BalanceInput) -> dict[str, float]:
    if isinstance(balances, Mapping):
        return dict(balances)
    return {b.traveler_id: b.balance for b in balances}


def settle(balances: BalanceInput, epsilon: float | None = None) -> list[Transfer]:
    """Compute transfers that drive every balance to zero (within epsilon).

    Args:
        balances: Ledger balances, or a traveler id -> balance mapping
        epsilon: Balances with absolute value at or below this count as settled
            (default: settings.settlement_epsilon)

    Returns:
        Ordered transfers, debtor to creditor
    """
    eps = get_settings().settlement_epsilon if epsilon is None else epsilon
    remaining = {tid: amount for tid, amount in _as_mapping(balances).items() if abs(amount) > eps}
    transfers: list[Transfer] = []

    while True:
        debtors = [(amount, tid) for tid, amount in remaining.items() if amount < 0]
        creditors = [(-amount, tid) for tid, amount in remaining.items() if amount > 0]
        if not debtors or not creditors:
            break

        debt, debtor = min(debtors)
        neg_credit, creditor = min(creditors)
        amount = min(-debt, -neg_credit)

        transfers.append(Transfer(from_id=debtor, to_id=creditor, amount=amount))
        remaining[debtor] += amount
        remaining[creditor] -= amount

        for tid in (debtor, creditor):
            if abs(remaining[tid]) <= eps:
                del remaining[tid]

    return transfers


def apply_transfers(balances: BalanceInput, transfers: Iterable[Transfer]) -> dict[str, float]:
    """Residual balances after the given transfers are paid."""
    residual = _as_mapping(balances)
    for transfer in transfers:
        residual[transfer.from_id] = residual.get(transfer.from_id, 0.0) + transfer.amount
        residual[transfer.to_id] = residual.get(transfer.to_id, 0.0) - transfer.amount
    return residual
