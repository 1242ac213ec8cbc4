"""Expense endpoints - recording, balances and settlement."""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Response, status

from tripmate.app.api.session import TripSession, get_trip_session
from tripmate.app.ledger.settlement import settle
from tripmate.app.models.ledger import Balance, Expense, Transfer

router = APIRouter()

Session = Annotated[TripSession, Depends(get_trip_session)]


@router.post("/expenses", response_model=Expense, status_code=status.HTTP_201_CREATED)
async def record_expense(
    session: Session, payload: Annotated[dict[str, Any], Body()]
) -> Expense:
    return session.ledger.record_expense(payload)


@router.delete("/expenses/{expense_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_expense(expense_id: str, session: Session) -> Response:
    session.ledger.remove_expense(expense_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/balances", response_model=list[Balance])
async def balances(session: Session) -> list[Balance]:
    """Unrounded paid/owed/balance per traveler; rounding is up to the client."""
    return session.ledger.balances()


@router.get("/settlement", response_model=list[Transfer])
async def settlement(session: Session) -> list[Transfer]:
    """Transfers that settle the current balances."""
    return settle(session.ledger.balances())
