"""Ledger models - travelers, shared expenses, balances and transfers."""

from datetime import date
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator

from tripmate.app.models.common import DEFAULT_CURRENCY
from tripmate.app.models.itinerary import new_id


class Traveler(BaseModel):
    """Trip member. Identity is only used for references from expenses."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    avatar: str | None = None


class Expense(BaseModel):
    """Money paid by one traveler on behalf of a group of travelers."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_id, min_length=1)
    amount: float = Field(..., gt=0, allow_inf_nan=False)
    currency: str = DEFAULT_CURRENCY
    category: str
    payer_id: str
    split_between: Annotated[tuple[str, ...], Field(min_length=1)]
    description: str = ""
    date: date

    @field_validator("split_between")
    @classmethod
    def validate_split_unique(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Each traveler takes at most one share of an expense."""
        if len(set(v)) != len(v):
            raise ValueError("split_between must not contain duplicate traveler ids")
        return v


class Balance(BaseModel):
    """Net position of a traveler. Positive means the group owes them."""

    traveler_id: str
    paid: float
    owed: float
    balance: float


class Transfer(BaseModel):
    """One peer-to-peer payment in a settlement plan."""

    from_id: str
    to_id: str
    amount: float = Field(..., gt=0, allow_inf_nan=False)
