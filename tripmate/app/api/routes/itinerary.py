"""Itinerary endpoints - day views and item commands."""

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Response, status
from pydantic import BaseModel

from tripmate.app.api.session import TripSession, get_trip_session
from tripmate.app.features.links import maps_url
from tripmate.app.itinerary.summary import TripSummary, summarize_trip
from tripmate.app.models.common import Direction
from tripmate.app.models.itinerary import ItineraryItem
from tripmate.app.models.trip import TripData

router = APIRouter()
logger = logging.getLogger(__name__)

Session = Annotated[TripSession, Depends(get_trip_session)]


class ReorderRequest(BaseModel):
    direction: Direction


class MapsLink(BaseModel):
    url: str | None


@router.get("/trip", response_model=TripData)
async def get_trip(session: Session) -> TripData:
    """Full trip snapshot."""
    return session.trip


@router.get("/days/{day}/items", response_model=list[ItineraryItem])
async def items_for_day(day: int, session: Session) -> list[ItineraryItem]:
    """Items of one day ordered by start time."""
    return session.store.items_for_day(day)


@router.post("/items", response_model=ItineraryItem, status_code=status.HTTP_201_CREATED)
async def add_item(
    session: Session, payload: Annotated[dict[str, Any], Body()]
) -> ItineraryItem:
    """Add an item. Rule violations surface as 422 via the ValidationError handler."""
    item = session.store.add_item(payload)
    logger.info(f"[POST /items] added {item.id} on day {item.day_index}")
    return item


@router.patch("/items/{item_id}", response_model=ItineraryItem)
async def update_item(
    item_id: str, session: Session, payload: Annotated[dict[str, Any], Body()]
) -> ItineraryItem:
    return session.store.update_item(item_id, payload)


@router.delete("/items/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_item(item_id: str, session: Session) -> Response:
    session.store.delete_item(item_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/items/{item_id}/reorder", response_model=ItineraryItem)
async def reorder_item(item_id: str, body: ReorderRequest, session: Session) -> ItineraryItem:
    """Move an item one step up or down in the global collection."""
    return session.store.reorder(item_id, body.direction)


@router.get("/items/{item_id}/maps-url", response_model=MapsLink)
async def item_maps_url(item_id: str, session: Session) -> MapsLink:
    return MapsLink(url=maps_url(session.store.get_item(item_id)))


@router.get("/summary", response_model=TripSummary)
async def trip_summary(session: Session) -> TripSummary:
    """Planned spend by category and day, against the budget."""
    return summarize_trip(session.trip)
