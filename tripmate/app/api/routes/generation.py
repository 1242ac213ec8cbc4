"""Generation endpoints - propose/confirm itineraries and travel-time estimates."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from tripmate.app.api.session import TripSession, get_trip_session
from tripmate.app.models.generation import (
    ApplyMode,
    GenerationRequest,
    GenerationResult,
    TravelEstimate,
    TravelEstimateRequest,
)

router = APIRouter(tags=["generation"])
logger = logging.getLogger(__name__)

Session = Annotated[TripSession, Depends(get_trip_session)]


class ConfirmRequest(BaseModel):
    mode: ApplyMode = ApplyMode.REPLACE


@router.post("/generate", response_model=GenerationResult)
async def generate(
    request: GenerationRequest,
    session: Session,
    auto_confirm: bool = False,
    mode: ApplyMode = ApplyMode.REPLACE,
) -> GenerationResult:
    """Ask the generator for an itinerary.

    By default the valid items are returned as a pending proposal; with
    ``auto_confirm`` they are applied straight away. Failures come back as a
    result with zero items, never as an error status.
    """
    logger.info(f"[POST /generate] destination={request.destination}, days={request.days}")
    if auto_confirm:
        return await session.planner.generate(request, mode)
    return await session.planner.propose(request)


@router.post("/generate/confirm", response_model=GenerationResult)
async def confirm(body: ConfirmRequest, session: Session) -> GenerationResult:
    return session.planner.confirm(body.mode)


@router.post("/generate/discard", response_model=GenerationResult)
async def discard(session: Session) -> GenerationResult:
    return session.planner.discard()


@router.post("/estimate", response_model=TravelEstimate)
async def estimate(request: TravelEstimateRequest, session: Session) -> TravelEstimate:
    """Best-effort travel time; "Unknown" when the service cannot answer."""
    return await session.planner.estimate_travel_time(
        request.origin, request.destination, request.mode
    )


@router.post("/items/{item_id}/estimate", response_model=TravelEstimate | None)
async def estimate_leg(item_id: str, session: Session) -> TravelEstimate | None:
    """Estimate a transport leg from the location of the item before it."""
    return await session.planner.estimate_leg(item_id)
