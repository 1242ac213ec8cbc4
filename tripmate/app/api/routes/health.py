"""Health check endpoint."""

from typing import Annotated, Any

from fastapi import APIRouter, Depends

from tripmate.app.api.session import TripSession, get_trip_session
from tripmate.app.generation.client import OpenAIItineraryGenerator

router = APIRouter()


@router.get("/health")
async def health() -> dict[str, str]:
    """Simple health check for Docker/k8s.

    Returns:
        200 OK always (application is running)
    """
    return {"status": "ok"}


@router.get("/healthz")
async def healthz(session: Annotated[TripSession, Depends(get_trip_session)]) -> dict[str, Any]:
    """Health check with component details.

    The generator is reported as "openai" or "stub"; a stub is healthy, it
    only means no API key is configured.
    """
    generator = session.planner.generator
    return {
        "status": "ok",
        "components": {
            "generator": "openai" if isinstance(generator, OpenAIItineraryGenerator) else "stub",
            "generation_busy": session.planner.busy,
            "items": len(session.trip.items),
            "expenses": len(session.trip.expenses),
        },
    }
