"""Itinerary generator clients.

Security: Reads the API key from settings (environment) only, never hardcoded.
Provides a deterministic stub when no key is present, for local use and tests.

Generators return raw candidate objects in the wire shape of GeneratedItem.
Validating them is the adapter's job, so a single bad candidate never sinks a
whole batch.
"""

import json
import logging
from typing import Any, Protocol

from openai import AsyncOpenAI, OpenAIError
from pydantic import ValidationError as PydanticValidationError

from tripmate.app.config import get_settings
from tripmate.app.errors import ErrorCode, ExternalServiceError
from tripmate.app.models.common import Category, TransportMode
from tripmate.app.models.generation import GenerationRequest, TravelEstimate, TravelEstimateRequest

logger = logging.getLogger(__name__)


class ItineraryGenerator(Protocol):
    """Protocol for itinerary generator implementations."""

    async def generate(self, request: GenerationRequest) -> list[dict[str, Any]]:
        """Produce candidate itinerary items.

        Args:
            request: Destination, number of days and free-text interests

        Returns:
            Candidate objects with camelCase keys (dayIndex, startTime, ...)

        Raises:
            ExternalServiceError: if the service fails or answers with
                something that is not a list of objects
        """
        ...

    async def estimate_travel_time(self, request: TravelEstimateRequest) -> TravelEstimate:
        """Estimate duration and distance of a leg.

        Raises:
            ExternalServiceError: if the service fails or the answer is unusable
        """
        ...


class DeterministicStubGenerator:
    """Deterministic stub generator (no API key required)."""

    async def generate(self, request: GenerationRequest) -> list[dict[str, Any]]:
        """Generate the same simple day template for every day."""
        interests = [i.strip() for i in request.interests.split(",") if i.strip()] or ["sightseeing"]
        items: list[dict[str, Any]] = []

        for day in range(1, request.days + 1):
            interest = interests[(day - 1) % len(interests)]
            items.extend(
                [
                    {
                        "dayIndex": day,
                        "startTime": "08:30",
                        "endTime": "09:30",
                        "title": f"Breakfast in {request.destination}",
                        "category": Category.FOOD.value,
                        "cost": 200,
                        "locationName": f"{request.destination} breakfast spot",
                    },
                    {
                        "dayIndex": day,
                        "startTime": "10:00",
                        "endTime": "12:00",
                        "title": f"{interest.title()} in {request.destination}",
                        "description": f"Stub activity for interest '{interest}'",
                        "category": Category.ACTIVITY.value,
                        "cost": 500,
                        "locationName": request.destination,
                    },
                    {
                        "dayIndex": day,
                        "startTime": "12:15",
                        "endTime": "12:45",
                        "title": "Metro to lunch",
                        "category": Category.TRANSPORT.value,
                        "cost": 40,
                        "locationName": f"{request.destination} city centre",
                        "transportType": TransportMode.METRO.value,
                    },
                    {
                        "dayIndex": day,
                        "startTime": "13:00",
                        "endTime": "14:00",
                        "title": "Lunch",
                        "category": Category.FOOD.value,
                        "cost": 400,
                        "locationName": f"{request.destination} city centre",
                    },
                ]
            )
        return items

    async def estimate_travel_time(self, request: TravelEstimateRequest) -> TravelEstimate:
        """No service to ask; the estimate is always unknown."""
        return TravelEstimate.unknown()


class OpenAIItineraryGenerator:
    """OpenAI-backed itinerary generator."""

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4o-mini",
        timeout: float = 30.0,
        estimate_timeout: float = 10.0,
        temperature: float = 0.7,
        client: AsyncOpenAI | None = None,
    ):
        """Initialize OpenAI generator.

        Args:
            api_key: OpenAI API key (read from environment)
            model: Model name to use
            timeout: Generation request timeout in seconds; the only cancellation there is
            estimate_timeout: Travel-time estimate request timeout in seconds
            temperature: Sampling temperature for itinerary generation
            client: Optional preconfigured client (for testing with mocks)
        """
        self.client = client or AsyncOpenAI(api_key=api_key, timeout=timeout, max_retries=0)
        self.model = model
        self.timeout = timeout
        self.estimate_timeout = estimate_timeout
        self.temperature = temperature

    async def generate(self, request: GenerationRequest) -> list[dict[str, Any]]:
        content = await self._complete_json(
            system=self._build_system_prompt(),
            user=self._build_generation_prompt(request),
            temperature=self.temperature,
            timeout=self.timeout,
            code=ErrorCode.GENERATION_FAILED,
        )

        # JSON mode only returns objects, so the array arrives wrapped
        raw_items = content.get("items") if isinstance(content, dict) else content
        if not isinstance(raw_items, list):
            raise ExternalServiceError("Generator response has no item list")
        return [item for item in raw_items if isinstance(item, dict)]

    async def estimate_travel_time(self, request: TravelEstimateRequest) -> TravelEstimate:
        content = await self._complete_json(
            system="You estimate travel times. Answer with a JSON object only.",
            user=(
                f"Estimate the travel time and distance from {request.origin} to "
                f"{request.destination} by {request.mode}. Be concise. Return a JSON object "
                "with 'duration' (e.g. '20 mins') and 'distance' (e.g. '5 km')."
            ),
            temperature=0,
            timeout=self.estimate_timeout,
            code=ErrorCode.ESTIMATE_FAILED,
        )
        try:
            return TravelEstimate.model_validate(content)
        except PydanticValidationError as e:
            raise ExternalServiceError(
                f"Unusable estimate response: {e}", code=ErrorCode.ESTIMATE_FAILED
            ) from e

    async def _complete_json(
        self, *, system: str, user: str, temperature: float, timeout: float, code: ErrorCode
    ) -> Any:
        """Run one chat completion in JSON mode and decode the answer."""
        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": system},
                    {"role": "user", "content": user},
                ],
                temperature=temperature,
                response_format={"type": "json_object"},
                timeout=timeout,
            )
        except OpenAIError as e:
            raise ExternalServiceError(f"OpenAI API call failed: {e}", code=code) from e

        text = response.choices[0].message.content or ""
        if not text.strip():
            raise ExternalServiceError("OpenAI returned empty response", code=code)

        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise ExternalServiceError(f"OpenAI returned invalid JSON: {e}", code=code) from e

    def _build_system_prompt(self) -> str:
        categories = ", ".join(c.value for c in Category)
        modes = ", ".join(m.value for m in TransportMode)
        return f"""You are a travel itinerary planner. Answer with a JSON object of the form
{{"items": [...]}} and nothing else. Each item has:

- dayIndex (integer, 1-based day of the trip)
- startTime and optional endTime ("HH:mm", 24h; endTime not before startTime)
- title, optional description
- category: one of {categories}
- cost (number, estimated in TWD)
- locationName
- for TRANSPORT items only: transportType (one of {modes}), optional
  transportProvider, and for METRO legs metroCity (TAIPEI, TAICHUNG, KAOHSIUNG,
  TAOYUAN or NONE)

Include transport legs when moving between cities or major spots, using
realistic modes for the destination. Never put transport fields on non-transport items."""

    def _build_generation_prompt(self, request: GenerationRequest) -> str:
        lines = [
            f"Plan a {request.days}-day trip to {request.destination}.",
            f"Interests: {request.interests or 'general sightseeing'}.",
            f"Use dayIndex values 1 to {request.days} only.",
        ]
        return "\n".join(lines)


def get_generator() -> ItineraryGenerator:
    """Factory function to get the generator matching the configuration.

    Returns:
        OpenAIItineraryGenerator if an API key is configured, DeterministicStubGenerator otherwise
    """
    settings = get_settings()
    api_key = settings.openai_api_key

    if api_key and api_key.get_secret_value():
        logger.info("Using OpenAI generator for itineraries")
        return OpenAIItineraryGenerator(
            api_key=api_key.get_secret_value(),
            model=settings.openai_model,
            timeout=settings.generation_timeout_s,
            estimate_timeout=settings.estimate_timeout_s,
            temperature=settings.generation_temperature,
        )
    logger.warning("No OpenAI API key configured, using deterministic stub generator")
    return DeterministicStubGenerator()
