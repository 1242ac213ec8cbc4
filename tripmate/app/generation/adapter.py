"""Generation adapter - the boundary between the store and an itinerary generator.

Every generator call is single-shot: no retry, no cancellation beyond the
client timeout. Failures are caught here and reported as "zero items
produced"; nothing behind this boundary ever sees a network error.

Generated items are first proposed, then applied on confirmation. A new
proposal replaces any earlier unconfirmed one.
"""

import logging
import time
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from tripmate.app.errors import USER_MESSAGES, ErrorCode, ExternalServiceError, ValidationError
from tripmate.app.generation.client import ItineraryGenerator
from tripmate.app.itinerary.store import ItineraryStore
from tripmate.app.models.common import Category, Location, MetroCity, TransportMode
from tripmate.app.models.generation import (
    ApplyMode,
    GeneratedItem,
    GenerationOutcome,
    GenerationRequest,
    GenerationResult,
    TravelEstimate,
    TravelEstimateRequest,
)
from tripmate.app.models.itinerary import ItineraryItem
from tripmate.app.models.transport import details_for_mode
from tripmate.app.utils.logging import StructuredGenerationLogger
from tripmate.app.utils.metrics import PrometheusGenerationMetrics

logger = logging.getLogger(__name__)


def candidate_to_item_data(candidate: GeneratedItem) -> dict[str, Any]:
    """Map a generated candidate onto ItineraryItem fields.

    Transport fields are only read for TRANSPORT candidates. A missing transport
    type becomes OTHER, a metro leg without a city gets NONE, and the location
    falls back to the title.

    Raises:
        ValueError: if the category or transport enums are unknown
    """
    category = Category(candidate.category)
    data: dict[str, Any] = {
        "day_index": candidate.day_index,
        "start_time": candidate.start_time,
        "end_time": candidate.end_time,
        "title": candidate.title,
        "description": candidate.description,
        "category": category,
        "location": Location(name=candidate.location_name or candidate.title),
        "cost": candidate.cost,
    }

    if category == Category.TRANSPORT:
        mode = TransportMode(candidate.transport_type or TransportMode.OTHER)
        fields: dict[str, Any] = {"provider": candidate.transport_provider}
        if mode == TransportMode.METRO:
            fields["metro_city"] = MetroCity(candidate.metro_city or MetroCity.NONE)
        data["transport_details"] = details_for_mode(mode, **fields)

    return data


class GenerationAdapter:
    """Runs generator requests against one store.

    ``busy`` is set while a request is outstanding; a second request made
    meanwhile is answered with BUSY instead of reaching the generator. Store
    and ledger operations stay available throughout.
    """

    def __init__(
        self,
        store: ItineraryStore,
        generator: ItineraryGenerator,
        metrics: PrometheusGenerationMetrics | None = None,
        structured_logger: StructuredGenerationLogger | None = None,
    ) -> None:
        self._store = store
        self._generator = generator
        self._metrics = metrics or PrometheusGenerationMetrics()
        self._logger = structured_logger or StructuredGenerationLogger()
        self._busy = False
        self._pending: list[ItineraryItem] | None = None

    @property
    def generator(self) -> ItineraryGenerator:
        return self._generator

    @property
    def busy(self) -> bool:
        return self._busy

    @property
    def pending(self) -> list[ItineraryItem] | None:
        """Unconfirmed proposal, if any."""
        return list(self._pending) if self._pending is not None else None

    async def propose(self, request: GenerationRequest) -> GenerationResult:
        """Call the generator once and keep the valid items as a pending proposal.

        The store is never modified here.
        """
        if self._busy:
            return GenerationResult(
                outcome=GenerationOutcome.BUSY,
                message="A generation request is already in progress.",
            )

        self._busy = True
        start = time.monotonic()
        try:
            try:
                candidates = await self._generator.generate(request)
            except ExternalServiceError as e:
                return self._finish_failed(start, str(e))
            except Exception as e:
                # Any transport-level fault from a generator stops at this boundary
                logger.exception("Generator raised unexpectedly")
                return self._finish_failed(start, f"{type(e).__name__}: {e}")

            items, dropped = self._convert(candidates)
            latency_ms = (time.monotonic() - start) * 1000
            self._metrics.inc_dropped(dropped)

            if not items:
                outcome = GenerationOutcome.EMPTY
                self._metrics.record_latency("generate", outcome.value, latency_ms)
                self._metrics.inc_request(outcome.value)
                self._logger.log_attempt("generate", outcome.value, latency_ms, dropped=dropped)
                return GenerationResult(
                    outcome=outcome,
                    dropped=dropped,
                    message="Zero items produced; the itinerary was left unchanged.",
                )

            self._pending = items
            outcome = GenerationOutcome.PROPOSED
            self._metrics.record_latency("generate", outcome.value, latency_ms)
            self._metrics.inc_request(outcome.value)
            self._logger.log_attempt(
                "generate", outcome.value, latency_ms, produced=len(items), dropped=dropped
            )
            return GenerationResult(
                outcome=outcome,
                items=list(items),
                dropped=dropped,
                message=f"{len(items)} items ready to apply.",
            )
        finally:
            self._busy = False

    def confirm(self, mode: ApplyMode = ApplyMode.REPLACE) -> GenerationResult:
        """Apply the pending proposal to the store."""
        if self._pending is None:
            return GenerationResult(
                outcome=GenerationOutcome.EMPTY, message="Nothing pending; zero items applied."
            )

        pending, self._pending = self._pending, None
        if mode == ApplyMode.MERGE:
            applied = self._store.merge_items(pending)
        else:
            applied = self._store.replace_items(pending)
        self._metrics.inc_request(GenerationOutcome.APPLIED.value)
        return GenerationResult(
            outcome=GenerationOutcome.APPLIED,
            items=applied,
            message=f"{len(applied)} items applied ({mode.value}).",
        )

    def discard(self) -> GenerationResult:
        self._pending = None
        return GenerationResult(outcome=GenerationOutcome.DISCARDED, message="Proposal discarded.")

    async def generate(
        self, request: GenerationRequest, mode: ApplyMode = ApplyMode.REPLACE
    ) -> GenerationResult:
        """Propose and immediately confirm."""
        proposal = await self.propose(request)
        if proposal.outcome != GenerationOutcome.PROPOSED:
            return proposal
        result = self.confirm(mode)
        return result.model_copy(update={"dropped": proposal.dropped})

    async def estimate_travel_time(self, origin: str, destination: str, mode: str) -> TravelEstimate:
        """Best-effort estimate; any failure yields "Unknown" for both fields."""
        request = TravelEstimateRequest(origin=origin, destination=destination, mode=mode)
        start = time.monotonic()
        try:
            estimate = await self._generator.estimate_travel_time(request)
        except ExternalServiceError as e:
            self._record_estimate("failed", start, str(e))
            return TravelEstimate.unknown()
        except Exception as e:
            logger.exception("Estimator raised unexpectedly")
            self._record_estimate("failed", start, f"{type(e).__name__}: {e}")
            return TravelEstimate.unknown()

        self._record_estimate("ok", start)
        return estimate

    async def estimate_leg(self, item_id: str) -> TravelEstimate | None:
        """Estimate a transport leg from the preceding item's location.

        The origin is the item before it in the global collection. Returns None
        when the item is not a transport leg, or there is no origin or
        destination to ask about.

        Raises:
            NotFoundError: if the item does not exist
        """
        item = self._store.get_item(item_id)
        if item.transport_details is None or item.location is None:
            return None
        previous = self._store.previous_item(item_id)
        if previous is None or previous.location is None:
            return None
        return await self.estimate_travel_time(
            previous.location.name, item.location.name, item.transport_details.mode
        )

    def _convert(self, candidates: list[dict[str, Any]]) -> tuple[list[ItineraryItem], int]:
        """Validate candidates against the store rules, dropping the bad ones."""
        items: list[ItineraryItem] = []
        dropped = 0
        for index, raw in enumerate(candidates):
            try:
                candidate = GeneratedItem.model_validate(raw)
                item = self._store.validate_candidate(candidate_to_item_data(candidate))
            except (PydanticValidationError, ValidationError, ValueError) as e:
                dropped += 1
                logger.warning("Dropping generated candidate %d: %s", index, e)
                continue
            items.append(item)
        return items, dropped

    def _finish_failed(self, start: float, reason: str) -> GenerationResult:
        latency_ms = (time.monotonic() - start) * 1000
        outcome = GenerationOutcome.FAILED
        self._metrics.record_latency("generate", outcome.value, latency_ms)
        self._metrics.inc_request(outcome.value)
        self._logger.log_attempt("generate", outcome.value, latency_ms, error_reason=reason)
        return GenerationResult(
            outcome=outcome,
            message=f"Zero items produced. {USER_MESSAGES[ErrorCode.GENERATION_FAILED]}",
        )

    def _record_estimate(self, outcome: str, start: float, reason: str | None = None) -> None:
        latency_ms = (time.monotonic() - start) * 1000
        self._metrics.record_latency("estimate", outcome, latency_ms)
        self._metrics.inc_estimate(outcome)
        self._logger.log_attempt("estimate", outcome, latency_ms, error_reason=reason)
