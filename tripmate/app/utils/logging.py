"""Structured logging for generation attempts."""

import logging
from typing import Any

logger = logging.getLogger(__name__)


class StructuredGenerationLogger:
    """Structured logger for generation and estimate calls."""

    def log_attempt(
        self,
        operation: str,
        outcome: str,
        latency_ms: float,
        produced: int = 0,
        dropped: int = 0,
        error_reason: str | None = None,
    ) -> None:
        """Log one external call with structured data."""
        log_data: dict[str, Any] = {
            "operation": operation,
            "outcome": outcome,
            "latency_ms": round(latency_ms, 2),
            "produced": produced,
            "dropped": dropped,
        }

        if error_reason:
            log_data["error_reason"] = error_reason

        log_msg = f"Generation call: {operation} - {outcome}"

        if outcome in ("proposed", "applied", "ok"):
            logger.info(log_msg, extra={"structured": log_data})
        else:
            logger.warning(log_msg, extra={"structured": log_data})
