"""Structured logging for itinerary generation."""

import logging
from typing import Any

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once for the service process."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


class StructuredGenerationLogger:
    """Structured logger for generation outcomes."""

    def log_outcome(
        self,
        *,
        destination: str,
        duration: int,
        source: str,
        latency_ms: float,
        failure_reason: str | None = None,
    ) -> None:
        """Log one generate() call with structured data.

        Args:
            destination: Requested destination
            duration: Requested trip length in days
            source: "generated" or "fallback"
            latency_ms: Wall time of the whole call
            failure_reason: Why the draft was rejected, for fallbacks
        """
        log_data: dict[str, Any] = {
            "destination": destination,
            "duration": duration,
            "source": source,
            "latency_ms": round(latency_ms, 2),
        }

        if failure_reason:
            log_data["failure_reason"] = failure_reason

        log_msg = f"Itinerary generation: {destination} - {source}"

        if source == "generated":
            logger.info(log_msg, extra={"structured": log_data})
        else:
            logger.warning(log_msg, extra={"structured": log_data})
