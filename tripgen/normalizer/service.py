"""Itinerary normalizer - model draft in, complete Itinerary out.

``generate`` never raises. Network errors, bad status codes, missing or
malformed JSON all end in the template fallback, which has exactly the same
shape as a drafted itinerary. Which path was taken is visible only in logs and
metrics, never in the returned payload.
"""

import logging
import random
import time

import httpx

from tripgen.llm.client import TextGenerator
from tripgen.models.draft import DraftItinerary
from tripgen.models.itinerary import DayPlan, Itinerary
from tripgen.normalizer.assemble import DayContext, assemble_day_plan
from tripgen.normalizer.cost import calculate_total_cost, format_budget
from tripgen.normalizer.extract import DraftExtractionError, parse_draft
from tripgen.normalizer.prompt import build_prompt
from tripgen.utils.logging import StructuredGenerationLogger
from tripgen.utils.metrics import PrometheusGenerationMetrics
from tripgen.validation import sanitize_string

logger = logging.getLogger(__name__)

SOURCE_GENERATED = "generated"
SOURCE_FALLBACK = "fallback"


def _dietary_prefix(dietary: str) -> str:
    return "" if dietary == "Any" else f"{dietary} "


def fallback_fragments(destination: str, theme: str, dietary: str) -> tuple[str, str, str]:
    """Template brunch/activity/dinner texts for one day."""
    prefix = _dietary_prefix(dietary)
    return (
        f"Local {prefix}restaurant in {destination} - Perfect for brunch!",
        f"{theme} activity in {destination} - Explore the local {theme.lower()} scene!",
        f"Premium {prefix}dining experience in {destination} - Make a reservation!",
    )


def build_summary(destination: str, duration: int, theme: str) -> str:
    return (
        f"Your {duration}-day {theme} adventure to {destination}! "
        "Created with love by Floofie the panda."
    )


class ItineraryNormalizer:
    """Turns trip parameters into a complete itinerary via the generative endpoint."""

    def __init__(
        self,
        generator: TextGenerator,
        rng: random.Random | None = None,
        metrics: PrometheusGenerationMetrics | None = None,
        structured_logger: StructuredGenerationLogger | None = None,
    ) -> None:
        """Initialize normalizer.

        Args:
            generator: Generative-text client
            rng: Source for synthetic ratings, prices and costs (seed it in tests)
            metrics: Metrics sink
            structured_logger: Outcome logger
        """
        self._generator = generator
        self._rng = rng or random.Random()
        self._metrics = metrics or PrometheusGenerationMetrics()
        self._log = structured_logger or StructuredGenerationLogger()

    async def generate(
        self,
        destination: str,
        duration: int,
        budget: int | str,
        theme: str,
        dietary: str = "Any",
    ) -> Itinerary:
        """Generate an itinerary, degrading to the template fallback on any failure.

        Args:
            destination: Validated destination
            duration: Trip length in days
            budget: Dollar amount or bucket label (e.g. "$500-$1000")
            theme: Activity theme
            dietary: Dietary preference

        Returns:
            Itinerary with exactly ``duration`` days
        """
        start = time.perf_counter()
        failure_reason: str | None = None
        itinerary: Itinerary | None = None

        try:
            text = await self._generator.generate_text(
                build_prompt(destination, duration, theme, dietary)
            )
            draft = parse_draft(text)
            itinerary = self.from_draft(draft, destination, duration, budget, theme, dietary)
        except DraftExtractionError as e:
            failure_reason = e.reason
            logger.warning(f"Unusable model response: {e}")
        except httpx.HTTPStatusError as e:
            failure_reason = "http_status"
            logger.error(f"Generative endpoint returned {e.response.status_code}")
        except httpx.HTTPError as e:
            failure_reason = "network"
            logger.error(f"Generative endpoint call failed: {e}")
        except ValueError as e:
            # Corrupt inline payload or a draft that produced invalid fields
            failure_reason = "invalid_payload"
            logger.error(f"Could not decode model response: {e}")
        except Exception as e:
            failure_reason = "unexpected"
            logger.exception(f"Itinerary generation failed: {e}")

        source = SOURCE_GENERATED
        if itinerary is None:
            source = SOURCE_FALLBACK
            self._metrics.inc_upstream_failure(failure_reason or "unexpected")
            itinerary = self.build_fallback(destination, duration, budget, theme, dietary)

        latency_ms = (time.perf_counter() - start) * 1000
        self._metrics.record_generation(source, latency_ms)
        self._log.log_outcome(
            destination=destination,
            duration=duration,
            source=source,
            latency_ms=latency_ms,
            failure_reason=failure_reason,
        )
        return itinerary

    def from_draft(
        self,
        draft: DraftItinerary,
        destination: str,
        duration: int,
        budget: int | str,
        theme: str,
        dietary: str,
    ) -> Itinerary:
        """Convert a parsed draft into the full itinerary shape.

        Top-level fields come from the request, not the draft. Extra draft days
        are dropped and missing ones are filled from the templates.
        """
        ctx = DayContext(destination=destination, dietary=dietary, rng=self._rng)
        templates = fallback_fragments(destination, theme, dietary)

        if len(draft.days) != duration:
            logger.info(f"Draft has {len(draft.days)} day(s), expected {duration}; adjusting")

        days: list[DayPlan] = []
        for index in range(duration):
            if index < len(draft.days):
                draft_day = draft.days[index]
                fragments = (
                    sanitize_string(draft_day.brunch),
                    sanitize_string(draft_day.activity),
                    sanitize_string(draft_day.dinner),
                )
            else:
                fragments = templates
            days.append(assemble_day_plan(index + 1, *fragments, ctx))

        return self._finish(destination, duration, budget, theme, dietary, days)

    def build_fallback(
        self,
        destination: str,
        duration: int,
        budget: int | str,
        theme: str,
        dietary: str,
    ) -> Itinerary:
        """Synthesize a complete itinerary from templates alone."""
        ctx = DayContext(destination=destination, dietary=dietary, rng=self._rng)
        fragments = fallback_fragments(destination, theme, dietary)
        days = [assemble_day_plan(day, *fragments, ctx) for day in range(1, duration + 1)]
        return self._finish(destination, duration, budget, theme, dietary, days)

    def _finish(
        self,
        destination: str,
        duration: int,
        budget: int | str,
        theme: str,
        dietary: str,
        days: list[DayPlan],
    ) -> Itinerary:
        return Itinerary(
            destination=destination,
            duration=duration,
            budget=format_budget(budget),
            theme=theme,
            dietary=dietary,
            total_cost=calculate_total_cost(budget, duration, self._rng),
            summary=build_summary(destination, duration, theme),
            days=days,
        )
