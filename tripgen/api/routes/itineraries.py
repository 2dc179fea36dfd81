"""Itinerary endpoints - POST /itineraries and quota lookup."""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Request, Response, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from tripgen.api.client_key import get_client_key
from tripgen.normalizer.service import ItineraryNormalizer
from tripgen.ratelimit import RateLimiter, RateLimitExceeded, enforce_rate_limit
from tripgen.utils.metrics import rate_limit_denials_total, validation_failures_total
from tripgen.validation import validate_travel_form

router = APIRouter(tags=["itineraries"])


class RateLimitResponse(BaseModel):
    """Response for GET /rate-limit."""

    limit: int
    remaining: int
    reset_ms: int


def get_rate_limiter(request: Request) -> RateLimiter:
    """Limiter owned by the running application."""
    limiter: RateLimiter = request.app.state.rate_limiter
    return limiter


def get_normalizer(request: Request) -> ItineraryNormalizer:
    """Normalizer owned by the running application."""
    normalizer: ItineraryNormalizer = request.app.state.normalizer
    return normalizer


@router.post("/itineraries", response_model=None)
async def create_itinerary(
    payload: Annotated[dict[str, Any], Body()],
    response: Response,
    client_key: Annotated[str, Depends(get_client_key)],
    limiter: Annotated[RateLimiter, Depends(get_rate_limiter)],
    normalizer: Annotated[ItineraryNormalizer, Depends(get_normalizer)],
) -> dict[str, Any] | JSONResponse:
    """Validate the trip form, admit the call, and generate an itinerary.

    Returns:
        200 with the itinerary (camelCase keys)
        422 with ``errors`` when the form is invalid
        429 with a wait message when the client is over quota
    """
    validation = validate_travel_form(payload)
    if not validation.is_valid or validation.sanitized_data is None:
        validation_failures_total.inc()
        return JSONResponse(
            status_code=422,
            content={"errors": validation.errors},
        )

    try:
        quota = enforce_rate_limit(limiter, client_key)
    except RateLimitExceeded as e:
        rate_limit_denials_total.inc()
        return JSONResponse(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            content={"detail": str(e)},
            headers={"Retry-After": str(e.retry_after_seconds)},
        )

    trip = validation.sanitized_data
    itinerary = await normalizer.generate(
        destination=trip.destination,
        duration=trip.duration,
        budget=trip.budget,
        theme=trip.theme,
        dietary=trip.dietary.value,
    )

    response.headers["X-RateLimit-Remaining"] = str(quota.remaining)
    return itinerary.model_dump(mode="json", by_alias=True)


@router.get("/rate-limit", response_model=RateLimitResponse)
async def get_rate_limit(
    client_key: Annotated[str, Depends(get_client_key)],
    limiter: Annotated[RateLimiter, Depends(get_rate_limiter)],
) -> RateLimitResponse:
    """Report the caller's quota without consuming it."""
    return RateLimitResponse(
        limit=limiter.max_requests,
        remaining=limiter.remaining(client_key),
        reset_ms=limiter.reset_time(client_key),
    )
