"""FastAPI application."""

import random

from fastapi import FastAPI

from tripgen.api.routes.health import router as health_router
from tripgen.api.routes.itineraries import router as itineraries_router
from tripgen.api.routes.metrics import router as metrics_router
from tripgen.config import get_settings
from tripgen.llm.client import get_text_generator
from tripgen.normalizer.service import ItineraryNormalizer
from tripgen.ratelimit import create_rate_limiter
from tripgen.utils.logging import configure_logging

settings = get_settings()
configure_logging(settings.log_level)

app = FastAPI(title="Trip Itinerary API", version="0.1.0")

# Shared per-process state; the limiter counters are the only cross-request data
app.state.rate_limiter = create_rate_limiter(settings)
app.state.normalizer = ItineraryNormalizer(
    generator=get_text_generator(settings),
    rng=random.Random(settings.rng_seed),
)

# Register routes
app.include_router(health_router, tags=["health"])
app.include_router(metrics_router, tags=["metrics"])
app.include_router(itineraries_router)


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {"message": "Trip Itinerary API", "version": "0.1.0"}
