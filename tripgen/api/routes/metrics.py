"""Prometheus metrics endpoint."""

from fastapi import APIRouter, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

router = APIRouter()


@router.get("/metrics")
async def metrics() -> Response:
    """Prometheus metrics endpoint.

    Exposes all registered Prometheus metrics including:
    - itinerary_generations_total{source}
    - upstream_failures_total{reason}
    - rate_limit_denials_total
    """
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
