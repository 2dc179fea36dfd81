"""Health check endpoints.

- /health: liveness, always 200
- /healthz: checks Redis (when configured) and that a generative endpoint is set
"""

import json
from typing import Any

import redis
from fastapi import APIRouter, Response

from tripgen.config import Settings, get_settings

router = APIRouter()


async def check_redis(settings: Settings) -> tuple[bool, str]:
    """Check Redis connectivity.

    Returns:
        (is_ok, status_message)
    """
    if not settings.redis_url:
        return (True, "not_configured")

    try:
        client = redis.from_url(settings.redis_url, decode_responses=True)  # type: ignore[no-untyped-call]
        client.ping()
        return (True, "ok")
    except Exception as e:
        return (False, f"error: {type(e).__name__}")


async def check_generative(settings: Settings) -> tuple[bool, str]:
    """Check the generative endpoint is configured.

    No outbound call is made; a failing endpoint only degrades itineraries
    to the fallback, it never makes the service unhealthy.
    """
    if not settings.generative_api_url:
        return (False, "not_configured")
    return (True, "configured")


@router.get("/health")
async def health() -> dict[str, str]:
    """Simple health check for Docker/k8s.

    Returns:
        200 OK always (application is running)
    """
    return {"status": "ok"}


@router.get("/healthz", response_model=None)
async def healthz() -> dict[str, Any] | Response:
    """Health check endpoint.

    Returns:
        200 with component status if core systems ok
        503 if critical components fail
    """
    settings = get_settings()

    redis_ok, redis_status = await check_redis(settings)
    generative_ok, generative_status = await check_generative(settings)

    core_ok = redis_ok and generative_ok

    response_body = {
        "status": "ok" if core_ok else "degraded",
        "components": {
            "redis": redis_status,
            "generative": generative_status,
        },
    }

    if not core_ok:
        return Response(
            content=json.dumps(response_body),
            status_code=503,
            media_type="application/json",
        )

    return response_body
