"""Integration tests for POST /itineraries and GET /rate-limit."""

import json
import random
from collections.abc import Generator
from typing import Any

import pytest
from fastapi.testclient import TestClient

from tests.helpers import StaticTextGenerator, make_draft
from tripgen.api.routes.itineraries import get_normalizer, get_rate_limiter
from tripgen.main import app
from tripgen.normalizer.service import ItineraryNormalizer
from tripgen.ratelimit import FixedWindowRateLimiter, make_client_key

HEADERS = {
    "User-Agent": "Mozilla/5.0 (X11; Linux x86_64)",
    "Accept-Language": "en-US,en;q=0.9",
    "X-Timezone": "America/Cancun",
}


def valid_form(**overrides: Any) -> dict[str, Any]:
    form: dict[str, Any] = {
        "destination": "Cancun",
        "duration": 3,
        "theme": "Culinary Tours",
        "budget": 1200,
        "dietary": "Vegetarian",
    }
    form.update(overrides)
    return form


@pytest.fixture
def generator() -> StaticTextGenerator:
    return StaticTextGenerator(json.dumps(make_draft(days=3)))


@pytest.fixture
def limiter() -> FixedWindowRateLimiter:
    return FixedWindowRateLimiter(max_requests=2, window_ms=60_000)


@pytest.fixture
def client(
    generator: StaticTextGenerator, limiter: FixedWindowRateLimiter
) -> Generator[TestClient, None, None]:
    """Test client with a fresh limiter and a canned generator."""
    normalizer = ItineraryNormalizer(generator=generator, rng=random.Random(0))
    app.dependency_overrides[get_rate_limiter] = lambda: limiter
    app.dependency_overrides[get_normalizer] = lambda: normalizer
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_create_itinerary_returns_camel_case_itinerary(client: TestClient) -> None:
    response = client.post("/itineraries", json=valid_form(), headers=HEADERS)

    assert response.status_code == 200
    data = response.json()
    assert data["destination"] == "Cancun"
    assert data["duration"] == 3
    assert data["budget"] == "$1,200"
    assert data["dietary"] == "Vegetarian"
    assert data["totalCost"].startswith("$")
    assert len(data["days"]) == 3
    assert data["days"][0]["morning"]["name"] == "Café Maya"
    assert data["days"][0]["dining"]["breakfast"]["mapsUrl"].startswith("https://")
    assert response.headers["X-RateLimit-Remaining"] == "1"


def test_sanitized_values_reach_generator(
    client: TestClient, generator: StaticTextGenerator
) -> None:
    response = client.post(
        "/itineraries", json=valid_form(destination="  Cancun  ", duration=3.0), headers=HEADERS
    )

    assert response.status_code == 200
    assert "Plan a 3-day trip to Cancun with" in generator.prompts[0]


def test_invalid_form_returns_errors_without_upstream_call(
    client: TestClient, generator: StaticTextGenerator, limiter: FixedWindowRateLimiter
) -> None:
    """Test rejected forms neither call the generator nor consume quota."""
    response = client.post(
        "/itineraries",
        json=valid_form(destination="Paris 75001", duration=31),
        headers=HEADERS,
    )

    assert response.status_code == 422
    errors = response.json()["errors"]
    assert "Destination contains invalid characters" in errors
    assert "Duration must be between 1 and 30 days" in errors
    assert generator.prompts == []
    key = make_client_key(HEADERS["User-Agent"], "en-US", HEADERS["X-Timezone"])
    assert limiter.remaining(key) == 2
    assert limiter.reset_time(key) == 0


def test_rate_limit_denies_after_quota(
    client: TestClient, generator: StaticTextGenerator
) -> None:
    """Test the third call in a 2-per-window quota is denied with a wait time."""
    for _ in range(2):
        assert client.post("/itineraries", json=valid_form(), headers=HEADERS).status_code == 200

    response = client.post("/itineraries", json=valid_form(), headers=HEADERS)

    assert response.status_code == 429
    assert response.json()["detail"].startswith("Rate limit exceeded. Please try again in")
    assert 1 <= int(response.headers["Retry-After"]) <= 60
    assert len(generator.prompts) == 2


def test_rate_limit_is_per_client_fingerprint(client: TestClient) -> None:
    for _ in range(2):
        client.post("/itineraries", json=valid_form(), headers=HEADERS)

    other = {**HEADERS, "X-Timezone": "Europe/Paris"}
    response = client.post("/itineraries", json=valid_form(), headers=other)

    assert response.status_code == 200


def test_accept_language_quality_weights_ignored(client: TestClient) -> None:
    for _ in range(2):
        client.post("/itineraries", json=valid_form(), headers=HEADERS)

    same_locale = {**HEADERS, "Accept-Language": "en-US;q=1.0"}
    response = client.post("/itineraries", json=valid_form(), headers=same_locale)

    assert response.status_code == 429


def test_upstream_failure_still_returns_itinerary(
    client: TestClient, generator: StaticTextGenerator
) -> None:
    """Test fallback itineraries are served as ordinary 200 responses."""
    generator.text = "Sorry, I can't help with that."

    response = client.post("/itineraries", json=valid_form(duration=2), headers=HEADERS)

    assert response.status_code == 200
    data = response.json()
    assert len(data["days"]) == 2
    assert data["days"][0]["morning"]["name"] == "Local Vegetarian restaurant in Cancun"


def test_get_rate_limit_does_not_consume(client: TestClient) -> None:
    client.post("/itineraries", json=valid_form(), headers=HEADERS)

    first = client.get("/rate-limit", headers=HEADERS).json()
    second = client.get("/rate-limit", headers=HEADERS).json()

    assert first["limit"] == 2
    assert first["remaining"] == 1
    assert second["remaining"] == 1
    assert 0 < first["reset_ms"] <= 60_000
