"""Shared pytest fixtures for all test suites."""

import json
import random
from collections.abc import Callable

import httpx
import pytest

from tests.helpers import make_draft


@pytest.fixture
def rng() -> random.Random:
    """Seeded RNG so synthetic fields are reproducible."""
    return random.Random(1234)


@pytest.fixture
def draft_text() -> str:
    """Fenced model answer wrapping a valid 3-day draft."""
    return "Here is your trip!\n```json\n" + json.dumps(make_draft(days=3)) + "\n```\nEnjoy!"


@pytest.fixture
def mock_http_client() -> Callable[[httpx.Response], httpx.AsyncClient]:
    """Factory for an httpx client that answers every request with ``response``."""

    def factory(response: httpx.Response) -> httpx.AsyncClient:
        def handler(request: httpx.Request) -> httpx.Response:
            return response

        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return factory
