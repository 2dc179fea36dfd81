"""Client for the generative-text proxy endpoint.

The proxy speaks the ``contents/parts`` wire format: one POST with the prompt
as the only message, answer text under ``candidates[0].content.parts[0]``.
"""

import base64
import logging
from typing import Any, Protocol

import httpx

from tripgen.config import Settings

logger = logging.getLogger(__name__)


class TextGenerator(Protocol):
    """Protocol for generative-text client implementations."""

    async def generate_text(self, prompt: str) -> str:
        """Send ``prompt`` and return the answer text.

        Raises:
            httpx.HTTPError: On network or non-2xx responses
        """
        ...


def build_request_body(prompt: str) -> dict[str, Any]:
    """Wrap a prompt as the sole message of a generate request."""
    return {"contents": [{"parts": [{"text": prompt}]}]}


def decode_inline_data(encoded: str) -> str:
    """Decode a base64 payload that may be line-wrapped or unpadded."""
    compact = "".join(encoded.split())
    compact += "=" * (-len(compact) % 4)
    return base64.b64decode(compact, validate=True).decode("utf-8")


def extract_response_text(data: Any) -> str:
    """Pull answer text out of a generate response.

    Plain ``text`` wins; otherwise a base64 ``inlineData.data`` payload is
    decoded. Any other shape yields an empty string.

    Raises:
        binascii.Error / UnicodeDecodeError: If the inline payload is corrupt
    """
    try:
        part = data["candidates"][0]["content"]["parts"][0]
    except (KeyError, IndexError, TypeError):
        return ""

    if not isinstance(part, dict):
        return ""

    text = part.get("text")
    if isinstance(text, str) and text:
        return text

    inline = part.get("inlineData")
    if isinstance(inline, dict) and isinstance(inline.get("data"), str) and inline["data"]:
        return decode_inline_data(inline["data"])

    return ""


class HttpTextGenerator:
    """httpx-backed client for the generative proxy."""

    def __init__(self, api_url: str, client: httpx.AsyncClient | None = None) -> None:
        """Initialize client.

        Args:
            api_url: Proxy endpoint URL
            client: Optional httpx client (for testing with mocks)
        """
        self.api_url = api_url
        self._client = client

    async def generate_text(self, prompt: str) -> str:
        """POST the prompt and return the extracted answer text.

        No retry and no timeout beyond the transport default.
        """
        close_client = False
        client = self._client
        if client is None:
            client = httpx.AsyncClient()
            close_client = True

        try:
            response = await client.post(self.api_url, json=build_request_body(prompt))
            response.raise_for_status()
            return extract_response_text(response.json())
        finally:
            if close_client:
                await client.aclose()


def get_text_generator(settings: Settings) -> TextGenerator:
    """Factory for the configured generative client."""
    logger.debug("Using generative endpoint %s", settings.generative_api_url)
    return HttpTextGenerator(api_url=settings.generative_api_url)
