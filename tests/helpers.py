"""Test helpers shared across suites."""

import base64
from typing import Any

GENERATIVE_URL = "http://generative.test/proxy"


class StaticTextGenerator:
    """TextGenerator returning a fixed answer (or raising a fixed error)."""

    def __init__(self, text: str = "", error: Exception | None = None) -> None:
        self.text = text
        self.error = error
        self.prompts: list[str] = []

    async def generate_text(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.text


def make_draft(destination: str = "Cancun", days: int = 3) -> dict[str, Any]:
    """Draft in the shape the model is asked to return."""
    return {
        "destination": destination,
        "duration": days,
        "theme": "Culinary Tours",
        "cuisine": "Vegetarian",
        "days": [
            {
                "day": f"Day {i}: Flavors of {destination}",
                "brunch": (
                    "**Café Maya** in downtown — Fresh fruit platters ($15-25). "
                    "Located in Plaza Maya."
                ),
                "activity": (
                    "Visit **Chichen Itza** archaeological site - World Wonder Maya ruins "
                    "with guided tours ($60 entrance + $40 guide)"
                ),
                "dinner": (
                    "**Lorenzo's at Nizuc Resort** - Italian fine dining with ocean views "
                    "($80-120 per person). Reservations required."
                ),
            }
            for i in range(1, days + 1)
        ],
    }


def text_response(text: str) -> dict[str, Any]:
    """Generate response carrying plain text."""
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


def inline_response(text: str) -> dict[str, Any]:
    """Generate response carrying base64 inline data."""
    encoded = base64.b64encode(text.encode("utf-8")).decode("ascii")
    return {"candidates": [{"content": {"parts": [{"inlineData": {"data": encoded}}]}}]}


def key_shape(value: Any) -> Any:
    """Structure of a dumped model: dict keys and list lengths, leaves replaced by type."""
    if isinstance(value, dict):
        return {k: key_shape(v) for k, v in value.items()}
    if isinstance(value, list):
        return [key_shape(v) for v in value]
    return type(value).__name__
