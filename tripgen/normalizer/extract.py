"""Best-effort extraction of a draft itinerary from model text.

This is the only place that pattern-matches raw model output. Replacing it
with schema-constrained output later means changing ``parse_draft`` alone.
"""

import json
import re

from pydantic import ValidationError

from tripgen.models.draft import DraftItinerary

_CODE_FENCE_JSON = re.compile(r"```json\n?")
_CODE_FENCE = re.compile(r"```\n?")


class DraftExtractionError(ValueError):
    """Model text did not contain a usable draft."""

    def __init__(self, reason: str, message: str) -> None:
        self.reason = reason
        super().__init__(message)


def strip_code_fences(text: str) -> str:
    """Remove Markdown code-fence markers."""
    return _CODE_FENCE.sub("", _CODE_FENCE_JSON.sub("", text))


def find_json_object(text: str) -> str | None:
    """Return the widest ``{...}`` span in ``text``, if any.

    Greedy: first "{" through last "}", found in linear time.
    """
    start = text.find("{")
    end = text.rfind("}")
    if 0 <= start < end:
        return text[start : end + 1]
    return None


def parse_draft(text: str) -> DraftItinerary:
    """Parse model text into a draft.

    Raises:
        DraftExtractionError: With ``reason`` one of no_json, invalid_json, schema_mismatch
    """
    candidate = find_json_object(strip_code_fences(text))
    if candidate is None:
        raise DraftExtractionError("no_json", "No JSON object found in model response")

    try:
        payload = json.loads(candidate)
    except json.JSONDecodeError as e:
        raise DraftExtractionError("invalid_json", f"Failed to parse JSON: {e}") from e

    try:
        return DraftItinerary.model_validate(payload)
    except ValidationError as e:
        raise DraftExtractionError(
            "schema_mismatch", f"Draft does not match expected shape: {e.error_count()} error(s)"
        ) from e
