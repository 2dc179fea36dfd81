"""Trip form validation and sanitization.

Every field is checked and all errors are collected before returning, so the
form can show them together. Nothing here raises; callers decide how to
surface ``ValidationResult.errors``.
"""

import math
import re
from collections.abc import Mapping
from typing import Any

from tripgen.models.common import VALID_THEMES, Dietary
from tripgen.models.request import TravelRequest, ValidationResult

DESTINATION_MIN_LENGTH = 2
DESTINATION_MAX_LENGTH = 100
DESTINATION_PATTERN = re.compile(r"[A-Za-z\s\-'.,]+")

DURATION_MIN_DAYS = 1
DURATION_MAX_DAYS = 30

BUDGET_MIN_USD = 100
BUDGET_MAX_USD = 50000

VALID_DIETARY: frozenset[str] = frozenset(d.value for d in Dietary)


def _is_number(value: Any) -> bool:
    """True for int/float, excluding bool and NaN/inf."""
    if isinstance(value, bool) or not isinstance(value, int | float):
        return False
    return math.isfinite(value)


def _check_destination(value: Any, errors: list[str]) -> None:
    if not isinstance(value, str) or not value.strip():
        errors.append("Destination is required and must be a string")
        return

    trimmed = value.strip()
    if not DESTINATION_MIN_LENGTH <= len(trimmed) <= DESTINATION_MAX_LENGTH:
        errors.append(
            f"Destination must be between {DESTINATION_MIN_LENGTH} "
            f"and {DESTINATION_MAX_LENGTH} characters"
        )
    elif not DESTINATION_PATTERN.fullmatch(trimmed):
        errors.append("Destination contains invalid characters")


def _check_duration(value: Any, errors: list[str]) -> None:
    if not _is_number(value):
        errors.append("Duration is required and must be a number")
    elif not float(value).is_integer():
        errors.append("Duration must be a whole number of days")
    elif not DURATION_MIN_DAYS <= value <= DURATION_MAX_DAYS:
        errors.append(f"Duration must be between {DURATION_MIN_DAYS} and {DURATION_MAX_DAYS} days")


def _check_theme(value: Any, errors: list[str]) -> None:
    if not isinstance(value, str) or not value.strip():
        errors.append("Theme is required and must be a string")
    elif value not in VALID_THEMES:
        # Never echo the submitted value back
        errors.append("Theme must be one of the available activity types")


def _check_budget(value: Any, errors: list[str]) -> None:
    if not _is_number(value):
        errors.append("Budget is required and must be a number")
    elif not BUDGET_MIN_USD <= value <= BUDGET_MAX_USD:
        errors.append(f"Budget must be between ${BUDGET_MIN_USD} and ${BUDGET_MAX_USD:,}")


def _check_dietary(value: Any, errors: list[str]) -> None:
    if value is None:
        return
    if not isinstance(value, str) or value not in VALID_DIETARY:
        errors.append("Dietary preference must be one of the available options")


def validate_travel_form(data: Mapping[str, Any]) -> ValidationResult:
    """Validate a raw trip form submission.

    Args:
        data: Loosely typed form payload (e.g. decoded JSON body)

    Returns:
        ValidationResult with all accumulated errors, or sanitized data when valid
    """
    errors: list[str] = []

    _check_destination(data.get("destination"), errors)
    _check_duration(data.get("duration"), errors)
    _check_theme(data.get("theme"), errors)
    _check_budget(data.get("budget"), errors)
    _check_dietary(data.get("dietary"), errors)

    if errors:
        return ValidationResult(is_valid=False, errors=errors)

    dietary = data.get("dietary")
    sanitized = TravelRequest(
        destination=data["destination"].strip(),
        duration=math.floor(data["duration"]),
        theme=data["theme"].strip(),
        budget=math.floor(data["budget"]),
        dietary=Dietary(dietary) if dietary is not None else Dietary.any,
    )
    return ValidationResult(is_valid=True, errors=[], sanitized_data=sanitized)


def sanitize_string(text: str, max_length: int = 1000) -> str:
    """Trim, drop angle brackets and cap length of untrusted free text."""
    return text.strip().replace("<", "").replace(">", "")[:max_length]
