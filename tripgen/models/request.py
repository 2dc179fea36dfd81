"""Request models - validated trip form input."""

from typing import Annotated

from pydantic import BaseModel, Field, field_validator

from tripgen.models.common import VALID_THEMES, Dietary


class TravelRequest(BaseModel):
    """Sanitized trip parameters accepted by the generator."""

    destination: Annotated[str, Field(min_length=2, max_length=100, pattern=r"^[A-Za-z\s\-'.,]+$")]
    duration: Annotated[int, Field(ge=1, le=30)]
    theme: str
    budget: Annotated[int, Field(ge=100, le=50000)]
    dietary: Dietary = Dietary.any

    @field_validator("theme")
    @classmethod
    def validate_theme_in_catalog(cls, v: str) -> str:
        """Ensure theme is one of the offered activity types."""
        if v not in VALID_THEMES:
            raise ValueError("theme must be one of the available activity types")
        return v


class ValidationResult(BaseModel):
    """Outcome of form validation.

    Errors are advisory strings; ``sanitized_data`` is set only when valid.
    """

    is_valid: bool
    errors: list[str] = Field(default_factory=list)
    sanitized_data: TravelRequest | None = None
