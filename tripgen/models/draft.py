"""Draft models - the loose day/brunch/activity/dinner shape the model is asked for."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class DraftDay(BaseModel):
    """One day as written by the generative model."""

    model_config = ConfigDict(extra="ignore")

    # Label only; never read, so any value is accepted
    day: Any = None
    brunch: str = ""
    activity: str = ""
    dinner: str = ""


class DraftItinerary(BaseModel):
    """Whole draft; only ``days`` is required."""

    model_config = ConfigDict(extra="ignore")

    destination: str | None = None
    duration: int | None = None
    theme: str | None = None
    cuisine: str | None = None
    days: list[DraftDay] = Field(..., min_length=1)
