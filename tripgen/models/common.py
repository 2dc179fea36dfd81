"""Common types and catalogs shared across all models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Dietary(str, Enum):
    """Dietary preference offered on the trip form."""

    any = "Any"
    vegetarian = "Vegetarian"
    vegan = "Vegan"
    non_vegetarian = "Non-Vegetarian"
    halal = "Halal"
    kosher = "Kosher"


# Activity themes, grouped the way the form presents them
THEME_CATEGORIES: dict[str, tuple[str, ...]] = {
    "Leisure & Wellness": ("Spa & Wellness", "Beach Relaxation", "Yoga Retreat", "Meditation"),
    "Adventure & Sports": ("Water Sports", "Hiking & Trekking", "Extreme Sports", "Cycling Tours"),
    "Cultural & Arts": (
        "Museums & Galleries",
        "Historical Sites",
        "Local Traditions",
        "Art Workshops",
    ),
    "Food & Dining": ("Culinary Tours", "Wine Tasting", "Street Food", "Cooking Classes"),
    "Nature & Wildlife": (
        "Wildlife Safari",
        "Botanical Gardens",
        "National Parks",
        "Bird Watching",
    ),
    "Urban & Modern": ("City Exploration", "Shopping Districts", "Nightlife", "Tech & Innovation"),
}

VALID_THEMES: frozenset[str] = frozenset(
    theme for themes in THEME_CATEGORIES.values() for theme in themes
)


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys for the web client."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)
