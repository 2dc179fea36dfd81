"""Models package - re-exports for convenience."""

from tripgen.models.common import THEME_CATEGORIES, VALID_THEMES, CamelModel, Dietary
from tripgen.models.draft import DraftDay, DraftItinerary
from tripgen.models.itinerary import (
    AccommodationItem,
    Activity,
    DayPlan,
    Dining,
    DiningItem,
    Itinerary,
)
from tripgen.models.request import TravelRequest, ValidationResult

__all__ = [
    # Common
    "CamelModel",
    "Dietary",
    "THEME_CATEGORIES",
    "VALID_THEMES",
    # Request
    "TravelRequest",
    "ValidationResult",
    # Draft
    "DraftDay",
    "DraftItinerary",
    # Itinerary
    "Activity",
    "DiningItem",
    "Dining",
    "AccommodationItem",
    "DayPlan",
    "Itinerary",
]
