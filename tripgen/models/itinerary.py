"""Itinerary models - final output for user consumption."""

from pydantic import Field

from tripgen.models.common import CamelModel


class Activity(CamelModel):
    """Scheduled activity for one time slot."""

    name: str = Field(..., min_length=1, max_length=60)
    type: str
    time: str
    cost: str
    rating: float = Field(..., ge=0, le=5)
    address: str
    maps_url: str
    booking_url: str
    description: str
    reviews: int = Field(..., ge=0)
    dietary: str


class DiningItem(CamelModel):
    """Restaurant suggestion for one meal."""

    name: str = Field(..., min_length=1, max_length=50)
    type: str
    rating: float = Field(..., ge=0, le=5)
    reviews: int = Field(..., ge=0)
    dietary: str
    price: str
    maps_url: str
    booking_url: str


class Dining(CamelModel):
    """Meals for one day."""

    breakfast: DiningItem
    lunch: DiningItem
    dinner: DiningItem


class AccommodationItem(CamelModel):
    """Lodging for one night."""

    name: str
    type: str
    rating: float = Field(..., ge=0, le=5)
    price: str
    maps_url: str
    booking_url: str


class DayPlan(CamelModel):
    """Plan for a single day - every slot is always populated."""

    day: int = Field(..., ge=1)
    morning: Activity
    afternoon: Activity
    evening: Activity
    dining: Dining
    accommodation: AccommodationItem


class Itinerary(CamelModel):
    """Complete itinerary, identical in shape whether drafted or synthesized."""

    destination: str
    duration: int = Field(..., ge=1)
    budget: str
    theme: str
    dietary: str
    total_cost: str
    summary: str
    days: list[DayPlan]
