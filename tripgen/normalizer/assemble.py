"""Assemble day plans from three free-text fragments.

Drafted and fallback itineraries both go through ``assemble_day_plan``, so the
two paths always produce the same shape. Ratings, review counts and hotel
prices are synthetic; names, costs and descriptions come from the text.
"""

import math
import random
import re
from dataclasses import dataclass
from urllib.parse import quote_plus

from tripgen.models.itinerary import AccommodationItem, Activity, DayPlan, Dining, DiningItem
from tripgen.validation import sanitize_string

ACTIVITY_NAME_MAX = 60
DINING_NAME_MAX = 50
DEFAULT_COST = "$50"

HOTEL_TYPES = ("Luxury Resort", "Boutique Hotel", "City Hotel", "Beach Resort", "Mountain Lodge")

# (slot label, time of day)
MORNING = ("Morning", "9:00 AM")
AFTERNOON = ("Afternoon", "2:00 PM")
EVENING = ("Evening", "7:00 PM")

BOOKING_URL = "https://www.booking.com"

_BOLD = re.compile(r"\*\*(.*?)\*\*")
_NAME_DELIMITER = re.compile(r"\.| - ")
_LEADING_FILLER = re.compile(r"^(After|Time|For|Let's|Good morning|Today).*?at\s+", re.IGNORECASE)
_COST = re.compile(r"\$\d+(-\d+)?")


@dataclass(frozen=True)
class DayContext:
    """Request-level values shared by every slot of a day."""

    destination: str
    dietary: str
    rng: random.Random


def derive_name(text: str, max_length: int, fallback: str) -> str:
    """Pick a display name out of free text.

    Prefers the first ``**bold**`` span, else the text up to the first period
    or " - ". Filler openers ("Today we head to ... at") are dropped.
    """
    match = _BOLD.search(text)
    if match and match.group(1).strip():
        name = match.group(1)
    else:
        name = _NAME_DELIMITER.split(text, maxsplit=1)[0]

    name = name.replace("**", "")
    name = _LEADING_FILLER.sub("", name, count=1)
    name = name.strip()[:max_length].strip()
    return name or fallback


def extract_cost(text: str) -> str:
    """First "$N" or "$N-M" in the text, else the default cost."""
    match = _COST.search(text)
    return match.group(0) if match else DEFAULT_COST


def synthetic_rating(rng: random.Random, low: float) -> float:
    """One-decimal rating in [low, 5.0)."""
    return math.floor((low + rng.random() * (5.0 - low)) * 10) / 10


def maps_search_url(name: str, destination: str) -> str:
    return f"https://www.google.com/maps/search/?api=1&query={quote_plus(f'{name}, {destination}')}"


def build_activity(text: str, slot: tuple[str, str], ctx: DayContext) -> Activity:
    label, time = slot
    name = derive_name(text, ACTIVITY_NAME_MAX, f"{label} Activity")
    return Activity(
        name=name,
        type=label,
        time=time,
        cost=extract_cost(text),
        rating=synthetic_rating(ctx.rng, 4.5),
        address=f"City Center, {ctx.destination}",
        maps_url=maps_search_url(name, ctx.destination),
        booking_url=BOOKING_URL,
        description=sanitize_string(text),
        reviews=ctx.rng.randint(50, 549),
        dietary=ctx.dietary,
    )


def build_dining(text: str, meal: str, ctx: DayContext) -> DiningItem:
    name = derive_name(text, DINING_NAME_MAX, f"{meal} Restaurant")
    return DiningItem(
        name=name,
        type=f"{meal} Restaurant",
        rating=synthetic_rating(ctx.rng, 4.0),
        reviews=ctx.rng.randint(100, 899),
        dietary=ctx.dietary,
        price=extract_cost(text),
        maps_url=maps_search_url(name, ctx.destination),
        booking_url=BOOKING_URL,
    )


def build_accommodation(ctx: DayContext) -> AccommodationItem:
    hotel_type = ctx.rng.choice(HOTEL_TYPES)
    name = f"{ctx.destination} {hotel_type}"
    return AccommodationItem(
        name=name,
        type=hotel_type,
        rating=synthetic_rating(ctx.rng, 4.2),
        price=f"${ctx.rng.randint(150, 449)}/night",
        maps_url=maps_search_url(name, ctx.destination),
        booking_url=f"{BOOKING_URL}/searchresults.html?ss={quote_plus(ctx.destination)}",
    )


def assemble_day_plan(
    day: int, brunch: str, activity: str, dinner: str, ctx: DayContext
) -> DayPlan:
    """Build a complete DayPlan from the day's three text fragments.

    Each fragment feeds one activity slot and one meal independently.
    """
    return DayPlan(
        day=day,
        morning=build_activity(brunch, MORNING, ctx),
        afternoon=build_activity(activity, AFTERNOON, ctx),
        evening=build_activity(dinner, EVENING, ctx),
        dining=Dining(
            breakfast=build_dining(brunch, "Breakfast", ctx),
            lunch=build_dining(activity, "Lunch", ctx),
            dinner=build_dining(dinner, "Dinner", ctx),
        ),
        accommodation=build_accommodation(ctx),
    )
