"""Budget buckets and total-cost estimation."""

import random

# label -> (min, max) in dollars for a 3-day reference trip
BUDGET_RANGES: dict[str, tuple[int, int]] = {
    "Under $500": (300, 500),
    "$500-$1000": (500, 1000),
    "$1000-$2000": (1000, 2000),
    "$2000+": (2000, 5000),
}
DEFAULT_RANGE = (500, 1000)
REFERENCE_DAYS = 3


def budget_label(budget: int | str) -> str:
    """Map a dollar amount to its bucket label; labels pass through."""
    if isinstance(budget, str):
        return budget
    if budget < 500:
        return "Under $500"
    if budget < 1000:
        return "$500-$1000"
    if budget < 2000:
        return "$1000-$2000"
    return "$2000+"


def format_budget(budget: int | str) -> str:
    """Display string for the requested budget."""
    if isinstance(budget, str):
        return budget
    return f"${budget:,}"


def calculate_total_cost(budget: int | str, duration: int, rng: random.Random) -> str:
    """Estimate a trip total as a "$N" string.

    Draws uniformly inside the bucket range, then scales by duration / 3.
    Unknown labels use the $500-$1000 range.
    """
    low, high = BUDGET_RANGES.get(budget_label(budget), DEFAULT_RANGE)
    base = rng.uniform(low, high)
    return f"${round(base * (duration / REFERENCE_DAYS))}"
