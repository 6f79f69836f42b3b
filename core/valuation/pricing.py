"""
Valuation functions for listings.

Implements:
- Location adjustment (city multipliers)
- Prefab adjustments (floor level, insulation)
- Final price with a single round-half-up at the end
- Per-room metrics
- Discounts

Every function here is pure except apply_discount, which is the only
operation that changes a listing's base price.
"""

import logging
import unicodedata
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

from utils.formatting import format_number

from core.errors import InvalidDiscountError
from .models import Listing, ListingKind, Number, to_decimal


logger = logging.getLogger(__name__)


# =============================================================================
# Configuration Constants
# =============================================================================

# City multipliers, keyed by normalised city name
LOCATION_MULTIPLIERS = {
    "budapest": Decimal("1.30"),
    "debrecen": Decimal("1.20"),
    "nyiregyhaza": Decimal("1.15"),
}
DEFAULT_LOCATION_MULTIPLIER = Decimal("1")

# Prefab floor adjustments
LOW_FLOOR_RANGE = (0, 2)
LOW_FLOOR_MULTIPLIER = Decimal("1.05")
TOP_FLOOR = 10
TOP_FLOOR_MULTIPLIER = Decimal("0.95")

# Prefab insulation adjustment
INSULATION_MULTIPLIER = Decimal("1.05")

MAX_DISCOUNT_PERCENT = Decimal("100")


# =============================================================================
# Price Adjustments
# =============================================================================

def normalise_location(location: str) -> str:
    """Case-fold a city name and strip diacritics and surrounding whitespace."""
    decomposed = unicodedata.normalize("NFKD", location.strip())
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.casefold()


def location_multiplier(location: str) -> Decimal:
    """Return the price multiplier for a city (1 for unlisted cities)."""
    return LOCATION_MULTIPLIERS.get(
        normalise_location(location), DEFAULT_LOCATION_MULTIPLIER
    )


def _floor_multiplier(floor: int) -> Decimal:
    low, high = LOW_FLOOR_RANGE
    if low <= floor <= high:
        return LOW_FLOOR_MULTIPLIER
    if floor == TOP_FLOOR:
        return TOP_FLOOR_MULTIPLIER
    return Decimal("1")


def adjusted_price(listing: Listing) -> Decimal:
    """
    Calculate the unrounded adjusted price of a listing.

    Adjustments compose multiplicatively in order:
    1. Location multiplier (all listings)
    2. Floor multiplier (prefab only)
    3. Insulation multiplier (prefab only)

    Args:
        listing: Listing to value

    Returns:
        Exact adjusted price
    """
    price = listing.base_price * location_multiplier(listing.location)

    if listing.kind is ListingKind.PREFAB:
        price *= _floor_multiplier(listing.floor)
        if listing.is_insulated:
            price *= INSULATION_MULTIPLIER

    return price


def final_price(listing: Listing) -> int:
    """
    Calculate the final price of a listing, rounded half-up to an integer.

    Does not modify the listing; repeated calls return the same value.
    """
    price = int(adjusted_price(listing).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    logger.debug("Final price for %s: %d", listing.location, price)
    return price


def same_final_price(first: Optional[Listing], second: Optional[Listing]) -> bool:
    """Whether two listings have equal final prices (False if either is None)."""
    if first is None or second is None:
        return False
    return final_price(first) == final_price(second)


# =============================================================================
# Per-Room Metrics
# =============================================================================

def average_area_per_room(listing: Listing) -> Decimal:
    """Average square meters per room, or 0 when there are no rooms."""
    if listing.room_count == 0:
        return Decimal("0")
    return listing.area_sqm / listing.room_count


def room_price(listing: Listing) -> Decimal:
    """
    Base price per room of a prefab listing.

    Uses the base price rather than the final price, so listings in
    different cities can be compared before location premiums.

    Args:
        listing: A prefab listing

    Returns:
        Base price divided by room count, or 0 when there are no rooms

    Raises:
        TypeError: If the listing is not a prefab listing
    """
    if listing.kind is not ListingKind.PREFAB:
        raise TypeError("room_price is only defined for prefab listings")
    if listing.room_count == 0:
        return Decimal("0")
    return listing.base_price / listing.room_count


# =============================================================================
# Discounts
# =============================================================================

def apply_discount(listing: Listing, percentage: Number) -> None:
    """
    Reduce a listing's base price by a percentage, in place.

    Args:
        listing: Listing to discount
        percentage: Discount between 0 and 100 inclusive

    Raises:
        InvalidDiscountError: If percentage is outside [0, 100]
    """
    try:
        percent = to_decimal(percentage)
    except (TypeError, ValueError):
        raise InvalidDiscountError(percentage) from None

    if percent < 0 or percent > MAX_DISCOUNT_PERCENT:
        raise InvalidDiscountError(percentage)

    listing.base_price = listing.base_price - listing.base_price * percent / 100
    logger.info(
        "Applied %s%% discount to %s listing, new base price %s",
        format_number(percent),
        listing.location,
        format_number(listing.base_price),
    )


# =============================================================================
# Description
# =============================================================================

def describe(listing: Listing) -> str:
    """Return a one-line description of a listing."""
    text = (
        f"Listing(location='{listing.location}', "
        f"base_price={format_number(listing.base_price)}, "
        f"area_sqm={format_number(listing.area_sqm)}, "
        f"room_count={listing.room_count}, "
        f"category={listing.category.name})"
    )
    if listing.kind is ListingKind.PREFAB:
        text += (
            f" is a Panel with floor={listing.floor}, "
            f"is_insulated={listing.is_insulated}"
        )
    return text
