"""
Data models for the valuation model.

Defines the listing variants (standard and prefab panel) and the
classifications used to value them.
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import ClassVar, Optional, Tuple, Union


Number = Union[int, float, str, Decimal]


class Category(Enum):
    """
    Property category.

    Parsed case-insensitively; separators between words are ignored,
    so "FAMILYHOUSE", "family_house" and "family house" are equivalent.
    """
    FAMILY_HOUSE = "family_house"
    FLAT = "flat"
    FARM = "farm"

    @classmethod
    def from_string(cls, value: str) -> Optional["Category"]:
        """Convert string to Category, or None if unrecognised."""
        compact = "".join(ch for ch in value.lower() if ch.isalnum())
        for member in cls:
            if member.value.replace("_", "") == compact:
                return member
        return None


class ListingKind(Enum):
    """Variant tag the valuation functions dispatch on."""
    STANDARD = "standard"
    PREFAB = "prefab"


def to_decimal(value: Number) -> Decimal:
    """Coerce a numeric input to Decimal without binary float artefacts."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise TypeError("Boolean is not a valid numeric value")
    try:
        result = Decimal(str(value).strip())
    except InvalidOperation:
        raise ValueError(f"Not a valid number: {value!r}") from None
    if not result.is_finite():
        raise ValueError(f"Not a finite number: {value!r}")
    return result


@dataclass
class Listing:
    """
    A real estate listing.

    Attributes are plain and mutable, but nothing stored here is ever
    derived from a valuation: final prices are computed on demand.
    """
    kind: ClassVar[ListingKind] = ListingKind.STANDARD

    location: str
    base_price: Decimal
    area_sqm: Decimal
    room_count: int
    category: Category

    def __post_init__(self):
        """Normalise numeric fields and validate room count."""
        self.base_price = to_decimal(self.base_price)
        self.area_sqm = to_decimal(self.area_sqm)
        if self.room_count < 0:
            raise ValueError("room_count must be non-negative")

    @property
    def sort_key(self) -> Tuple:
        """
        Total ordering and equality key used by the listing store.

        Base attributes first; the variant tag and prefab attributes
        only separate listings whose base attributes coincide.
        """
        return (
            self.location,
            self.base_price,
            self.area_sqm,
            self.room_count,
            self.category.value,
            self.kind.value,
            getattr(self, "floor", 0),
            getattr(self, "is_insulated", False),
        )


@dataclass
class PrefabListing(Listing):
    """
    A listing in a prefabricated concrete panel building.

    Floor level and insulation add their own price adjustments on top
    of the location adjustment every listing receives.
    """
    kind: ClassVar[ListingKind] = ListingKind.PREFAB

    floor: int
    is_insulated: bool
