"""
Record Loader - Listings from '#'-delimited text files

Record formats (one per line, type prefix case-insensitive):
    REALESTATE#city#price#sqm#rooms#category
    PANEL#city#price#sqm#rooms#category#floor#insulated

A line that cannot be parsed is logged, recorded as a rejection and
skipped. It never aborts the rest of the batch.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Final, Optional, Union

from core.errors import (
    InputNotFoundError,
    InputReadError,
    MalformedRecordError,
    UnknownRecordTypeError,
)
from core.store import ListingStore
from core.valuation.models import Category, Listing, PrefabListing, to_decimal


logger = logging.getLogger(__name__)


# =============================================================================
# Record Layout
# =============================================================================

FIELD_SEPARATOR: Final[str] = "#"

STANDARD_RECORD_TYPE: Final[str] = "REALESTATE"
PREFAB_RECORD_TYPE: Final[str] = "PANEL"

STANDARD_FIELD_COUNT: Final[int] = 6
PREFAB_FIELD_COUNT: Final[int] = 8

INSULATED_VALUE: Final[str] = "yes"

# Prices and areas must stay below 10**20 so adjusted prices fit the
# default 28-digit decimal context
MAX_AMOUNT_DIGITS: Final[int] = 20

REJECTION_CODES: Final[dict[str, str]] = {
    "UNKNOWN_RECORD_TYPE": "Record type is not REALESTATE or PANEL",
    "WRONG_FIELD_COUNT": "Record has the wrong number of fields",
    "MISSING_CITY": "Required field 'city' not provided",
    "INVALID_PRICE": "Price is not a non-negative number below 10^20",
    "INVALID_AREA": "Area is not a non-negative number below 10^20",
    "INVALID_ROOM_COUNT": "Room count is not a non-negative integer",
    "UNMAPPED_CATEGORY": "Category could not be normalised to valid enum",
    "INVALID_FLOOR": "Floor is not an integer",
}


# =============================================================================
# Parsing
# =============================================================================

def _parse_amount(raw: str, code: str, line: str):
    try:
        value = to_decimal(raw)
    except (TypeError, ValueError):
        raise MalformedRecordError(f"Not a number: {raw!r}", line, code) from None
    if value < 0:
        raise MalformedRecordError(f"Negative value: {raw!r}", line, code)
    if value.adjusted() >= MAX_AMOUNT_DIGITS:
        raise MalformedRecordError(f"Value too large: {raw!r}", line, code)
    return value


def _parse_int(raw: str, code: str, line: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise MalformedRecordError(f"Not an integer: {raw!r}", line, code) from None


def parse_record(line: str) -> Optional[Listing]:
    """
    Parse one input line into a listing.

    Args:
        line: Raw line from the input file

    Returns:
        Listing or PrefabListing, or None for a blank line

    Raises:
        UnknownRecordTypeError: If the type prefix is not recognised
        MalformedRecordError: If any field cannot be parsed
    """
    line = line.strip()
    if not line:
        return None

    parts = [part.strip() for part in line.split(FIELD_SEPARATOR)]
    record_type = parts[0].upper()

    if record_type == STANDARD_RECORD_TYPE:
        expected = STANDARD_FIELD_COUNT
    elif record_type == PREFAB_RECORD_TYPE:
        expected = PREFAB_FIELD_COUNT
    else:
        raise UnknownRecordTypeError(f"Unknown record type: {parts[0]!r}", line)

    if len(parts) != expected:
        raise MalformedRecordError(
            f"{record_type} record needs {expected} fields, got {len(parts)}",
            line,
            "WRONG_FIELD_COUNT",
        )

    city = parts[1]
    if not city:
        raise MalformedRecordError("City is empty", line, "MISSING_CITY")

    price = _parse_amount(parts[2], "INVALID_PRICE", line)
    sqm = _parse_amount(parts[3], "INVALID_AREA", line)

    rooms = _parse_int(parts[4], "INVALID_ROOM_COUNT", line)
    if rooms < 0:
        raise MalformedRecordError(
            f"Negative room count: {rooms}", line, "INVALID_ROOM_COUNT"
        )

    category = Category.from_string(parts[5])
    if category is None:
        raise MalformedRecordError(
            f"Unknown category: {parts[5]!r}", line, "UNMAPPED_CATEGORY"
        )

    if record_type == STANDARD_RECORD_TYPE:
        return Listing(city, price, sqm, rooms, category)

    floor = _parse_int(parts[6], "INVALID_FLOOR", line)
    is_insulated = parts[7].lower() == INSULATED_VALUE
    return PrefabListing(city, price, sqm, rooms, category, floor, is_insulated)


# =============================================================================
# Rejection Tracking
# =============================================================================

@dataclass(frozen=True)
class RejectionRecord:
    """
    Record of an input line that was skipped.

    Used for data quality reporting after a load.
    """

    line_number: int
    rejection_code: str
    rejection_reason: str
    detail: str
    raw_line: str

    @classmethod
    def from_error(cls, line_number: int, error: MalformedRecordError) -> "RejectionRecord":
        """Create a rejection record from a parse error."""
        return cls(
            line_number=line_number,
            rejection_code=error.code,
            rejection_reason=REJECTION_CODES.get(error.code, f"Unknown code: {error.code}"),
            detail=str(error),
            raw_line=error.line,
        )


@dataclass
class LoadResult:
    """Outcome of loading one input file."""

    source: Path
    lines_read: int = 0
    listings_added: int = 0
    duplicates: int = 0
    rejections: list[RejectionRecord] = field(default_factory=list)

    @property
    def rejected(self) -> int:
        return len(self.rejections)

    def rejections_by_code(self) -> dict[str, int]:
        """Count rejections per rejection code."""
        counts: dict[str, int] = {}
        for r in self.rejections:
            counts[r.rejection_code] = counts.get(r.rejection_code, 0) + 1
        return counts


# =============================================================================
# Loader
# =============================================================================

class RecordLoader:
    """
    Loads listing records from a text file into a store.

    Per-line failures are isolated: they are logged, recorded on the
    LoadResult and skipped. Whole-file failures raise.
    """

    def __init__(self, encoding: str = "utf-8"):
        self._encoding = encoding

    def load_file(self, path: Union[str, Path], store: ListingStore) -> LoadResult:
        """
        Load every record in a file into the store.

        Args:
            path: Input file path
            store: Store that receives parsed listings

        Returns:
            LoadResult with counts and rejections

        Raises:
            InputNotFoundError: If the file does not exist
            InputReadError: If the file cannot be read
        """
        path = Path(path)
        result = LoadResult(source=path)

        try:
            with path.open("r", encoding=self._encoding) as f:
                for line_number, line in enumerate(f, start=1):
                    result.lines_read += 1
                    self._load_line(line_number, line, store, result)
        except FileNotFoundError:
            raise InputNotFoundError(path) from None
        except (OSError, UnicodeDecodeError) as e:
            raise InputReadError(path, str(e)) from e

        logger.info(
            "Successfully loaded %d properties from %s (%d duplicates, %d rejected)",
            result.listings_added,
            path,
            result.duplicates,
            result.rejected,
        )
        return result

    def _load_line(
        self,
        line_number: int,
        line: str,
        store: ListingStore,
        result: LoadResult,
    ) -> None:
        try:
            listing = parse_record(line)
        except MalformedRecordError as e:
            record = RejectionRecord.from_error(line_number, e)
            result.rejections.append(record)
            logger.warning(
                "Skipped line %d of %s: %s (%s)",
                line_number,
                result.source,
                record.rejection_code,
                record.detail,
            )
            return

        if listing is None:
            return

        if store.add(listing):
            result.listings_added += 1
        else:
            result.duplicates += 1
