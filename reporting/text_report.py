"""
Plain-text analysis report.

Renders an AnalyticsReport as the numbered five-section text report and
persists it to disk.

Output Structure:
    ===== REAL ESTATE AGENT ANALYSIS =====

    1. Average unit price
    2. Cheapest property total price
    3. Most expensive target-city property - avg sqm per room
    4. Total price of all properties

    5. Flat properties with price <= average price
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from core.analytics import AnalyticsReport
from core.errors import OutputWriteError
from core.valuation.pricing import describe
from utils.formatting import format_area, format_currency


logger = logging.getLogger(__name__)


REPORT_HEADER = "===== REAL ESTATE AGENT ANALYSIS ====="
NO_AFFORDABLE_FLATS_MESSAGE = "   No flats found within average price."


@dataclass
class ReportSuccess:
    """Returned when a report file is written."""
    path: Path
    bytes_written: int


def render_report(report: AnalyticsReport) -> str:
    """
    Render the five report facts as text.

    Args:
        report: Facts from one analytics run

    Returns:
        Report text, newline-terminated
    """
    lines = [REPORT_HEADER, ""]

    lines.append(
        f"1. Average unit price: {format_currency(report.average_base_price)}"
    )

    if report.cheapest is not None:
        lines.append(
            f"2. Cheapest property total price: {format_currency(report.cheapest.final_price)}"
        )
    else:
        lines.append("2. No cheapest property available")

    if report.target_city_top is not None:
        lines.append(
            f"3. Most expensive {report.target_city} property - avg sqm per room: "
            f"{format_area(report.target_city_area_per_room)}"
        )
    else:
        lines.append(f"3. No properties found in {report.target_city}")

    lines.append(
        f"4. Total price of all properties: {format_currency(report.total_valuation)}"
    )

    lines.append("")
    lines.append(
        "5. Flat properties with price <= average price "
        f"({format_currency(report.average_final_price)}):"
    )
    if report.affordable_flats:
        for priced in report.affordable_flats:
            lines.append(f"   - {describe(priced.listing)}")
    else:
        lines.append(NO_AFFORDABLE_FLATS_MESSAGE)

    return "\n".join(lines) + "\n"


def write_text_report(text: str, path: Union[str, Path]) -> ReportSuccess:
    """
    Write report text to a file, creating parent directories.

    Raises:
        OutputWriteError: If the file cannot be written
    """
    path = Path(path)
    data = text.encode("utf-8")
    try:
        if path.parent != Path("."):
            path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
    except OSError as e:
        logger.error("Error writing to output file %s: %s", path, e)
        raise OutputWriteError(path, str(e)) from e

    logger.info("Report written to %s", path)
    return ReportSuccess(path=path, bytes_written=len(data))
