"""
Tests for report rendering and writing

Tests covering:
1. Exact text layout of the five sections
2. "None found" variants of sections 3 and 5
3. Report files written, including missing parent directories
4. Unwritable destinations raise OutputWriteError
5. PDF mirror produces a PDF document
"""

import pytest
from pathlib import Path
import sys

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.analytics import AnalyticsEngine
from core.errors import OutputWriteError
from core.store import ListingStore
from core.valuation import Category, Listing, PrefabListing
from reporting import (
    NO_AFFORDABLE_FLATS_MESSAGE,
    PdfReportGenerator,
    render_report,
    write_pdf_report,
    write_text_report,
)


EXPECTED_REPORT = """\
===== REAL ESTATE AGENT ANALYSIS =====

1. Average unit price: 110000.00 Ft
2. Cheapest property total price: 80000 Ft
3. Most expensive Budapest property - avg sqm per room: 20.00 m²
4. Total price of all properties: 390000 Ft

5. Flat properties with price <= average price (130000.00 Ft):
   - Listing(location='Budapest', base_price=100000, area_sqm=80, room_count=4, category=FLAT)
   - Listing(location='Szeged', base_price=80000, area_sqm=50, room_count=2, category=FLAT)
"""


@pytest.fixture
def report():
    """Report over three listings with final prices 130000, 180000, 80000."""
    store = ListingStore([
        Listing("Budapest", 100000, 80, 4, Category.FLAT),
        PrefabListing("Debrecen", 150000, 60, 3, Category.FAMILY_HOUSE, 5, False),
        Listing("Szeged", 80000, 50, 2, Category.FLAT),
    ])
    return AnalyticsEngine().run(store)


class TestRenderReport:

    def test_full_layout(self, report):
        assert render_report(report) == EXPECTED_REPORT

    def test_no_target_city_listing(self):
        store = ListingStore([Listing("Szeged", 80000, 50, 2, Category.FLAT)])

        text = render_report(AnalyticsEngine().run(store))

        assert "3. No properties found in Budapest\n" in text

    def test_no_affordable_flats(self):
        store = ListingStore([Listing("Szeged", 80000, 50, 2, Category.FARM)])

        text = render_report(AnalyticsEngine().run(store))

        assert text.endswith(NO_AFFORDABLE_FLATS_MESSAGE + "\n")

    def test_prefab_flat_described_with_panel_fields(self):
        store = ListingStore([PrefabListing("Eger", 90000, 45, 2, Category.FLAT, 10, True)])

        text = render_report(AnalyticsEngine().run(store))

        assert "is a Panel with floor=10, is_insulated=True" in text

    def test_fractional_average(self):
        store = ListingStore([
            Listing("Szeged", 100000, 50, 2, Category.FLAT),
            Listing("Szeged", 100001, 50, 2, Category.FLAT),
        ])

        text = render_report(AnalyticsEngine().run(store))

        assert "1. Average unit price: 100000.50 Ft" in text


class TestWriteTextReport:

    def test_writes_file(self, tmp_path, report):
        path = tmp_path / "outputRealEstate.txt"

        result = write_text_report(render_report(report), path)

        assert result.path == path
        assert path.read_text(encoding="utf-8") == EXPECTED_REPORT
        assert result.bytes_written == len(EXPECTED_REPORT.encode("utf-8"))

    def test_creates_parent_directories(self, tmp_path):
        path = tmp_path / "reports" / "2026" / "out.txt"

        write_text_report("hello\n", path)

        assert path.read_text(encoding="utf-8") == "hello\n"

    def test_unwritable_destination(self, tmp_path):
        with pytest.raises(OutputWriteError) as exc_info:
            write_text_report("hello\n", tmp_path)

        assert exc_info.value.path == tmp_path


class TestPdfReport:

    def test_generates_pdf_bytes(self, report):
        data = PdfReportGenerator().generate_to_buffer(render_report(report))

        assert data.startswith(b"%PDF")

    def test_writes_pdf_file(self, tmp_path, report):
        path = tmp_path / "report.pdf"

        result = write_pdf_report(render_report(report), path)

        assert path.exists()
        assert result.bytes_written == path.stat().st_size

    def test_unwritable_destination(self, tmp_path, report):
        with pytest.raises(OutputWriteError):
            write_pdf_report(render_report(report), tmp_path)
