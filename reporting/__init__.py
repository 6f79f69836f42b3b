"""
Reporting module for the real estate agent.

Renders analytics reports as text, writes them to disk and optionally
mirrors them to PDF.

Usage:
    from core import AnalyticsEngine, ListingStore
    from reporting import render_report, write_text_report

    report = AnalyticsEngine().run(store)
    text = render_report(report)
    write_text_report(text, "outputRealEstate.txt")
"""

from .text_report import (
    NO_AFFORDABLE_FLATS_MESSAGE,
    REPORT_HEADER,
    ReportSuccess,
    render_report,
    write_text_report,
)
from .pdf_report import PdfReportGenerator, write_pdf_report

__all__ = [
    # Text report
    "NO_AFFORDABLE_FLATS_MESSAGE",
    "REPORT_HEADER",
    "ReportSuccess",
    "render_report",
    "write_text_report",
    # PDF report
    "PdfReportGenerator",
    "write_pdf_report",
]
