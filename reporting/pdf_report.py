"""
PDF mirror of the analysis report.

Lays the rendered text report out as a single-column A4 document.
Uses ReportLab, which needs no browser or rendering engine.
"""

import logging
from io import BytesIO
from pathlib import Path
from typing import Union
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.enums import TA_LEFT
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer

from core.errors import OutputWriteError

from .text_report import REPORT_HEADER, ReportSuccess


logger = logging.getLogger(__name__)


def get_report_styles():
    """Create paragraph styles for the PDF report."""
    styles = getSampleStyleSheet()

    styles.add(ParagraphStyle(
        name='ReportTitle',
        parent=styles['Normal'],
        fontSize=16,
        leading=20,
        textColor=colors.Color(0.2, 0.2, 0.22),
        alignment=TA_LEFT,
        fontName='Helvetica-Bold',
        spaceAfter=8*mm,
    ))

    styles.add(ParagraphStyle(
        name='ReportLine',
        parent=styles['Normal'],
        fontSize=10,
        leading=14,
        textColor=colors.Color(0.1, 0.1, 0.1),
        alignment=TA_LEFT,
        fontName='Helvetica',
    ))

    styles.add(ParagraphStyle(
        name='ReportItem',
        parent=styles['ReportLine'],
        fontSize=9,
        leading=12,
        leftIndent=6*mm,
    ))

    return styles


class PdfReportGenerator:
    """Builds the PDF mirror of a text report."""

    MARGIN = 18*mm

    def __init__(self):
        """Initialize the report generator with styles."""
        self.styles = get_report_styles()

    def generate_to_buffer(self, text: str) -> bytes:
        """Generate PDF and return as bytes."""
        buffer = BytesIO()
        self._build_document(text, buffer)
        return buffer.getvalue()

    def generate_report(self, text: str, path: Union[str, Path]) -> ReportSuccess:
        """
        Generate the PDF and write it to a file.

        Raises:
            OutputWriteError: If the PDF cannot be written
        """
        path = Path(path)
        data = self.generate_to_buffer(text)
        try:
            if path.parent != Path("."):
                path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(data)
        except OSError as e:
            logger.error("Error writing PDF report %s: %s", path, e)
            raise OutputWriteError(path, str(e)) from e

        logger.info("PDF report written to %s", path)
        return ReportSuccess(path=path, bytes_written=len(data))

    def _build_document(self, text: str, buffer: BytesIO):
        doc = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            leftMargin=self.MARGIN,
            rightMargin=self.MARGIN,
            topMargin=self.MARGIN,
            bottomMargin=self.MARGIN,
            title="Real Estate Agent Analysis",
            author="Real Estate Agent",
        )

        story = []
        for line in text.splitlines():
            if line == REPORT_HEADER:
                story.append(Paragraph(escape(line.strip("= ")), self.styles['ReportTitle']))
            elif not line.strip():
                story.append(Spacer(1, 4*mm))
            elif line.startswith("   "):
                story.append(Paragraph(escape(line.strip()), self.styles['ReportItem']))
            else:
                story.append(Paragraph(escape(line), self.styles['ReportLine']))

        doc.build(story)


def write_pdf_report(text: str, path: Union[str, Path]) -> ReportSuccess:
    """Write the PDF mirror of a text report."""
    generator = PdfReportGenerator()
    return generator.generate_report(text, path)
