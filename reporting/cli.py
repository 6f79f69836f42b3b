#!/usr/bin/env python3
"""
CLI for the real estate analysis report.

Usage:
    python -m reporting.cli

Loads listings from the configured input file, prints the analysis
report and writes it to the configured output file. File names and
options come from environment variables (see utils.config.Config).

Examples:
    # Analyse realestates.txt into outputRealEstate.txt
    python -m reporting.cli

    # Run against the built-in sample listings
    REALESTATE_USE_SAMPLE_DATA=true python -m reporting.cli
"""

import argparse
import logging
import sys
from typing import List, Optional

from core.analytics import EMPTY_COLLECTION_MESSAGE, AnalyticsEngine
from core.errors import InputNotFoundError, InputReadError, OutputWriteError
from core.ingestion import RecordLoader, load_sample_data
from core.store import ListingStore
from utils.config import Config

from .pdf_report import write_pdf_report
from .text_report import render_report, write_text_report


logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(config: Config) -> None:
    """Send logs to the configured log file, and warnings to stderr."""
    level = getattr(logging, config.log_level, logging.INFO)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(logging.WARNING)
    handlers: List[logging.Handler] = [console]

    try:
        file_handler = logging.FileHandler(config.log_file, encoding="utf-8")
    except OSError as e:
        print(f"Warning: cannot open log file {config.log_file}: {e}", file=sys.stderr)
    else:
        file_handler.setLevel(level)
        handlers.append(file_handler)

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers, force=True)


def load_listings(config: Config, store: ListingStore) -> None:
    """
    Fill the store from sample data or the configured input file.

    A missing or unreadable input file is reported and leaves the store
    as it was; it never stops the run.
    """
    if config.use_sample_data:
        added = load_sample_data(store)
        print(f"Sample data loaded: {added} properties.")
        return

    try:
        result = RecordLoader().load_file(config.input_file, store)
    except InputNotFoundError as e:
        logger.warning("Input file not found: %s", e.path)
        print(f"File not found: {e.path}", file=sys.stderr)
        print(
            "Please ensure the file exists or set REALESTATE_USE_SAMPLE_DATA=true "
            "to use sample data.",
            file=sys.stderr,
        )
        return
    except InputReadError as e:
        logger.error("Error reading input file %s: %s", e.path, e.reason)
        print(f"Error reading file: {e.reason}", file=sys.stderr)
        return

    print(f"Successfully loaded {result.listings_added} properties from file.")
    if result.rejected:
        print(
            f"Skipped {result.rejected} malformed line(s); see {config.log_file} for details.",
            file=sys.stderr,
        )


def run(config: Config) -> int:
    """
    Load, analyse and report.

    Returns:
        Process exit status (0 success, 1 report could not be written)
    """
    store = ListingStore()
    load_listings(config, store)

    report = AnalyticsEngine(target_city=config.target_city).run(store)
    if report is None:
        print(EMPTY_COLLECTION_MESSAGE)
        return 0

    text = render_report(report)
    print(text, end="")

    try:
        write_text_report(text, config.output_file)
        if config.pdf_file:
            write_pdf_report(text, config.pdf_file)
    except OutputWriteError as e:
        print(f"Error writing to output file: {e.reason}", file=sys.stderr)
        return 1

    print(f"\n===== Results written to {config.output_file} =====")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Real Estate Agent - listing valuation and analysis report",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Environment:
    REALESTATE_INPUT_FILE       input records (default: realestates.txt)
    REALESTATE_OUTPUT_FILE      text report (default: outputRealEstate.txt)
    REALESTATE_PDF_FILE         optional PDF copy of the report
    REALESTATE_LOG_FILE         log file (default: realEstateApp.log)
    REALESTATE_LOG_LEVEL        log level (default: INFO)
    REALESTATE_TARGET_CITY      city for section 3 (default: Budapest)
    REALESTATE_USE_SAMPLE_DATA  analyse built-in sample listings (default: false)
        """,
    )
    parser.parse_args(argv)

    config = Config.load()
    configure_logging(config)
    logger.info("Starting analysis with config %s", config.to_dict())

    return run(config)


if __name__ == "__main__":
    sys.exit(main())
