"""
Configuration management.
"""

import os
from dataclasses import dataclass, field
from typing import Optional


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes")


@dataclass
class Config:
    """
    Application configuration.

    Loads from environment variables with sensible defaults.
    """

    # Files
    input_file: str = field(
        default_factory=lambda: os.getenv("REALESTATE_INPUT_FILE", "realestates.txt")
    )
    output_file: str = field(
        default_factory=lambda: os.getenv("REALESTATE_OUTPUT_FILE", "outputRealEstate.txt")
    )
    pdf_file: Optional[str] = field(
        default_factory=lambda: os.getenv("REALESTATE_PDF_FILE") or None
    )

    # Logging
    log_file: str = field(
        default_factory=lambda: os.getenv("REALESTATE_LOG_FILE", "realEstateApp.log")
    )
    log_level: str = field(
        default_factory=lambda: os.getenv("REALESTATE_LOG_LEVEL", "INFO").upper()
    )

    # Analytics
    target_city: str = field(
        default_factory=lambda: os.getenv("REALESTATE_TARGET_CITY", "Budapest")
    )

    # Data
    use_sample_data: bool = field(
        default_factory=lambda: _env_flag("REALESTATE_USE_SAMPLE_DATA")
    )

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from environment."""
        return cls()

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "input_file": self.input_file,
            "output_file": self.output_file,
            "pdf_file": self.pdf_file,
            "log_file": self.log_file,
            "log_level": self.log_level,
            "target_city": self.target_city,
            "use_sample_data": self.use_sample_data,
        }
