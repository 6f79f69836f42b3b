"""
Utility modules for the real estate agent.
"""

from .formatting import format_area, format_currency, format_number
from .config import Config

__all__ = ["format_area", "format_currency", "format_number", "Config"]
