"""
Error taxonomy for the real estate agent.

Per-record failures (MalformedRecordError, UnknownRecordTypeError) are
isolated by the loader and never abort a batch. Whole-phase failures
(InputReadError, OutputWriteError) are reported once by the caller.
"""

from pathlib import Path
from typing import Optional, Union


class RealEstateError(Exception):
    """Base class for all errors raised by this package."""


class InputNotFoundError(RealEstateError):
    """Raised when the listings input file does not exist."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        super().__init__(f"File not found: {self.path}")


class InputReadError(RealEstateError):
    """Raised when the listings input file exists but cannot be read."""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Error reading file {self.path}: {reason}")


class MalformedRecordError(RealEstateError, ValueError):
    """Raised when a single input record cannot be parsed."""

    code = "MALFORMED_RECORD"

    def __init__(self, message: str, line: str = "", code: Optional[str] = None):
        self.line = line
        if code is not None:
            self.code = code
        super().__init__(message)


class UnknownRecordTypeError(MalformedRecordError):
    """Raised when a record's type prefix is not recognised."""

    code = "UNKNOWN_RECORD_TYPE"


class InvalidDiscountError(RealEstateError, ValueError):
    """Raised when a discount percentage falls outside [0, 100]."""

    def __init__(self, percentage):
        self.percentage = percentage
        super().__init__(
            f"Discount percentage must be between 0 and 100, got {percentage}"
        )


class OutputWriteError(RealEstateError):
    """Raised when a report cannot be persisted."""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Error writing to output file {self.path}: {reason}")
