"""Format models package.

This package contains the rule enumeration and the package error types.
"""

from __future__ import annotations

from ryandata_format_utils.models.enums import RULE_NAMES, FormatRule
from ryandata_format_utils.models.errors import (
    FORMAT_ERROR_MESSAGE,
    FORMAT_ERROR_TYPE,
    PACKAGE_NAME,
    RyanDataFormatError,
    RyanDataValidationError,
)

__all__ = [
    # Errors
    "PACKAGE_NAME",
    "FORMAT_ERROR_TYPE",
    "FORMAT_ERROR_MESSAGE",
    "RyanDataFormatError",
    "RyanDataValidationError",
    # Enums and constants
    "FormatRule",
    "RULE_NAMES",
]
