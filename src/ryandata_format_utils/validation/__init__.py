"""Format validation adapters.

This module exposes the format predicates as BaseValidator implementations
and as annotated pydantic field types.
"""

from abstract_validation_base import BaseValidator

from ryandata_format_utils.validation.types import (
    CaPostalCodeStr,
    DomainStr,
    EmailAddressStr,
    HexColorStr,
    IPAddressStr,
    UkPostCodeStr,
    UrlStr,
    UsZipCodeStr,
    format_field,
)
from ryandata_format_utils.validation.validators import FormatValidator, validate_format

__all__ = [
    "BaseValidator",
    "FormatValidator",
    "validate_format",
    "format_field",
    "DomainStr",
    "UrlStr",
    "EmailAddressStr",
    "UsZipCodeStr",
    "CaPostalCodeStr",
    "UkPostCodeStr",
    "HexColorStr",
    "IPAddressStr",
]
