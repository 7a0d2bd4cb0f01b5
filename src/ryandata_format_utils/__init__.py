"""ryandata-format-utils: boolean validators for well-known literal formats.

This package provides a set of independent, pure format checks:
- One predicate per format (domain, URL, email, postal codes, phones, IPs...)
- A read-only registry mapping rule names to predicates
- BaseValidator adapters returning ValidationResult objects
- Annotated string types for pydantic models

Every predicate accepts a value of any type and returns a bool. None of
them raise.

Quick Start:
    >>> from ryandata_format_utils import email, ipv4, us_zip_code
    >>> email("address@example.com")
    True
    >>> ipv4("127.0.0.1")
    True
    >>> us_zip_code("1")
    False

    # Look a rule up by name
    >>> from ryandata_format_utils import is_valid
    >>> is_valid("creditCard", "378282246310005")
    True

    # Collect errors instead of a bool
    >>> from ryandata_format_utils import validate_format
    >>> result = validate_format("hexColor", "#12")
    >>> result.is_valid
    False
"""

from __future__ import annotations  # noqa: I001

from ryandata_format_utils.coercion import to_text
from ryandata_format_utils.models import (
    PACKAGE_NAME,
    RULE_NAMES,
    FormatRule,
    RyanDataFormatError,
    RyanDataValidationError,
)
from ryandata_format_utils.registry import (
    VALIDATORS,
    available_rules,
    canonical_name,
    get_validator,
    is_valid,
)
from ryandata_format_utils.validation import (
    BaseValidator,
    CaPostalCodeStr,
    DomainStr,
    EmailAddressStr,
    FormatValidator,
    HexColorStr,
    IPAddressStr,
    UkPostCodeStr,
    UrlStr,
    UsZipCodeStr,
    format_field,
    validate_format,
)
from ryandata_format_utils.validators import (
    affirmative,
    alpha_numeric,
    alphanumeric,
    base64,
    ca_postal_code,
    credit_card,
    date_string,
    domain,
    email,
    epp_phone,
    hex_color,
    hexadecimal,
    int_phone,
    ip,
    ipv4,
    ipv6,
    nanp_phone,
    social_security_number,
    time_string,
    uk_post_code,
    url,
    us_zip_code,
)

__version__ = "0.1.0"
__package_name__ = "ryandata-format-utils"

__all__ = [
    # Version
    "__version__",
    # Validators
    "domain",
    "url",
    "email",
    "credit_card",
    "alpha_numeric",
    "alphanumeric",
    "time_string",
    "date_string",
    "base64",
    "us_zip_code",
    "ca_postal_code",
    "uk_post_code",
    "nanp_phone",
    "epp_phone",
    "int_phone",
    "social_security_number",
    "affirmative",
    "hexadecimal",
    "hex_color",
    "ipv4",
    "ipv6",
    "ip",
    # Registry
    "VALIDATORS",
    "available_rules",
    "canonical_name",
    "get_validator",
    "is_valid",
    # Models
    "FormatRule",
    "RULE_NAMES",
    # Errors
    "PACKAGE_NAME",
    "RyanDataFormatError",
    "RyanDataValidationError",
    # Validation adapters
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
    # Coercion
    "to_text",
]
