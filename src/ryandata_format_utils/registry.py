"""Rule name to validator mapping.

The registry is built once at import time and is read-only. Lookups accept
the canonical rule name (``"creditCard"``), a FormatRule member, or the
Python function name (``"credit_card"``).

Example:
    >>> from ryandata_format_utils.registry import get_validator
    >>> get_validator("usZipCode")("02201-1020")
    True
    >>> get_validator("us_zip_code")("1")
    False
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any

from ryandata_format_utils import validators
from ryandata_format_utils.models.enums import FormatRule

Predicate = Callable[[Any], bool]

VALIDATORS: Mapping[str, Predicate] = MappingProxyType(
    {
        FormatRule.DOMAIN.value: validators.domain,
        FormatRule.URL.value: validators.url,
        FormatRule.EMAIL.value: validators.email,
        FormatRule.CREDIT_CARD.value: validators.credit_card,
        FormatRule.ALPHA_NUMERIC.value: validators.alpha_numeric,
        FormatRule.ALPHANUMERIC.value: validators.alphanumeric,
        FormatRule.TIME_STRING.value: validators.time_string,
        FormatRule.DATE_STRING.value: validators.date_string,
        FormatRule.BASE64.value: validators.base64,
        FormatRule.US_ZIP_CODE.value: validators.us_zip_code,
        FormatRule.CA_POSTAL_CODE.value: validators.ca_postal_code,
        FormatRule.UK_POST_CODE.value: validators.uk_post_code,
        FormatRule.NANP_PHONE.value: validators.nanp_phone,
        FormatRule.EPP_PHONE.value: validators.epp_phone,
        FormatRule.INT_PHONE.value: validators.int_phone,
        FormatRule.SOCIAL_SECURITY_NUMBER.value: validators.social_security_number,
        FormatRule.AFFIRMATIVE.value: validators.affirmative,
        FormatRule.HEXADECIMAL.value: validators.hexadecimal,
        FormatRule.HEX_COLOR.value: validators.hex_color,
        FormatRule.IPV4.value: validators.ipv4,
        FormatRule.IPV6.value: validators.ipv6,
        FormatRule.IP.value: validators.ip,
    }
)


def _lookup_key(name: str) -> str:
    return name.replace("_", "").lower()


def canonical_name(rule: str | FormatRule) -> str:
    """Resolve a rule name to its canonical spelling.

    Args:
        rule: Canonical name, FormatRule member, or snake_case function name.

    Returns:
        The canonical rule name, e.g. ``"creditCard"``.

    Raises:
        ValueError: If the rule name is not known.
    """
    name = rule.value if isinstance(rule, FormatRule) else rule
    if isinstance(name, str):
        if name in VALIDATORS:
            return name

        key = _lookup_key(name)
        for canonical in VALIDATORS:
            if _lookup_key(canonical) == key:
                return canonical

    available = ", ".join(available_rules())
    raise ValueError(f"Unknown rule: {name}. Available rules: {available}")


def get_validator(rule: str | FormatRule) -> Predicate:
    """Get the validator for a rule.

    Args:
        rule: Canonical name, FormatRule member, or snake_case function name.

    Returns:
        The predicate function for the rule.

    Raises:
        ValueError: If the rule name is not known.
    """
    return VALIDATORS[canonical_name(rule)]


def available_rules() -> list[str]:
    """Get list of available rule names.

    Returns:
        Sorted list of canonical rule names.
    """
    return sorted(VALIDATORS.keys())


def is_valid(rule: str | FormatRule, value: Any) -> bool:
    """Check a value against a rule looked up by name.

    Args:
        rule: Canonical name, FormatRule member, or snake_case function name.
        value: The value to check.

    Returns:
        True if the value matches the rule's format.

    Raises:
        ValueError: If the rule name is not known. The value itself never
            causes an error.
    """
    return get_validator(rule)(value)
