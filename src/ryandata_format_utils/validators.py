"""Format validators.

Each validator is a pure predicate: it accepts a value of any type, converts
it to text and reports whether the whole text matches one literal format.
Validators never raise; anything that does not match returns False.

Example:
    >>> from ryandata_format_utils import validators
    >>> validators.domain("example.com")
    True
    >>> validators.us_zip_code("02201-1020")
    True
    >>> validators.ipv4("5555.555.5.5")
    False
"""

from __future__ import annotations

import re
from typing import Any

from ryandata_format_utils import patterns
from ryandata_format_utils.coercion import to_text


def _matches(pattern: re.Pattern[str], value: Any) -> bool:
    """Check that the text form of value fully matches pattern."""
    text = to_text(value)
    if text is None:
        return False
    return pattern.fullmatch(text) is not None


def domain(val: Any) -> bool:
    """Check for a domain name such as ``sub.example.com``.

    Labels are 1-63 lowercase letters, digits or hyphens and never start or
    end with a hyphen. At least two labels are required and the last one is
    two characters or longer.

    Args:
        val: The value to check.

    Returns:
        True if the value is a domain name.
    """
    return _matches(patterns.DOMAIN, val)


def url(val: Any) -> bool:
    """Check for a URL such as ``http://example.com/path?q=1#top``.

    Accepts a 3-9 letter scheme, or a ``www.`` / ``user@`` prefix, followed by
    a host, an optional port and an optional path, query and fragment.

    Args:
        val: The value to check.

    Returns:
        True if the value is a URL.
    """
    return _matches(patterns.URL, val)


def email(val: Any) -> bool:
    """Check for an email address such as ``address@example.com``.

    Args:
        val: The value to check.

    Returns:
        True if the value is an email address.
    """
    return _matches(patterns.EMAIL, val)


def credit_card(val: Any) -> bool:
    """Check for a Visa, MasterCard, Amex, Discover, Diners Club or JCB number.

    Only the issuer prefix and length are checked, not the Luhn checksum.

    Args:
        val: The value to check.

    Returns:
        True if the value is a credit card number.
    """
    return _matches(patterns.CREDIT_CARD, val)


def alpha_numeric(val: Any) -> bool:
    """Check for a non-empty string of ASCII letters and digits.

    Args:
        val: The value to check.

    Returns:
        True if the value is alphanumeric.
    """
    return _matches(patterns.ALPHA_NUMERIC, val)


alphanumeric = alpha_numeric


def time_string(val: Any) -> bool:
    """Check for a 24-hour ``H:M:S`` time such as ``13:45:30``.

    Args:
        val: The value to check.

    Returns:
        True if the value is a time string.
    """
    return _matches(patterns.TIME_STRING, val)


def date_string(val: Any) -> bool:
    """Check for a ``m/d/y`` or ``m-d-y`` date.

    Month and day take one or two digits, the year two or four. Both
    separators must be the same character.

    Args:
        val: The value to check.

    Returns:
        True if the value is a date string.
    """
    return _matches(patterns.DATE_STRING, val)


def base64(val: Any) -> bool:
    """Check for a base64 body such as ``ZmktaXM=``.

    Args:
        val: The value to check.

    Returns:
        True if the value is base64 encoded.
    """
    return _matches(patterns.BASE64, val)


def us_zip_code(val: Any) -> bool:
    """Check for a US ZIP code, ``12345`` or ``12345-6789``.

    Args:
        val: The value to check.

    Returns:
        True if the value is a US ZIP code.
    """
    return _matches(patterns.US_ZIP_CODE, val)


def ca_postal_code(val: Any) -> bool:
    """Check for a Canadian postal code such as ``L8V3Y1`` or ``L8V 3Y1``.

    Args:
        val: The value to check.

    Returns:
        True if the value is a Canadian postal code.
    """
    return _matches(patterns.CA_POSTAL_CODE, val)


def uk_post_code(val: Any) -> bool:
    """Check for a UK post code such as ``B184BJ``, or a BFPO style code.

    Args:
        val: The value to check.

    Returns:
        True if the value is a UK post code.
    """
    return _matches(patterns.UK_POST_CODE, val)


def nanp_phone(val: Any) -> bool:
    """Check for a North American Numbering Plan number such as ``609-555-0175``.

    Args:
        val: The value to check.

    Returns:
        True if the value is a NANP phone number.
    """
    return _matches(patterns.NANP_PHONE, val)


def epp_phone(val: Any) -> bool:
    """Check for an EPP formatted phone number such as ``+90.2322456789``.

    Args:
        val: The value to check.

    Returns:
        True if the value is an EPP phone number.
    """
    return _matches(patterns.EPP_PHONE, val)


def int_phone(val: Any) -> bool:
    """Check for an international phone number such as ``+297983652``.

    Args:
        val: The value to check.

    Returns:
        True if the value is an international phone number.
    """
    return _matches(patterns.INT_PHONE, val)


def social_security_number(val: Any) -> bool:
    """Check for a US social security number such as ``017-90-7890``.

    Area numbers 000, 666 and 900-999, group 00 and serial 0000 are rejected.

    Args:
        val: The value to check.

    Returns:
        True if the value is a social security number.
    """
    return _matches(patterns.SOCIAL_SECURITY_NUMBER, val)


def affirmative(val: Any) -> bool:
    """Check for an affirmative token: ``yes``, ``y``, ``true``, ``t``, ``1``, ``ok``...

    Matching is case-insensitive. ``True`` and ``1`` are affirmative too.

    Args:
        val: The value to check.

    Returns:
        True if the value is affirmative.
    """
    return _matches(patterns.AFFIRMATIVE, val)


def hexadecimal(val: Any) -> bool:
    """Check for a non-empty string of hex digits.

    Args:
        val: The value to check.

    Returns:
        True if the value is hexadecimal.
    """
    return _matches(patterns.HEXADECIMAL, val)


def hex_color(val: Any) -> bool:
    """Check for a ``#RGB`` or ``#RRGGBB`` color, ``#`` optional.

    Args:
        val: The value to check.

    Returns:
        True if the value is a hex color.
    """
    return _matches(patterns.HEX_COLOR, val)


def ipv4(val: Any) -> bool:
    """Check for a dotted-quad IPv4 address, surrounding whitespace allowed.

    Args:
        val: The value to check.

    Returns:
        True if the value is an IPv4 address.
    """
    return _matches(patterns.IPV4, val)


def ipv6(val: Any) -> bool:
    """Check for an IPv6 address, surrounding whitespace allowed.

    Full and compressed forms are accepted, with an optional embedded IPv4
    tail and an optional ``%zone`` suffix.

    Args:
        val: The value to check.

    Returns:
        True if the value is an IPv6 address.
    """
    return _matches(patterns.IPV6, val)


def ip(val: Any) -> bool:
    """Check for an IPv4 or IPv6 address.

    Args:
        val: The value to check.

    Returns:
        True if the value is an IP address.
    """
    return ipv4(val) or ipv6(val)
