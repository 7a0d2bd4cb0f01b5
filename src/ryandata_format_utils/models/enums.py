"""Format rule enumerations and constants."""

from __future__ import annotations

from enum import Enum


class FormatRule(str, Enum):
    """Enumeration of all format rule names."""

    DOMAIN = "domain"
    URL = "url"
    EMAIL = "email"
    CREDIT_CARD = "creditCard"
    ALPHA_NUMERIC = "alphaNumeric"
    ALPHANUMERIC = "alphanumeric"
    TIME_STRING = "timeString"
    DATE_STRING = "dateString"
    BASE64 = "base64"
    US_ZIP_CODE = "usZipCode"
    CA_POSTAL_CODE = "caPostalCode"
    UK_POST_CODE = "ukPostCode"
    NANP_PHONE = "nanpPhone"
    EPP_PHONE = "eppPhone"
    INT_PHONE = "intPhone"
    SOCIAL_SECURITY_NUMBER = "socialSecurityNumber"
    AFFIRMATIVE = "affirmative"
    HEXADECIMAL = "hexadecimal"
    HEX_COLOR = "hexColor"
    IPV4 = "ipv4"
    IPV6 = "ipv6"
    IP = "ip"


# All rule names as a list
RULE_NAMES: list[str] = [r.value for r in FormatRule]
