"""Compiled format patterns.

This module is the single source of truth for the literal formats checked
by the validators. Every pattern is compiled once at import time and is
meant to be used with ``fullmatch``, so none of them carry ``^``/``$``
anchors.

ASCII classes are spelled out (``[0-9]`` rather than ``\\d``) so that
non-ASCII digits and word characters never match. Whitespace is likewise an
explicit class rather than ``\\s``.
"""

from __future__ import annotations

import re

# Any character except line terminators
_ANY = r"[^\n\r\u2028\u2029]"
_WORD = "A-Za-z0-9_"
# Whitespace and line terminators, without the C0 separators and NEL that
# Python adds to \s
_WS_CHARS = r"\t\n\v\f\r \xa0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
_WS = "[" + _WS_CHARS + "]"

# -----------------------------------------------------------------------------
# Internet
# -----------------------------------------------------------------------------

DOMAIN = re.compile(
    r"(?:[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?\.)+[a-z0-9][a-z0-9-]{0,61}[a-z0-9]"
)

URL = re.compile(
    # scheme ("http:", "mailto:") with optional "//" and user info, then host
    r"(?:[A-Za-z]{3,9}:(?://)?(?:[-;:&=+$," + _WORD + r"]+@)?[A-Za-z0-9.-]+"
    # or a "www." / user info prefix, then host
    r"|(?:www\.|[-;:&=+$," + _WORD + r"]+@)[A-Za-z0-9.-]+)"
    r"(?::[0-9]+)?"
    # path, query and fragment
    r"(?:(?:/[+~%/." + _WORD + r"-]*)?\??[-+=&;%@." + _WORD + r"]*"
    r"#?[.!/\\" + _WORD + r"]*)?"
)

_EMAIL_ATOM = r"[^<>()\[\].,;:" + _WS_CHARS + r"@\"]"

EMAIL = re.compile(
    r"(?:" + _EMAIL_ATOM + r"+(?:\." + _EMAIL_ATOM + r"+)*|\"" + _ANY + r"+\")"
    r"@(?:" + _EMAIL_ATOM + r"+\.)+" + _EMAIL_ATOM + r"{2,}",
    re.IGNORECASE,
)

_IPV4_OCTET = r"(?:[0-9]|[1-9][0-9]|1[0-9]{2}|2[0-4][0-9]|25[0-5])"

IPV4 = re.compile(_WS + r"*(?:" + _IPV4_OCTET + r"\.){3}" + _IPV4_OCTET + _WS + "*")

_H16 = "[0-9A-Fa-f]{1,4}"
_IPV4_TAIL = r"{0}(?:\.{0}){{3}}".format(_IPV4_OCTET)


def _ipv6_branch(leading: int) -> str:
    """Build the alternative for addresses with ``leading`` groups before ``::``.

    Seven leading groups is the uncompressed form (the last group may be
    replaced by ``::``). Six leading groups allow either one more group or an
    embedded IPv4 tail. Fewer groups allow a compressed run followed by up to
    ``7 - leading`` groups, or by up to ``5 - leading`` groups and an IPv4 tail.
    """
    if leading == 7:
        return f"(?:{_H16}:){{7}}(?:{_H16}|:)"
    if leading == 6:
        return f"(?:{_H16}:){{6}}(?::{_H16}|{_IPV4_TAIL}|:)"
    head = f"(?:{_H16}:){{{leading}}}" if leading else ":"
    return (
        f"{head}(?:(?::{_H16}){{1,{7 - leading}}}"
        f"|(?::{_H16}){{0,{5 - leading}}}:{_IPV4_TAIL}"
        "|:)"
    )


IPV6 = re.compile(
    _WS
    + "*(?:"
    + "|".join(_ipv6_branch(leading) for leading in range(7, -1, -1))
    + r")(?:%"
    + _ANY
    + r"+)?"
    + _WS
    + "*"
)

# -----------------------------------------------------------------------------
# Payment and identity numbers
# -----------------------------------------------------------------------------

CREDIT_CARD = re.compile(
    r"4[0-9]{12}(?:[0-9]{3})?"  # Visa
    r"|5[1-5][0-9]{14}"  # MasterCard
    r"|6(?:011|5[0-9]{2})[0-9]{12}"  # Discover
    r"|3[47][0-9]{13}"  # American Express
    r"|3(?:0[0-5]|[68][0-9])[0-9]{11}"  # Diners Club
    r"|(?:2131|1800|35[0-9]{3})[0-9]{11}"  # JCB
)

SOCIAL_SECURITY_NUMBER = re.compile(r"(?!000|666)[0-8][0-9]{2}-(?!00)[0-9]{2}-(?!0000)[0-9]{4}")

# -----------------------------------------------------------------------------
# Generic text
# -----------------------------------------------------------------------------

ALPHA_NUMERIC = re.compile(r"[A-Za-z0-9]+")

HEXADECIMAL = re.compile(r"[0-9a-fA-F]+")

HEX_COLOR = re.compile(r"#?(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})")

BASE64 = re.compile(r"(?:[A-Za-z0-9+/]{4})*(?:[A-Za-z0-9+/]{2}==|[A-Za-z0-9+/]{3}=)?")

# ASCII keeps IGNORECASE from folding e.g. the Kelvin sign onto "k"
AFFIRMATIVE = re.compile(r"1|t(?:rue)?|y(?:es)?|o\.?k\.?(?:ay)?", re.IGNORECASE | re.ASCII)

# -----------------------------------------------------------------------------
# Dates and times
# -----------------------------------------------------------------------------

# 24-hour clock, one or two digits per field
TIME_STRING = re.compile(r"(?:2[0-3]|[01]?[0-9]):[0-5]?[0-9]:[0-5]?[0-9]")

# m/d/yy or m-d-yyyy, both separators identical
DATE_STRING = re.compile(
    r"(?:1[0-2]|0?[1-9])([/-])(?:3[01]|[12][0-9]|0?[1-9])\1(?:[0-9]{2})?[0-9]{2}"
)

# -----------------------------------------------------------------------------
# Postal codes
# -----------------------------------------------------------------------------

US_ZIP_CODE = re.compile(r"[0-9]{5}(?:-[0-9]{4})?")

CA_POSTAL_CODE = re.compile(
    r"(?!" + _ANY + r"*[DFIOQU])[A-VXY][0-9][A-Z]" + _WS + r"?[0-9][A-Z][0-9]"
)

UK_POST_CODE = re.compile(
    r"[A-Z]{1,2}[0-9RCHNQ][0-9A-Z]?" + _WS + r"?[0-9][ABD-HJLNP-UW-Z]{2}"
    # BFPO style: two letters and four digits
    r"|[A-Z]{2}-?[0-9]{4}"
)

# -----------------------------------------------------------------------------
# Phone numbers
# -----------------------------------------------------------------------------

NANP_PHONE = re.compile(r"\(?[0-9]{3}\)?[-. ]?[0-9]{3}[-. ]?[0-9]{4}")

EPP_PHONE = re.compile(r"\+[0-9]{1,3}\.[0-9]{4,14}(?:x" + _ANY + r"+)?")

INT_PHONE = re.compile(r"\+[1-9][0-9]{0,4}[0-9]{2,14}")
