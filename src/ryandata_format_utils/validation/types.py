"""Annotated string types for pydantic models.

Each type is a plain ``str`` with an after-validator that checks one format
rule. A value that does not match raises RyanDataFormatError, which pydantic
reports inside its ValidationError.

Example:
    class Contact(BaseModel):
        email: EmailAddressStr
        zip_code: UsZipCodeStr

    Contact(email="address@example.com", zip_code="02201-1020")
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import AfterValidator

from ryandata_format_utils.models.enums import FormatRule
from ryandata_format_utils.models.errors import RyanDataFormatError
from ryandata_format_utils.registry import VALIDATORS, canonical_name


def format_field(rule: str | FormatRule) -> Any:
    """Build an annotated ``str`` type that must match a format rule.

    Args:
        rule: Rule name, FormatRule member, or snake_case function name.

    Returns:
        ``Annotated[str, AfterValidator(...)]`` for use as a field type.

    Raises:
        ValueError: If the rule name is not known.
    """
    name = canonical_name(rule)
    predicate = VALIDATORS[name]

    def check(value: str) -> str:
        if not predicate(value):
            raise RyanDataFormatError.for_rule(name, value)
        return value

    return Annotated[str, AfterValidator(check)]


DomainStr = format_field(FormatRule.DOMAIN)
UrlStr = format_field(FormatRule.URL)
EmailAddressStr = format_field(FormatRule.EMAIL)
UsZipCodeStr = format_field(FormatRule.US_ZIP_CODE)
CaPostalCodeStr = format_field(FormatRule.CA_POSTAL_CODE)
UkPostCodeStr = format_field(FormatRule.UK_POST_CODE)
HexColorStr = format_field(FormatRule.HEX_COLOR)
IPAddressStr = format_field(FormatRule.IP)
