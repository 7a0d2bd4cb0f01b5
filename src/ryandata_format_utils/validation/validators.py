from __future__ import annotations

import logging
from typing import Any

from abstract_validation_base import BaseValidator, ValidationResult

from ryandata_format_utils.coercion import to_text
from ryandata_format_utils.models.enums import FormatRule
from ryandata_format_utils.models.errors import FORMAT_ERROR_MESSAGE, RyanDataFormatError
from ryandata_format_utils.registry import VALIDATORS, canonical_name

logger = logging.getLogger(__name__)


class FormatValidator(BaseValidator[Any]):
    """Validates a value against a single format rule.

    Wraps one of the format predicates so it can be used wherever a
    BaseValidator is expected and report a ValidationResult instead of a
    bare bool.

    Example:
        >>> validator = FormatValidator("usZipCode", field="zip")
        >>> validator.validate("02201-1020").is_valid
        True
    """

    def __init__(self, rule: str | FormatRule, field: str | None = None) -> None:
        """Initialize format validator.

        Args:
            rule: Rule name, FormatRule member, or snake_case function name.
            field: Field name to report errors on. Defaults to the rule name.

        Raises:
            ValueError: If the rule name is not known.
        """
        self._rule = canonical_name(rule)
        self._predicate = VALIDATORS[self._rule]
        self._field = field or self._rule

    @property
    def name(self) -> str:
        """Name of this validator."""
        return f"{self._rule}_format"

    @property
    def rule(self) -> str:
        """Canonical name of the rule being checked."""
        return self._rule

    def validate(self, item: Any) -> ValidationResult:
        """Validate the format of a value.

        Args:
            item: Value to validate. Any type is accepted.

        Returns:
            ValidationResult with a format error if the value does not match.
        """
        result = ValidationResult(is_valid=True)
        if not self._predicate(item):
            text = to_text(item)
            logger.debug("Value failed %s check: %s", self._rule, text)
            result.add_error(self._field, FORMAT_ERROR_MESSAGE.format(rule=self._rule), text)
        return result


def validate_format(
    rule: str | FormatRule,
    value: Any,
    *,
    field: str | None = None,
    raise_exception: bool = False,
) -> ValidationResult:
    """Validate a value against a format rule.

    Args:
        rule: Rule name, FormatRule member, or snake_case function name.
        value: Value to validate.
        field: Field name to report errors on. Defaults to the rule name.
        raise_exception: If True, raise instead of returning an invalid result.

    Returns:
        ValidationResult for the check.

    Raises:
        RyanDataFormatError: If raise_exception is True and the value does not match.
        ValueError: If the rule name is not known.
    """
    validator = FormatValidator(rule, field=field)
    result = validator.validate(value)

    if raise_exception and not result.is_valid:
        raise RyanDataFormatError.for_rule(validator.rule, to_text(value), field)

    return result
