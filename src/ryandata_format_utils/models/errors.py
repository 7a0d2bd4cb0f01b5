"""Format-specific error classes.

These classes provide package-specific error handling for callers that want
a failed format check surfaced as an exception. The validators themselves
never raise.
"""

from __future__ import annotations

from typing import Any

from pydantic_core import PydanticCustomError

# Package identifier for error context
PACKAGE_NAME = "ryandata_format_utils"

# Error type used for failed format checks
FORMAT_ERROR_TYPE = "format_validation"
FORMAT_ERROR_MESSAGE = "Value does not match {rule} format"


class RyanDataFormatError(PydanticCustomError):
    """Custom exception for ryandata_format_utils that wraps Pydantic errors.

    Inherits from PydanticCustomError so it can be raised from inside pydantic
    validators and still be reported as a regular validation error.
    """

    @classmethod
    def for_rule(
        cls,
        rule: str,
        value: Any = None,
        field: str | None = None,
    ) -> RyanDataFormatError:
        """Create the error for a value that failed a format rule.

        Args:
            rule: Name of the rule that failed.
            value: The text that was checked (optional).
            field: Name of the field holding the value (optional).

        Returns:
            RyanDataFormatError with the rule, field and value in its context.
        """
        return cls(
            FORMAT_ERROR_TYPE,
            FORMAT_ERROR_MESSAGE,
            {
                "package": PACKAGE_NAME,
                "rule": rule,
                "field": field or rule,
                "value": value,
            },
        )

    @classmethod
    def from_pydantic_error(cls, error: PydanticCustomError) -> RyanDataFormatError:
        """Wrap a PydanticCustomError as RyanDataFormatError.

        Args:
            error: The PydanticCustomError to wrap.

        Returns:
            RyanDataFormatError instance with same type, message, and context.
        """
        return cls(
            error.type,
            error.message_template,
            {"package": PACKAGE_NAME, **(error.context or {})},
        )

    @classmethod
    def from_validation_error(
        cls, error: Exception, context: dict | None = None
    ) -> RyanDataFormatError:
        """Wrap a pydantic.ValidationError or extract a contained format error.

        Args:
            error: The ValidationError to wrap.
            context: Additional context to include in the error.

        Returns:
            RyanDataFormatError instance with extracted or converted error details.
        """
        from pydantic import ValidationError

        ctx = {"package": PACKAGE_NAME, **(context or {})}

        if isinstance(error, ValidationError):
            for err_dict in error.errors():
                if err_dict.get("type") == FORMAT_ERROR_TYPE:
                    return cls(
                        FORMAT_ERROR_TYPE,
                        err_dict.get("msg", str(error)),
                        {**ctx, **(err_dict.get("ctx") or {})},
                    )

            error_messages = "; ".join(e.get("msg", str(e)) for e in error.errors())
            return cls("validation_error", error_messages, ctx)

        return cls("validation_error", str(error), ctx)


class RyanDataValidationError(Exception):
    """Custom exception that wraps pydantic.ValidationError with package identification.

    Useful around models built with the annotated format types: the original
    error stays available while the package context is added.
    """

    def __init__(self, validation_error: Exception, context: dict | None = None):
        """Initialize RyanDataValidationError.

        Args:
            validation_error: The pydantic.ValidationError to wrap.
            context: Optional additional context to include.
        """
        from pydantic import ValidationError as PydanticValidationError

        self.original_error = validation_error
        self.context = {"package": PACKAGE_NAME, **(context or {})}

        if isinstance(validation_error, PydanticValidationError):
            self.errors_list = validation_error.errors()
            error_messages = "; ".join(e.get("msg", str(e)) for e in self.errors_list)
        else:
            self.errors_list = []
            error_messages = str(validation_error)

        super().__init__(error_messages)

    @classmethod
    def from_validation_error(
        cls, error: Exception, context: dict | None = None
    ) -> RyanDataValidationError:
        """Wrap a pydantic.ValidationError with package context."""
        return cls(error, context)

    def errors(self) -> list:
        """Get the list of validation errors.

        Returns:
            List of error dictionaries from the original ValidationError.
        """
        return self.errors_list

    def __repr__(self) -> str:
        return f"RyanDataValidationError({self.original_error!r}, context={self.context})"
