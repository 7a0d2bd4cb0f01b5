"""Value coercion for pattern matching.

Validators accept values of any type. Before matching, the value is turned
into the text the pattern is checked against. The conversion never raises:
values that cannot be rendered come back as ``None`` and simply fail to match.
"""

from __future__ import annotations

import logging
import math
import re
from decimal import Decimal
from typing import Any

logger = logging.getLogger(__name__)

# Python renders exponents zero padded ("1e-07"); drop the padding
_EXPONENT_PADDING = re.compile(r"e([+-])0*([0-9])")

# Floats between these magnitudes are written positionally
_POSITIONAL_MIN = 1e-6
_POSITIONAL_MAX = 1e21


def format_number(value: float) -> str:
    """Render a float as the shortest decimal text that round-trips.

    Integral floats drop the trailing ``.0`` so ``1.0`` and ``1`` match the
    same patterns.

    Args:
        value: The float to render.

    Returns:
        Decimal text for the value.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    magnitude = abs(value)
    if magnitude < _POSITIONAL_MIN or magnitude >= _POSITIONAL_MAX:
        return _EXPONENT_PADDING.sub(r"e\1\2", repr(value))
    text = format(Decimal(repr(value)), "f")
    # Below 1e16 an integral repr ends in ".0"
    return text.removesuffix(".0") if value.is_integer() else text


def to_text(value: Any) -> str | None:
    """Convert any value to the text a validator matches against.

    Args:
        value: The value to convert.

    Returns:
        The text form of the value, or None when the value has no text
        form (None itself, or a value whose conversion fails).
    """
    if value is None:
        return None
    if isinstance(value, str):
        return value
    # Lowercase words, as in "true"/"false" tokens
    if isinstance(value, bool):
        return "true" if value else "false"

    try:
        if isinstance(value, float):
            return format_number(value)
        # Very long ints and custom __str__ implementations can both raise
        return str(value)
    except Exception as e:
        logger.debug("Could not convert %s value to text - %s", type(value).__name__, e)
        return None
