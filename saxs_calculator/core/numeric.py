"""Numeric helpers: input coercion and display rounding.

The schedule tables are compared against a reference spreadsheet, so
rounding must match it digit for digit:
- round_fixed: like JavaScript ``Number.toFixed`` (half away from zero,
  decided on the exact binary value of the float)
- round_half_up: like JavaScript ``Math.round`` (ties go toward +inf)

Python's built-in ``round`` uses banker's rounding and differs on ties.
"""

from decimal import Decimal, ROUND_HALF_UP
import math
from typing import Any

from .errors import MissingParameterError


def round_fixed(value: float, digits: int) -> float:
    """Round ``value`` to ``digits`` decimals the way ``toFixed`` does."""
    if not math.isfinite(value):
        return value
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties toward positive infinity."""
    return int(math.floor(value + 0.5))


def _coerce(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number):
        return None
    return number


def require_number(name: str, value: Any) -> float:
    """Return ``value`` as float or raise MissingParameterError.

    ``None``, booleans, empty or non-numeric strings and NaN count as missing.
    """
    number = _coerce(value)
    if number is None:
        raise MissingParameterError(name)
    return number


def require_numbers(**values: Any) -> dict[str, float]:
    """Coerce several named values at once.

    Reports every missing parameter in a single error rather than the first one.
    """
    coerced = {}
    missing = []
    for name, value in values.items():
        number = _coerce(value)
        if number is None:
            missing.append(name)
        else:
            coerced[name] = number
    if missing:
        raise MissingParameterError(missing)
    return coerced
