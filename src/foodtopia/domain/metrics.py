"""Numeric guards shared by the aggregate and derived-metric code."""

import math

from foodtopia.domain.errors import InvalidMetricError


def ensure_metric(value: object, field: str, *, allow_negative: bool = False) -> float:
    """Return value as a float or raise InvalidMetricError.

    Booleans, strings, ``None``, NaN and infinities are rejected. Negative
    numbers are rejected unless ``allow_negative`` is set.
    """
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise InvalidMetricError(field, value)
    number = float(value)
    if not math.isfinite(number):
        raise InvalidMetricError(field, value)
    if number < 0 and not allow_negative:
        raise InvalidMetricError(field, value)
    return number


def ensure_optional_metric(value: object, field: str) -> float:
    """Like ensure_metric, but an absent value counts as zero."""
    if value is None:
        return 0.0
    return ensure_metric(value, field)
