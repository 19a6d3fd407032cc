from __future__ import annotations

import math

from geostore.domain.exceptions import RangeValidationError, TypeValidationError


def is_finite_number(value: object) -> bool:
    # bool is an int subclass but never a coordinate.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    if isinstance(value, int):
        return True
    return math.isfinite(value)


def validate_number(
    arg: str,
    value: object,
    *,
    min_value: float | None = None,
    max_value: float | None = None,
) -> None:
    """Check that `value` is a finite number within the inclusive bounds.

    Raises:
      TypeValidationError: not an int/float, or NaN/infinite.
      RangeValidationError: below `min_value` or above `max_value`.
    """

    if not is_finite_number(value):
        raise TypeValidationError(arg, value)

    number: float = value  # type: ignore[assignment]
    if min_value is not None and number < min_value:
        raise RangeValidationError(
            arg, number, bound=min_value, min_value=min_value, max_value=max_value
        )
    if max_value is not None and number > max_value:
        raise RangeValidationError(
            arg, number, bound=max_value, min_value=min_value, max_value=max_value
        )
