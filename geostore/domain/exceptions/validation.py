from __future__ import annotations


class GeoPointValidationError(ValueError):
    """Base exception for coordinates rejected at construction."""


class TypeValidationError(GeoPointValidationError, TypeError):
    """Raised when a coordinate is not a finite real number."""

    def __init__(self, field: str, value: object) -> None:
        super().__init__(f'Value for argument "{field}" is not a valid number.')
        self.field = field
        self.value = value


class RangeValidationError(GeoPointValidationError):
    """Raised when a coordinate is numeric but outside its permitted bounds."""

    def __init__(
        self,
        field: str,
        value: float,
        *,
        bound: float,
        min_value: float | None,
        max_value: float | None,
    ) -> None:
        lo = "-inf" if min_value is None else _fmt(min_value)
        hi = "inf" if max_value is None else _fmt(max_value)
        super().__init__(
            f'Value for argument "{field}" must be within [{lo}, {hi}] '
            f"inclusive, but was: {_fmt(value)}"
        )
        self.field = field
        self.value = value
        self.bound = bound
        self.min_value = min_value
        self.max_value = max_value


def _fmt(n: float) -> str:
    # 90.0 -> "90", 90.5 -> "90.5"
    if isinstance(n, int) or n.is_integer():
        return str(int(n))
    return repr(n)
