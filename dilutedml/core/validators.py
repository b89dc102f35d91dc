"""Argument validation shared by the statistics, sampling and scaling operations."""

import math
import numbers

from .errors import EmptyDatasetError, IndexOutOfRangeError, InvalidArgumentError

__all__ = [
    "check_bounds",
    "check_count",
    "check_index",
    "check_not_empty",
]


def _is_integer(value):
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def check_index(index, size, axis="column"):
    """Validate that ``index`` addresses one of ``size`` positions along ``axis``."""
    if not _is_integer(index):
        raise IndexOutOfRangeError(f"{axis} index must be an integer, got {type(index).__name__}.")
    if not 0 <= index < size:
        raise IndexOutOfRangeError(f"{axis} index {index} is out of range for {size} {axis}s.")
    return int(index)


def check_count(count, name="count"):
    """Validate a non-negative integer count."""
    if not _is_integer(count):
        raise InvalidArgumentError(f"{name} must be an integer, got {type(count).__name__}.")
    if count < 0:
        raise InvalidArgumentError(f"{name} must be non-negative, got {count}.")
    return int(count)


def check_not_empty(view):
    """Raise when a view has no rows."""
    if view.rows == 0:
        raise EmptyDatasetError("The dataset has no rows.")


def check_bounds(lower, upper, label="range"):
    """Validate a finite ``[lower, upper]`` pair whose span is non-zero and finite."""
    try:
        lower = float(lower)
        upper = float(upper)
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError(f"{label} bounds must be real numbers.") from e
    if not (math.isfinite(lower) and math.isfinite(upper)):
        raise InvalidArgumentError(f"{label} bounds must be finite, got ({lower}, {upper}).")
    if upper == lower:
        raise InvalidArgumentError(f"{label} has zero span: upper == lower == {lower}.")
    if not math.isfinite(upper - lower):
        raise InvalidArgumentError(f"{label} span overflows: ({lower}, {upper}).")
    return lower, upper
