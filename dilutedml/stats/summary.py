"""Column statistics: mean, median and dispersion."""

import math
import warnings
from typing import NamedTuple

import numpy as np

from dilutedml.core.backend import get_backend, to_device
from dilutedml.core.format import attach_format, format_column_summary
from dilutedml.core.tabular import as_tabular, column_values
from dilutedml.core.validators import check_not_empty

__all__ = [
    "ColumnSummary",
    "dispersion",
    "mean",
    "median",
    "standard_deviation",
    "summarize_column",
]


class ColumnSummary(NamedTuple):
    """Summary statistics for one column.

    Attributes
    ----------
    column : int
        Column index the statistics describe.
    count : int
        Number of rows.
    mean : float
        Arithmetic mean.
    median : float
        Order-statistic median.
    dispersion : float
        Population variance, in squared units.
    std : float
        Population standard deviation, ``sqrt(dispersion)``.
    """

    column: int
    count: int
    mean: float
    median: float
    dispersion: float
    std: float


attach_format(ColumnSummary, format_column_summary)


def _scratch_column(view, col):
    """Copy a validated, non-empty column onto the active device."""
    view = as_tabular(view)
    values = column_values(view, col)
    check_not_empty(view)
    if not np.all(np.isfinite(values)):
        warnings.warn(
            f"Column {col} contains NaN or infinite values; statistics will not be finite.",
            UserWarning,
        )
    return to_device(values)


def _shifted_mean(values):
    """Mean computed around the first element so that large magnitudes do not overflow the sum."""
    xp = get_backend()
    x0 = values[0]
    return x0 + xp.mean(values - x0)


def _mean(values):
    return float(_shifted_mean(values))


def _median(values):
    sorted_values = get_backend().sort(values)
    n = sorted_values.shape[0]
    mid = n // 2
    if n % 2 == 1:
        return float(sorted_values[mid])
    lo, hi = sorted_values[mid - 1], sorted_values[mid]
    # opposite signs cannot overflow the sum; same signs cannot overflow the difference
    if (lo < 0) != (hi < 0):
        return float((lo + hi) / 2)
    return float(lo + (hi - lo) / 2)


def _dispersion(values):
    deviations = values - _shifted_mean(values)
    return float(get_backend().mean(deviations * deviations))


def mean(view, col):
    """Arithmetic mean of a column.

    Parameters
    ----------
    view : TabularView or array_like
        Source data. Never modified.
    col : int
        Column index in ``[0, view.cols)``.

    Returns
    -------
    float
        Mean of the ``view.rows`` values in the column.

    Raises
    ------
    IndexOutOfRangeError
        If ``col`` is outside ``[0, view.cols)``.
    EmptyDatasetError
        If the view has no rows.
    """
    return _mean(_scratch_column(view, col))


def median(view, col):
    """Order-statistic median of a column.

    The column is copied into a scratch vector and sorted; the middle element
    of the sorted copy is returned, or the mean of the two middle elements when
    the row count is even. The source view is left untouched.

    Parameters
    ----------
    view : TabularView or array_like
        Source data. Never modified.
    col : int
        Column index in ``[0, view.cols)``.

    Returns
    -------
    float
        Median of the column.

    Raises
    ------
    IndexOutOfRangeError
        If ``col`` is outside ``[0, view.cols)``.
    EmptyDatasetError
        If the view has no rows.
    """
    return _median(_scratch_column(view, col))


def dispersion(view, col):
    r"""Population variance of a column.

    Computes :math:`\frac{1}{n} \sum_i (x_i - \bar{x})^2`. The result is in
    squared units; use :func:`standard_deviation` for the square root.

    Parameters
    ----------
    view : TabularView or array_like
        Source data. Never modified.
    col : int
        Column index in ``[0, view.cols)``.

    Returns
    -------
    float
        Mean squared deviation from the column mean.

    Raises
    ------
    IndexOutOfRangeError
        If ``col`` is outside ``[0, view.cols)``.
    EmptyDatasetError
        If the view has no rows.
    """
    return _dispersion(_scratch_column(view, col))


def standard_deviation(view, col):
    """Population standard deviation of a column, ``sqrt(dispersion(view, col))``."""
    return math.sqrt(dispersion(view, col))


def summarize_column(view, col):
    """Compute mean, median, dispersion and standard deviation in one pass over a column copy.

    Returns
    -------
    ColumnSummary
        Named tuple of the statistics; printing it renders a table.
    """
    values = _scratch_column(view, col)
    var = _dispersion(values)
    return ColumnSummary(
        column=int(col),
        count=int(values.shape[0]),
        mean=_mean(values),
        median=_median(values),
        dispersion=var,
        std=math.sqrt(var),
    )
