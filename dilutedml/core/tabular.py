"""Read-only tabular views over already-loaded numeric data."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

import numpy as np
import polars as pl

from .backend import to_numpy
from .dataframe import frame_to_matrix
from .errors import InvalidArgumentError
from .validators import check_index

__all__ = ["TabularData", "TabularView", "as_tabular", "column_values"]


@runtime_checkable
class TabularView(Protocol):
    """Row-major numeric matrix with known dimensions."""

    @property
    def rows(self) -> int:
        """Number of rows."""

    @property
    def cols(self) -> int:
        """Number of columns."""

    def cell(self, row: int, col: int) -> float:
        """Value at ``(row, col)``."""


class TabularData:
    """Read-only :class:`TabularView` backed by a 2-D ``float64`` array.

    The wrapped array is exposed through a non-writeable view, so neither the
    caller's buffer nor this object can be modified through it. A copy is only
    made when the input is not already ``float64``.

    Parameters
    ----------
    values : array_like
        Two-dimensional numeric data, rows first.
    columns : list of str, optional
        Column labels, used for display only.
    """

    __slots__ = ("_values", "columns")

    def __init__(self, values: Any, columns: list[str] | None = None):
        try:
            arr = np.asarray(to_numpy(values), dtype=np.float64)
        except (TypeError, ValueError) as e:
            raise InvalidArgumentError("values must be convertible to a float matrix.") from e
        if arr.ndim != 2:
            raise InvalidArgumentError(f"Expected a 2-dimensional matrix, got {arr.ndim} dimensions.")

        view = arr.view()
        view.flags.writeable = False
        self._values = view

        if columns is not None and len(columns) != view.shape[1]:
            raise InvalidArgumentError(f"Got {len(columns)} column labels for {view.shape[1]} columns.")
        self.columns = list(columns) if columns is not None else None

    @classmethod
    def from_frame(cls, df: Any) -> TabularData:
        """Build a view from a polars, pandas or other Arrow-compatible DataFrame."""
        matrix, columns = frame_to_matrix(df)
        return cls(matrix, columns=columns)

    @property
    def rows(self) -> int:
        return self._values.shape[0]

    @property
    def cols(self) -> int:
        return self._values.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return self._values.shape

    @property
    def values(self) -> np.ndarray:
        """Non-writeable view of the underlying matrix."""
        return self._values

    def cell(self, row: int, col: int) -> float:
        row = check_index(row, self.rows, "row")
        col = check_index(col, self.cols, "column")
        return float(self._values[row, col])

    def column(self, col: int) -> np.ndarray:
        """Return a fresh copy of column ``col``."""
        col = check_index(col, self.cols, "column")
        return self._values[:, col].copy()

    def row(self, row: int) -> np.ndarray:
        """Return a fresh copy of row ``row``."""
        row = check_index(row, self.rows, "row")
        return self._values[row].copy()

    def __len__(self) -> int:
        return self.rows

    def __repr__(self) -> str:
        return f"TabularData(rows={self.rows}, cols={self.cols})"


def as_tabular(data: Any) -> TabularView:
    """Coerce ``data`` to a :class:`TabularView`.

    Views are returned unchanged. DataFrames go through :meth:`TabularData.from_frame`
    and anything else is treated as a 2-D array.
    """
    if isinstance(data, TabularData):
        return data
    if isinstance(data, (pl.DataFrame, pl.Series)) or hasattr(data, "__arrow_c_stream__"):
        return TabularData.from_frame(data)
    if isinstance(data, TabularView):
        return data
    return TabularData(data)


def column_values(view: TabularView, col: int) -> np.ndarray:
    """Copy column ``col`` of ``view`` into a new 1-D array."""
    col = check_index(col, view.cols, "column")
    if isinstance(view, TabularData):
        return view.column(col)
    return np.fromiter((view.cell(row, col) for row in range(view.rows)), dtype=np.float64, count=view.rows)
