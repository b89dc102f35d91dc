"""DataFrame compatibility layer for pandas/polars interoperability."""

from typing import Any

import narwhals as nw
import polars as pl

DataFrame = Any  # Any object implementing __arrow_c_stream__


def to_polars(df: Any) -> pl.DataFrame:
    """Convert any Arrow-compatible DataFrame to polars.

    Parameters
    ----------
    df : Any
        Input DataFrame. Supports polars DataFrames and any object implementing
        the Arrow PyCapsule Interface (``__arrow_c_stream__``), such as pandas
        2.0+ DataFrames, pyarrow Tables and duckdb results.

    Returns
    -------
    pl.DataFrame
        Polars DataFrame.

    Raises
    ------
    TypeError
        If input doesn't implement ``__arrow_c_stream__``.
    """
    if isinstance(df, pl.DataFrame):
        return df

    if isinstance(df, pl.Series):
        return df.to_frame()

    if hasattr(df, "__arrow_c_stream__"):
        return nw.from_arrow(df, backend=pl).to_native()

    msg = f"Expected object implementing '__arrow_c_stream__', got: {type(df).__name__}"
    raise TypeError(msg)


def frame_to_matrix(df: Any) -> tuple[Any, list[str]]:
    """Return the numeric contents of a DataFrame as a 2-D float array and its column names."""
    frame = to_polars(df)
    non_numeric = [name for name, dtype in frame.schema.items() if not dtype.is_numeric()]
    if non_numeric:
        raise TypeError(f"Columns {non_numeric} are not numeric. Please convert or drop them.")
    return frame.to_numpy().astype("float64", copy=False), list(frame.columns)
