"""Column statistics over tabular views."""

from .summary import (
    ColumnSummary,
    dispersion,
    mean,
    median,
    standard_deviation,
    summarize_column,
)

__all__ = [
    "ColumnSummary",
    "dispersion",
    "mean",
    "median",
    "standard_deviation",
    "summarize_column",
]
