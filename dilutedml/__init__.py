"""Statistics, sampling and rescaling primitives for tabular ML pipelines."""

from dilutedml.core import (
    DilutedMLError,
    EmptyDatasetError,
    IndexOutOfRangeError,
    InvalidArgumentError,
    TabularData,
    TabularView,
    Vector,
    as_tabular,
    as_vector,
    create_float_vector,
    get_backend,
    head,
    set_backend,
    tail,
    use_backend,
)
from dilutedml.sampling import get_generator, sample, seed
from dilutedml.scaling import rescale, scale_by_range
from dilutedml.stats import (
    ColumnSummary,
    dispersion,
    mean,
    median,
    standard_deviation,
    summarize_column,
)

__version__ = "0.1.0"

__all__ = [
    "ColumnSummary",
    "DilutedMLError",
    "EmptyDatasetError",
    "IndexOutOfRangeError",
    "InvalidArgumentError",
    "TabularData",
    "TabularView",
    "Vector",
    "as_tabular",
    "as_vector",
    "create_float_vector",
    "dispersion",
    "get_backend",
    "get_generator",
    "head",
    "mean",
    "median",
    "rescale",
    "sample",
    "scale_by_range",
    "seed",
    "set_backend",
    "standard_deviation",
    "summarize_column",
    "tail",
    "use_backend",
]
