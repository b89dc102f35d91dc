"""Core data structures, validation and backend dispatch."""

from .backend import HAS_CUPY, get_backend, set_backend, to_device, to_numpy, use_backend
from .errors import DilutedMLError, EmptyDatasetError, IndexOutOfRangeError, InvalidArgumentError
from .format import head, tail
from .tabular import TabularData, TabularView, as_tabular, column_values
from .vector import Vector, as_vector, create_float_vector

__all__ = [
    "HAS_CUPY",
    "DilutedMLError",
    "EmptyDatasetError",
    "IndexOutOfRangeError",
    "InvalidArgumentError",
    "TabularData",
    "TabularView",
    "Vector",
    "as_tabular",
    "as_vector",
    "column_values",
    "create_float_vector",
    "get_backend",
    "head",
    "set_backend",
    "tail",
    "to_device",
    "to_numpy",
    "use_backend",
]
