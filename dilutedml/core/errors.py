"""Exception types raised by dilutedml operations."""

__all__ = [
    "DilutedMLError",
    "EmptyDatasetError",
    "IndexOutOfRangeError",
    "InvalidArgumentError",
]


class DilutedMLError(Exception):
    """Base class for all dilutedml errors."""


class EmptyDatasetError(DilutedMLError, ValueError):
    """Operation requires at least one row but the view has none."""


class IndexOutOfRangeError(DilutedMLError, IndexError):
    """Row or column index falls outside the bounds of the view."""


class InvalidArgumentError(DilutedMLError, ValueError):
    """Malformed numeric argument such as a negative count or a zero-span range."""
