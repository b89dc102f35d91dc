"""Construction helpers for one-dimensional float vectors."""

import numpy as np

from .backend import get_backend, to_device
from .errors import InvalidArgumentError
from .validators import check_count

__all__ = ["Vector", "as_vector", "create_float_vector"]

Vector = np.ndarray


def create_float_vector(length):
    """Allocate a zero-filled float vector on the active backend.

    Parameters
    ----------
    length : int
        Number of elements. Zero is allowed.

    Returns
    -------
    ndarray
        New 1-D ``float64`` array of ``length`` zeros.
    """
    length = check_count(length, "length")
    return get_backend().zeros(length, dtype=np.float64)


def as_vector(values):
    """Return a fresh 1-D ``float64`` copy of ``values`` on the active backend.

    The result never shares memory with ``values``.
    """
    xp = get_backend()
    try:
        vec = xp.array(to_device(values), dtype=xp.float64, copy=True)
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError("values must be convertible to a float array.") from e
    if vec.ndim != 1:
        raise InvalidArgumentError(f"Expected a 1-dimensional vector, got {vec.ndim} dimensions.")
    return vec
