"""Selects the array module that holds column scratch copies and returned vectors."""

from __future__ import annotations

import contextlib
from contextvars import ContextVar

import numpy as np

from .constants import BACKENDS
from .errors import InvalidArgumentError

try:
    import cupy as cp

    HAS_CUPY = True
except ImportError:
    HAS_CUPY = False
    cp = None

__all__ = [
    "HAS_CUPY",
    "get_backend",
    "set_backend",
    "to_device",
    "to_numpy",
    "use_backend",
]

_active_backend: ContextVar[str] = ContextVar("dilutedml_backend", default="numpy")


def set_backend(name):
    """Choose where statistics run and where scaled or sampled vectors are allocated.

    Parameters
    ----------
    name : {"numpy", "cupy"}
        ``"cupy"`` keeps column copies and output vectors in GPU memory and
        needs CuPy plus a CUDA device.
    """
    _active_backend.set(_check_backend(name))


def get_backend():
    """Return ``numpy`` or ``cupy``, whichever currently allocates vectors."""
    if _active_backend.get() == "cupy":
        return cp
    return np


@contextlib.contextmanager
def use_backend(name):
    """Allocate vectors on ``name`` for the duration of a ``with`` block.

    The backend in force before the block is restored on exit, including
    when the block raises. The setting is local to the current thread or
    task.

    Parameters
    ----------
    name : {"numpy", "cupy"}
        Backend used inside the block.
    """
    token = _active_backend.set(_check_backend(name))
    try:
        yield
    finally:
        _active_backend.reset(token)


def to_device(arr):
    """Place a column copy or vector on the active backend.

    Host arrays are uploaded when CuPy is active; GPU arrays are brought
    back to the host otherwise.

    Parameters
    ----------
    arr : array_like
        Values read from a view, or an input vector.

    Returns
    -------
    ndarray
        The same values as a NumPy or CuPy array.
    """
    if get_backend() is cp:
        if isinstance(arr, np.ndarray):
            return cp.asarray(arr)
        return arr
    return to_numpy(arr)


def to_numpy(arr):
    """Bring a vector back to host memory as a NumPy array."""
    if HAS_CUPY and isinstance(arr, cp.ndarray):
        return cp.asnumpy(arr)
    return np.asarray(arr)


def _check_backend(name):
    name = name.lower()
    if name not in BACKENDS:
        raise InvalidArgumentError(f"Unknown backend {name!r}. Choose one of {', '.join(BACKENDS)}.")
    if name == "cupy":
        if not HAS_CUPY:
            raise ImportError("CuPy is not installed. Install with: uv pip install 'dilutedml[gpu]'")
        if not cp.is_available():
            raise RuntimeError("CuPy found no CUDA device; keep vectors on the 'numpy' backend.")
    return name
