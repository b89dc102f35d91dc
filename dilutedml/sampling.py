"""Uniform random sampling of cells from a tabular view."""

from __future__ import annotations

import logging
import os
import threading

import numpy as np

from dilutedml.core.backend import to_device
from dilutedml.core.constants import SEED_ENV_VAR
from dilutedml.core.errors import EmptyDatasetError, InvalidArgumentError
from dilutedml.core.tabular import TabularData, as_tabular
from dilutedml.core.validators import check_count
from dilutedml.core.vector import create_float_vector

__all__ = ["get_generator", "sample", "seed"]

log = logging.getLogger("dilutedml.sampling")

_lock = threading.Lock()
_generator: np.random.Generator | None = None


def _seed_from_env():
    raw = os.environ.get(SEED_ENV_VAR)
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError as e:
        raise InvalidArgumentError(f"{SEED_ENV_VAR} must be an integer, got {raw!r}.") from e


def _shared_generator():
    """Return the process-wide generator, creating it on first use. Caller holds ``_lock``."""
    global _generator
    if _generator is None:
        initial = _seed_from_env()
        _generator = np.random.default_rng(initial)
        log.debug("Initialised shared generator (seed=%s)", initial if initial is not None else "entropy")
    return _generator


def seed(value=None):
    """Reseed the process-wide generator.

    Parameters
    ----------
    value : int or None, default None
        Seed for :func:`numpy.random.default_rng`. ``None`` draws fresh OS
        entropy.
    """
    global _generator
    if value is not None:
        check_count(value, "seed")
    with _lock:
        _generator = np.random.default_rng(value)
    log.debug("Reseeded shared generator (seed=%s)", value if value is not None else "entropy")


def get_generator():
    """Return the process-wide generator used by :func:`sample`.

    Draws from the returned object are not serialised; prefer :func:`sample`
    or pass ``random_state`` when sharing it between threads.
    """
    with _lock:
        return _shared_generator()


def _draw_indices(rng, rows, cols, count):
    row_idx = rng.integers(0, rows, size=count)
    col_idx = rng.integers(0, cols, size=count)
    return row_idx, col_idx


def sample(view, count, random_state=None):
    """Draw ``count`` cells uniformly at random, with replacement.

    Each draw picks a row uniformly from ``[0, rows)`` and, independently, a
    column uniformly from ``[0, cols)``, so one call can mix values from
    different columns.

    Parameters
    ----------
    view : TabularView or array_like
        Source data. Never modified.
    count : int
        Number of samples. Zero yields an empty vector.
    random_state : int, Generator or None, default None
        Source of randomness for this call only. ``None`` uses the shared
        process-wide generator, which is seeded once and never per call.

    Returns
    -------
    ndarray
        New 1-D ``float64`` vector of length ``count``.

    Raises
    ------
    InvalidArgumentError
        If ``count`` is negative or not an integer.
    EmptyDatasetError
        If ``count > 0`` and the view has no cells.
    """
    view = as_tabular(view)
    count = check_count(count)

    if count == 0:
        return create_float_vector(0)
    if view.rows == 0 or view.cols == 0:
        raise EmptyDatasetError(f"Cannot draw {count} samples from a view with no cells.")

    if random_state is None:
        with _lock:
            row_idx, col_idx = _draw_indices(_shared_generator(), view.rows, view.cols, count)
    else:
        row_idx, col_idx = _draw_indices(np.random.default_rng(random_state), view.rows, view.cols, count)

    if isinstance(view, TabularData):
        stream = view.values[row_idx, col_idx].astype(np.float64, copy=True)
    else:
        stream = np.fromiter(
            (view.cell(int(r), int(c)) for r, c in zip(row_idx, col_idx, strict=True)),
            dtype=np.float64,
            count=count,
        )
    return to_device(stream)
