"""Affine rescaling of vectors."""

from dilutedml.core.validators import check_bounds
from dilutedml.core.vector import as_vector

__all__ = ["rescale", "scale_by_range"]


def scale_by_range(vector, lower, upper):
    """Divide every element by the span ``upper - lower``.

    This does not subtract ``lower`` first, so results fall in ``[0, 1]`` only
    when the inputs already lie in ``[0, upper - lower]``. Use :func:`rescale`
    for a min-max mapping.

    Parameters
    ----------
    vector : array_like
        One-dimensional input. Never modified.
    lower, upper : float
        Bounds whose difference is the divisor.

    Returns
    -------
    ndarray
        New vector of the same length.

    Raises
    ------
    InvalidArgumentError
        If ``upper == lower``, a bound is not finite, or ``vector`` is not 1-D.
    """
    lower, upper = check_bounds(lower, upper)
    return as_vector(vector) / (upper - lower)


def rescale(vector, lower, upper, new_lower, new_upper):
    """Map values from ``[lower, upper]`` onto ``[new_lower, new_upper]``.

    Each output element is ``x * scale + offset`` with
    ``scale = (new_upper - new_lower) / (upper - lower)`` and
    ``offset = new_lower - scale * lower``. Swapping the two ranges inverts
    the mapping.

    Parameters
    ----------
    vector : array_like
        One-dimensional input. Never modified.
    lower, upper : float
        Source range.
    new_lower, new_upper : float
        Target range.

    Returns
    -------
    ndarray
        New vector of the same length.

    Raises
    ------
    InvalidArgumentError
        If either range has zero span, a bound is not finite, or ``vector`` is
        not 1-D.
    """
    lower, upper = check_bounds(lower, upper, "source range")
    new_lower, new_upper = check_bounds(new_lower, new_upper, "target range")

    scale = (new_upper - new_lower) / (upper - lower)
    offset = new_lower - scale * lower

    out = as_vector(vector)
    out *= scale
    out += offset
    return out
