"""
===========================================================
Circular statistics (:mod:`phenology.statistics.circular.circular`)
===========================================================

.. currentmodule:: phenology.statistics.circular.circular

Descriptive statistics for angular data. All angles are in radians.

.. autosummary::
    :toctree: generated/

    wrap
    diff
    resultant
    mean
    resultant_length
    dispersion
    median

"""
import numba
import numpy as np

from phenology.version._version import __version__

__all__ = [
    "wrap",
    "diff",
    "resultant",
    "mean",
    "resultant_length",
    "dispersion",
    "median",
]


def wrap(theta, low=0.0, high=2 * np.pi):
    """Wrap angles to a range.

    Parameters
    ----------
    theta : array-like
        Angles in radians.
    low, high : float
        Range of wrapped angles, [low, high).

    Returns
    -------
    array

    Examples
    --------
    >>> float(wrap(-np.pi / 2))
    4.71238898038469
    >>> float(wrap(3 * np.pi, low=-np.pi, high=np.pi))
    -3.141592653589793

    """
    theta = np.asarray(theta, dtype=np.float64)
    period = high - low
    theta = np.mod(theta - low, period)
    # np.mod may round tiny negative values up to the period itself
    theta = np.where(theta >= period, 0.0, theta)
    return theta + low


def diff(phi, theta, directed=False):
    """Circular difference between angles.

    Parameters
    ----------
    phi, theta : array-like
    directed : bool
        If True, the signed difference phi-theta in range [-pi, pi) is
        returned. Otherwise the absolute distance in range [0, pi].

    Returns
    -------
    array

    """
    d = wrap(np.asarray(phi) - np.asarray(theta), low=-np.pi, high=np.pi)
    if not directed:
        d = np.abs(d)
    return d


def resultant(theta, axis=0):
    """Sum of unit vectors.

    Parameters
    ----------
    theta : array-like
    axis : int

    Returns
    -------
    C, S : sum of cosines and sum of sines

    """
    theta = np.asarray(theta, dtype=np.float64)
    return np.sum(np.cos(theta), axis=axis), np.sum(np.sin(theta), axis=axis)


def mean(theta, axis=0):
    """Circular mean direction and mean resultant length.

    Parameters
    ----------
    theta : array-like
    axis : int

    Returns
    -------
    mu : array or float
        Mean direction in range [0, 2*pi).
    R : array or float
        Mean resultant length in range [0, 1].

    Examples
    --------
    >>> mu, R = mean([0.5, 1.5])
    >>> round(float(mu), 6), round(float(R), 6)
    (1.0, 0.877583)

    """
    theta = np.asarray(theta, dtype=np.float64)
    n = theta.shape[axis]

    C, S = resultant(theta, axis=axis)

    mu = wrap(np.arctan2(S, C))
    R = np.clip(np.sqrt(C ** 2 + S ** 2) / n, 0.0, 1.0)

    if np.ndim(mu) == 0:
        mu, R = float(mu), float(R)

    return mu, R


def resultant_length(theta, axis=0):
    """Mean resultant length.

    A value of 1 means that all angles are the same, a value of 0 means
    that the angles are spread evenly around the circle.
    """
    return mean(theta, axis=axis)[1]


def dispersion(theta, axis=0):
    """Circular variance, 1 - R."""
    return 1.0 - resultant_length(theta, axis=axis)


# the distance sums are O(n^2), so we compile the loop with numba
# theta is assumed to be in the range [0, 2pi)
@numba.jit(nopython=True, nogil=True)
def _summed_distance(theta):
    n = len(theta)
    d = np.zeros(n)
    for i in range(n):
        for j in range(n):
            d[i] += np.pi - np.abs(np.pi - np.abs(theta[i] - theta[j]))
    return d


def median(theta):
    """Circular median.

    The circular median is the sample angle that minimizes the summed
    circular distance to all other angles. If multiple sample angles
    are equally good, their circular mean is returned.

    Parameters
    ----------
    theta : 1d array-like

    Returns
    -------
    float

    """
    theta = wrap(np.asarray(theta, dtype=np.float64).ravel())

    if len(theta) == 0:
        raise ValueError("Cannot compute median of empty array.")

    d = _summed_distance(theta)
    candidates = theta[np.isclose(d, np.min(d), rtol=1e-12, atol=1e-12)]

    return mean(candidates)[0]
