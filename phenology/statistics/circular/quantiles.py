"""
================================================================
Circular quantiles (:mod:`phenology.statistics.circular.quantiles`)
================================================================

.. currentmodule:: phenology.statistics.circular.quantiles

Quantiles of circular data.

.. autosummary::
    :toctree: generated/

    quantile
    boxplot_quantiles
    default_probabilities

"""
import warnings

import numpy as np

from phenology.utilities.errors import ValidationError
from phenology.version._version import __version__

from . import circular as circ

__all__ = [
    "ROTATIONS",
    "BOXPLOT_PROBABILITIES",
    "quantile",
    "boxplot_quantiles",
    "default_probabilities",
    "check_probabilities",
    "clip_probabilities",
]

ROTATIONS = ("counter", "clock")
BOXPLOT_PROBABILITIES = (0.1, 0.25, 0.5, 0.75, 0.9)


def check_probabilities(probs):
    """Check that probabilities are finite and in range [0, 1]."""
    try:
        probs = np.atleast_1d(np.asarray(probs, dtype=np.float64)).ravel()
    except (TypeError, ValueError) as e:
        raise ValidationError("Probabilities should be numeric.") from e

    if len(probs) == 0:
        raise ValidationError("At least one probability is required.")

    if not np.all(np.isfinite(probs)) or np.any(probs < 0) or np.any(probs > 1):
        raise ValidationError(
            "Probabilities should be in range [0, 1], got {}.".format(list(probs))
        )

    return probs


def default_probabilities(mrl):
    """Probabilities for quantiles, based on the concentration of the data.

    The outer quantiles move towards the tails of the distribution as the
    mean resultant length increases.

    Parameters
    ----------
    mrl : float
        Mean resultant length.

    Returns
    -------
    1d array
        Probabilities (1-mrl)/3, 0.5 and 1-(1-mrl)/3.

    """
    mrl = float(mrl)
    d = (1.0 - mrl) / 3.0
    return np.array([d, 0.5, 1.0 - d])


def quantile(theta, probs, rotation="counter"):
    """Quantiles of circular data.

    The data is referenced to the circular median and deviations are
    mapped to the range [-pi, pi). Quantiles are computed with linear
    interpolation between order statistics (type 7) and shifted back.

    Parameters
    ----------
    theta : 1d array-like
        Angles in radians.
    probs : float or 1d array-like
        Probabilities in range [0, 1].
    rotation : "counter" or "clock"
        Direction in which angles increase. With clockwise rotation the
        quantile for probability p equals the counter clockwise quantile
        for probability 1-p.

    Returns
    -------
    1d array
        Quantiles in range [0, 2*pi).

    """
    if not rotation in ROTATIONS:
        raise ValidationError(
            "Invalid rotation '{}', expected one of {}.".format(
                rotation, ", ".join(ROTATIONS)
            )
        )

    probs = check_probabilities(probs)
    theta = np.asarray(theta, dtype=np.float64).ravel()

    if len(theta) == 0:
        raise ValidationError("Cannot compute quantiles of empty data.")

    if rotation == "clock":
        probs = 1.0 - probs

    center = circ.median(theta)
    deviation = circ.diff(theta, center, directed=True)

    q = np.quantile(deviation, probs, method="linear")

    return circ.wrap(q + center)


def boxplot_quantiles(theta, probs=BOXPLOT_PROBABILITIES, rotation="counter"):
    """Five quantiles for a boxplot.

    Parameters
    ----------
    theta : 1d array-like
    probs : 5-element sequence
        Probabilities for the lower whisker, lower hinge, median, upper
        hinge and upper whisker.
    rotation : "counter" or "clock"

    Returns
    -------
    (5,) array

    """
    probs = check_probabilities(probs)

    if len(probs) != 5:
        raise ValidationError(
            "Boxplot requires exactly 5 probabilities, got {}.".format(len(probs))
        )

    return quantile(theta, probs, rotation=rotation)


def clip_probabilities(probs):
    """Clip negative probabilities to zero."""
    probs = np.asarray(probs, dtype=np.float64)
    if np.any(probs < 0):
        warnings.warn("Negative quantile probabilities were set to zero.")
        probs = np.maximum(probs, 0.0)
    return probs
