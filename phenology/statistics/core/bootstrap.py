"""
======================================================
Bootstrap (:mod:`phenology.statistics.core.bootstrap`)
======================================================

.. currentmodule:: phenology.statistics.core.bootstrap

Bootstrapping utilities.

"""
from phenology.version._version import __version__

__all__ = [
    "replicates",
    "percentile_interval",
    "bootstrap_indexes",
    "check_alpha",
    "check_nsamples",
]

import numpy as np

from phenology.utilities.errors import ValidationError


def check_alpha(alpha):
    """Check significance level, 0 < alpha < 1."""
    try:
        alpha = float(alpha)
    except (TypeError, ValueError) as e:
        raise ValidationError(
            "Significance level alpha should be a number, got {!r}.".format(alpha)
        ) from e

    if not 0.0 < alpha < 1.0:
        raise ValidationError(
            "Significance level alpha should be in range (0, 1), got {}.".format(alpha)
        )
    return alpha


def check_nsamples(nsamples):
    """Check number of bootstrap samples, an integer >= 1."""
    try:
        nsamples = int(nsamples)
    except (TypeError, ValueError) as e:
        raise ValidationError(
            "Number of bootstrap samples should be an integer, got {!r}.".format(
                nsamples
            )
        ) from e

    if nsamples < 1:
        raise ValidationError(
            "Number of bootstrap samples should be at least 1, got {}.".format(nsamples)
        )
    return nsamples


def replicates(data, statistic, nsamples=10000, axis=0, rng=None):
    """Compute statistic for bootstrap resamples of the data.

    Parameters
    ----------
    data : array or sequence of arrays
    statistic : function( *data ) -> scalar or array
    nsamples : int, optional
        number of bootstrap samples
    axis : int, optional
        axis of data samples
    rng : None, int or numpy.random.Generator
        Random number generator or seed.

    Returns
    -------
    array
        Statistic for each bootstrap sample, stacked along the first axis.

    """
    if not isinstance(data, (list, tuple)):
        data = (data,)

    data = [np.asarray(x) for x in data]

    nsamples = check_nsamples(nsamples)

    rng = np.random.default_rng(rng)

    bootindexes = bootstrap_indexes([x.shape[axis] for x in data], nsamples, rng=rng)
    stat = np.array(
        [
            statistic(*(x.take(idx, axis=axis) for x, idx in zip(data, indexes)))
            for indexes in bootindexes
        ]
    )

    return stat


def percentile_interval(stat, alpha=0.05):
    """Two-sided percentile interval of bootstrap replicates.

    NaN replicates are ignored.
    """
    lo, hi = np.nanpercentile(
        stat, [100.0 * alpha / 2.0, 100.0 * (1 - alpha / 2.0)], axis=0
    )
    return lo, hi


def bootstrap_indexes(n, nsamples=10000, rng=None):
    """Generate bootstrap indices."""
    if not isinstance(n, (list, tuple)):
        n = (n,)

    rng = np.random.default_rng(rng)

    for _ in range(nsamples):
        yield (rng.integers(N, size=(N,)) for N in n)
