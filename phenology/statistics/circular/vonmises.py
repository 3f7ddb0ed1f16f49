"""
=================================================================
Von Mises distribution (:mod:`phenology.statistics.circular.vonmises`)
=================================================================

.. currentmodule:: phenology.statistics.circular.vonmises

Maximum likelihood fit of the von Mises distribution and bootstrap
confidence intervals for its parameters.

.. autosummary::
    :toctree: generated/

    A1
    A1inv
    fit
    bootstrap_ci
    BootstrapResult

"""
import collections
import warnings

import numpy as np
import scipy.optimize
import scipy.special

import phenology.statistics.core
from phenology.utilities.errors import FitConvergenceError
from phenology.utilities.errors import ValidationError
from phenology.version._version import __version__

from . import circular as circ

__all__ = ["A1", "A1inv", "fit", "bootstrap_ci", "BootstrapResult", "STRATEGIES"]

STRATEGIES = ("nonparametric", "parametric")

# resultant lengths closer to 1 than this have no finite concentration
_MAX_RESULTANT = 1.0 - 1e-12

BootstrapResult = collections.namedtuple(
    "BootstrapResult", ["mu", "kappa", "mu_ci", "kappa_ci", "replicates"]
)
BootstrapResult.__doc__ = """Result of a von Mises bootstrap.

Attributes
----------
mu, kappa : float
    Maximum likelihood estimates of location and concentration.
mu_ci : (float, float)
    Lower and upper bound of the confidence interval of the location,
    wrapped to [0, 2*pi). The lower bound can be larger than the upper
    bound if the interval contains angle 0.
kappa_ci : (float, float)
    Confidence interval of the concentration.
replicates : (n, 2) array
    Location and concentration of all bootstrap samples.

"""


def A1(kappa):
    """Ratio of modified Bessel functions, I1(kappa)/I0(kappa).

    This is the mean resultant length of a von Mises distribution with
    concentration *kappa*.
    """
    kappa = np.asarray(kappa, dtype=np.float64)
    return scipy.special.i1e(kappa) / scipy.special.i0e(kappa)


def A1inv(R):
    """Inverse of A1.

    Parameters
    ----------
    R : float
        Mean resultant length in range [0, 1).

    Returns
    -------
    kappa : float
        Concentration for which A1(kappa) equals R.

    """
    R = float(R)

    if not 0.0 <= R < 1.0:
        raise FitConvergenceError(
            "Mean resultant length should be in range [0, 1), got {}.".format(R)
        )

    if R == 0.0:
        return 0.0

    # A1(kappa) ~ 1 - 1/(2*kappa) for large kappa, so the root lies below 2/(1-R)
    upper = max(10.0, 2.0 / (1.0 - R))

    try:
        kappa, result = scipy.optimize.brentq(
            lambda k: A1(k) - R, 0.0, upper, full_output=True
        )
    except (ValueError, RuntimeError) as e:
        raise FitConvergenceError(
            "Concentration estimate did not converge for R={}.".format(R)
        ) from e

    if not result.converged:
        raise FitConvergenceError(
            "Concentration estimate did not converge for R={}: {}.".format(
                R, result.flag
            )
        )

    return float(kappa)


def _correct_bias(kappa, n):
    # Best and Fisher (1981) small sample correction
    if kappa < 2:
        return max(kappa - 2.0 / (n * kappa), 0.0) if kappa > 0 else 0.0
    else:
        return (n - 1) ** 3 * kappa / (n ** 3 + n)


def fit(theta, bias=False, tol=1e-6):
    """Maximum likelihood fit of the von Mises distribution.

    Parameters
    ----------
    theta : 1d array-like
        Angles in radians.
    bias : bool
        Apply small sample bias correction to the concentration.
    tol : float
        Mean resultant lengths below this value are considered to have no
        preferred direction.

    Returns
    -------
    mu : float
        Location, in range [0, 2*pi).
    kappa : float
        Concentration. Infinite if all samples are equal.

    Raises
    ------
    FitConvergenceError
        If the data has no preferred direction, or if the concentration
        estimate does not converge.

    """
    theta = np.asarray(theta, dtype=np.float64).ravel()
    n = len(theta)

    mu, R = circ.mean(theta)

    if R < tol:
        raise FitConvergenceError(
            "Data has no preferred direction (mean resultant length {:.3g} "
            "for {} samples).".format(R, n)
        )

    if R > _MAX_RESULTANT:
        warnings.warn(
            "Data has zero dispersion (all {} samples are equal), "
            "concentration is infinite.".format(n)
        )
        return mu, np.inf

    kappa = A1inv(R)

    if bias:
        kappa = _correct_bias(kappa, n)
        if kappa == 0.0:
            warnings.warn("Bias corrected concentration is zero.")

    return mu, kappa


def _concentration(R, n, bias):
    # concentration of bootstrap replicates, NaN if not defined
    kappa = np.full(len(R), np.nan)
    for k, r in enumerate(R):
        if r > _MAX_RESULTANT:
            kappa[k] = np.inf
            continue
        try:
            kappa[k] = A1inv(r)
        except FitConvergenceError:
            continue
        if bias:
            kappa[k] = _correct_bias(kappa[k], n)
    return kappa


def _concentration_interval(kappa, alpha):
    if np.all(np.isnan(kappa)):
        return (np.nan, np.nan)
    lo, hi = phenology.statistics.core.percentile_interval(kappa, alpha=alpha)
    # interpolation towards an infinite replicate yields NaN
    return tuple(np.inf if np.isnan(k) else float(k) for k in (lo, hi))


def bootstrap_ci(
    theta,
    alpha=0.05,
    nsamples=1000,
    strategy="nonparametric",
    bias=False,
    tol=1e-6,
    rng=None,
):
    """Bootstrap confidence interval for von Mises location and concentration.

    Parameters
    ----------
    theta : 1d array-like
        Angles in radians.
    alpha : float
        Significance level, the interval has 100*(1-alpha) % coverage.
    nsamples : int
        Number of bootstrap samples.
    strategy : "nonparametric" or "parametric"
        Resample the observed data with replacement or sample from the
        fitted von Mises distribution.
    bias : bool
        Apply small sample bias correction to the concentration.
    tol : float
        See `fit`.
    rng : None, int or numpy.random.Generator
        Random number generator or seed.

    Returns
    -------
    BootstrapResult
        For data with zero dispersion the concentration is infinite and
        the interval of the location has zero width.

    """
    theta = np.asarray(theta, dtype=np.float64).ravel()
    n = len(theta)

    if not strategy in STRATEGIES:
        raise ValidationError(
            "Invalid bootstrap strategy '{}', expected one of {}.".format(
                strategy, ", ".join(STRATEGIES)
            )
        )

    alpha = phenology.statistics.core.check_alpha(alpha)
    nsamples = phenology.statistics.core.check_nsamples(nsamples)

    mu, kappa = fit(theta, bias=bias, tol=tol)

    try:
        rng = np.random.default_rng(rng)
    except (TypeError, ValueError) as e:
        raise ValidationError(
            "Invalid seed or random number generator {!r}.".format(rng)
        ) from e

    if strategy == "nonparametric":
        stat = phenology.statistics.core.replicates(
            theta,
            statistic=circ.mean,
            nsamples=nsamples,
            rng=rng,
        )
        mu_b, R_b = stat[:, 0], stat[:, 1]
    elif np.isinf(kappa):
        # the fitted distribution is a point mass
        mu_b, R_b = np.full(nsamples, mu), np.ones(nsamples)
    else:
        samples = rng.vonmises(mu, kappa, size=(nsamples, n))
        mu_b, R_b = circ.mean(samples, axis=1)

    kappa_b = _concentration(R_b, n, bias)

    # percentiles of the deviation from the fitted location, so that
    # the replicate distribution is not split at angle 0
    lo, hi = phenology.statistics.core.percentile_interval(
        circ.diff(mu_b, mu, directed=True), alpha=alpha
    )
    mu_ci = (float(circ.wrap(mu + lo)), float(circ.wrap(mu + hi)))

    kappa_ci = _concentration_interval(kappa_b, alpha)

    return BootstrapResult(
        mu, kappa, mu_ci, kappa_ci, np.column_stack([circ.wrap(mu_b), kappa_b])
    )
