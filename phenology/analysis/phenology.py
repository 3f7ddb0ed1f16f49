"""
=========================================================
Phenology analysis (:mod:`phenology.analysis.phenology`)
=========================================================

.. currentmodule:: phenology.analysis.phenology

Circular statistics of the timing of a recurring seasonal event.

.. autosummary::
    :toctree: generated/

    analyze
    PhenologyResult

"""
import collections

import numpy as np

import phenology.statistics.circular as circ
from phenology.dates import CircularTransform
from phenology.dates import select_observations
from phenology.utilities.errors import ValidationError
from phenology.version._version import __version__

__all__ = ["analyze", "PhenologyResult", "DEFAULT_BANDWIDTH", "DEFAULT_OPTIONS"]

# standard deviation of the density kernel in days: one fifth of a radian
# on a full year circle, i.e. a kernel concentration of about 25
DEFAULT_BANDWIDTH = 365 / (10 * np.pi)

DEFAULT_OPTIONS = collections.OrderedDict(
    window=(1, 365),
    bandwidth=DEFAULT_BANDWIDTH,
    step_size=7,
    quantiles=None,
    quantiles_boxplot=circ.BOXPLOT_PROBABILITIES,
    alpha=0.05,
    nsamples=1000,
    strategy="nonparametric",
    bias=False,
    rotation="counter",
    grid_size=1024,
    unique=False,
    seed=None,
)

_fields = [
    "mean",
    "ci",
    "mrl",
    "peak_day",
    "quantiles",
    "boxplot_quantiles",
    "n_obs",
    "n_used",
    "kappa",
    "kappa_ci",
    "density",
    "transform",
    "step_size",
]


class PhenologyResult(collections.namedtuple("PhenologyResult", _fields)):
    """Result of a phenology analysis.

    All timing values are expressed as day of year.

    Attributes
    ----------
    mean : float
        Circular mean.
    ci : (float, float)
        Bootstrap confidence interval of the mean, low <= high.
    mrl : float
        Mean resultant length.
    peak_day : float
        Location of the maximum of the kernel density.
    quantiles : [(probability, day), ...]
    boxplot_quantiles : [(probability, day), ...]
        Lower whisker, lower hinge, median, upper hinge and upper whisker.
    n_obs : int
        Number of observations in the input.
    n_used : int
        Number of observations inside the analysis window.
    kappa : float
        Concentration of the fitted von Mises distribution, infinite if
        all observations fall on the same day.
    kappa_ci : (float, float)
        Bootstrap confidence interval of the concentration.
    density : CircularDensity
        Kernel density of the observation angles.
    transform : CircularTransform
        Mapping between days and angles.
    step_size : float
        Bin size in days for `counts_at`.

    """

    __slots__ = ()

    def density_at(self, days):
        """Density per day at arbitrary days.

        Days outside the analysis window are wrapped, so that the density
        is continuous across the window boundary.
        """
        return self.transform.density_to_days(
            self.density(self.transform.to_angle(days))
        )

    def counts_at(self, days):
        """Expected number of observations per *step_size* days."""
        return self.density_at(days) * self.n_used * self.step_size


def _resolve_probabilities(probs, mrl):
    # probabilities can depend on the mean resultant length
    if callable(probs):
        probs = probs(mrl)
    return circ.check_probabilities(circ.clip_probabilities(probs))


def _kernel_concentration(bandwidth, theta, transform):
    if isinstance(bandwidth, str):
        if bandwidth != "taylor":
            raise ValidationError(
                "Invalid bandwidth '{}', expected a number of days or "
                "'taylor'.".format(bandwidth)
            )
        return circ.taylor_bandwidth(theta)

    try:
        bandwidth = float(bandwidth)
    except (TypeError, ValueError) as e:
        raise ValidationError("Bandwidth should be a number of days.") from e

    return circ.bandwidth_to_kappa(transform.days_to_angle(bandwidth))


def analyze(
    observations=None,
    day="day",
    month="month",
    year="year",
    id="id",
    window=(1, 365),
    bandwidth=DEFAULT_BANDWIDTH,
    step_size=7,
    quantiles=None,
    quantiles_boxplot=circ.BOXPLOT_PROBABILITIES,
    alpha=0.05,
    nsamples=1000,
    strategy="nonparametric",
    bias=False,
    rotation="counter",
    grid_size=1024,
    unique=False,
    seed=None,
):
    """Circular statistics of observation dates.

    Parameters
    ----------
    observations : None or pandas.DataFrame
        Table of observations.
    day, month, year, id : array-like or str
        Observation fields, or column names in *observations*.
    window : (start_day, end_day)
        Analysis window. Observations outside the window are ignored and
        the end of the window wraps around to the start.
    bandwidth : float or "taylor"
        Standard deviation of the density kernel in days, or "taylor" for
        a rule of thumb bandwidth.
    step_size : float
        Bin size in days used to express density as counts.
    quantiles : None, sequence of floats or callable
        Probabilities of quantiles. If a callable, it is called with the
        mean resultant length. If None, the probabilities are
        (1-mrl)/3, 0.5 and 1-(1-mrl)/3.
    quantiles_boxplot : 5-element sequence or callable
        Probabilities of the boxplot quantiles.
    alpha : float
        Significance level of the confidence interval of the mean.
    nsamples : int
        Number of bootstrap samples.
    strategy : "nonparametric" or "parametric"
        Bootstrap resampling strategy.
    bias : bool
        Small sample bias correction of the von Mises concentration.
    rotation : "counter" or "clock"
        Direction of increasing angles for quantiles.
    grid_size : int
        Number of grid points for finding the density peak.
    unique : bool
        Drop duplicate observations.
    seed : None, int or numpy.random.Generator
        Seed for the bootstrap.

    Returns
    -------
    PhenologyResult

    Raises
    ------
    ValidationError
        If there are not enough observations or options are invalid.
    FitConvergenceError
        If the data does not have a preferred direction. If all
        observations fall on the same day, the concentration is infinite
        and the confidence interval has zero width.
    NumericDomainError
        If the density is degenerate.

    """
    obs = select_observations(
        day=day,
        month=month,
        year=year,
        id=id,
        observations=observations,
        window=window,
        unique=unique,
    )

    transform = CircularTransform(*window)
    theta = transform.to_angle(obs.day_of_year)

    mu, mrl = circ.mean(theta)

    # probabilities are resolved before any expensive computation
    probs = _resolve_probabilities(
        circ.default_probabilities if quantiles is None else quantiles, mrl
    )
    probs_boxplot = _resolve_probabilities(quantiles_boxplot, mrl)

    if len(probs_boxplot) != 5:
        raise ValidationError(
            "Boxplot requires exactly 5 probabilities, got {}.".format(
                len(probs_boxplot)
            )
        )

    try:
        step_size = float(step_size)
    except (TypeError, ValueError) as e:
        raise ValidationError(
            "Step size should be a number of days, got {!r}.".format(step_size)
        ) from e

    if not step_size > 0:
        raise ValidationError(
            "Step size should be larger than zero, got {}.".format(step_size)
        )

    density = circ.CircularDensity(
        theta, _kernel_concentration(bandwidth, theta, transform), grid_size=grid_size
    )
    peak = density.peak()

    q = transform.to_day(circ.quantile(theta, probs, rotation=rotation))
    q_boxplot = transform.to_day(
        circ.boxplot_quantiles(theta, probs_boxplot, rotation=rotation)
    )

    boot = circ.bootstrap_ci(
        theta,
        alpha=alpha,
        nsamples=nsamples,
        strategy=strategy,
        bias=bias,
        rng=seed,
    )
    ci = [float(transform.to_day(x)) for x in boot.mu_ci]

    return PhenologyResult(
        mean=float(transform.to_day(mu)),
        ci=(min(ci), max(ci)),
        mrl=mrl,
        peak_day=float(transform.to_day(peak.location)),
        quantiles=[(float(p), float(v)) for p, v in zip(probs, q)],
        boxplot_quantiles=[(float(p), float(v)) for p, v in zip(probs_boxplot, q_boxplot)],
        n_obs=obs.n_obs,
        n_used=len(theta),
        kappa=boot.kappa,
        kappa_ci=boot.kappa_ci,
        density=density,
        transform=transform,
        step_size=step_size,
    )
