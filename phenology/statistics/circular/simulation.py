"""
======================================================================
Seasonal data simulation (:mod:`phenology.statistics.circular.simulation`)
======================================================================

.. currentmodule:: phenology.statistics.circular.simulation

Tool to create a dataset of observation dates of a seasonal event.

.. autosummary::
    :toctree: generated/

    generate_seasonal_dataset
"""
import numpy as np
import pandas as pd

import phenology.statistics.circular as circ
from phenology.dates.dates import date_from_day_of_year
from phenology.dates.transform import CircularTransform

__all__ = ["generate_seasonal_dataset"]


def generate_seasonal_dataset(
    nsamples=100, peak_day=145, kappa=50.0, window=(1, 365), years=(2010, 2020), rng=None
):
    """Generate observation dates with a seasonal peak.

    Parameters
    ----------
    nsamples : int
        Number of observations in data set.
    peak_day : scalar
        Day of year around which observations are concentrated.
    kappa : scalar
        Kappa parameter of the Von Mises distribution from which the
        observation angles are drawn. Lower values of kappa spread the
        observations over a larger part of the window.
    window : (start_day, end_day)
        Window that is mapped onto the circle.
    years : (first, last)
        Range from which years are uniformly drawn.
    rng : None, int or numpy.random.Generator

    Returns
    -------
    pandas.DataFrame
        Table with id, day, month and year columns.

    """
    rng = np.random.default_rng(rng)
    transform = CircularTransform(*window)

    theta = circ.wrap(transform.to_angle(peak_day) + rng.vonmises(0, kappa, nsamples))
    doy = np.round(transform.to_day(theta)).astype(int)
    # the window end coincides with the start on the circle
    doy = np.clip(doy, transform.start_day, transform.end_day)

    day, month = date_from_day_of_year(doy)
    year = rng.integers(years[0], years[1] + 1, size=nsamples)

    return pd.DataFrame(
        dict(id=np.arange(nsamples), day=day, month=month, year=year)
    )
