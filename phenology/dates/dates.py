"""
==================================================
Calendar dates (:mod:`phenology.dates.dates`)
==================================================

.. currentmodule:: phenology.dates.dates

Conversion of calendar dates of observations to day of year and
selection of observations inside an analysis window.

.. autosummary::
    :toctree: generated/

    day_of_year
    date_from_day_of_year
    check_window
    select_observations
    Observations

"""
import collections
import warnings

import numpy as np
import pandas as pd

from phenology.utilities.errors import ValidationError
from phenology.version._version import __version__

__all__ = [
    "DAYS_IN_MONTH",
    "DAYS_IN_YEAR",
    "MIN_OBSERVATIONS",
    "MIN_SELECTED",
    "Observations",
    "day_of_year",
    "date_from_day_of_year",
    "check_window",
    "select_observations",
]

# no leap years
DAYS_IN_MONTH = np.array([31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31])
DAYS_IN_YEAR = int(np.sum(DAYS_IN_MONTH))

_MONTH_OFFSET = np.concatenate([[0], np.cumsum(DAYS_IN_MONTH)[:-1]])

# the raw input needs more than MIN_OBSERVATIONS rows and more than
# MIN_SELECTED rows need to remain after selecting the window
MIN_OBSERVATIONS = 24
MIN_SELECTED = 4

Observations = collections.namedtuple(
    "Observations", ["id", "day_of_year", "year", "n_obs"]
)
Observations.__doc__ = """Observations selected inside an analysis window.

Attributes
----------
id : 1d array
    Identifiers of the selected observations.
day_of_year : 1d int array
year : 1d int array
n_obs : int
    Number of observations in the raw input (before selection).

"""


def _as_integers(x, name):
    try:
        x = np.asarray(x, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise ValidationError("Field '{}' contains non-numeric values.".format(name)) from e

    if not np.all(np.isfinite(x)):
        raise ValidationError(
            "Field '{}' contains {} missing or non-finite values.".format(
                name, int(np.sum(~np.isfinite(x)))
            )
        )

    if np.any(x != np.round(x)):
        raise ValidationError("Field '{}' contains non-integral values.".format(name))

    return x.astype(np.int64)


def day_of_year(day, month):
    """Convert day and month to day of year.

    A fixed 365-day year is assumed, i.e. there is no correction for leap
    years.

    Parameters
    ----------
    day : int or array of ints
        Day of month (1-31).
    month : int or array of ints
        Month (1-12).

    Returns
    -------
    int or 1d array

    Examples
    --------
    >>> day_of_year(1, 1)
    1
    >>> day_of_year([25, 31], [5, 12])
    array([145, 365])

    """
    scalar = np.ndim(day) == 0 and np.ndim(month) == 0

    day = np.atleast_1d(_as_integers(day, "day"))
    month = np.atleast_1d(_as_integers(month, "month"))

    if np.any(month < 1) or np.any(month > 12):
        raise ValidationError("Month values should be in range [1, 12].")

    if np.any(day < 1) or np.any(day > 31):
        raise ValidationError("Day values should be in range [1, 31].")

    doy = _MONTH_OFFSET[month - 1] + day

    if scalar:
        return int(doy[0])

    return doy


def date_from_day_of_year(doy):
    """Convert day of year to day and month.

    Parameters
    ----------
    doy : int or array of ints
        Day of year in range [1, 365].

    Returns
    -------
    day, month : int or 1d arrays

    Examples
    --------
    >>> date_from_day_of_year(145)
    (25, 5)

    """
    scalar = np.ndim(doy) == 0
    doy = np.atleast_1d(_as_integers(doy, "day_of_year"))

    if np.any(doy < 1) or np.any(doy > DAYS_IN_YEAR):
        raise ValidationError(
            "Day of year values should be in range [1, {}].".format(DAYS_IN_YEAR)
        )

    month = np.searchsorted(_MONTH_OFFSET, doy, side="left")
    day = doy - _MONTH_OFFSET[month - 1]

    if scalar:
        return int(day[0]), int(month[0])

    return day, month


def check_window(window):
    """Check analysis window.

    Parameters
    ----------
    window : (start_day, end_day)
        Inclusive bounds of the analysis window in days of year.

    Returns
    -------
    start_day, end_day : int

    """
    try:
        start, end = window
    except (TypeError, ValueError) as e:
        raise ValidationError("Window should be a (start_day, end_day) pair.") from e

    start, end = _as_integers([start, end], "window")

    if start >= end:
        raise ValidationError(
            "Window start day ({}) should be smaller than end day ({}).".format(
                start, end
            )
        )

    if start < 1 or end > DAYS_IN_YEAR:
        raise ValidationError(
            "Window should lie within [1, {}], got [{}, {}].".format(
                DAYS_IN_YEAR, start, end
            )
        )

    return int(start), int(end)


def _bind_field(value, observations, name):
    # fields are either array-like values or column names in a data frame
    if observations is not None and isinstance(value, str):
        if value not in observations.columns:
            raise ValidationError("Missing column '{}' in observations.".format(value))
        return observations[value].to_numpy()

    if isinstance(value, str):
        raise ValidationError(
            "Field '{}' refers to column '{}', but no observations table was "
            "provided.".format(name, value)
        )

    return np.atleast_1d(np.asarray(value))


def select_observations(
    day="day",
    month="month",
    year="year",
    id="id",
    observations=None,
    window=(1, 365),
    unique=False,
):
    """Select observations inside an analysis window.

    Parameters
    ----------
    day, month, year : array-like or str
        Day of month, month and year of each observation. If *observations*
        is provided, then each of these can be the name of a column in the
        table.
    id : None, scalar, array-like or str
        Identifier of the observations. A scalar is used for all
        observations. If None, or if *id* names a column that is not present
        in *observations*, the row number (or table index) is used.
    observations : None or pandas.DataFrame
        Table of observations.
    window : (start_day, end_day)
        Inclusive bounds of the analysis window in days of year.
    unique : bool
        Drop duplicate (id, day, month, year) rows before selection.

    Returns
    -------
    Observations

    """
    if observations is not None and not isinstance(observations, pd.DataFrame):
        observations = pd.DataFrame(observations)

    start, end = check_window(window)

    day = _as_integers(_bind_field(day, observations, "day"), "day")
    month = _as_integers(_bind_field(month, observations, "month"), "month")
    year = _as_integers(_bind_field(year, observations, "year"), "year")

    if not (len(day) == len(month) == len(year)):
        raise ValidationError(
            "Fields day, month and year have unequal lengths ({}, {}, {}).".format(
                len(day), len(month), len(year)
            )
        )

    n = len(day)

    if id is None or (
        isinstance(id, str) and observations is not None and id not in observations.columns
    ):
        id = np.arange(n) if observations is None else observations.index.to_numpy()
    elif isinstance(id, str) and observations is None:
        id = np.arange(n)
    else:
        id = _bind_field(id, observations, "id")
        if len(id) == 1:
            id = np.repeat(id, n)
        elif len(id) != n:
            raise ValidationError(
                "Field id has length {}, expected {}.".format(len(id), n)
            )

    n_obs = n if observations is None else max(n, len(observations))

    if n_obs <= MIN_OBSERVATIONS:
        raise ValidationError(
            "At least {} observations are required, got {}.".format(
                MIN_OBSERVATIONS + 1, n_obs
            )
        )

    doy = day_of_year(day, month)

    if unique:
        table = pd.DataFrame(dict(id=id, day=day, month=month, year=year))
        keep = ~table.duplicated().to_numpy()
        if not np.all(keep):
            warnings.warn(
                "Dropped {} duplicate observations.".format(int(np.sum(~keep)))
            )
    else:
        keep = np.ones(n, dtype=bool)

    selected = np.logical_and.reduce([keep, doy >= start, doy <= end])

    if np.sum(selected) <= MIN_SELECTED:
        raise ValidationError(
            "At least {} observations are required in window [{}, {}], "
            "got {} of {}.".format(
                MIN_SELECTED + 1, start, end, int(np.sum(selected)), n_obs
            )
        )

    return Observations(id[selected], doy[selected], year[selected], n_obs)
