"""
======================================================
Circular transform (:mod:`phenology.dates.transform`)
======================================================

.. currentmodule:: phenology.dates.transform

Linear mapping between days in an analysis window and angles on the circle.

.. autosummary::
    :toctree: generated/

    CircularTransform

"""
import numpy as np

import phenology.statistics.circular as circ
from phenology.version._version import __version__

from .dates import check_window

__all__ = ["CircularTransform"]


class CircularTransform:
    """Map days in an analysis window onto the circle.

    The start day of the window is mapped to angle 0 and the end day is
    mapped to angle 2*pi, i.e. the end of the window wraps around to the
    start.

    Parameters
    ----------
    start_day, end_day : int
        Inclusive bounds of the analysis window.

    Examples
    --------
    >>> t = CircularTransform(1, 365)
    >>> float(t.to_angle(183))
    3.141592653589793
    >>> float(t.to_day(-np.pi))
    183.0

    """

    def __init__(self, start_day=1, end_day=365):
        self._start, self._end = check_window((start_day, end_day))

    def __repr__(self):
        return "CircularTransform(start_day={}, end_day={})".format(
            self._start, self._end
        )

    @property
    def start_day(self):
        return self._start

    @property
    def end_day(self):
        return self._end

    @property
    def span(self):
        """Number of days that make up a full cycle."""
        return self._end - self._start

    def to_angle(self, day):
        """Convert day of year to angle."""
        return (np.asarray(day, dtype=np.float64) - self._start) / self.span * 2 * np.pi

    def to_day(self, theta):
        """Convert angle to day of year.

        Angles are first wrapped into the range [0, 2*pi).
        """
        return circ.wrap(theta) / (2 * np.pi) * self.span + self._start

    def days_to_angle(self, length):
        """Convert a length (e.g. a bandwidth) in days to radians."""
        return np.asarray(length, dtype=np.float64) / self.span * 2 * np.pi

    def angle_to_days(self, length):
        """Convert a length (e.g. a bandwidth) in radians to days."""
        return np.asarray(length, dtype=np.float64) / (2 * np.pi) * self.span

    def density_to_days(self, density):
        """Convert a density per radian to a density per day."""
        return np.asarray(density, dtype=np.float64) * 2 * np.pi / self.span
