"""
================================================================
Circular density (:mod:`phenology.statistics.circular.density`)
================================================================

.. currentmodule:: phenology.statistics.circular.density

Kernel density estimation on the circle with a von Mises kernel.

.. autosummary::
    :toctree: generated/

    VonMisesKernel
    CircularDensity
    DensityPeak
    bandwidth_to_kappa
    taylor_bandwidth

"""
import collections

import numpy as np
import scipy.special

from phenology.utilities.errors import NumericDomainError
from phenology.utilities.errors import ValidationError
from phenology.version._version import __version__

from . import circular as circ
from .vonmises import A1inv

__all__ = [
    "VonMisesKernel",
    "CircularDensity",
    "DensityPeak",
    "bandwidth_to_kappa",
    "taylor_bandwidth",
]

DensityPeak = collections.namedtuple("DensityPeak", ["location", "density"])


def bandwidth_to_kappa(bandwidth):
    """Convert kernel standard deviation (in radians) to concentration.

    Parameters
    ----------
    bandwidth : float > 0

    Returns
    -------
    kappa : float

    """
    bandwidth = float(bandwidth)
    if not bandwidth > 0:
        raise ValidationError(
            "Bandwidth should be larger than zero, got {}.".format(bandwidth)
        )
    return 1.0 / bandwidth ** 2


def taylor_bandwidth(theta):
    """Rule of thumb concentration of the von Mises kernel.

    Implements the plug-in rule of Taylor (2008), which assumes that the
    data follows a von Mises distribution.

    Parameters
    ----------
    theta : 1d array-like

    Returns
    -------
    kappa : float
        Concentration of the kernel.

    Raises
    ------
    NumericDomainError
        If the data has zero dispersion.

    """
    theta = np.asarray(theta, dtype=np.float64).ravel()
    n = len(theta)

    R = circ.resultant_length(theta)

    if R >= 1.0 - 1e-12:
        raise NumericDomainError(
            "Cannot compute bandwidth for data with zero dispersion "
            "({} samples).".format(n)
        )

    kappa = A1inv(R)

    # I2(2k)/I0(k)^2 with exponentially scaled bessel functions
    ratio = scipy.special.ive(2, 2 * kappa) / scipy.special.i0e(kappa) ** 2
    bw = (3 * n * kappa ** 2 * ratio / (4 * np.sqrt(np.pi))) ** 0.4

    if not np.isfinite(bw) or bw <= 0:
        raise NumericDomainError(
            "Rule of thumb bandwidth is degenerate (R={:.3g}).".format(R)
        )

    return float(bw)


class VonMisesKernel:
    """Von Mises kernel.

    Parameters
    ----------
    kappa : float > 0
        Concentration of the kernel.

    """

    def __init__(self, kappa):
        kappa = float(kappa)

        if not np.isfinite(kappa) or kappa <= 0:
            raise NumericDomainError(
                "Kernel concentration should be finite and positive, got {}.".format(
                    kappa
                )
            )

        self._kappa = kappa
        # exponentially scaled to avoid overflow for large kappa
        self._norm = 2 * np.pi * scipy.special.i0e(kappa)

    def __repr__(self):
        return "VonMisesKernel(kappa={})".format(self._kappa)

    @property
    def kappa(self):
        return self._kappa

    @property
    def bandwidth(self):
        """Approximate standard deviation of the kernel in radians."""
        return 1.0 / np.sqrt(self._kappa)

    def __call__(self, dx):
        dx = np.asarray(dx, dtype=np.float64)
        return np.exp(self._kappa * (np.cos(dx) - 1.0)) / self._norm


class CircularDensity:
    """Kernel density estimate for circular data.

    The density is periodic, i.e. it can be evaluated at any angle and
    density(theta) equals density(theta + 2*pi*k) for integer k.

    Parameters
    ----------
    theta : 1d array-like
        Angles in radians.
    kappa : float or VonMisesKernel
        Concentration of the von Mises kernel.
    grid_size : int
        Number of evenly spaced angles in [0, 2*pi) at which the density
        is evaluated to find the peak.

    """

    def __init__(self, theta, kappa, grid_size=1024):
        self._theta = circ.wrap(np.asarray(theta, dtype=np.float64).ravel())

        if len(self._theta) == 0:
            raise ValidationError("Cannot compute density of empty data.")

        if isinstance(kappa, VonMisesKernel):
            self._kernel = kappa
        else:
            self._kernel = VonMisesKernel(kappa)

        try:
            grid_size = int(grid_size)
        except (TypeError, ValueError) as e:
            raise ValidationError(
                "Grid size should be an integer, got {!r}.".format(grid_size)
            ) from e

        if grid_size < 2:
            raise ValidationError(
                "Grid size should be at least 2, got {}.".format(grid_size)
            )

        self._grid = np.linspace(0, 2 * np.pi, grid_size, endpoint=False)
        self._values = self(self._grid)

    @property
    def kernel(self):
        return self._kernel

    @property
    def n(self):
        return len(self._theta)

    @property
    def grid(self):
        return self._grid

    @property
    def values(self):
        """Density at the grid angles."""
        return self._values

    def __call__(self, x):
        """Evaluate density at angles x."""
        x = np.asarray(x, dtype=np.float64)
        # loop over samples to keep memory bounded for large grids
        f = np.zeros(x.shape)
        for t in self._theta:
            f += self._kernel(x - t)
        f /= len(self._theta)

        if not np.all(np.isfinite(f)):
            raise NumericDomainError("Density has non-finite values.")

        return f

    def peak(self):
        """Location and value of the density maximum.

        The maximum is searched on the evaluation grid. In case of ties,
        the first grid angle is returned.

        Returns
        -------
        DensityPeak

        """
        idx = np.argmax(self._values)
        return DensityPeak(float(self._grid[idx]), float(self._values[idx]))
