"""
=======================================================
Error types (:mod:`phenology.utilities.errors`)
=======================================================

.. currentmodule:: phenology.utilities.errors

Exceptions raised by the phenology analysis.

.. autosummary::
    :toctree: generated/

    PhenologyError
    ValidationError
    FitConvergenceError
    NumericDomainError

"""
from phenology.version._version import __version__

__all__ = [
    "PhenologyError",
    "ValidationError",
    "FitConvergenceError",
    "NumericDomainError",
]


class PhenologyError(Exception):
    """Base class for all phenology analysis errors."""

    def __init__(self, msg):
        super().__init__(msg)
        self.msg = msg

    def __str__(self):
        return str(self.msg)


class ValidationError(PhenologyError, ValueError):
    """Exception raised if input data or options fail a precondition."""


class FitConvergenceError(PhenologyError):
    """Exception raised if the von Mises fit does not converge.

    This usually means the data has no preferred direction (i.e. no
    detectable seasonal peak) or no dispersion at all.
    """


class NumericDomainError(PhenologyError, ArithmeticError):
    """Exception raised if a density or bandwidth is numerically degenerate."""
