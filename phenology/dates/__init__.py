"""
===============================================
Calendar dates (:mod:`phenology.dates`)
===============================================

.. currentmodule:: phenology.dates

Day of year conversion, selection of observations and mapping of days
onto the circle.

.. automodule:: phenology.dates.dates
   :noindex:

.. automodule:: phenology.dates.transform
   :noindex:

"""
from .dates import *
from .transform import *

__all__ = [s for s in dir() if not s.startswith("_")]
