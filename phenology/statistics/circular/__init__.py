"""
======================================================
Circular statistics (:mod:`phenology.statistics.circular`)
======================================================

.. currentmodule:: phenology.statistics.circular

Collection of circular statistics functions.

.. automodule:: phenology.statistics.circular.circular
   :noindex:

.. automodule:: phenology.statistics.circular.vonmises
   :noindex:

.. automodule:: phenology.statistics.circular.density
   :noindex:

.. automodule:: phenology.statistics.circular.quantiles
   :noindex:

"""
from .circular import *
from .density import *
from .quantiles import *
from .vonmises import *

__all__ = [s for s in dir() if not s.startswith("_")]
