"""
==================================================
Phenology analysis (:mod:`phenology.analysis`)
==================================================

.. currentmodule:: phenology.analysis

Circular statistics of observation dates of a seasonal event.

.. automodule:: phenology.analysis.phenology
   :noindex:

.. automodule:: phenology.analysis.config
   :noindex:

"""
from .config import *
from .phenology import *

__all__ = [s for s in dir() if not s.startswith("_")]
