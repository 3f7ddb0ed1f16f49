"""
====================================================
Statistical functions (:mod:`phenology.statistics.core`)
====================================================

.. currentmodule:: phenology.statistics.core

Collection of statistical functions.


"""
from .bootstrap import *

__all__ = [s for s in dir() if not s.startswith("_")]
