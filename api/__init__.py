"""
API layer for webapp.

This module provides a facade over the data loader and analytics,
so pages only talk to one entry point.
"""

from .clinical import ClinicalDataAPI

__all__ = ['ClinicalDataAPI']
