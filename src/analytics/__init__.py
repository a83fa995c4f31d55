"""
Dashboard Analytics Package

Pure filters and summaries over the loaded clinical datasets.
"""

from .filters import (
    filtered_outcomes,
    filtered_diagnoses,
    vital_signs_by_range,
    records_to_frame,
)

__all__ = [
    'filtered_outcomes',
    'filtered_diagnoses',
    'vital_signs_by_range',
    'records_to_frame',
]
