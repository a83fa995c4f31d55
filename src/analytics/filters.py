"""
Dashboard data filters.

Pure functions deriving the displayed subsets from the raw datasets and
the current selection state:
- Outcomes by selected age group
- Diagnoses by selected diagnosis
- Vital signs by time range

Usage:
    from src.analytics.filters import filtered_outcomes, vital_signs_by_range

    shown = filtered_outcomes(datasets.outcomes, state.selected_age_group)
    vitals = vital_signs_by_range(datasets.vitals, state.time_range)
"""

from typing import Optional, Sequence, Tuple, Type

import pandas as pd

from ..data_processing.records import (
    ClinicalRecord,
    DiagnosisRecord,
    OutcomeRecord,
    VitalSample,
)

# Hour cut-off for each time range; ranges not listed keep every sample
TIME_RANGE_HOURS = {
    "6h": 6,
    "12h": 12,
}


def filtered_outcomes(
    outcomes: Sequence[OutcomeRecord],
    selected_age_group: Optional[str],
) -> Tuple[OutcomeRecord, ...]:
    """
    Outcomes shown in the bar chart.

    Args:
        outcomes: All outcome records
        selected_age_group: Selected age group, or None

    Returns:
        All records when nothing is selected, otherwise those whose age
        group equals the selection (input order preserved)
    """
    if not selected_age_group:
        return tuple(outcomes)
    return tuple(r for r in outcomes if r.age_group == selected_age_group)


def filtered_diagnoses(
    diagnoses: Sequence[DiagnosisRecord],
    selected_diagnosis: Optional[str],
) -> Tuple[DiagnosisRecord, ...]:
    """
    Diagnoses shown in the pie chart.

    Selecting a diagnosis reduces the pie to that single slice.
    """
    if not selected_diagnosis:
        return tuple(diagnoses)
    return tuple(r for r in diagnoses if r.name == selected_diagnosis)


def vital_signs_by_range(
    vitals: Sequence[VitalSample],
    time_range: str,
) -> Tuple[VitalSample, ...]:
    """
    Vital samples within the selected time range.

    '6h' keeps hour < 6, '12h' keeps hour < 12; '24h' and any other value
    keep every sample.
    """
    key = getattr(time_range, "value", time_range)
    cutoff = TIME_RANGE_HOURS.get(key)
    if cutoff is None:
        return tuple(vitals)
    return tuple(s for s in vitals if s.hour < cutoff)


def records_to_frame(
    records: Sequence[ClinicalRecord],
    record_type: Type[ClinicalRecord],
) -> pd.DataFrame:
    """
    Convert records to a DataFrame with camelCase columns.

    The columns are present even when *records* is empty.
    """
    return pd.DataFrame(
        [r.to_dict() for r in records],
        columns=record_type.json_keys(),
    )
