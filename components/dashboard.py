"""
Dashboard Tab Layout

Renders the charts of the active tab and translates Plotly selection
events (bar clicks, box-select drags) into view-state actions.
"""

import streamlit as st
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence

from api import ClinicalDataAPI
from components.charts import (
    create_diagnosis_pie_chart,
    create_medication_chart,
    create_medication_usage_chart,
    create_outcomes_chart,
    create_stay_duration_chart,
    create_vital_correlation_chart,
    create_vital_signs_chart,
)
from components.filters import (
    chart_visibility_toggles,
    diagnosis_picker,
    selection_indicators,
    tab_selector,
    time_range_selector,
    zoom_controls,
)
from components.sidebar import interaction_hint
from components.tables import display_records_table
from src.analytics.filters import (
    filtered_diagnoses,
    filtered_outcomes,
    vital_signs_by_range,
)
from src.data_processing.records import (
    ClinicalDatasets,
    MedicationRecord,
    StayRecord,
)
from src.state.view_state import (
    PointerDown,
    PointerMove,
    PointerUp,
    Tab,
    ToggleAgeGroup,
    ViewStateStore,
    charts_for_tab,
)
from utils.formatting import format_days, format_number, format_percentage


# ---------------------------------------------------------------------------
# Selection event translation
# ---------------------------------------------------------------------------

def _selection(event: Optional[Mapping[str, Any]]) -> Mapping[str, Any]:
    if not event:
        return {}
    return event.get("selection") or {}


def selected_point_key(event: Optional[Mapping[str, Any]],
                       fields: Sequence[str] = ("x",)) -> Optional[str]:
    """
    Key of the first clicked point in a Plotly selection event.

    Bar points carry the category in 'x'.
    Returns None when nothing is selected.
    """
    points = _selection(event).get("points") or []
    if not points:
        return None
    point = points[0]
    for name in fields:
        value = point.get(name)
        if value is not None and value != "":
            return str(value)
    return None


def nearest_label(value: float, labels: Sequence[float]) -> Optional[float]:
    """Snap a continuous axis position to the nearest sample hour."""
    if not labels:
        return None
    return min(labels, key=lambda label: abs(float(label) - value))


def box_selection_actions(event: Optional[Mapping[str, Any]],
                          labels: Sequence[float]) -> List[Any]:
    """
    Actions equivalent to a drag across a box selection.

    The first box edge becomes the pointer-down label and the second the
    pointer-move label, each snapped to the nearest sample hour, followed
    by pointer-up. Returns an empty list when no box was drawn.
    """
    boxes = _selection(event).get("box") or []
    if not boxes:
        return []
    xs = boxes[0].get("x") or []
    if len(xs) < 2:
        return []

    start = nearest_label(float(xs[0]), labels)
    end = nearest_label(float(xs[1]), labels)
    return [PointerDown(start), PointerMove(end), PointerUp()]


def _on_select(key: str, handler: Callable[[Any], None]) -> Callable[[], None]:
    """Build an on_select callback that passes the chart's event to *handler*."""
    def _callback():
        handler(st.session_state.get(key))
    return _callback


def _no_data() -> None:
    st.caption("No data available")


# ---------------------------------------------------------------------------
# Chart sections
# ---------------------------------------------------------------------------

def _render_outcomes(store: ViewStateStore, data: ClinicalDatasets) -> None:
    st.subheader("Patient Outcomes by Age Group")
    interaction_hint("Click on a bar to filter data")

    fig = create_outcomes_chart(filtered_outcomes(data.outcomes, store.state.selected_age_group))
    if fig is None:
        _no_data()
        return

    def _handle(event):
        key = selected_point_key(event, ("x",))
        if key is not None:
            store.dispatch(ToggleAgeGroup(key))

    st.plotly_chart(
        fig,
        use_container_width=True,
        key="chart_outcomes",
        on_select=_on_select("chart_outcomes", _handle),
        selection_mode="points",
    )


def _render_diagnoses(store: ViewStateStore, data: ClinicalDatasets) -> None:
    st.subheader("Diagnosis Distribution")
    interaction_hint("Pick a diagnosis below the chart to filter")

    selected = store.state.selected_diagnosis
    fig = create_diagnosis_pie_chart(
        filtered_diagnoses(data.diagnoses, selected),
        selected=selected,
        all_diagnoses=data.diagnoses,
    )
    if fig is None:
        _no_data()
        return

    st.plotly_chart(fig, use_container_width=True, key="chart_diagnoses")
    diagnosis_picker(store, [d.name for d in data.diagnoses])


def _render_stay_duration(store: ViewStateStore, data: ClinicalDatasets) -> None:
    st.subheader("Length of Stay by Service")

    fig = create_stay_duration_chart(data.stays)
    if fig is None:
        _no_data()
        return
    st.plotly_chart(fig, use_container_width=True)
    display_records_table(data.stays, StayRecord,
                          column_labels={'service': 'Service', 'days': 'Days'})


def _render_vital_signs(store: ViewStateStore, data: ClinicalDatasets) -> None:
    state = store.state
    st.subheader(f"Patient Vital Signs ({state.time_range.value})")
    if state.is_customizing:
        interaction_hint("Click and drag to zoom into a specific time period")

    vitals = vital_signs_by_range(data.vitals, state.time_range)
    fig = create_vital_signs_chart(
        vitals,
        zoom_domain=state.zoom_domain,
        drag_range=state.drag_range,
        customizing=state.is_customizing,
    )
    if fig is None:
        _no_data()
        return

    if not state.is_customizing:
        st.plotly_chart(fig, use_container_width=True, key="chart_vitals")
        return

    hours = [s.hour for s in vitals]

    def _handle(event):
        for action in box_selection_actions(event, hours):
            store.dispatch(action)

    st.plotly_chart(
        fig,
        use_container_width=True,
        key="chart_vitals_zoom",
        on_select=_on_select("chart_vitals_zoom", _handle),
        selection_mode="box",
    )


def _render_vital_correlation(store: ViewStateStore, data: ClinicalDatasets) -> None:
    st.subheader("Vital Signs Correlation")

    fig = create_vital_correlation_chart(vital_signs_by_range(data.vitals, store.state.time_range))
    if fig is None:
        _no_data()
        return
    st.plotly_chart(fig, use_container_width=True)


def _render_medications(store: ViewStateStore, data: ClinicalDatasets) -> None:
    st.subheader("Most Frequent Medications")

    fig = create_medication_chart(data.medications)
    if fig is None:
        _no_data()
        return
    st.plotly_chart(fig, use_container_width=True)
    display_records_table(data.medications, MedicationRecord,
                          column_labels={'name': 'Medication', 'count': 'Count'})


def _render_medication_usage(store: ViewStateStore, data: ClinicalDatasets) -> None:
    st.subheader("Medication Usage Over Time (Simulated)")
    st.plotly_chart(create_medication_usage_chart(), use_container_width=True)


CHART_RENDERERS: Dict[str, Callable[[ViewStateStore, ClinicalDatasets], None]] = {
    'outcomes': _render_outcomes,
    'diagnoses': _render_diagnoses,
    'stayDuration': _render_stay_duration,
    'vitalSigns': _render_vital_signs,
    'vitalCorrelation': _render_vital_correlation,
    'medications': _render_medications,
    'medicationUsage': _render_medication_usage,
}

# Charts that share a row on the overview tab
_HALF_WIDTH = {'outcomes', 'diagnoses'}


# ---------------------------------------------------------------------------
# Page sections
# ---------------------------------------------------------------------------

def render_summary_metrics(data: ClinicalDatasets) -> None:
    """Metric row shown above the overview charts."""
    metrics = ClinicalDataAPI.get_summary_metrics(data)

    col1, col2, col3, col4 = st.columns(4)
    with col1:
        st.metric("Total Patients", format_number(metrics['total_patients']))
    with col2:
        st.metric("Mortality Rate", format_percentage(metrics['mortality_rate']))
    with col3:
        st.metric("Mean Length of Stay", format_days(metrics['mean_stay_days']))
    with col4:
        st.metric("Diagnoses", metrics['diagnosis_count'])


def render_controls(store: ViewStateStore) -> None:
    """Tab bar, patient-tab controls and selection indicators."""
    tab_selector(store)

    if store.state.active_tab == Tab.PATIENT:
        range_col, zoom_col = st.columns([1, 2])
        with range_col:
            time_range_selector(store)
        with zoom_col:
            zoom_controls(store)

    selection_indicators(store)


def render_sidebar(store: ViewStateStore) -> None:
    with st.sidebar:
        chart_visibility_toggles(store)


def render_charts(store: ViewStateStore, data: ClinicalDatasets) -> None:
    """Render the charts of the active tab, in layout order."""
    if store.state.active_tab == Tab.OVERVIEW:
        render_summary_metrics(data)
        st.markdown("---")

    charts = charts_for_tab(store.state)
    paired = [c for c in charts if c in _HALF_WIDTH]
    if len(paired) == 2:
        left, right = st.columns(2)
        with left:
            CHART_RENDERERS[paired[0]](store, data)
        with right:
            CHART_RENDERERS[paired[1]](store, data)
        charts = [c for c in charts if c not in _HALF_WIDTH]

    for chart in charts:
        CHART_RENDERERS[chart](store, data)


def render_dashboard(store: ViewStateStore, data: ClinicalDatasets) -> None:
    """Render the whole dashboard view for the current state."""
    render_sidebar(store)
    render_controls(store)
    render_charts(store, data)
