"""
Chart Components

Plotly figure builders for the dashboard charts. Every builder takes the
already-filtered records and returns None when there is nothing to plot.
"""

import plotly.express as px
import plotly.graph_objects as go
import pandas as pd
from typing import List, Dict, Any, Optional, Sequence, Tuple

from config.settings import (
    CHART_HEIGHT,
    FULL_WIDTH_CHART_HEIGHT,
    MEDICATION_SERIES,
    MEDICATION_USAGE_SIMULATED,
    OUTCOME_COLORS,
    PIE_COLORS,
    PRIMARY_COLOR,
    UNSELECTED_OPACITY,
    VITAL_SERIES,
)
from src.analytics.filters import records_to_frame
from src.state.view_state import order_domain
from src.data_processing.records import (
    DiagnosisRecord,
    MedicationRecord,
    OutcomeRecord,
    StayRecord,
    VitalSample,
)

# Half-width (hours) used when a committed zoom has identical endpoints
ZERO_WIDTH_PADDING = 0.5


def _with_alpha(hex_color: str, alpha: float) -> str:
    """Convert '#rrggbb' to an rgba() string with the given alpha."""
    h = hex_color.lstrip('#')
    r, g, b = (int(h[i:i + 2], 16) for i in (0, 2, 4))
    return f"rgba({r}, {g}, {b}, {alpha})"


def axis_range(domain: Optional[Tuple[Any, Any]]) -> Optional[List[float]]:
    """
    Numeric x-axis range for a committed zoom domain.

    A zero-width domain is widened by ZERO_WIDTH_PADDING on each side so
    the axis still shows the selected hour. Returns None when there is no
    domain or the labels are not numeric.
    """
    if domain is None:
        return None
    try:
        low, high = float(domain[0]), float(domain[1])
    except (TypeError, ValueError):
        return None
    if low == high:
        return [low - ZERO_WIDTH_PADDING, high + ZERO_WIDTH_PADDING]
    return [low, high]


def create_outcomes_chart(outcomes: Sequence[OutcomeRecord]) -> Optional[go.Figure]:
    """
    Grouped bar chart of survived / deceased counts by age group.

    Args:
        outcomes: Outcome records (already filtered by selection)

    Returns:
        Plotly figure, or None if there are no records
    """
    if not outcomes:
        return None

    df = records_to_frame(outcomes, OutcomeRecord)

    fig = go.Figure()
    for column, name in (('survived', 'Survived'), ('deceased', 'Deceased')):
        fig.add_trace(go.Bar(
            x=df['ageGroup'],
            y=df[column],
            name=name,
            marker_color=OUTCOME_COLORS[column],
        ))

    fig.update_layout(
        barmode='group',
        height=CHART_HEIGHT,
        xaxis_title='Age Group',
        yaxis_title='Patients',
        xaxis={'type': 'category'},
        clickmode='event+select',
        legend=dict(orientation='h', y=-0.2),
    )
    return fig


def create_diagnosis_pie_chart(
    diagnoses: Sequence[DiagnosisRecord],
    selected: Optional[str] = None,
    all_diagnoses: Optional[Sequence[DiagnosisRecord]] = None,
) -> Optional[go.Figure]:
    """
    Pie chart of the diagnosis distribution.

    Slice colours come from the position of each diagnosis in
    *all_diagnoses* (the unfiltered list) so a slice keeps its colour when
    the pie is filtered. Slices other than *selected* are dimmed.
    """
    if not diagnoses:
        return None

    palette_order = [d.name for d in (all_diagnoses or diagnoses)]
    colors = []
    for d in diagnoses:
        idx = palette_order.index(d.name) if d.name in palette_order else 0
        alpha = UNSELECTED_OPACITY if selected and d.name != selected else 1.0
        colors.append(_with_alpha(PIE_COLORS[idx % len(PIE_COLORS)], alpha))

    fig = go.Figure(go.Pie(
        labels=[d.name for d in diagnoses],
        values=[d.value for d in diagnoses],
        marker=dict(colors=colors),
        texttemplate='%{label}: %{percent:.0%}',
        textposition='outside',
        sort=False,
    ))
    fig.update_layout(height=CHART_HEIGHT, showlegend=False)
    return fig


def create_stay_duration_chart(stays: Sequence[StayRecord]) -> Optional[go.Figure]:
    """Bar chart of length of stay by service, with a range slider."""
    if not stays:
        return None

    df = records_to_frame(stays, StayRecord)

    fig = px.bar(
        df,
        x='service',
        y='days',
        labels={'service': 'Service', 'days': 'Days'},
        color_discrete_sequence=[PRIMARY_COLOR],
    )
    fig.update_layout(
        height=CHART_HEIGHT,
        xaxis=dict(type='category', rangeslider=dict(visible=True, thickness=0.1)),
    )
    return fig


def create_vital_signs_chart(
    vitals: Sequence[VitalSample],
    zoom_domain: Optional[Tuple[Any, Any]] = None,
    drag_range: Optional[Tuple[Any, Any]] = None,
    customizing: bool = False,
) -> Optional[go.Figure]:
    """
    Line chart of the four vital signs by hour.

    Args:
        vitals: Samples for the selected time range
        zoom_domain: Committed (low, high) hour domain, or None for auto range
        drag_range: Endpoints of an in-progress drag, shaded on the chart
        customizing: Enable box-select dragging for zoom

    Returns:
        Plotly figure, or None if there are no samples
    """
    if not vitals:
        return None

    df = records_to_frame(vitals, VitalSample)

    fig = go.Figure()
    for column, (name, color) in VITAL_SERIES.items():
        fig.add_trace(go.Scatter(
            x=df['hour'],
            y=df[column],
            name=name,
            mode='lines',
            line=dict(color=color, shape='spline'),
        ))

    x_range = axis_range(zoom_domain)
    fig.update_layout(
        height=FULL_WIDTH_CHART_HEIGHT,
        xaxis=dict(title='Hours', range=x_range, autorange=x_range is None),
        dragmode='select' if customizing else False,
        selectdirection='h',
        legend=dict(orientation='h', y=-0.2),
    )

    shaded = axis_range(order_domain(*drag_range)) if drag_range else None
    if shaded is not None:
        fig.add_vrect(x0=shaded[0], x1=shaded[1], fillcolor='#cccccc',
                      opacity=0.3, line_width=0)

    return fig


def create_vital_correlation_chart(vitals: Sequence[VitalSample]) -> Optional[go.Figure]:
    """Scatter of heart rate vs blood pressure, marker size by O₂ saturation."""
    if not vitals:
        return None

    df = records_to_frame(vitals, VitalSample)

    fig = px.scatter(
        df,
        x='heartRate',
        y='bloodPressure',
        size='o2Saturation',
        size_max=20,
        hover_data=['hour'],
        labels={
            'heartRate': 'Heart Rate (bpm)',
            'bloodPressure': 'Blood Pressure (mmHg)',
            'o2Saturation': 'O₂ Saturation',
        },
        color_discrete_sequence=[PRIMARY_COLOR],
    )
    fig.update_layout(height=FULL_WIDTH_CHART_HEIGHT)
    return fig


def create_medication_chart(medications: Sequence[MedicationRecord]) -> Optional[go.Figure]:
    """Horizontal bar chart of the most frequent medications."""
    if not medications:
        return None

    df = records_to_frame(medications, MedicationRecord)

    fig = px.bar(
        df,
        x='count',
        y='name',
        orientation='h',
        labels={'count': 'Count', 'name': ''},
        color_discrete_sequence=[PRIMARY_COLOR],
    )
    fig.update_layout(
        height=max(FULL_WIDTH_CHART_HEIGHT, len(df) * 30),
        yaxis=dict(categoryorder='array', categoryarray=list(df['name'])[::-1]),
    )
    return fig


def create_medication_usage_chart(
    usage: Optional[List[Dict[str, Any]]] = None,
) -> go.Figure:
    """
    Line chart of doses per day of ICU stay with a range slider.

    Defaults to the simulated series from settings.
    """
    df = pd.DataFrame(usage if usage is not None else MEDICATION_USAGE_SIMULATED)

    fig = go.Figure()
    for column, (name, color) in MEDICATION_SERIES.items():
        if column not in df.columns:
            continue
        fig.add_trace(go.Scatter(
            x=df['day'],
            y=df[column],
            name=name,
            mode='lines+markers',
            line=dict(color=color, shape='spline'),
        ))

    fig.update_layout(
        height=FULL_WIDTH_CHART_HEIGHT,
        xaxis=dict(title='Day of ICU Stay', rangeslider=dict(visible=True, thickness=0.1)),
        yaxis_title='Number of Doses',
        legend=dict(orientation='h', y=-0.4),
    )
    return fig
