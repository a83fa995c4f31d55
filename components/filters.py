"""
Filter Components

Streamlit control widgets for the dashboard. Widgets never change state
directly: their callbacks dispatch actions into the ViewStateStore.
"""

import streamlit as st
from typing import Optional, Sequence

from config.settings import CHART_LABELS, TAB_LABELS, TIME_RANGE_LABELS
from src.state.view_state import (
    CHART_NAMES,
    ClearAgeGroup,
    ClearDiagnosis,
    SelectTab,
    SetTimeRange,
    Tab,
    TimeRange,
    ToggleChart,
    ToggleCustomizing,
    ToggleDiagnosis,
    ViewStateStore,
    ZoomOut,
)


def tab_selector(store: ViewStateStore, key: str = "active_tab") -> Tab:
    """
    Create the tab navigation bar.

    Args:
        store: View state store
        key: Streamlit widget key

    Returns:
        Active tab after this render
    """
    tabs = list(Tab)

    def _on_change():
        store.dispatch(SelectTab(st.session_state[key]))

    st.radio(
        "View",
        options=tabs,
        index=tabs.index(store.state.active_tab),
        format_func=lambda t: TAB_LABELS[t.value],
        horizontal=True,
        label_visibility="collapsed",
        key=key,
        on_change=_on_change,
    )
    return store.state.active_tab


def chart_visibility_toggles(store: ViewStateStore, key_prefix: str = "visible") -> None:
    """Create one checkbox per chart under a 'Customize Dashboard' label."""
    st.markdown("**Customize Dashboard**")
    for name in CHART_NAMES:
        st.checkbox(
            CHART_LABELS[name],
            value=store.state.is_visible(name),
            key=f"{key_prefix}_{name}",
            on_change=store.dispatch,
            args=(ToggleChart(name),),
        )


def time_range_selector(store: ViewStateStore, key: str = "time_range") -> TimeRange:
    """Create the vital-signs time range dropdown."""
    ranges = list(TimeRange)

    def _on_change():
        store.dispatch(SetTimeRange(st.session_state[key]))

    st.selectbox(
        "Time Range",
        options=ranges,
        index=ranges.index(store.state.time_range),
        format_func=lambda r: TIME_RANGE_LABELS[r.value],
        key=key,
        on_change=_on_change,
    )
    return store.state.time_range


def zoom_controls(store: ViewStateStore, key_prefix: str = "zoom") -> None:
    """Create the 'Enable Zoom' / 'Finish Zooming' toggle and 'Reset Zoom' button."""
    state = store.state
    customizing = state.is_customizing

    st.button(
        "Finish Zooming" if customizing else "Enable Zoom",
        type="primary" if customizing else "secondary",
        key=f"{key_prefix}_toggle",
        on_click=store.dispatch,
        args=(ToggleCustomizing(),),
    )
    if state.zoom_domain is not None:
        st.button(
            "Reset Zoom",
            key=f"{key_prefix}_reset",
            on_click=store.dispatch,
            args=(ZoomOut(),),
        )


def _selection_indicator(label: str, value: Optional[str], clear_action, key: str) -> None:
    if not value:
        return
    text_col, button_col = st.columns([5, 1])
    with text_col:
        st.info(f"Selected {label}: **{value}**")
    with button_col:
        st.button("Clear", key=key, on_click=clear_action)


def selection_indicators(store: ViewStateStore) -> None:
    """Show each active chart selection with a 'Clear' button."""
    state = store.state
    _selection_indicator(
        "Age Group",
        state.selected_age_group,
        lambda: store.dispatch(ClearAgeGroup()),
        key="clear_age_group",
    )
    _selection_indicator(
        "Diagnosis",
        state.selected_diagnosis,
        lambda: store.dispatch(ClearDiagnosis()),
        key="clear_diagnosis",
    )


def diagnosis_pick_action(current: Optional[str], chosen: Optional[str]):
    """
    Action for a diagnosis picker change.

    Picking a name selects it. Un-picking the active name clears the
    selection. Returns None when nothing changes.
    """
    if chosen is None:
        return ClearDiagnosis() if current else None
    if chosen == current:
        return None
    return ToggleDiagnosis(chosen)


def diagnosis_picker(store: ViewStateStore, names: Sequence[str],
                     key_prefix: str = "diagnosis_pick") -> None:
    """
    Create the clickable diagnosis chips under the pie chart.

    The widget key follows the current selection, so the chips are rebuilt
    whenever the selection changes elsewhere (e.g. the Clear button).
    """
    selected = store.state.selected_diagnosis
    key = f"{key_prefix}_{selected or 'none'}"

    def _on_change():
        action = diagnosis_pick_action(selected, st.session_state.get(key))
        if action is not None:
            store.dispatch(action)

    st.pills(
        "Diagnosis",
        options=list(names),
        selection_mode="single",
        default=selected if selected in names else None,
        label_visibility="collapsed",
        key=key,
        on_change=_on_change,
    )
