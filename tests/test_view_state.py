"""Tests for the view-state reducer and the drag-to-zoom state machine."""

import pytest

from src.state.view_state import (
    Armed,
    CHART_NAMES,
    ClearAgeGroup,
    ClearDiagnosis,
    Dragging,
    Idle,
    PointerDown,
    PointerMove,
    PointerUp,
    SelectTab,
    SetTimeRange,
    Tab,
    TimeRange,
    ToggleAgeGroup,
    ToggleChart,
    ToggleCustomizing,
    ToggleDiagnosis,
    ViewState,
    ViewStateStore,
    Zoomed,
    ZoomOut,
    charts_for_tab,
    order_domain,
    reduce,
)


def _apply(state, *actions):
    for action in actions:
        state = reduce(state, action)
    return state


def _drag(start, end):
    return (ToggleCustomizing(), PointerDown(start), PointerMove(end), PointerUp())


class TestDefaults:

    def test_initial_state(self):
        state = ViewState()
        assert state.active_tab == Tab.OVERVIEW
        assert state.selected_age_group is None
        assert state.selected_diagnosis is None
        assert state.time_range == TimeRange.LAST_24H
        assert state.zoom == Idle()
        assert all(state.visible_charts[name] for name in CHART_NAMES)

    def test_reduce_does_not_mutate(self):
        state = ViewState()
        reduce(state, ToggleAgeGroup("18-30"))
        assert state.selected_age_group is None

    def test_unknown_action(self):
        with pytest.raises(TypeError):
            reduce(ViewState(), object())


class TestSelectionToggles:

    def test_toggle_sets_selection(self):
        state = reduce(ViewState(), ToggleAgeGroup("31-50"))
        assert state.selected_age_group == "31-50"

    def test_toggle_twice_is_identity(self):
        start = ViewState()
        assert _apply(start, ToggleAgeGroup("31-50"), ToggleAgeGroup("31-50")) == start
        assert _apply(start, ToggleDiagnosis("Sepsis"), ToggleDiagnosis("Sepsis")) == start

    def test_toggle_other_key_replaces(self):
        state = _apply(ViewState(), ToggleDiagnosis("Sepsis"), ToggleDiagnosis("Pneumonia"))
        assert state.selected_diagnosis == "Pneumonia"

    def test_clear_actions(self):
        state = _apply(
            ViewState(),
            ToggleAgeGroup("70+"),
            ToggleDiagnosis("Sepsis"),
            ClearAgeGroup(),
            ClearDiagnosis(),
        )
        assert state.selected_age_group is None
        assert state.selected_diagnosis is None


class TestTabsAndRange:

    def test_select_tab_accepts_string(self):
        assert reduce(ViewState(), SelectTab("patient")).active_tab == Tab.PATIENT

    def test_set_time_range(self):
        state = reduce(ViewState(), SetTimeRange(TimeRange.LAST_6H))
        assert state.time_range == TimeRange.LAST_6H

    def test_invalid_time_range(self):
        with pytest.raises(ValueError):
            reduce(ViewState(), SetTimeRange("48h"))


class TestChartVisibility:

    def test_toggle_hides_only_that_chart(self):
        state = reduce(ViewState(), ToggleChart("diagnoses"))
        assert state.visible_charts["diagnoses"] is False
        assert all(state.visible_charts[n] for n in CHART_NAMES if n != "diagnoses")

    def test_toggle_keeps_selection(self):
        state = _apply(ViewState(), ToggleAgeGroup("70+"), ToggleChart("outcomes"))
        assert state.selected_age_group == "70+"

    def test_unknown_chart(self):
        with pytest.raises(ValueError):
            reduce(ViewState(), ToggleChart("heatmap"))

    def test_hidden_medications_keeps_usage_chart(self):
        state = _apply(ViewState(), SelectTab(Tab.MEDICATIONS), ToggleChart("medications"))
        assert charts_for_tab(state) == ["medicationUsage"]

    def test_overview_layout(self):
        assert charts_for_tab(ViewState()) == ["outcomes", "diagnoses", "stayDuration"]

    def test_patient_layout_with_vitals_hidden(self):
        state = _apply(ViewState(), SelectTab(Tab.PATIENT), ToggleChart("vitalSigns"))
        assert charts_for_tab(state) == ["vitalCorrelation"]


class TestOrderDomain:

    def test_already_ordered(self):
        assert order_domain("2", "8") == ("2", "8")

    def test_reversed(self):
        assert order_domain("8", "2") == ("2", "8")

    def test_numeric_not_lexicographic(self):
        assert order_domain("10", "8") == ("8", "10")

    def test_non_numeric_labels(self):
        assert order_domain("b", "a") == ("a", "b")


class TestDragToZoom:

    def test_toggle_customizing(self):
        state = reduce(ViewState(), ToggleCustomizing())
        assert state.zoom == Armed()
        assert state.is_customizing
        assert reduce(state, ToggleCustomizing()).zoom == Idle()

    def test_pointer_down_ignored_when_not_customizing(self):
        state = reduce(ViewState(), PointerDown("2"))
        assert state.zoom == Idle()

    def test_pointer_down_starts_drag(self):
        state = _apply(ViewState(), ToggleCustomizing(), PointerDown("2"))
        assert state.zoom == Dragging(start="2")

    def test_empty_label_ignored(self):
        state = _apply(ViewState(), ToggleCustomizing(), PointerDown(""))
        assert state.zoom == Armed()

    def test_pointer_move_overwrites_end(self):
        state = _apply(
            ViewState(), ToggleCustomizing(), PointerDown("2"), PointerMove("5"), PointerMove("8")
        )
        assert state.zoom == Dragging(start="2", end="8")
        assert state.drag_range == ("2", "8")

    def test_pointer_move_without_start_ignored(self):
        state = _apply(ViewState(), ToggleCustomizing(), PointerMove("8"))
        assert state.zoom == Armed()

    def test_commit_ordered_domain(self):
        state = _apply(ViewState(), *_drag("2", "8"))
        assert state.zoom_domain == ("2", "8")
        assert state.zoom == Zoomed(("2", "8"), customizing=True)

    def test_commit_is_order_independent(self):
        state = _apply(ViewState(), *_drag("8", "2"))
        assert state.zoom_domain == ("2", "8")

    def test_zero_width_domain_committed(self):
        state = _apply(ViewState(), *_drag("4", "4"))
        assert state.zoom_domain == ("4", "4")

    def test_pointer_up_without_end_aborts(self):
        state = _apply(ViewState(), ToggleCustomizing(), PointerDown("2"), PointerUp())
        assert state.zoom == Armed()
        assert state.zoom_domain is None

    def test_toggle_off_mid_drag_clears_endpoints(self):
        state = _apply(
            ViewState(), ToggleCustomizing(), PointerDown("2"), PointerMove("8"), ToggleCustomizing()
        )
        assert state.zoom == Idle()
        assert state.zoom_domain is None
        assert state.drag_range is None

    def test_toggle_off_mid_drag_keeps_previous_zoom(self):
        state = _apply(
            ViewState(), *_drag("2", "8"), PointerDown("3"), PointerMove("4"), ToggleCustomizing()
        )
        assert state.zoom == Zoomed(("2", "8"), customizing=False)

    def test_new_drag_replaces_zoom(self):
        state = _apply(ViewState(), *_drag("2", "8"), PointerDown("10"), PointerMove("12"), PointerUp())
        assert state.zoom_domain == ("10", "12")

    def test_previous_zoom_shown_during_drag(self):
        state = _apply(ViewState(), *_drag("2", "8"), PointerDown("10"))
        assert state.zoom_domain == ("2", "8")

    def test_zoom_persists_after_finishing(self):
        state = _apply(ViewState(), *_drag("2", "8"), ToggleCustomizing())
        assert state.zoom_domain == ("2", "8")
        assert not state.is_customizing
        assert reduce(state, PointerDown("1")) == state

    def test_zoom_out_returns_to_armed(self):
        state = _apply(ViewState(), *_drag("2", "8"), ZoomOut())
        assert state.zoom == Armed()

    def test_zoom_out_returns_to_idle(self):
        state = _apply(ViewState(), *_drag("2", "8"), ToggleCustomizing(), ZoomOut())
        assert state.zoom == Idle()

    def test_zoom_out_without_zoom_is_noop(self):
        state = reduce(ViewState(), ToggleCustomizing())
        assert reduce(state, ZoomOut()) == state


class TestViewStateStore:

    def test_initialises_storage(self):
        storage = {}
        store = ViewStateStore(storage)
        assert storage[ViewStateStore.STATE_KEY] == ViewState()
        assert store.state == ViewState()

    def test_dispatch_replaces_state(self):
        storage = {}
        store = ViewStateStore(storage)
        store.dispatch(ToggleAgeGroup("18-30"))
        assert ViewStateStore(storage).state.selected_age_group == "18-30"
