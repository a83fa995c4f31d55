"""
Dashboard View State

One immutable ViewState updated through a single reducer. The drag-to-zoom
tool is an explicit tagged union (Idle, Armed, Dragging, Zoomed) so that
states like "dragging without a start" cannot be represented.

Usage::

    store = ViewStateStore(st.session_state)
    store.dispatch(ToggleAgeGroup("18-30"))
    shown = filtered_outcomes(datasets.outcomes, store.state.selected_age_group)
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from types import MappingProxyType
from typing import Any, List, Mapping, MutableMapping, Optional, Tuple, Union


class Tab(str, Enum):
    OVERVIEW = "overview"
    PATIENT = "patient"
    MEDICATIONS = "medications"


class TimeRange(str, Enum):
    LAST_6H = "6h"
    LAST_12H = "12h"
    LAST_24H = "24h"


# Charts that can be hidden, in checkbox order
CHART_NAMES = ("outcomes", "diagnoses", "stayDuration", "vitalSigns", "medications")

# Charts per tab; None marks a chart that is always rendered
TAB_LAYOUT = {
    Tab.OVERVIEW: (
        ("outcomes", "outcomes"),
        ("diagnoses", "diagnoses"),
        ("stayDuration", "stayDuration"),
    ),
    Tab.PATIENT: (
        ("vitalSigns", "vitalSigns"),
        ("vitalCorrelation", None),
    ),
    Tab.MEDICATIONS: (
        ("medications", "medications"),
        ("medicationUsage", None),
    ),
}

Label = Union[str, int, float]
Domain = Tuple[Label, Label]


# ---------------------------------------------------------------------------
# Zoom tool states
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Idle:
    """Zoom tool off, no zoom applied."""


@dataclass(frozen=True)
class Armed:
    """Zoom tool on, waiting for a drag."""


@dataclass(frozen=True)
class Dragging:
    """Drag in progress. *domain* is the zoom still on screen, if any."""
    start: Label
    end: Optional[Label] = None
    domain: Optional[Domain] = None


@dataclass(frozen=True)
class Zoomed:
    """Committed zoom domain (low <= high)."""
    domain: Domain
    customizing: bool = True


ZoomState = Union[Idle, Armed, Dragging, Zoomed]


def _as_number(label: Label) -> Optional[float]:
    if isinstance(label, bool):
        return None
    try:
        return float(label)
    except (TypeError, ValueError):
        return None


def order_domain(a: Label, b: Label) -> Domain:
    """
    Order two axis labels into (low, high).

    Labels compare numerically when both are numbers (so '8' < '10'),
    as strings otherwise. The labels themselves are returned unchanged.
    """
    na, nb = _as_number(a), _as_number(b)
    if na is not None and nb is not None:
        return (a, b) if na <= nb else (b, a)
    return (a, b) if str(a) <= str(b) else (b, a)


def _has_label(label: Optional[Label]) -> bool:
    return label is not None and label != ""


# ---------------------------------------------------------------------------
# View state
# ---------------------------------------------------------------------------

def _default_visibility() -> Mapping[str, bool]:
    return MappingProxyType({name: True for name in CHART_NAMES})


@dataclass(frozen=True)
class ViewState:
    """UI-only state of the dashboard."""
    active_tab: Tab = Tab.OVERVIEW
    selected_age_group: Optional[str] = None
    selected_diagnosis: Optional[str] = None
    time_range: TimeRange = TimeRange.LAST_24H
    zoom: ZoomState = field(default_factory=Idle)
    visible_charts: Mapping[str, bool] = field(default_factory=_default_visibility)

    @property
    def is_customizing(self) -> bool:
        """True while the zoom tool is active."""
        if isinstance(self.zoom, (Armed, Dragging)):
            return True
        return isinstance(self.zoom, Zoomed) and self.zoom.customizing

    @property
    def zoom_domain(self) -> Optional[Domain]:
        """Committed domain currently applied to the x axis."""
        if isinstance(self.zoom, (Zoomed, Dragging)):
            return self.zoom.domain
        return None

    @property
    def drag_range(self) -> Optional[Domain]:
        """Both drag endpoints while a drag is in progress (for shading)."""
        if isinstance(self.zoom, Dragging) and _has_label(self.zoom.end):
            return (self.zoom.start, self.zoom.end)
        return None

    def is_visible(self, chart: str) -> bool:
        return self.visible_charts.get(chart, True)


# ---------------------------------------------------------------------------
# Actions
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class SelectTab:
    tab: Tab


@dataclass(frozen=True)
class SetTimeRange:
    time_range: TimeRange


@dataclass(frozen=True)
class ToggleAgeGroup:
    age_group: str


@dataclass(frozen=True)
class ClearAgeGroup:
    pass


@dataclass(frozen=True)
class ToggleDiagnosis:
    name: str


@dataclass(frozen=True)
class ClearDiagnosis:
    pass


@dataclass(frozen=True)
class ToggleChart:
    chart: str


@dataclass(frozen=True)
class ToggleCustomizing:
    pass


@dataclass(frozen=True)
class PointerDown:
    label: Optional[Label]


@dataclass(frozen=True)
class PointerMove:
    label: Optional[Label]


@dataclass(frozen=True)
class PointerUp:
    pass


@dataclass(frozen=True)
class ZoomOut:
    pass


# ---------------------------------------------------------------------------
# Reducer
# ---------------------------------------------------------------------------

def _toggle(current: Optional[str], key: str) -> Optional[str]:
    return None if current == key else key


def reduce_zoom(zoom: ZoomState, action: Any) -> ZoomState:
    """Apply one zoom-tool action to a zoom state."""
    if isinstance(action, ToggleCustomizing):
        if isinstance(zoom, Idle):
            return Armed()
        if isinstance(zoom, Armed):
            return Idle()
        if isinstance(zoom, Dragging):
            # endpoints dropped, nothing committed
            return Zoomed(zoom.domain, customizing=False) if zoom.domain else Idle()
        return replace(zoom, customizing=not zoom.customizing)

    if isinstance(action, PointerDown):
        if not _has_label(action.label):
            return zoom
        if isinstance(zoom, Armed):
            return Dragging(start=action.label)
        if isinstance(zoom, Dragging):
            return Dragging(start=action.label, domain=zoom.domain)
        if isinstance(zoom, Zoomed) and zoom.customizing:
            return Dragging(start=action.label, domain=zoom.domain)
        return zoom

    if isinstance(action, PointerMove):
        if isinstance(zoom, Dragging) and _has_label(action.label):
            return replace(zoom, end=action.label)
        return zoom

    if isinstance(action, PointerUp):
        if not isinstance(zoom, Dragging):
            return zoom
        if _has_label(zoom.end):
            return Zoomed(order_domain(zoom.start, zoom.end), customizing=True)
        if zoom.domain is not None:
            return Zoomed(zoom.domain, customizing=True)
        return Armed()

    if isinstance(action, ZoomOut):
        if isinstance(zoom, Zoomed):
            return Armed() if zoom.customizing else Idle()
        if isinstance(zoom, Dragging):
            return replace(zoom, domain=None)
        return zoom

    raise TypeError(f"Not a zoom action: {action!r}")


_ZOOM_ACTIONS = (ToggleCustomizing, PointerDown, PointerMove, PointerUp, ZoomOut)


def reduce(state: ViewState, action: Any) -> ViewState:
    """
    Return the state that results from applying *action* to *state*.

    Args:
        state: Current view state (never modified)
        action: One of the action dataclasses in this module

    Returns:
        New ViewState

    Raises:
        ValueError: If a ToggleChart names an unknown chart
        TypeError: If the action type is not recognised
    """
    if isinstance(action, _ZOOM_ACTIONS):
        return replace(state, zoom=reduce_zoom(state.zoom, action))

    if isinstance(action, SelectTab):
        return replace(state, active_tab=Tab(action.tab))

    if isinstance(action, SetTimeRange):
        return replace(state, time_range=TimeRange(action.time_range))

    if isinstance(action, ToggleAgeGroup):
        return replace(state, selected_age_group=_toggle(state.selected_age_group, action.age_group))

    if isinstance(action, ClearAgeGroup):
        return replace(state, selected_age_group=None)

    if isinstance(action, ToggleDiagnosis):
        return replace(state, selected_diagnosis=_toggle(state.selected_diagnosis, action.name))

    if isinstance(action, ClearDiagnosis):
        return replace(state, selected_diagnosis=None)

    if isinstance(action, ToggleChart):
        if action.chart not in state.visible_charts:
            raise ValueError(f"Unknown chart: {action.chart}")
        visible = dict(state.visible_charts)
        visible[action.chart] = not visible[action.chart]
        return replace(state, visible_charts=MappingProxyType(visible))

    raise TypeError(f"Unknown action: {action!r}")


def charts_for_tab(state: ViewState) -> List[str]:
    """Chart ids rendered for the active tab, in layout order."""
    return [
        chart for chart, flag in TAB_LAYOUT[state.active_tab]
        if flag is None or state.is_visible(flag)
    ]


# ---------------------------------------------------------------------------
# Store
# ---------------------------------------------------------------------------

class ViewStateStore:
    """
    Holds the current ViewState inside a mutable mapping.

    In the app the mapping is ``st.session_state``; tests pass a dict.
    """

    STATE_KEY = "dashboard_view_state"

    def __init__(self, storage: MutableMapping[str, Any], key: str = STATE_KEY):
        self._storage = storage
        self._key = key
        if key not in storage:
            storage[key] = ViewState()

    @property
    def state(self) -> ViewState:
        return self._storage[self._key]

    def dispatch(self, action: Any) -> ViewState:
        """Apply *action* and store the resulting state."""
        new_state = reduce(self.state, action)
        self._storage[self._key] = new_state
        return new_state
