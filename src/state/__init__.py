"""
Dashboard view state: immutable state, actions and reducer.
"""

from .view_state import (
    Tab,
    TimeRange,
    CHART_NAMES,
    ViewState,
    ViewStateStore,
    Idle,
    Armed,
    Dragging,
    Zoomed,
    reduce,
    charts_for_tab,
)

__all__ = [
    'Tab',
    'TimeRange',
    'CHART_NAMES',
    'ViewState',
    'ViewStateStore',
    'Idle',
    'Armed',
    'Dragging',
    'Zoomed',
    'reduce',
    'charts_for_tab',
]
