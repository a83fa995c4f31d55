"""
Table Components

Reusable table display components for Streamlit.
"""

import streamlit as st
import pandas as pd
from typing import Dict, Optional, Sequence, Type

from src.analytics.filters import records_to_frame
from src.data_processing.records import ClinicalRecord


def static_table(df: pd.DataFrame) -> None:
    """Render a DataFrame as a static HTML table with no index column."""
    html = df.to_html(index=False, classes="clean-table", border=0)
    st.markdown(html, unsafe_allow_html=True)


def display_records_table(records: Sequence[ClinicalRecord],
                          record_type: Type[ClinicalRecord],
                          column_labels: Optional[Dict[str, str]] = None,
                          title: str = "View data") -> None:
    """
    Show the records behind a chart in a collapsed expander.

    Args:
        records: Records currently plotted
        record_type: Record class (defines the columns)
        column_labels: Optional display names keyed by JSON column
        title: Expander label
    """
    if not records:
        return

    df = records_to_frame(records, record_type)
    if column_labels:
        df = df.rename(columns=column_labels)

    with st.expander(title, expanded=False):
        static_table(df)
