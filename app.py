"""
MIMIC-III Clinical Dashboard - Web Application

Main entry point for the Streamlit web application.

Usage:
    streamlit run app.py
"""

import sys
from pathlib import Path

# Add current directory to path for imports
app_dir = Path(__file__).parent
sys.path.insert(0, str(app_dir))

import streamlit as st
from config.settings import (
    APP_TITLE,
    INITIAL_SIDEBAR_STATE,
    LAYOUT,
    PAGE_ICON,
    PAGE_TITLE,
)
from src.config import configure_logging
from src.state.view_state import ViewStateStore
from utils.cache import get_cached_datasets
from components.dashboard import render_dashboard
from components.sidebar import inject_global_css, render_page_header, render_page_footer


st.set_page_config(
    page_title=PAGE_TITLE,
    page_icon=PAGE_ICON,
    layout=LAYOUT,
    initial_sidebar_state=INITIAL_SIDEBAR_STATE
)


def main():
    """Main application entry point."""
    configure_logging()

    inject_global_css()
    render_page_header(APP_TITLE)

    # Load failures are logged by the loader; the view renders with empty data
    datasets = get_cached_datasets()

    store = ViewStateStore(st.session_state)
    render_dashboard(store, datasets)

    render_page_footer()


if __name__ == "__main__":
    main()
