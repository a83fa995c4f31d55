"""
Caching Utilities

Streamlit caching for the loaded datasets.
"""

import streamlit as st
from api import ClinicalDataAPI
from config.settings import CACHE_TTL_SECONDS
from src.data_processing.records import ClinicalDatasets


@st.cache_data(ttl=CACHE_TTL_SECONDS, show_spinner="Loading MIMIC-III data...")
def get_cached_datasets() -> ClinicalDatasets:
    """Get the five clinical datasets, loaded once per cache lifetime."""
    return ClinicalDataAPI.load_datasets()

