"""
Shared page chrome: CSS, header and footer.

Call ``inject_global_css()`` once at the top of the page (after
``st.set_page_config``), ``render_page_header()`` next and
``render_page_footer()`` last.
"""

import streamlit as st

from config.settings import APP_TITLE, APP_VERSION


def inject_global_css() -> None:
    """Inject the global CSS shared by the dashboard.

    Includes:
    - White page / light-grey sidebar background
    - ``.clean-table`` styling for static tables
    - ``.interaction-hint`` styling for the small chart hints
    """
    st.markdown(
        """
        <style>
        /* --- Page & sidebar colours --- */
        [data-testid="stAppViewContainer"] {
            background-color: #ffffff;
        }
        [data-testid="stSidebar"] {
            background-color: #f5f5f5;
        }

        /* --- Table styling --- */
        .clean-table { width: 100%; border-collapse: collapse; font-size: 0.85em; }
        .clean-table th { text-align: left; padding: 3px 8px; border-bottom: 2px solid #ddd; }
        .clean-table td { padding: 3px 8px; border-bottom: 1px solid #eee; }

        /* --- Chart hints --- */
        .interaction-hint { font-size: 0.8em; color: #888; font-style: italic; margin: 0; }
        </style>
        """,
        unsafe_allow_html=True,
    )


def interaction_hint(text: str) -> None:
    """Render a small italic hint under a chart title."""
    st.markdown(f"<p class='interaction-hint'>{text}</p>", unsafe_allow_html=True)


def render_page_header(title: str = APP_TITLE, subtitle: str = "") -> None:
    """Render the page header with title (left) and version badge (right)."""
    header_left, header_right = st.columns([3, 1])

    with header_left:
        st.title(title)
        if subtitle:
            st.markdown(f"### {subtitle}")

    with header_right:
        st.markdown(
            f"""
            <div style='text-align: right; padding-top: 10px;'>
                <span style='font-size: 0.9em; color: #666; background-color: #E3F2FD; padding: 4px 8px; border-radius: 4px;'>
                    v{APP_VERSION}
                </span><br>
                <span style='font-size: 0.75em; color: #999; margin-top: 4px; display: inline-block;'>
                    Data Source: MIMIC-III
                </span>
            </div>
            """,
            unsafe_allow_html=True,
        )


def render_page_footer() -> None:
    """Render the shared page footer."""
    st.markdown("---")
    st.markdown(
        "<div style='text-align: center; color: #888; font-size: 0.85em;'>"
        "ICU Clinical Dashboard - Based on MIMIC-III Data<br>"
        "<span style='font-size: 0.85em;'>Interactive dashboard for clinical data "
        "exploration. Data has been processed from MIMIC-III.</span>"
        "</div>",
        unsafe_allow_html=True,
    )
