"""Streamlit entry point for the Call Center Analytics Dashboard."""

import logging

import streamlit as st

st.set_page_config(
    page_title="Call Center Analytics",
    page_icon="📞",
    layout="wide",
    initial_sidebar_state="expanded",
)

from src.state import render_source_sidebar
from src.analytics.dashboard_stats import resolution_rate

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

st.title("Call Center Analytics")
st.markdown("**Real-time analytics for call center operations**")

try:
    bundle = render_source_sidebar()
    stats = bundle.stats

    col1, col2, col3, col4 = st.columns(4)
    with col1:
        st.metric("Total Calls", f"{stats.total_calls:,}")
    with col2:
        st.metric("Executives", f"{len(bundle.executives):,}")
    with col3:
        st.metric("Resolution Rate", f"{resolution_rate(stats.resolved_calls, stats.total_calls)}%")
    with col4:
        st.metric("Satisfaction Score", f"{stats.satisfaction_score:.1f}")

    st.divider()
    st.markdown("""
    ### Navigate the Analysis

    Use the sidebar to explore the dashboard:

    1. **Dashboard** — Call volume, sentiment and headline KPIs
    2. **Executives** — Searchable, sortable executive directory
    3. **Executive Details** — Per-executive performance, emotions and topics
    4. **Operations** — Hourly load, SLA, first-call resolution and agent scorecards
    5. **Custom Chart Builder** — Chart any two fields from the data tables
    """)

except Exception as e:
    st.error(f"Data loading error: {e}")
    st.exception(e)
