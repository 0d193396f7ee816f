"""Streamlit session state management and data loaders."""

import logging

import streamlit as st

from src.config import AppConfig
from src.cache_manager import clear_snapshots
from src.data.backend import create_backend, initialize_database
from src.data.sources import DataBundle, load_bundle
from src.data.models import ExecutiveStats
from src.analytics.executive_stats import generate_executive_stats

logger = logging.getLogger(__name__)


def get_config() -> AppConfig:
    """Get or create the AppConfig singleton."""
    if "config" not in st.session_state:
        st.session_state.config = AppConfig()
    return st.session_state.config


@st.cache_resource(show_spinner=False)
def get_backend():
    """Supabase client shared across sessions (None when unconfigured)."""
    config = get_config()
    client = create_backend(config.backend)
    if client is not None:
        initialize_database(client, config.backend)
    return client


@st.cache_resource(show_spinner="Loading call center data...")
def load_data() -> DataBundle:
    return load_bundle(get_backend(), get_config())


@st.cache_data(show_spinner="Computing executive statistics...", ttl=3600)
def load_executive_stats(executive_id: str) -> ExecutiveStats:
    bundle = load_data()
    return generate_executive_stats(
        executive_id, bundle.executives, bundle.calls, seed=get_config().seed,
    )


def reload_data() -> None:
    """Drop every cached loader and backend snapshot."""
    removed = clear_snapshots(get_config().cache_dir)
    logger.info("Cleared %d backend snapshots", removed)
    st.cache_data.clear()
    st.cache_resource.clear()


def render_source_sidebar() -> DataBundle:
    """Sidebar block showing where data came from, with a reload button."""
    bundle = load_data()
    with st.sidebar:
        st.header("Data Source")
        if bundle.source == "supabase":
            st.success("Supabase live")
        else:
            st.info("Mock data")
            for err in bundle.errors:
                st.caption(err)
        if st.button("Reload Data", type="primary"):
            reload_data()
            st.rerun()
    return bundle
