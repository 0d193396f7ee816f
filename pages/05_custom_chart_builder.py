"""Page 5: Custom Chart Builder — Chart any two fields from the data tables."""

import streamlit as st
import plotly.express as px

from src.state import render_source_sidebar, get_backend, get_config
from src.data.backend import BackendError, fetch_table, sample_rows, table_status
from src.analytics.custom_chart import (
    CHART_COLORS, CHART_TYPES, build_chart_data, frame_fetcher, frame_samples, list_fields,
)

st.set_page_config(page_title="Custom Chart Builder", layout="wide")
st.title("Custom Chart Builder")
st.caption("Create custom visualizations from your data")

bundle = render_source_sidebar()
client = get_backend()
config = get_config()

try:
    if client is not None:
        tables = config.backend.builder_tables
        with st.expander("Table status"):
            st.dataframe(table_status(client, tables), width="stretch", hide_index=True)
        samples = sample_rows(client, tables)

        def fetch(table, columns):
            return fetch_table(client, table, columns)
    else:
        st.info("Supabase is not configured; building charts from the loaded mock data.")
        frames = {"executives": bundle.executives, "calls": bundle.calls}
        samples = frame_samples(frames)
        fetch = frame_fetcher(frames)
except BackendError as e:
    st.error(f"Could not load table fields: {e}")
    st.stop()

fields = list_fields(samples)
if not fields:
    st.warning("No fields available to chart.")
    st.stop()

col1, col2, col3 = st.columns(3)
with col1:
    chart_type = st.selectbox("Chart Type", list(CHART_TYPES), format_func=CHART_TYPES.get)
with col2:
    x_field = st.selectbox("X-Axis Field", fields)
with col3:
    y_field = st.selectbox("Y-Axis Field", fields, index=min(1, len(fields) - 1))

if st.button("Generate Chart", type="primary"):
    try:
        data = build_chart_data(x_field, y_field, fetch, limit=config.top_n_chart_rows)
    except (BackendError, ValueError) as e:
        st.error(f"Failed to generate chart: {e}")
        st.stop()

    if len(data) == 0:
        st.warning("The selected fields returned no rows.")
        st.stop()

    df = data.to_pandas()
    title = f"{y_field} by {x_field}"
    if chart_type == "bar":
        fig = px.bar(df, x="name", y="value", title=title, color_discrete_sequence=CHART_COLORS)
    elif chart_type == "line":
        fig = px.line(df, x="name", y="value", title=title, markers=True,
                      color_discrete_sequence=CHART_COLORS)
    elif chart_type == "area":
        fig = px.area(df, x="name", y="value", title=title, color_discrete_sequence=CHART_COLORS)
    else:
        fig = px.pie(df, names="name", values="value", title=title,
                     color_discrete_sequence=CHART_COLORS)
    fig.update_layout(height=450)
    st.plotly_chart(fig, width="stretch")

    with st.expander("Chart data"):
        st.dataframe(df, width="stretch", hide_index=True)
