"""Page 2: Executives — Searchable, sortable executive directory."""

import streamlit as st
import polars as pl

from src.state import render_source_sidebar
from src.analytics.directory import SORTABLE_FIELDS, directory_view, toggle_sort
from src.analytics.thresholds import performance_band, status_color

st.set_page_config(page_title="Executives", layout="wide")
st.title("Executives")
st.caption("Manage and monitor call center executives")

bundle = render_source_sidebar()

if "sort_field" not in st.session_state:
    st.session_state.sort_field = "name"
    st.session_state.sort_descending = False

col_search, col_sort = st.columns([2, 1])
with col_search:
    query = st.text_input("Search executives...", placeholder="Name or department")
with col_sort:
    clicked = st.selectbox(
        "Sort by", SORTABLE_FIELDS,
        index=SORTABLE_FIELDS.index(st.session_state.sort_field),
        format_func=lambda f: f.replace("_", " ").title(),
    )
    if clicked != st.session_state.sort_field:
        st.session_state.sort_field, st.session_state.sort_descending = toggle_sort(
            st.session_state.sort_field, st.session_state.sort_descending, clicked,
        )
    if st.button("Reverse order"):
        st.session_state.sort_field, st.session_state.sort_descending = toggle_sort(
            st.session_state.sort_field, st.session_state.sort_descending, st.session_state.sort_field,
        )

table = directory_view(
    bundle.executives, query, st.session_state.sort_field, st.session_state.sort_descending,
)

if len(table) == 0:
    st.warning("No executives found.")
    st.stop()


def _style_row(row):
    styles = [""] * len(row)
    idx = list(row.index)
    styles[idx.index("status")] = f"color: {status_color(row['status'])}"
    styles[idx.index("performance")] = f"color: {performance_band(row['performance']).color}; font-weight: 600"
    return styles


styled = table.drop("id").to_pandas().style.apply(_style_row, axis=1).format(
    {"performance": "{}%"}
)
st.dataframe(styled, width="stretch", hide_index=True)

st.divider()
selected = st.selectbox(
    "Open executive details",
    table["id"].to_list(),
    format_func=lambda i: table.filter(pl.col("id") == i)["name"][0],
)
if st.button("View details", type="primary"):
    st.session_state.selected_executive = selected
    st.switch_page("pages/03_executive_details.py")
