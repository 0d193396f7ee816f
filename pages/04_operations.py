"""Page 4: Operations — Hourly load, call mix, CSAT, resolution and agent scorecards."""

import streamlit as st
import plotly.express as px
import plotly.graph_objects as go
import polars as pl

from src.state import render_source_sidebar, get_config
from src.data import mock_data
from src.analytics.distributions import (
    WEEKDAY_COLUMNS, call_status_split, duration_buckets, efficiency_by_topic,
    fcr_by_topic, hourly_volume, peak_hours_matrix, topic_counts,
)
from src.analytics.insights import (
    agent_comparison_insights, csat_insights, fcr_insights, hourly_insights,
)
from src.analytics.thresholds import (
    csat_band, fcr_band, heat_intensity, resolution_gauge_message,
    scorecard_resolved_band, scorecard_satisfaction_band, status_color,
)

st.set_page_config(page_title="Operations", layout="wide")
st.title("Operations")
st.caption("Call handling patterns across the whole team")

bundle = render_source_sidebar()
calls = bundle.calls
executives = bundle.executives
config = get_config()

# Computed series come from loaded calls; presets show reference figures
use_computed = st.sidebar.toggle("Compute from loaded calls", value=True)


def _bullets(lines):
    for line in lines:
        st.write(f"- {line}")


# --- Hourly volume and peak hours ---
col1, col2 = st.columns(2)
with col1:
    st.subheader("Hourly Call Volume")
    hourly = hourly_volume(calls) if use_computed else pl.DataFrame(mock_data.HOURLY_CALL_VOLUME)
    fig = px.bar(hourly.to_pandas(), x="hour", y="calls")
    fig.update_layout(height=300)
    st.plotly_chart(fig, width="stretch")
    _bullets(hourly_insights(hourly["hour"].to_list(), hourly["calls"].to_list()))

with col2:
    st.subheader("Peak Call Hours")
    peak = peak_hours_matrix(calls) if use_computed else pl.DataFrame(mock_data.PEAK_CALL_HOURS)
    days = [d for d in WEEKDAY_COLUMNS if d in peak.columns]
    max_value = max((peak[d].max() or 0 for d in days), default=0)
    z = [[heat_intensity(v, max_value) for v in row] for row in peak.select(days).rows()]
    fig = go.Figure(go.Heatmap(
        z=z, x=[d.capitalize() for d in days], y=peak["hour"].to_list(),
        text=peak.select(days).rows(), texttemplate="%{text}",
        colorscale="Blues", zmin=0, zmax=1, showscale=False,
    ))
    fig.update_layout(height=350, yaxis=dict(autorange="reversed"))
    st.plotly_chart(fig, width="stretch")

st.divider()

# --- Call mix ---
col3, col4, col5 = st.columns(3)
with col3:
    st.subheader("Calls by Category")
    if use_computed:
        topics = topic_counts(calls)
        fig = px.bar(topics.to_pandas(), x="count", y="topic", orientation="h")
        fig.update_layout(yaxis=dict(autorange="reversed"), yaxis_title=None)
    else:
        cat = pl.DataFrame(mock_data.CALLS_BY_CATEGORY)
        long = cat.unpivot(index="category", variable_name="type", value_name="calls")
        fig = px.bar(long.to_pandas(), x="category", y="calls", color="type", barmode="stack")
    fig.update_layout(height=300, xaxis_title=None)
    st.plotly_chart(fig, width="stretch")

with col4:
    st.subheader("Call Status")
    status = call_status_split(calls) if use_computed else pl.DataFrame(mock_data.CALL_STATUS)
    fig = px.pie(status.to_pandas(), names="status", values="value", hole=0.4)
    fig.update_layout(height=300)
    st.plotly_chart(fig, width="stretch")

with col5:
    st.subheader("Call Duration")
    buckets = duration_buckets(calls)
    fig = px.bar(buckets.to_pandas(), x="duration", y="count")
    fig.update_layout(height=300, xaxis_title=None)
    st.plotly_chart(fig, width="stretch")

st.divider()

# --- Satisfaction and efficiency ---
col6, col7 = st.columns(2)
with col6:
    st.subheader("Weekly CSAT")
    csat = pl.DataFrame(mock_data.WEEKLY_CSAT)
    colors = [csat_band(s).color for s in csat["score"].to_list()]
    fig = go.Figure(go.Bar(x=csat["name"].to_list(), y=csat["score"].to_list(), marker_color=colors,
                           text=[csat_band(s).label for s in csat["score"].to_list()]))
    fig.update_layout(height=300, yaxis=dict(range=[0, 5]))
    st.plotly_chart(fig, width="stretch")
    _bullets(csat_insights(csat["name"].to_list(), csat["score"].to_list()))

with col7:
    st.subheader("Call Efficiency")
    eff = efficiency_by_topic(calls) if use_computed else pl.DataFrame(mock_data.CALL_EFFICIENCY)
    long = eff.unpivot(index="category", variable_name="state", value_name="percent")
    fig = px.bar(long.to_pandas(), x="percent", y="category", color="state", orientation="h",
                 barmode="stack")
    fig.update_layout(height=350, xaxis=dict(range=[0, 100]), yaxis_title=None)
    st.plotly_chart(fig, width="stretch")

st.divider()

# --- First call resolution ---
col8, col9 = st.columns([3, 2])
fcr_rows = fcr_by_topic(calls) if use_computed else list(mock_data.FCR_BY_CATEGORY)
with col8:
    st.subheader("First Call Resolution by Category")
    if fcr_rows:
        fcr = pl.DataFrame(fcr_rows)
        fig = go.Figure(go.Bar(
            x=fcr["category"].to_list(), y=fcr["rate"].to_list(),
            marker_color=[fcr_band(r).color for r in fcr["rate"].to_list()],
        ))
        fig.update_layout(height=300, yaxis=dict(range=[0, 100], title="%"))
        st.plotly_chart(fig, width="stretch")
        _bullets(fcr_insights(fcr["category"].to_list(), fcr["rate"].to_list()))
    else:
        st.info("No first-call resolution data.")

with col9:
    st.subheader("Resolution Rate")
    overall = (
        float(calls["resolved"].mean() * 100) if use_computed and len(calls)
        else float(mock_data.PERFORMANCE_KPIS[1]["value"])
    )
    verdict = resolution_gauge_message(overall)
    fig = go.Figure(go.Indicator(
        mode="gauge+number", value=round(overall, 1), number=dict(suffix="%"),
        gauge=dict(axis=dict(range=[0, 100]), bar=dict(color=verdict.color)),
    ))
    fig.update_layout(height=300)
    st.plotly_chart(fig, width="stretch")
    st.caption(verdict.label)

st.divider()

# --- Agents ---
col10, col11 = st.columns(2)
with col10:
    st.subheader("Agent Comparison")
    fig = go.Figure()
    fig.add_trace(go.Bar(x=executives["name"].to_list(), y=executives["total_calls"].to_list(), name="Calls"))
    fig.add_trace(go.Scatter(x=executives["name"].to_list(),
                             y=executives["average_handling_time"].to_list(),
                             name="Avg. Handling Time (m)", mode="lines+markers", yaxis="y2"))
    fig.update_layout(
        height=350,
        yaxis=dict(title="Calls"),
        yaxis2=dict(title="Minutes", overlaying="y", side="right"),
    )
    st.plotly_chart(fig, width="stretch")
    _bullets(agent_comparison_insights(
        executives["name"].to_list(),
        executives["total_calls"].to_list(),
        executives["average_handling_time"].to_list(),
    ))

with col11:
    st.subheader("Performance KPIs")
    kpis = mock_data.PERFORMANCE_KPIS
    fig = go.Figure(go.Scatterpolar(
        r=[k["value"] for k in kpis], theta=[k["subject"] for k in kpis], fill="toself",
    ))
    fig.update_layout(polar=dict(radialaxis=dict(range=[0, kpis[0]["full_mark"]])), height=350)
    st.plotly_chart(fig, width="stretch")

st.subheader("Agent Scorecard")


def _score_style(row):
    styles = [""] * len(row)
    idx = list(row.index)
    styles[idx.index("resolved_rate")] = f"color: {scorecard_resolved_band(row['resolved_rate']).color}"
    styles[idx.index("satisfaction_score")] = (
        f"color: {scorecard_satisfaction_band(row['satisfaction_score']).color}"
    )
    styles[idx.index("status")] = f"color: {status_color(row['status'])}"
    return styles


scorecard = pl.DataFrame(mock_data.AGENT_SCORECARD).to_pandas()
st.dataframe(
    scorecard.style.apply(_score_style, axis=1).format(
        {"avg_handling_time": "{:.1f}m", "resolved_rate": "{}%", "satisfaction_score": "{:.1f}"}
    ),
    width="stretch", hide_index=True,
)
