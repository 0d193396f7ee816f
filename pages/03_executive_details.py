"""Page 3: Executive Details — Performance, emotions and topics for one executive."""

from datetime import datetime

import streamlit as st
import plotly.express as px
import plotly.graph_objects as go
import polars as pl

from src.state import render_source_sidebar, load_executive_stats, get_config
from src.analytics.executive_stats import ExecutiveNotFoundError, last_twelve_month_labels
from src.analytics.distributions import transfer_split
from src.analytics.insights import fcr_insights, sla_insights
from src.analytics.thresholds import (
    EMOTION_COLORS, SENTIMENT_COLORS, GREEN, RED,
    capitalize, emotion_color, fcr_band, percent_label, performance_band,
    sla_band, sla_target_message, status_color,
)

DEFAULT_SLA_COMPLIANCE = 85

st.set_page_config(page_title="Executive Details", layout="wide")
st.title("Executive Details")

bundle = render_source_sidebar()
executives = bundle.executives
config = get_config()

ids = executives["id"].to_list()
default_id = st.session_state.get("selected_executive", ids[0] if ids else None)
executive_id = st.selectbox(
    "Executive", ids,
    index=ids.index(default_id) if default_id in ids else 0,
    format_func=lambda i: executives.filter(pl.col("id") == i)["name"][0],
)
st.session_state.selected_executive = executive_id

try:
    stats = load_executive_stats(executive_id)
except ExecutiveNotFoundError as e:
    st.error(str(e))
    st.stop()

executive = executives.filter(pl.col("id") == executive_id).row(0, named=True)
month_labels = last_twelve_month_labels(datetime.now())

# --- Profile ---
col_profile, col_kpis = st.columns([1, 2])
with col_profile:
    if executive["avatar"]:
        st.image(executive["avatar"], width=96)
    st.subheader(executive["name"])
    st.caption(executive["department"])
    st.markdown(
        f"<span style='color:{status_color(executive['status'])}'>●</span> {capitalize(executive['status'])}",
        unsafe_allow_html=True,
    )
    st.write(f"**Email:** {executive['email']}")
    st.write(f"**Phone:** {executive['phone']}")

with col_kpis:
    band = performance_band(executive["performance"])
    k1, k2, k3, k4 = st.columns(4)
    k1.metric("Performance", f"{executive['performance']}%")
    k1.markdown(f"<span style='color:{band.color}'>{band.label}</span>", unsafe_allow_html=True)
    k2.metric("Resolved Rate", f"{stats.resolved_rate:.1f}%")
    k3.metric("Avg. Handling Time", f"{stats.average_handling_time:.1f}m")
    k4.metric("CSAT", f"{executive['satisfaction_score']:.1f}")

    k5, k6, k7 = st.columns(3)
    k5.metric("Total Calls", f"{stats.total_calls:,}")
    emotion = stats.dominant_emotion
    k6.metric("Dominant Emotion", capitalize(emotion))
    k6.markdown(f"<span style='color:{emotion_color(emotion)}'>●</span>", unsafe_allow_html=True)
    k7.metric(
        "Transfer Rate",
        "N/A" if stats.transfer_rate is None else f"{stats.transfer_rate:.1f}%",
    )

st.divider()

# --- Call volume and sentiment ---
col_a, col_b = st.columns([3, 2])
with col_a:
    st.subheader("Call Volume (last 12 months)")
    months = pl.DataFrame({
        "month": month_labels,
        "calls": stats.calls_by_month,
    }).to_pandas()
    fig = px.area(months, x="month", y="calls")
    fig.update_layout(height=300, margin=dict(t=10, b=0))
    st.plotly_chart(fig, width="stretch")

with col_b:
    st.subheader("Sentiment")
    dist = stats.sentiment_distribution
    sent_df = pl.DataFrame({
        "sentiment": list(dist),
        "value": list(dist.values()),
    }).to_pandas()
    total = sum(dist.values()) or 1
    fig = px.pie(sent_df, names="sentiment", values="value", color="sentiment",
                 color_discrete_map=SENTIMENT_COLORS, hole=0.4)
    fig.update_traces(text=[percent_label(v / total) or "" for v in dist.values()], textinfo="text")
    fig.update_layout(height=300, margin=dict(t=10, b=0))
    st.plotly_chart(fig, width="stretch")

# --- Emotions ---
col_e1, col_e2 = st.columns(2)
with col_e1:
    st.subheader("Customer Emotions")
    emo_df = pl.DataFrame(stats.emotions_data).with_columns(
        pl.col("name").str.to_lowercase().alias("key")
    ).to_pandas()
    fig = px.bar(emo_df, x="name", y="value", color="key", color_discrete_map=EMOTION_COLORS)
    fig.update_layout(height=300, showlegend=False, yaxis_title="%", xaxis_title=None)
    st.plotly_chart(fig, width="stretch")

with col_e2:
    st.subheader("Customer vs Executive Emotions")
    comp = pl.DataFrame(stats.emotions_comparison_data)
    fig = go.Figure()
    fig.add_trace(go.Bar(x=comp["name"].to_list(), y=comp["customer"].to_list(), name="Customer"))
    fig.add_trace(go.Bar(x=comp["name"].to_list(), y=comp["executive"].to_list(), name="Executive"))
    fig.update_layout(barmode="group", height=300, yaxis_title="%")
    st.plotly_chart(fig, width="stretch")

st.divider()

# --- Topics and productivity ---
col_t, col_r = st.columns(2)
with col_t:
    st.subheader("Top Call Topics")
    if not stats.top_topics:
        st.info("No calls recorded for this executive.")
    max_count = max((t["count"] for t in stats.top_topics), default=0)
    for topic in stats.top_topics:
        st.write(f"{topic['topic']} ({topic['count']})")
        st.progress(topic["count"] / max_count if max_count else 0.0)

with col_r:
    st.subheader("Productivity")
    radar = stats.productivity_score
    subjects = [r["subject"] for r in radar]
    fig = go.Figure()
    fig.add_trace(go.Scatterpolar(r=[r["A"] for r in radar], theta=subjects, fill="toself", name=stats.name))
    fig.add_trace(go.Scatterpolar(r=[r["B"] for r in radar], theta=subjects, fill="toself", name="Team Average"))
    fig.update_layout(polar=dict(radialaxis=dict(range=[0, 100])), height=350)
    st.plotly_chart(fig, width="stretch")

st.divider()

# --- FCR, SLA, transfers ---
col_f, col_s, col_x = st.columns(3)
with col_f:
    st.subheader("First Call Resolution")
    if stats.fcr_by_category:
        fcr = pl.DataFrame(stats.fcr_by_category)
        colors = [fcr_band(r).color for r in fcr["rate"].to_list()]
        fig = go.Figure(go.Bar(x=fcr["rate"].to_list(), y=fcr["category"].to_list(),
                               orientation="h", marker_color=colors))
        fig.update_layout(height=350, xaxis=dict(range=[0, 100], title="%"))
        st.plotly_chart(fig, width="stretch")
        for line in fcr_insights(fcr["category"].to_list(), fcr["rate"].to_list()):
            st.write(f"- {line}")
    else:
        st.info("No first-call resolution data.")

with col_s:
    st.subheader("SLA Compliance")
    sla_value = stats.sla_compliance
    if sla_value is None:
        sla_value = DEFAULT_SLA_COMPLIANCE
        st.caption("Not tracked for this executive; showing the team default.")
    band = sla_band(sla_value, config.sla_target)
    fig = go.Figure(go.Indicator(
        mode="gauge+number", value=round(sla_value, 1),
        number=dict(suffix="%"),
        gauge=dict(axis=dict(range=[0, 100]), bar=dict(color=band.color),
                   threshold=dict(line=dict(color="black", width=2), value=config.sla_target)),
    ))
    fig.update_layout(height=300)
    st.plotly_chart(fig, width="stretch")
    st.caption(sla_target_message(sla_value, config.sla_target))
    for line in sla_insights(sla_value, config.sla_target):
        st.write(f"- {line}")

with col_x:
    st.subheader("Call Transfers")
    split = pl.DataFrame(transfer_split(stats.transfer_rate)).to_pandas()
    fig = px.pie(split, names="name", values="value", hole=0.5, color="name",
                 color_discrete_map={"Transferred": RED, "Not Transferred": GREEN})
    fig.update_layout(height=300)
    st.plotly_chart(fig, width="stretch")

# --- Trends ---
st.subheader("Satisfaction and Performance Trends")
trend = pl.DataFrame({
    "month": month_labels,
    "satisfaction": stats.satisfaction_trend,
    "performance": stats.performance_trend,
}).to_pandas()
fig = go.Figure()
fig.add_trace(go.Scatter(x=trend["month"], y=trend["satisfaction"], name="CSAT", mode="lines+markers"))
fig.add_trace(go.Scatter(x=trend["month"], y=trend["performance"], name="Performance %",
                         mode="lines+markers", yaxis="y2"))
fig.update_layout(
    height=350,
    yaxis=dict(title="CSAT", range=[0, 5]),
    yaxis2=dict(title="Performance %", overlaying="y", side="right", range=[0, 100]),
)
st.plotly_chart(fig, width="stretch")
