"""Page 1: Dashboard — Overview of call center performance and key metrics."""

from datetime import datetime, timedelta

import streamlit as st
import plotly.express as px
import plotly.graph_objects as go
import polars as pl

from src.state import render_source_sidebar
from src.analytics.dashboard_stats import resolution_rate, stat_card_trend
from src.analytics.insights import call_volume_insights, sentiment_insights
from src.analytics.thresholds import SENTIMENT_COLORS

st.set_page_config(page_title="Dashboard", layout="wide")
st.title("Dashboard")
st.caption("Overview of call center performance and key metrics")

bundle = render_source_sidebar()
stats = bundle.stats
executives = bundle.executives

yesterday = datetime.now().date() - timedelta(days=1)
calls_yesterday = bundle.calls.filter(pl.col("timestamp").dt.date() == yesterday).height
today_change, _ = stat_card_trend(stats.calls_today, calls_yesterday)

# Top KPI row
c1, c2, c3, c4 = st.columns(4)
with c1:
    st.metric("Total Calls", f"{stats.total_calls:,}", help="Total calls received to date")
with c2:
    st.metric("Calls Today", f"{stats.calls_today:,}", delta=f"{today_change}% vs yesterday",
              help="Calls received today")
with c3:
    st.metric("Online Executives", f"{stats.online_executives}/{len(executives)}",
              help="Executives currently available")
with c4:
    st.metric("Avg. Handling Time", f"{stats.average_handling_time:.1f}m", help="Average time per call")

st.divider()

col_left, col_right = st.columns([4, 3])

with col_left:
    st.subheader("Call Volume")
    st.caption("Daily call volume for the past week")
    fig = go.Figure(go.Scatter(
        x=bundle.trend_labels, y=stats.calls_trend, mode="lines", fill="tozeroy",
        line=dict(width=2), hovertemplate="%{x}<br>Calls: %{y}<extra></extra>",
    ))
    fig.update_layout(height=300, margin=dict(t=10, b=0))
    st.plotly_chart(fig, width="stretch")
    for line in call_volume_insights(bundle.trend_labels, stats.calls_trend):
        st.write(f"- {line}")

with col_right:
    st.subheader("Sentiment Analysis")
    st.caption("Distribution of customer sentiment")
    sentiment = pl.DataFrame({
        "name": [k.capitalize() for k in stats.sentiment_distribution],
        "value": [round(v, 1) for v in stats.sentiment_distribution.values()],
        "key": list(stats.sentiment_distribution),
    }).to_pandas()
    fig2 = px.bar(sentiment, x="value", y="name", orientation="h", color="key",
                  color_discrete_map=SENTIMENT_COLORS)
    fig2.update_layout(height=300, showlegend=False, xaxis_title="%", yaxis_title=None,
                       margin=dict(t=10, b=0))
    st.plotly_chart(fig2, width="stretch")
    for line in sentiment_insights(stats.sentiment_distribution):
        st.write(f"- {line}")

st.divider()

# Second KPI row
c5, c6, c7, c8 = st.columns(4)
with c5:
    st.metric("Resolved Calls", f"{resolution_rate(stats.resolved_calls, stats.total_calls)}%",
              help="Call resolution rate")
with c6:
    st.metric("Pending Calls", f"{stats.pending_calls:,}", help="Calls waiting to be resolved")
with c7:
    st.metric("Satisfaction Score", f"{stats.satisfaction_score:.1f}", help="Average customer satisfaction")
with c8:
    trend = stats.calls_trend
    first_half, second_half = sum(trend[:3]), sum(trend[-3:])
    growth = (second_half - first_half) / first_half * 100 if first_half else 0.0
    st.metric("Call Growth", f"{growth:.0f}%", help="Last three days compared to the first three")
