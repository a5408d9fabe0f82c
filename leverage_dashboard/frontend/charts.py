"""
Chart rendering functions for the Futures Leverage Dashboard
Handles Plotly chart creation and rendering.
"""

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from .. import config

CHART_HEIGHTS = config.CHART_HEIGHTS
COLORS = config.COLORS


def build_exposure_figure(exposure_df: pd.DataFrame) -> go.Figure:
    colors = [COLORS["positive"] if q >= 0 else COLORS["negative"] for q in exposure_df["Qty"]]
    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=exposure_df["Symbol"],
        y=exposure_df["Notional"],
        marker_color=colors,
        name="Notional",
        hovertemplate="%{x}: $%{y:,.2f}<extra></extra>",
    ))
    fig.update_layout(
        template="plotly_white",
        height=CHART_HEIGHTS.get("exposure", 350),
        margin=dict(l=10, r=10, t=10, b=10),
        yaxis=dict(tickprefix="$", separatethousands=True),
        showlegend=False,
    )
    return fig


def render_exposure_chart(exposure_df: pd.DataFrame) -> None:
    if exposure_df.empty:
        return
    st.plotly_chart(build_exposure_figure(exposure_df), use_container_width=True)
