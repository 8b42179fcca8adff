from typing import Sequence

import plotly.graph_objects as go
import streamlit as st

from screen_compare.services.report import comparison_rectangles
from screen_compare.utils.errors import ui_error_boundary
from screen_compare.utils.typing import DerivedScreen

def build_figure(results: Sequence[DerivedScreen], scale_factor: float) -> go.Figure:
    """Overlay of screen outlines sharing the bottom-left corner, 1 inch = scale_factor px."""
    fig = go.Figure()
    rects = comparison_rectangles(results, scale_factor)
    for rect in rects:
        fig.add_shape(
            type="rect", x0=0, y0=0, x1=rect.width_px, y1=rect.height_px,
            line=dict(color=rect.color, width=3),
            fillcolor=rect.color, opacity=0.15,
        )
        # invisible trace so each screen gets a legend entry and hover label
        fig.add_trace(go.Scatter(
            x=[rect.width_px], y=[rect.height_px], mode="markers",
            marker=dict(color=rect.color, size=8), name=rect.label,
            hovertemplate=f"{rect.label}<extra></extra>",
        ))
    max_w = max((r.width_px for r in rects), default=0)
    max_h = max((r.height_px for r in rects), default=0)
    fig.update_xaxes(range=[0, max_w * 1.05 or 1], title="px")
    fig.update_yaxes(range=[0, max_h * 1.05 or 1], scaleanchor="x", scaleratio=1, title="px")
    fig.update_layout(height=450, margin=dict(l=10, r=10, t=10, b=10))
    return fig

@ui_error_boundary
def render(results: Sequence[DerivedScreen], scale_factor: float) -> None:
    st.subheader(f"Visual Comparison (1 inch = {scale_factor:g} pixels)")
    if not results:
        st.info("Nothing to compare yet.")
        return
    st.plotly_chart(build_figure(results, scale_factor), use_container_width=True)
