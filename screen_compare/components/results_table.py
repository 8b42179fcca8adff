from typing import Sequence

import streamlit as st

from screen_compare.services.report import results_frame, summary
from screen_compare.utils.errors import ui_error_boundary
from screen_compare.utils.typing import DerivedScreen

def _highlight_color(row):
    return [f"border-left: 6px solid {row['Color']}" if col == "Screen" else "" for col in row.index]

@ui_error_boundary
def render(results: Sequence[DerivedScreen]) -> None:
    """Calculated dimensions table plus a couple of headline metrics."""
    st.subheader("Calculated Dimensions")
    if not results:
        st.info("No results to show.")
        return

    df = results_frame(results)
    styled = df.style.apply(_highlight_color, axis=1).format({
        "Diagonal (in)": "{:.1f}",
        "Width (in)": "{:.2f}",
        "Height (in)": "{:.2f}",
        "Area (sq in)": "{:.2f}",
    })
    st.dataframe(styled, hide_index=True, use_container_width=True)

    info = summary(results)
    col1, col2 = st.columns(2)
    with col1:
        st.metric("Largest Screen", info["largest"])
    with col2:
        ratios = [v for v in info["relative_area"].values() if v is not None]
        st.metric("Largest / Smallest Area", f"{max(ratios):.2f}×" if ratios else "–")
