import streamlit as st
from screen_compare.app import state
from screen_compare.components import comparison_chart, results_table, screen_card
from screen_compare.services.collection import MAX_SCREENS
from screen_compare.services.config import get_config
from screen_compare.utils.errors import ui_error_boundary

def _on_add() -> None:
    result = state.collection().add()
    if not result.success:
        state.flash(result.error)

def _on_reset() -> None:
    state.collection().reset()
    state.pipeline().recompute()

@ui_error_boundary
def render() -> None:
    collection = state.collection()
    pipeline = state.pipeline()

    col1, col2, col3 = st.columns([2, 1, 1])
    with col1:
        st.button(
            f"➕ Add Screen ({len(collection)}/{MAX_SCREENS})",
            on_click=_on_add,
            disabled=not collection.can_add,
        )
    with col2:
        st.button("🔄 Reset", on_click=_on_reset)

    message = state.pop_flash()
    if message:
        st.warning(message)

    entries = collection.snapshot().entries
    cols = st.columns(3)
    for i, spec in enumerate(entries):
        with cols[i % 3]:
            screen_card.render(spec, i, removable=collection.can_remove)

    # edits arrive through widget callbacks before this rerun; settle them in one pass
    pipeline.flush()
    with col3:
        if st.button("Calculate", type="primary"):
            pipeline.recompute()

    result = pipeline.state
    if not result.is_valid:
        st.error(result.error or "Results are not available yet.")

    st.markdown("---")
    comparison_chart.render(result.results, get_config().scale_factor)
    st.markdown("---")
    results_table.render(result.results)
