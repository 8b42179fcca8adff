import streamlit as st
from screen_compare.services.collection import MAX_SCREENS

def render() -> None:
    st.title("📺 Dynamic Screen Comparator")
    st.caption(
        f"Compare up to {MAX_SCREENS} screens by diagonal size and aspect ratio. "
        "All sizes are in inches."
    )
