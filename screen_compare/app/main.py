"""
Screen Compare - Streamlit entry point.

    streamlit run screen_compare/app/main.py
"""
import streamlit as st

from screen_compare.utils import errors, logging as app_logging
from screen_compare.app import state
from screen_compare.components import header
from screen_compare.views import comparator

def configure_page() -> None:
    st.set_page_config(
        page_title="Screen Compare",
        page_icon="📺",
        layout="wide",
    )

@errors.ui_error_boundary
def main() -> None:
    app_logging.init()
    configure_page()
    try:
        state.initialize()
    except Exception as e:
        errors.handle_fatal(e)
    header.render()
    comparator.render()

if __name__ == "__main__":
    main()
