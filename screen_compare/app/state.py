import streamlit as st
from screen_compare.utils.logging import logger
from screen_compare.services.collection import ScreenCollection
from screen_compare.services.config import get_config
from screen_compare.services.pipeline import RecomputePipeline

def initialize() -> None:
    if st.session_state.get("_initialized"):
        return
    logger.info("Initializing session state")

    config = get_config()
    collection = ScreenCollection()
    defaults = {
        "collection": collection,
        "pipeline": RecomputePipeline(collection, debounce_s=config.debounce_s),
        "flash": None,
    }
    for k, v in defaults.items():
        st.session_state.setdefault(k, v)

    st.session_state["_initialized"] = True

def collection() -> ScreenCollection:
    return st.session_state["collection"]

def pipeline() -> RecomputePipeline:
    return st.session_state["pipeline"]

def flash(message: str) -> None:
    st.session_state["flash"] = message

def pop_flash():
    return st.session_state.pop("flash", None)
