import functools, traceback
from enum import Enum
import streamlit as st
from screen_compare.utils.logging import logger

class ErrorKind(Enum):
    """Recoverable, user-facing failures. Reported as data, never raised."""
    CAPACITY_EXCEEDED = "capacity_exceeded"
    FIELD_INVALID = "field_invalid"
    COLLECTION_INVALID = "collection_invalid"
    NOT_FOUND = "not_found"
    MINIMUM_ENTRIES = "minimum_entries"

class ScreenCompareError(Exception): ...
class ConfigError(ScreenCompareError): ...

def _section_name(fn) -> str:
    # components.results_table.render -> "results table"
    module = fn.__module__.rsplit(".", 1)[-1]
    return module.replace("_", " ") if fn.__name__ == "render" else fn.__name__.strip("_").replace("_", " ")

def ui_error_boundary(fn):
    """Keep one broken section from taking the whole comparator page down."""
    @functools.wraps(fn)
    def _wrap(*a, **k):
        try:
            return fn(*a, **k)
        except Exception as e:
            section = _section_name(fn)
            logger.error("render failed in %s.%s: %s", fn.__module__, fn.__name__, e, exc_info=True)
            st.warning(f"The {section} section could not be drawn. "
                       "Your screens are unchanged; try Reset if this keeps happening.")
            with st.expander("Technical details"):
                st.code("".join(traceback.format_exception_only(type(e), e)))
    return _wrap

def handle_fatal(e: Exception) -> None:
    logger.critical("comparator session could not start: %s", e, exc_info=True)
    st.error("Screen Compare could not start this session. Reload the page to try again.")
    st.stop()
