import streamlit as st
from screen_compare.app import state
from screen_compare.utils.errors import ui_error_boundary
from screen_compare.utils.fields import field_errors
from screen_compare.utils.typing import ScreenSpec

def _display(value) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)

def _on_edit(screen_id: int, name: str, key: str) -> None:
    result = state.collection().update_field(screen_id, name, st.session_state[key])
    if not result.success:
        state.flash(result.error)

def _on_remove(screen_id: int) -> None:
    result = state.collection().remove(screen_id)
    if not result.success:
        state.flash(result.error)

def _field(spec: ScreenSpec, name: str, label: str, errors: dict) -> None:
    key = f"{name}_{spec.id}"
    st.text_input(
        label,
        value=_display(getattr(spec, name)),
        key=key,
        on_change=_on_edit,
        args=(spec.id, name, key),
    )
    if name in errors:
        st.markdown(f":red[{errors[name]}]")

@ui_error_boundary
def render(spec: ScreenSpec, position: int, removable: bool) -> None:
    """Input card for one screen. Field errors are shown under the offending input."""
    errors = field_errors(spec)
    with st.container(border=True):
        col1, col2 = st.columns([3, 1])
        with col1:
            st.markdown(f"**Screen {position + 1}**")
        with col2:
            if removable:
                st.button("✖", key=f"remove_{spec.id}", help="Remove this screen",
                          on_click=_on_remove, args=(spec.id,))

        _field(spec, "diagonal", "Diagonal (in)", errors)
        cx, cy = st.columns(2)
        with cx:
            _field(spec, "aspect_x", "Aspect X", errors)
        with cy:
            _field(spec, "aspect_y", "Aspect Y", errors)

        color_key = f"color_{spec.id}"
        st.color_picker("Color", value=spec.color, key=color_key,
                        on_change=_on_edit, args=(spec.id, "color", color_key))
