"""Bridge between Streamlit session state and the persisted `AppState`."""
import streamlit as st

from domain.models import AppState
from services.state import load_state


def current_state() -> AppState:
    if 'mode' not in st.session_state:
        st.session_state.mode = 'public'
    if 'admin_view' not in st.session_state:
        st.session_state.admin_view = 'routes'
    return load_state(mode=st.session_state.mode, view=st.session_state.admin_view)


def commit(state: AppState):
    """Carry mode/view changes made by an operation into the next run."""
    st.session_state.mode = state.mode
    st.session_state.admin_view = state.view
