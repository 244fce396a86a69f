"""
Reusable UI components for the Streamlit application.

- `base`: CSS injection, the completion badge and markdown escaping for user text.
- `cards`: customer route cards and pending request cards.
- `customer_form`: the signup form shared by the public page and the admin Add tab.

Import from here for a single access point (`from ui import components`).
"""

from .base import (
    inject_base_css,
    completed_badge,
    plain_md,
)

from .cards import (
    customer_card,
    pending_card,
)

from . import customer_form

import streamlit as st


def flash(message: str, kind: str = "success"):
    """Queue a message to show after the next rerun."""
    st.session_state["flash"] = (kind, message)


def show_flash():
    entry = st.session_state.pop("flash", None)
    if not entry:
        return
    kind, message = entry
    getattr(st, kind, st.info)(message)
