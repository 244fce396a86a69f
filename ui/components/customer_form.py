import streamlit as st
from typing import Dict, Any, Optional

from domain.constants import BIN_SIZES, SCHEDULES, default_form

# One draft shared by the public form and the admin "Add" form.
DRAFT_PREFIX = "draft_"


def _draft_key(field: str) -> str:
    return f"{DRAFT_PREFIX}{field}"


def ensure_draft():
    """Seed widget state with defaults for any draft field not yet present."""
    for field, value in default_form().items():
        st.session_state.setdefault(_draft_key(field), value)


def reset_draft():
    """Forget the draft; the next run re-seeds defaults (55 Gallon / Weekly, rest empty)."""
    for field in default_form():
        st.session_state.pop(_draft_key(field), None)


def render(title: str, form_key: str, submit_label: str = "Submit Request") -> Optional[Dict[str, Any]]:
    """
    Renders the signup form used by both the public page and the admin Add tab.

    Args:
        title (str): Heading shown above the fields.
        form_key (str): Unique Streamlit form key.
        submit_label (str): Text on the submit button.

    Returns:
        Dict[str, Any]: The draft values when submitted, otherwise None.
    """
    ensure_draft()
    with st.form(form_key):
        st.subheader(title)
        name = st.text_input("Full Name", key=_draft_key("name"),
                             placeholder="Full Name")
        address = st.text_input("Service Address", key=_draft_key("address"),
                                placeholder="Service Address")
        phone = st.text_input("Phone Number", key=_draft_key("phone"),
                              placeholder="Phone Number")
        bin_size = st.selectbox("Bin Size", BIN_SIZES, key=_draft_key("bin_size"))
        schedule = st.selectbox("Pickup Schedule", SCHEDULES, key=_draft_key("schedule"))
        notes = st.text_area("Notes", key=_draft_key("notes"),
                             placeholder="Gate code / where to leave bin")
        submitted = st.form_submit_button(submit_label)

    if submitted:
        return {
            'name': name,
            'address': address,
            'phone': phone,
            'bin_size': bin_size,
            'schedule': schedule,
            'notes': notes,
        }
    return None
