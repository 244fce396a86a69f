import streamlit as st

from services import customers as customer_svc
from ui import components
from ui.components import pending_card


def render_requests_tab(state):
    """Pending public requests, each approvable into the active list."""
    st.subheader("New Requests")

    if not state.pending:
        st.info("No new requests")
        return

    st.write(f"**{len(state.pending)}** request(s) waiting for review.")
    for idx, r in enumerate(state.pending):
        if pending_card(r, key=f"{idx}_{r.id}"):
            approved = customer_svc.approve_customer(state, r.id)
            if approved:
                components.flash(f"{components.plain_md(approved.name)} approved for the {approved.schedule} route.")
            st.rerun()
