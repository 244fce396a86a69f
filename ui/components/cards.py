import streamlit as st

from domain.models import Customer
from services.customers import map_search_url
from .base import plain_md, completed_badge


def customer_card(customer: Customer, completed: bool, key: str) -> bool:
    """
    Route card for one active customer.

    Shows name, address, bin size and notes, a map link and a completion toggle.
    `key` must be unique on the page; stored ids can repeat in browser-era data.
    Returns True when the toggle was clicked on this run.
    """
    with st.container(border=True):
        info_col, map_col, done_col = st.columns([6, 2, 2])
        with info_col:
            st.markdown(f"**{plain_md(customer.name)}**")
            st.caption(plain_md(customer.address))
            st.caption(plain_md(customer.bin_size))
        with map_col:
            st.link_button("📍 Map", map_search_url(customer.address))
        with done_col:
            toggled = st.button("✅", key=f"toggle_{key}",
                                help="Mark pickup done / undo")
        if customer.notes:
            st.caption(f"Notes: {plain_md(customer.notes)}")
        if completed:
            st.markdown(completed_badge(), unsafe_allow_html=True)
    return toggled


def pending_card(request: Customer, key: str) -> bool:
    """Card for a pending request; returns True when "Approve Customer" was clicked."""
    with st.container(border=True):
        st.markdown(f"**{plain_md(request.name)}**")
        st.caption(plain_md(request.address))
        st.caption(plain_md(request.schedule))
        if request.phone:
            st.caption(f"📞 {plain_md(request.phone)}")
        return st.button("Approve Customer", key=f"approve_{key}")
