import streamlit as st

from services import admin as admin_svc
from ui import components


def render_data_tab(state):
    """Export and pickup-cycle maintenance."""
    st.subheader("💾 Data")

    df = admin_svc.customer_table(state)
    if df.empty:
        st.caption("No active customers yet.")
    else:
        st.dataframe(df, hide_index=True)

    with st.container(border=True):
        st.subheader("Export (CSV)")
        c1, c2, c3 = st.columns(3)
        c1.download_button("Customers", admin_svc.export_to_csv('customers'), "customers.csv", "text/csv")
        c2.download_button("Requests", admin_svc.export_to_csv('pending'), "requests.csv", "text/csv")
        c3.download_button("Completed", admin_svc.export_to_csv('completed'), "completed.csv", "text/csv")

    with st.container(border=True):
        st.subheader("Pickup cycle")
        st.caption(f"{len(state.completed)} pickup(s) currently marked done.")
        c1, c2 = st.columns(2)
        if c1.button("Start new pickup cycle"):
            cleared = admin_svc.clear_completed(state)
            components.flash(f"Cleared {cleared} completion marker(s).")
            st.rerun()
        if c2.button("Remove stale markers"):
            removed = admin_svc.prune_completed(state)
            components.flash(f"Removed {removed} marker(s) for customers no longer on a route.", "info")
            st.rerun()
