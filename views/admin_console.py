import streamlit as st

from config import load_settings
from services import admin as admin_svc
from services import state as state_svc
from ui import components
from views.session import current_state, commit
from views.admin_tabs.routes import render_routes_tab
from views.admin_tabs.add_customer import render_add_tab
from views.admin_tabs.requests import render_requests_tab
from views.admin_tabs.data import render_data_tab

# view key -> (button label, renderer)
ADMIN_TABS = {
    "routes": ("🗺️ Routes", render_routes_tab),
    "add": ("➕ Add", render_add_tab),
    "pending": ("👥 Requests", render_requests_tab),
    "data": ("💾 Data", render_data_tab),
}


def view():
    state = current_state()
    st.title(f"{load_settings().business_name} - Admin")
    st.caption("Admin mode is a convenience toggle, not a login. Anyone using this page can reach it.")
    components.show_flash()

    stats = admin_svc.route_stats(state)
    c1, c2, c3 = st.columns(3)
    c1.metric("Active customers", stats["active"])
    c2.metric("New requests", stats["pending"])
    c3.metric("Pickups done", f"{stats['completed']} / {stats['active']}")

    nav_cols = st.columns(len(ADMIN_TABS))
    for col, (key, (label, _)) in zip(nav_cols, ADMIN_TABS.items()):
        kind = "primary" if key == state.view else "secondary"
        if col.button(label, key=f"nav_{key}", type=kind):
            state_svc.select_view(state, key)
            commit(state)
            st.rerun()

    st.write("---")
    _, render_tab = ADMIN_TABS.get(state.view, ADMIN_TABS["routes"])
    render_tab(state)

    st.write("---")
    if st.button("Switch to Public Page"):
        state_svc.enter_public(state)
        commit(state)
        st.rerun()
