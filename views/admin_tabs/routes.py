import streamlit as st

from services import customers as customer_svc
from services import routes as route_svc
from ui.components import customer_card, plain_md


def render_routes_tab(state):
    """One section per schedule with a card for every customer on that route."""
    grouped = route_svc.group_by_schedule(state.customers)
    summary = route_svc.route_summary(grouped, state.completed)

    for schedule, members in grouped.items():
        total, done = summary[schedule]
        st.markdown(f"<div class='route-title'>{schedule} Route <small>({done}/{total} done)</small></div>",
                    unsafe_allow_html=True)
        if not members:
            st.caption("No customers")
        for idx, c in enumerate(members):
            if customer_card(c, customer_svc.is_completed(state, c.id), key=f"{schedule}_{idx}_{c.id}"):
                customer_svc.toggle_complete(state, c.id)
                st.rerun()

    leftovers = route_svc.unscheduled(state.customers)
    if leftovers:
        st.caption(f"{len(leftovers)} customer(s) have an unrecognized schedule and are not on any route: "
                   + ", ".join(plain_md(c.name or c.id) for c in leftovers))
