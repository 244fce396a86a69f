import streamlit as st

from services import customers as customer_svc
from ui import components
from ui.components import customer_form
from views.session import commit


def render_add_tab(state):
    submitted = customer_form.render("Add Customer", form_key="admin_add_form")
    if submitted:
        try:
            customer = customer_svc.add_customer_direct(state, submitted)
        except ValueError as e:
            st.error(str(e))
            return
        customer_form.reset_draft()
        commit(state)
        components.flash(f"{components.plain_md(customer.name)} added to the {customer.schedule} route.")
        st.rerun()
