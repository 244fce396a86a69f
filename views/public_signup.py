import streamlit as st

from config import load_settings
from domain.constants import TAGLINE, CONFIRMATION_NOTICE
from services import customers as customer_svc
from services import state as state_svc
from ui import components
from ui.components import customer_form
from views.session import current_state, commit


def view():
    state = current_state()
    st.title(load_settings().business_name)
    st.caption(TAGLINE)
    components.show_flash()

    submitted = customer_form.render("Request Your Free Bin", form_key="public_signup_form")
    if submitted:
        try:
            customer_svc.submit_public_request(state, submitted)
        except ValueError as e:
            st.error(str(e))
        else:
            customer_form.reset_draft()
            components.flash(CONFIRMATION_NOTICE)
            st.rerun()

    st.write("")
    _, mid, _ = st.columns([1, 2, 1])
    if mid.button("Admin Login"):
        state_svc.enter_admin(state)
        commit(state)
        st.rerun()
