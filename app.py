import logging

import streamlit as st

from config import configure_logging, load_settings
from ui.components import inject_base_css
from views import public_signup, admin_console

logger = logging.getLogger(__name__)

# --- Page Registry ---
# Maps a mode to its rendering function and admin status.
PAGE_REGISTRY = {
    "public": {
        "render_func": public_signup.view,
        "admin": False,
    },
    "admin": {
        "render_func": admin_console.view,
        "admin": True,
    },
}


def main():
    """
    Main application router.

    Renders the public signup page or the admin console depending on
    `st.session_state.mode`. Mode switches happen through the "Admin Login"
    and "Switch to Public Page" buttons; there is no credential check.
    """
    configure_logging()
    settings = load_settings()
    st.set_page_config(page_title=settings.business_name, page_icon="♻️", layout="centered")
    inject_base_css()

    # Initialize session state for mode if it doesn't exist
    if 'mode' not in st.session_state:
        st.session_state.mode = 'public'

    page = PAGE_REGISTRY.get(st.session_state.mode)
    if page is None:
        logger.warning("Unknown mode %r in session, falling back to public", st.session_state.mode)
        st.session_state.mode = 'public'
        page = PAGE_REGISTRY['public']

    page["render_func"]()


if __name__ == "__main__":
    main()
