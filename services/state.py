"""Application state: loading the persisted collections and mode/view transitions.

The UI never holds collections itself; each Streamlit run calls `load_state()`
and every mutation writes its collection straight back.
"""
from __future__ import annotations
import logging
from dataclasses import asdict

from domain.constants import ADMIN_VIEWS
from domain.models import AppState, customer_from_dict
from services import persistence

logger = logging.getLogger(__name__)


def load_state(mode: str = 'public', view: str = 'routes') -> AppState:
    customers = [customer_from_dict(c) for c in persistence.load_list('customers')
                 if isinstance(c, dict)]
    pending = [customer_from_dict(c) for c in persistence.load_list('pending')
               if isinstance(c, dict)]
    completed = [str(cid) for cid in persistence.load_list('completed')]
    return AppState(customers=customers, pending=pending, completed=completed,
                    mode=mode, view=view)


def save_customers(state: AppState):
    persistence.replace_all('customers', [asdict(c) for c in state.customers])


def save_pending(state: AppState):
    persistence.replace_all('pending', [asdict(c) for c in state.pending])


def save_completed(state: AppState):
    persistence.replace_all('completed', list(state.completed))


def enter_admin(state: AppState):
    # UI convenience only: no credential check happens here.
    state.mode = 'admin'
    logger.info("Switched to admin console")


def enter_public(state: AppState):
    state.mode = 'public'


def select_view(state: AppState, view: str):
    if view not in ADMIN_VIEWS:
        raise ValueError(f"Unknown admin view: {view}")
    state.view = view
