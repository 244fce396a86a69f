"""
Pickup request and customer operations.

Each operation updates the in-memory `AppState` and then writes the affected
collection(s) back to storage before returning.
"""
import logging
from typing import Dict, Any, Optional
from urllib.parse import quote

from domain.constants import BIN_SIZES, SCHEDULES, MAP_SEARCH_URL
from domain.models import AppState, Customer
from services import state as state_svc
from utils.ids import create_id_with_prefix

logger = logging.getLogger(__name__)

# Characters JavaScript's encodeURIComponent leaves alone besides alphanumerics and -_.~
_URI_COMPONENT_SAFE = "!*'()"


def validate_fields(fields: Dict[str, Any]) -> Dict[str, str]:
    """Return trimmed form values or raise ValueError.

    Name and address are required; bin size and schedule must be known options.
    """
    cleaned = {k: str(fields.get(k) or '').strip()
               for k in ('name', 'address', 'phone', 'bin_size', 'schedule', 'notes')}
    if not (cleaned['name'] and cleaned['address']):
        raise ValueError("Name and service address are required.")
    if cleaned['bin_size'] not in BIN_SIZES:
        raise ValueError(f"Unknown bin size: {cleaned['bin_size'] or '(blank)'}")
    if cleaned['schedule'] not in SCHEDULES:
        raise ValueError(f"Unknown pickup schedule: {cleaned['schedule'] or '(blank)'}")
    return cleaned


def _new_customer(fields: Dict[str, Any]) -> Customer:
    return Customer(id=create_id_with_prefix('c'), **validate_fields(fields))


def submit_public_request(state: AppState, fields: Dict[str, Any]) -> Customer:
    """Queue a public signup for admin review."""
    request = _new_customer(fields)
    state.pending.append(request)
    state_svc.save_pending(state)
    logger.info("Pickup request %s queued (%s)", request.id, request.schedule)
    return request


def add_customer_direct(state: AppState, fields: Dict[str, Any]) -> Customer:
    """Admin shortcut: create an active customer and jump back to the routes view."""
    customer = _new_customer(fields)
    state.customers.append(customer)
    state_svc.save_customers(state)
    state.view = 'routes'
    logger.info("Customer %s added directly to %s route", customer.id, customer.schedule)
    return customer


def approve_customer(state: AppState, customer_id: str) -> Optional[Customer]:
    """Move a pending request into the active list.

    Unknown ids are ignored and nothing is written.
    """
    request = next((p for p in state.pending if p.id == customer_id), None)
    if request is None:
        logger.info("Approve ignored: no pending request %s", customer_id)
        return None
    state.customers.append(request)
    state.pending = [p for p in state.pending if p is not request]
    state_svc.save_customers(state)
    state_svc.save_pending(state)
    logger.info("Approved request %s", customer_id)
    return request


def toggle_complete(state: AppState, customer_id: str) -> bool:
    """Flip the pickup-completed marker; returns True when now marked done.

    The id is not checked against the customer list.
    """
    if customer_id in state.completed:
        state.completed = [c for c in state.completed if c != customer_id]
        done = False
    else:
        state.completed = state.completed + [customer_id]
        done = True
    state_svc.save_completed(state)
    logger.info("Pickup %s marked %s", customer_id, "done" if done else "not done")
    return done


def is_completed(state: AppState, customer_id: str) -> bool:
    return customer_id in state.completed


def map_search_url(address: str) -> str:
    """Google Maps search link for an address, encoded like encodeURIComponent."""
    return MAP_SEARCH_URL.format(query=quote(address or '', safe=_URI_COMPONENT_SAFE))
