"""
Business logic behind the admin console's data tools: CSV export, pickup
cycle resets and summary counts. Keeps the admin tabs focused on rendering.
"""
import csv
import io
import logging
from dataclasses import asdict, fields as dc_fields

import pandas as pd

from domain.constants import SCHEDULES
from domain.models import AppState, Customer
from services import persistence, routes
from services import state as state_svc

logger = logging.getLogger(__name__)

CUSTOMER_COLUMNS = [f.name for f in dc_fields(Customer)]


def export_to_csv(data_key: str) -> str:
    """Exports a stored collection to a CSV string ("" when empty)."""
    data = persistence.load_list(data_key)
    if not data:
        return ""

    output = io.StringIO()
    if data_key == 'completed':
        writer = csv.writer(output)
        writer.writerow(['id'])
        writer.writerows([[cid] for cid in data])
        return output.getvalue()

    writer = csv.DictWriter(output, fieldnames=CUSTOMER_COLUMNS, extrasaction='ignore')
    writer.writeheader()
    for row in data:
        if 'binSize' in row and 'bin_size' not in row:
            row = {**row, 'bin_size': row['binSize']}
        writer.writerow(row)
    return output.getvalue()


def clear_completed(state: AppState) -> int:
    """Start a new pickup cycle; returns how many markers were cleared."""
    cleared = len(state.completed)
    state.completed = []
    state_svc.save_completed(state)
    logger.info("New pickup cycle started, %d completion markers cleared", cleared)
    return cleared


def prune_completed(state: AppState) -> int:
    """Drop completion markers whose customer is no longer active."""
    active_ids = {c.id for c in state.customers}
    kept = [cid for cid in state.completed if cid in active_ids]
    removed = len(state.completed) - len(kept)
    if removed:
        state.completed = kept
        state_svc.save_completed(state)
        logger.info("Pruned %d stale completion markers", removed)
    return removed


def route_stats(state: AppState) -> dict:
    """Counts for the admin metrics strip."""
    grouped = routes.group_by_schedule(state.customers)
    summary = routes.route_summary(grouped, state.completed)
    return {
        "active": len(state.customers),
        "pending": len(state.pending),
        "completed": sum(done for _, done in summary.values()),
        "unscheduled": len(routes.unscheduled(state.customers)),
        "routes": summary,
    }


def customer_table(state: AppState) -> pd.DataFrame:
    """Active customers as a table in route order, with a pickup-done column."""
    done_ids = set(state.completed)
    rows = [{**asdict(c), 'done': c.id in done_ids} for c in state.customers]
    df = pd.DataFrame(rows, columns=CUSTOMER_COLUMNS + ['done'])
    order = {s: i for i, s in enumerate(SCHEDULES)}
    df['_route'] = df['schedule'].map(order)
    return df.sort_values('_route', kind='stable', na_position='last').drop(columns='_route').reset_index(drop=True)
