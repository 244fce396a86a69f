from typing import Dict, List, Iterable, Tuple

from domain.constants import SCHEDULES
from domain.models import Customer


def group_by_schedule(customers: Iterable[Customer]) -> Dict[str, List[Customer]]:
    """Bucket customers by schedule in route order; unknown schedules are left out."""
    grouped: Dict[str, List[Customer]] = {s: [] for s in SCHEDULES}
    for c in customers:
        if c.schedule in grouped:
            grouped[c.schedule].append(c)
    return grouped


def unscheduled(customers: Iterable[Customer]) -> List[Customer]:
    return [c for c in customers if c.schedule not in SCHEDULES]


def route_summary(grouped: Dict[str, List[Customer]], completed: Iterable[str]) -> Dict[str, Tuple[int, int]]:
    """(total, done) per route."""
    done_ids = set(completed)
    return {key: (len(members), sum(1 for c in members if c.id in done_ids))
            for key, members in grouped.items()}
