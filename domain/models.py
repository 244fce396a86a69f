from dataclasses import dataclass, field
from typing import List, Dict, Any
import datetime as _dt


def _now_iso():
    return _dt.datetime.now(_dt.timezone.utc).replace(microsecond=0).isoformat().replace('+00:00', 'Z')


@dataclass
class Customer:
    """An active customer or a pending pickup request (same shape)."""
    id: str
    name: str
    address: str
    phone: str = ''
    bin_size: str = '55 Gallon'
    schedule: str = 'Weekly'  # Weekly | Bi-Weekly | Monthly | On Call
    notes: str = ''
    created_at: str = field(default_factory=_now_iso)


# Keys written by the browser version of the app
_LEGACY_KEYS = {'binSize': 'bin_size'}
_TEXT_FIELDS = ('id', 'name', 'address', 'phone', 'notes')


def customer_from_dict(d: Dict[str, Any]) -> Customer:
    """Safe conversion: maps legacy camelCase keys, drops unknown keys, null or missing text becomes ''."""
    allowed = {"id", "name", "address", "phone", "bin_size",
               "schedule", "notes", "created_at"}
    renamed = {_LEGACY_KEYS.get(k, k): v for k, v in d.items()}
    filtered = {k: v for k, v in renamed.items() if k in allowed}
    for key in _TEXT_FIELDS:
        value = filtered.get(key)
        filtered[key] = '' if value is None else str(value)
    if 'created_at' not in filtered:
        filtered['created_at'] = _now_iso()
    return Customer(**filtered)


@dataclass
class AppState:
    """Everything the UI renders from: three persisted collections plus mode/view."""
    customers: List[Customer] = field(default_factory=list)
    pending: List[Customer] = field(default_factory=list)
    completed: List[str] = field(default_factory=list)
    mode: str = 'public'  # public | admin
    view: str = 'routes'  # routes | add | pending | data
