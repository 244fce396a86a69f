"""
Centralized constants for the recycling pickup app: bin sizes, pickup
schedules, storage keys and the default form draft.
"""

# Bin sizes offered on the signup form (display order).
BIN_SIZES = ["32 Gallon", "55 Gallon", "96 Gallon", "Brewery / Commercial"]

# Pickup schedules; this order is also the route display order.
SCHEDULES = ["Weekly", "Bi-Weekly", "Monthly", "On Call"]

# Persisted collections (file name = storage prefix + key + .json)
STORAGE_KEYS = ["customers", "pending", "completed"]

ADMIN_VIEWS = ["routes", "add", "pending", "data"]

DEFAULT_FORM = {
    "name": "",
    "address": "",
    "phone": "",
    "bin_size": "55 Gallon",
    "schedule": "Weekly",
    "notes": "",
}

MAP_SEARCH_URL = "https://www.google.com/maps/search/?api=1&query={query}"

TAGLINE = "Free aluminum can pickup in the 828 area"
CONFIRMATION_NOTICE = "Request sent to 828 Convenient Recycling!"


def default_form() -> dict:
    """Fresh copy of the empty signup draft."""
    return DEFAULT_FORM.copy()
