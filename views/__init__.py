"""View modules for manual routing.

`app.py` picks a page from `PAGE_REGISTRY` by the session's mode (public or
admin). Each page module exposes a `view()` function; the admin console's
tabs live under `views/admin_tabs/` and take the loaded `AppState`.
"""
