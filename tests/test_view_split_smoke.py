from unittest.mock import patch, MagicMock

# Mock streamlit before importing the app
st_mock = MagicMock()


def test_page_registry_structure():
    with patch.dict("sys.modules", {"streamlit": st_mock}):
        from app import PAGE_REGISTRY
    """
    Tests that the PAGE_REGISTRY has one page per mode with the expected keys.
    """
    assert set(PAGE_REGISTRY) == {"public", "admin"}
    for key, value in PAGE_REGISTRY.items():
        assert "render_func" in value
        assert callable(value["render_func"])
        assert isinstance(value["admin"], bool)


def test_only_admin_console_is_flagged_admin():
    with patch.dict("sys.modules", {"streamlit": st_mock}):
        from app import PAGE_REGISTRY
    admin_pages = [key for key, value in PAGE_REGISTRY.items() if value["admin"]]
    assert admin_pages == ["admin"]


def test_admin_tabs_cover_all_views():
    with patch.dict("sys.modules", {"streamlit": st_mock}):
        from views.admin_console import ADMIN_TABS
    from domain.constants import ADMIN_VIEWS
    assert list(ADMIN_TABS) == ADMIN_VIEWS
    for label, render in ADMIN_TABS.values():
        assert callable(render)
