import pytest

from domain.models import AppState


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    """Redirect storage to a throwaway directory."""
    d = tmp_path / 'data'
    d.mkdir()
    monkeypatch.setattr('services.persistence.DATA_DIR', str(d))
    monkeypatch.setenv('RECYCLE_DATA_DIR', str(d))
    return d


@pytest.fixture
def state(data_dir):
    return AppState()


@pytest.fixture
def jane():
    return {'name': 'Jane Doe', 'address': '1 Main St', 'phone': '',
            'bin_size': '55 Gallon', 'schedule': 'Weekly', 'notes': ''}
