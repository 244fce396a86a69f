import json

import pytest

from services import state as state_svc


def test_initial_state_is_public_routes(data_dir):
    s = state_svc.load_state()
    assert s.mode == 'public'
    assert s.view == 'routes'
    assert (s.customers, s.pending, s.completed) == ([], [], [])


def test_loads_browser_format_records(data_dir):
    legacy = [{'id': 1718000000000, 'name': 'Old Timer', 'address': '9 Elm', 'phone': '',
               'binSize': '96 Gallon', 'schedule': 'Monthly', 'notes': ''},
              {'name': None, 'address': None, 'phone': None, 'schedule': 'Weekly'}]
    (data_dir / '828-customers.json').write_text(json.dumps(legacy), encoding='utf-8')
    (data_dir / '828-completed.json').write_text('[1718000000000]', encoding='utf-8')

    s = state_svc.load_state()

    assert s.customers[0].id == '1718000000000'
    assert s.customers[0].bin_size == '96 Gallon'
    assert s.completed == ['1718000000000']
    blank = s.customers[1]
    assert (blank.id, blank.name, blank.address, blank.phone, blank.notes) == ('', '', '', '', '')


def test_mode_transitions_have_no_credential_check(data_dir):
    s = state_svc.load_state()
    state_svc.enter_admin(s)
    assert s.mode == 'admin'
    state_svc.enter_public(s)
    assert s.mode == 'public'


def test_select_view(data_dir):
    s = state_svc.load_state(mode='admin')
    state_svc.select_view(s, 'pending')
    assert s.view == 'pending'
    with pytest.raises(ValueError):
        state_svc.select_view(s, 'settings')
