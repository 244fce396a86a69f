from config import Settings, configure_logging, load_settings


def test_load_settings_reads_environment(monkeypatch, tmp_path):
    monkeypatch.setenv('RECYCLE_DATA_DIR', str(tmp_path))
    monkeypatch.setenv('RECYCLE_LOG_LEVEL', 'debug')
    s = load_settings()
    assert s.data_dir == str(tmp_path)
    assert s.log_level == 'DEBUG'
    assert s.storage_prefix == '828-'


def test_configure_logging_accepts_explicit_or_missing_settings(monkeypatch):
    monkeypatch.setattr(configure_logging, '_applied', False, raising=False)
    configure_logging(Settings(data_dir='data', storage_prefix='828-', log_level='WARNING',
                               business_name='Test'))
    # second call is a no-op
    configure_logging(None)
    assert configure_logging._applied is True
