"""Tests for shared.diagnostics helpers."""

import logging
from types import SimpleNamespace

import shared.diagnostics as diagnostics


def test_get_memory_info_direct():
    info = diagnostics.get_memory_info()
    assert 'process_rss_mb' in info


def test_get_thread_info_direct():
    info = diagnostics.get_thread_info()
    assert info['active_count'] >= 1
    assert info['main_thread_alive'] is True


def test_log_memory_usage_direct(caplog):
    with caplog.at_level(logging.INFO):
        diagnostics.log_memory_usage('test context')
    assert 'Memory usage (test context)' in caplog.text


def test_log_comprehensive_diagnostics_direct(caplog):
    with caplog.at_level(logging.INFO):
        diagnostics.log_comprehensive_diagnostics('test op')
    assert 'DIAGNOSTIC INFO: TEST OP' in caplog.text


def test_get_memory_info_with_dummy_psutil(monkeypatch):
    """get_memory_info should convert psutil byte counts to MB."""
    class DummyProcess:
        def memory_info(self):
            return SimpleNamespace(rss=1024 * 1024, vms=2 * 1024 * 1024)

        def memory_percent(self):
            return 12.5

    dummy_psutil = SimpleNamespace(
        Process=lambda: DummyProcess(),
        virtual_memory=lambda: SimpleNamespace(
            total=10 * 1024 * 1024,
            available=4 * 1024 * 1024,
            percent=60,
        ),
    )
    monkeypatch.setattr(diagnostics, 'psutil', dummy_psutil)

    info = diagnostics.get_memory_info()

    assert info['process_rss_mb'] == 1.0
    assert info['process_vms_mb'] == 2.0
    assert info['system_available_mb'] == 4.0
    assert info['process_memory_percent'] == 12.5


def test_get_memory_info_failure_is_reported(monkeypatch):
    """psutil failures should come back as an error entry, not an exception."""
    def broken_process():
        raise RuntimeError('no access')

    monkeypatch.setattr(diagnostics, 'psutil', SimpleNamespace(Process=broken_process))

    info = diagnostics.get_memory_info()

    assert 'error' in info
    assert 'no access' in info['error']


def test_log_memory_usage_reports_growth(monkeypatch, caplog):
    """With a baseline the RSS delta is part of the message."""
    monkeypatch.setattr(
        diagnostics,
        'get_memory_info',
        lambda: {'process_rss_mb': 150.5, 'system_available_mb': 1000.0},
    )
    with caplog.at_level(logging.INFO):
        diagnostics.log_memory_usage('after precompute', baseline={'process_rss_mb': 100.0})
    assert 'delta=+50.50MB' in caplog.text


def test_log_comprehensive_diagnostics_with_memory_error(monkeypatch, caplog):
    monkeypatch.setattr(diagnostics, 'get_memory_info', lambda: {'error': 'denied'})
    with caplog.at_level(logging.INFO):
        diagnostics.log_comprehensive_diagnostics('scan')
    assert 'Memory - denied' in caplog.text
