"""Pytest configuration and shared fixtures for catching tests."""

import pytest

from catching import _config


@pytest.fixture
def sample_success():
    """Sample Success value for testing."""
    from catching import success

    return success(42)


@pytest.fixture
def sample_failure():
    """Sample Failure value for testing."""
    from catching import failure

    return failure(ValueError('test error'))


@pytest.fixture
def fresh_config(monkeypatch):
    """Reset global configuration and CATCHING_* environment around a test."""
    for name in ('CATCHING_CAPTURE_TRACE', 'CATCHING_TRACE_LIMIT', 'CATCHING_LOG_LEVEL'):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(_config, '_config', None)

