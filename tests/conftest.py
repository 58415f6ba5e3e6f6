"""Pytest configuration and shared fixtures for klaw-either tests."""

import pytest


@pytest.fixture
def fresh_config():
    """Start and finish a test with no cached configuration."""
    from klaw_either._config import reset

    reset()
    yield
    reset()


@pytest.fixture
def sample_ok():
    """Sample Ok value for testing."""
    from klaw_either import Ok

    return Ok(42)


@pytest.fixture
def sample_err():
    """Sample Err value for testing."""
    from klaw_either import Err

    return Err(ValueError('test error'))


@pytest.fixture
def sample_some():
    """Sample Some value for testing."""
    from klaw_either import Some

    return Some('hello')


@pytest.fixture
def sample_nothing():
    """Sample Nothing value for testing."""
    from klaw_either import Nothing

    return Nothing
