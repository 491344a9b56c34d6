"""Shared test configuration for pytest."""

import logging

import pytest
import structlog

from recordmapper.infrastructure.config import MapperSettings, get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache(monkeypatch):
    """Start every test from default, uncached settings."""
    for name in ("RECORDMAPPER_COPY_VALUES", "RECORDMAPPER_LOG_LEVEL", "RECORDMAPPER_LOG_JSON"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sharing_settings():
    """Settings that share identical-type values instead of copying them."""
    return MapperSettings(copy_values=False)


@pytest.fixture
def reset_logging():
    """Restore structlog and the package logger after a test configures them."""
    yield
    structlog.reset_defaults()
    package_logger = logging.getLogger("recordmapper")
    package_logger.setLevel(logging.NOTSET)
    package_logger.handlers.clear()
