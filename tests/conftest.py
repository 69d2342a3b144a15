"""Pytest configuration for all tests."""

import pytest
import structlog

from credpolicy.core.config import get_settings
from credpolicy.domain.entities import PasswordPolicyConfig


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Reload settings and logging configuration around every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()


@pytest.fixture
def password_config() -> PasswordPolicyConfig:
    """Password policy used by the end-to-end examples."""
    return PasswordPolicyConfig(
        min_length=8,
        max_length=64,
        require_upper=True,
        require_lower=True,
        require_digit=True,
        special_charset="!@#$",
    )
