"""
Shared pytest fixtures and configuration for funcspec tests.

This module provides:
- Settings cache reset so env overrides in one test never leak into another
- Logging context cleanup
- Common validators used across test modules
"""

from pathlib import Path

import pytest
import structlog

import funcspec.core.logging as funcspec_logging
from funcspec import make_validator
from funcspec.core.logging import clear_context
from funcspec.core.settings import reset_settings


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Auto-mark tests based on their location."""
    for item in items:
        test_path = Path(item.fspath).relative_to(Path(__file__).parent)

        if "integration" in str(test_path):
            item.add_marker(pytest.mark.integration)

        markers = {mark.name for mark in item.iter_markers()}
        if not markers.intersection({"unit", "integration"}):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Isolation Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch):
    """Drop cached settings and FUNCSPEC_* env vars around every test."""
    for name in ("FUNCSPEC_STRICT", "FUNCSPEC_COERCION", "FUNCSPEC_LOG_LEVEL", "FUNCSPEC_LOG_FORMAT"):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture(autouse=True)
def clean_log_context():
    """Clear bound context and structlog configuration after every test."""
    yield
    clear_context()
    structlog.reset_defaults()
    funcspec_logging._configured = False


# =============================================================================
# Validators
# =============================================================================


def _is_natural(n):
    return n >= 0 and int(n) == n


@pytest.fixture
def natural():
    """Validator for natural numbers defaulting to 0."""
    return make_validator(0, _is_natural)


@pytest.fixture
def add():
    def add(a, b):
        return a + b

    return add
