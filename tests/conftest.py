"""
Pytest configuration for Bookshelf.

Provides fixtures for:
- Settings with test-specific overrides
- A library wired to an in-memory notification recorder
- Isolation of the shared library, the settings cache and root logging
"""

from __future__ import annotations

import logging
from typing import Generator

import pytest

from bookshelf.config import Settings, get_settings
from bookshelf.domain.builder import build_record
from bookshelf.domain.models import BookRecord
from bookshelf.infrastructure.notifications import NotificationHub, NotificationRecorder
from bookshelf.library import Library, reset_library


@pytest.fixture(autouse=True)
def isolate_shared_state() -> Generator[None, None, None]:
    """
    Start every test with no shared library, a fresh settings cache and the
    root logger as it was.
    """
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    get_settings.cache_clear()
    reset_library()
    yield
    reset_library()
    get_settings.cache_clear()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def test_settings() -> Settings:
    """
    Settings fixture independent of the environment the tests run in.
    """
    return Settings(
        app_env="test",
        log_level="DEBUG",
        log_json=False,
        locale="en",
        allow_writes=True,
        decorator_layers=1,
    )


@pytest.fixture
def recorder() -> NotificationRecorder:
    return NotificationRecorder()


@pytest.fixture
def library(test_settings: Settings, recorder: NotificationRecorder) -> Library:
    """
    Library whose only subscriber is `recorder`.
    """
    return Library(settings=test_settings, hub=NotificationHub([recorder]))


@pytest.fixture
def sample_record() -> BookRecord:
    return build_record("Ion", "Liviu Rebreanu", 1920)
