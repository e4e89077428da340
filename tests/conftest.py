"""Shared pytest configuration for the portal test-suite."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

import pytest

TEST_DB_PATH = Path(tempfile.gettempdir()) / "vetportal-test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["APP_TIMEZONE"] = "UTC"
os.environ["BACKEND_API_URL"] = "http://backend.test/api"
os.environ["ADMIN_API_URL"] = "http://backend.test/api/admin"


@pytest.fixture(autouse=True)
def reset_caches():
    """Make every test read the environment configured above."""

    from vetportal.config import reset_settings_cache
    from vetportal.utils import get_app_timezone

    reset_settings_cache()
    get_app_timezone.cache_clear()
    yield
    reset_settings_cache()
    get_app_timezone.cache_clear()
