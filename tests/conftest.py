"""Pytest configuration and fixtures."""

import pytest

from app.core.config import Settings
from fakes import build_settings


@pytest.fixture
def settings() -> Settings:
    return build_settings()
