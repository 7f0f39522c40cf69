"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import pytest

from formnest.config.models import FormConfig
from formnest.validation.form import Form


@pytest.fixture
def fixtures_path() -> Path:
    """Directory holding YAML fixtures."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_config_path(fixtures_path: Path) -> Path:
    """Path to sample configuration file."""
    return fixtures_path / "sample_config.yaml"


@pytest.fixture
def default_config() -> FormConfig:
    """Create default configuration."""
    return FormConfig()


@pytest.fixture
def signup_input() -> Dict[str, Any]:
    """Valid signup payload with a nested company and two pictures."""
    return {
        "username": "ada",
        "email": "ada@example.com",
        "password": "s3cret!",
        "password_confirmation": "s3cret!",
        "tags": ["math", "engines"],
        "company": {"name": "Analytical Engines Ltd"},
        "pictures": [
            {"title": "portrait", "url": "https://example.com/ada.png"},
            {"title": "engine", "url": "https://example.com/engine.png"},
        ],
    }


@pytest.fixture
def form_class() -> type:
    """A fresh Form subclass, so registrations never leak between tests."""

    class TestForm(Form):
        pass

    return TestForm
