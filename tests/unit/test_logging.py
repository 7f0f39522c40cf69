"""
Unit Tests for configure_logging.

Test Aspects Covered:
    ✅ Configuration: explicit level/format and LoggingConfig input
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterator, List

import pytest

import formnest
from formnest.config.models import LoggingConfig


@pytest.fixture
def basic_config_calls(monkeypatch: pytest.MonkeyPatch) -> Iterator[List[Dict[str, Any]]]:
    """Record logging.basicConfig calls and restore the package logger level."""
    calls: List[Dict[str, Any]] = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    package_logger = logging.getLogger("formnest")
    previous = package_logger.level
    yield calls
    package_logger.setLevel(previous)


class TestConfigureLogging:
    """Test cases for configure_logging."""

    def test_explicit_level(self, basic_config_calls: List[Dict[str, Any]]) -> None:
        """
        SCENARIO: configure_logging(logging.DEBUG)
        EXPECTED: Package logger at DEBUG
        """
        formnest.configure_logging(logging.DEBUG)

        assert logging.getLogger("formnest").level == logging.DEBUG
        assert basic_config_calls[0]["level"] == logging.DEBUG

    def test_from_logging_config(self, basic_config_calls: List[Dict[str, Any]]) -> None:
        """
        SCENARIO: LoggingConfig with ERROR and a custom format
        EXPECTED: Both applied, explicit arguments ignored
        """
        # Arrange
        config = LoggingConfig(level="ERROR", format="%(name)s: %(message)s")

        # Act
        formnest.configure_logging(logging.DEBUG, config=config)

        # Assert
        assert logging.getLogger("formnest").level == logging.ERROR
        assert basic_config_calls[0]["format"] == "%(name)s: %(message)s"
