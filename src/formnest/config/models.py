"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic.
"""

from __future__ import annotations

import re
from typing import Any, Dict

from pydantic import BaseModel, Field, field_validator

# Basic email pattern, checks structure, not deliverability
DEFAULT_EMAIL_PATTERN = r"[a-zA-Z0-9._%+\-]+@[a-zA-Z0-9.\-]+\.[a-zA-Z]{2,}"

# Scheme + host structure
DEFAULT_URL_PATTERN = r"https?://[^\s/$.?#].\S*"


def deep_merge(base: Dict[str, Any], overlay: Dict[str, Any]) -> Dict[str, Any]:
    """Return `base` with `overlay` merged in; nested dicts merge key by key."""
    result = dict(base)
    for key, value in overlay.items():
        if isinstance(result.get(key), dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


class PatternConfig(BaseModel):
    """Configuration for pattern based validators."""

    anchor: bool = Field(
        default=True,
        description="regexp must match the whole string",
    )
    email: str = Field(default=DEFAULT_EMAIL_PATTERN)
    url: str = Field(default=DEFAULT_URL_PATTERN)

    model_config = {"frozen": True}

    @field_validator("email", "url")
    @classmethod
    def check_pattern_compiles(cls, value: str) -> str:
        try:
            re.compile(value)
        except re.error as e:
            raise ValueError(f"invalid pattern {value!r}: {e}") from e
        return value


class PresenceConfig(BaseModel):
    """Configuration for the required validator."""

    strip_whitespace: bool = Field(
        default=False,
        description="whitespace-only strings count as missing",
    )

    model_config = {"frozen": True}


class LoggingConfig(BaseModel):
    """Logging settings, applied with formnest.configure_logging(config=...)."""

    level: str = Field(
        default="WARNING",
        pattern=r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
    )
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

    model_config = {"frozen": True}


class FormConfig(BaseModel):
    """
    Root configuration object.

    The `forms` section overrides the settings above for single Form
    classes, keyed by class name:

        presence:
          strip_whitespace: false
        forms:
          SignupForm:
            presence:
              strip_whitespace: true
    """

    version: str = "1.0"
    patterns: PatternConfig = Field(default_factory=PatternConfig)
    presence: PresenceConfig = Field(default_factory=PresenceConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    forms: Dict[str, Dict[str, Any]] = Field(default_factory=dict)

    model_config = {"frozen": True}

    def for_form(self, name: str) -> FormConfig:
        """
        Settings seen by the Form class called `name`.

        Returns:
            This config if `forms` has no entry for `name`, otherwise a
            new config with the entry merged over the shared settings
        """
        overrides = self.forms.get(name)
        if not overrides:
            return self
        shared = self.model_dump(exclude={"forms"})
        return FormConfig.model_validate(deep_merge(shared, overrides))
