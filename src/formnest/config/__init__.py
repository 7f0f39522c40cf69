"""
Configuration Package - Models and Loaders.

Configuration Structure:
    - FormConfig: Root configuration object
    - PatternConfig: regexp anchoring, email and url patterns
    - PresenceConfig: what the required validator treats as missing
    - LoggingConfig: level and format for configure_logging()

Forms pick up configuration through the Form.config class attribute,
set directly or with bind_config():

    @bind_config(load_config("forms.yaml", profile="strict"))
    class SignupForm(Form):
        ...
"""

from formnest.config.loader import ConfigLoader, bind_config, load_config
from formnest.config.models import (
    FormConfig,
    LoggingConfig,
    PatternConfig,
    PresenceConfig,
)

__all__ = [
    "ConfigLoader",
    "bind_config",
    "load_config",
    "FormConfig",
    "LoggingConfig",
    "PatternConfig",
    "PresenceConfig",
]
