"""
formnest - Nested Input Validation and Coercion.

Declare the fields you expect on arbitrary nested input (scalars, lists,
objects, lists of objects), chain validations and transforms on them,
collect every error keyed by field name (and by position inside lists),
and get back an output dict holding only what was declared.

Architecture:
    - Ports & Adapters: the input source is an InputExtractor
    - Open validator catalog via a per-class ValidatorRegistry
    - Configuration-driven behavior via YAML

Main Components:
    - validation: Form and Field
    - registry: ValidatorRegistry
    - adapters: MappingExtractor, MultiValueExtractor
    - domain: Error payloads and schema exceptions
    - config: Configuration models and loaders

Example:
    >>> from formnest import Form
    >>> form = Form({"user": {"email": ""}})
    >>> user = form.form("user")
    >>> _ = user.field("email").required().email()
    >>> form.errors
    {'user': {'email': ('required',)}}
"""

import logging
from typing import Optional, Union

from formnest.adapters import MappingExtractor, MultiValueExtractor, ensure_sequence
from formnest.config import FormConfig, LoggingConfig, bind_config, load_config
from formnest.domain import (
    DuplicateFieldError,
    IndexedErrors,
    MapperAlreadyDefined,
    NotASetError,
    SchemaError,
    UnknownFieldError,
    UnknownValidatorError,
    flatten_errors,
)
from formnest.interfaces import InputExtractor
from formnest.registry import ValidatorInfo, ValidatorKind, ValidatorRegistry
from formnest.validation import Field, Form

__version__ = "0.1.0"


def configure_logging(
    level: Union[int, str] = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    config: Optional[LoggingConfig] = None,
) -> None:
    """
    Configure logging for formnest.

    Call this at application startup to see log messages.
    By default, only WARNING and above are visible.

    Args:
        level: Logging level or level name (default: INFO)
        format: Log message format
        config: Loaded logging settings; overrides level and format

    Example:
        >>> import formnest
        >>> formnest.configure_logging(logging.DEBUG)
        >>> formnest.configure_logging(config=load_config("forms.yaml").logging)
    """
    if config is not None:
        level, format = config.level, config.format

    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    # Set our package's logger
    logging.getLogger("formnest").setLevel(level)


__all__ = [
    "DuplicateFieldError",
    "Field",
    "Form",
    "FormConfig",
    "IndexedErrors",
    "InputExtractor",
    "LoggingConfig",
    "MapperAlreadyDefined",
    "MappingExtractor",
    "MultiValueExtractor",
    "NotASetError",
    "SchemaError",
    "UnknownFieldError",
    "UnknownValidatorError",
    "ValidatorInfo",
    "ValidatorKind",
    "ValidatorRegistry",
    "bind_config",
    "configure_logging",
    "ensure_sequence",
    "flatten_errors",
    "load_config",
]
