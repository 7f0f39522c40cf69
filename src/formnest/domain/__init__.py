"""
Domain Package - Error Types and Value Objects.

This package defines what the rest of formnest passes around:
    - exceptions: Schema (programmer) errors, raised immediately
    - value_objects: Validation error payloads and the propagation record
"""

from formnest.domain.exceptions import (
    DuplicateFieldError,
    MapperAlreadyDefined,
    NotASetError,
    SchemaError,
    UnknownFieldError,
    UnknownValidatorError,
)
from formnest.domain.value_objects import (
    ErrorMap,
    ErrorPropagation,
    FlatErrors,
    IndexedErrors,
    flatten_errors,
)

__all__ = [
    "DuplicateFieldError",
    "MapperAlreadyDefined",
    "NotASetError",
    "SchemaError",
    "UnknownFieldError",
    "UnknownValidatorError",
    "ErrorMap",
    "ErrorPropagation",
    "FlatErrors",
    "IndexedErrors",
    "flatten_errors",
]
