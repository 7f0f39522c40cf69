"""
Schema Exceptions - Programmer and Contract Errors.

These exceptions signal a mistake in the validation schema itself, never
bad input. Bad input is reported through Form.errors and is never raised.

Hierarchy:
    SchemaError
        DuplicateFieldError     (also ValueError)
        NotASetError            (also TypeError)
        MapperAlreadyDefined
        UnknownFieldError       (also LookupError)
        UnknownValidatorError   (also AttributeError)
"""

from __future__ import annotations

from typing import Any


class SchemaError(Exception):
    """Base for all schema definition errors."""


class DuplicateFieldError(SchemaError, ValueError):
    """Raised when a name is declared twice on the same form."""

    def __init__(self, name: Any) -> None:
        super().__init__(f"duplicate field: {name!r}")
        self.name = name


class NotASetError(SchemaError, TypeError):
    """Raised when a set validation runs on a single-valued field."""

    def __init__(self, name: Any) -> None:
        super().__init__(f"{name!r} field is not a set")
        self.name = name


class MapperAlreadyDefined(SchemaError):
    """Raised when a second output mapper is registered on a form."""
    pass


class UnknownFieldError(SchemaError, LookupError):
    """Raised when a group refers to a field that was never declared."""

    def __init__(self, name: Any) -> None:
        super().__init__(f"unknown field: {name!r}")
        self.name = name


class UnknownValidatorError(SchemaError, AttributeError):
    """Raised when a field is asked for a validator nobody registered."""

    def __init__(self, name: str, owner: str = "") -> None:
        where = f" on {owner}" if owner else ""
        super().__init__(f"no validator or helper named {name!r}{where}")
        self.name = name
