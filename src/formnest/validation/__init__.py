"""
Validation Package - Forms, Fields and Built-in Validators.

This package provides:
    - Form: Validator node bound to one (sub)structure of input
    - Field: Chainable value-holder reporting into its form
    - builtins: required, length, regexp, count, confirmation, ...

Design Principles:
    - Bad input is accumulated in Form.errors, never raised
    - Schema mistakes raise SchemaError immediately
    - The validator catalog is open: Form.define_* adds to it
"""

from formnest.validation.field import Field
from formnest.validation.form import Form

__all__ = [
    "Field",
    "Form",
]
