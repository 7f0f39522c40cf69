"""
Built-in Validators and Helpers.

Every function here takes the field as its first argument, so it can read
the owning form's configuration through `field.form.config`.

Value validations return truthy when the value passes:
    required, length, regexp, match, one_of, email, url, integer, number
Set validations return truthy when the whole list passes:
    count, equal
Helpers transform the field or run their own checks:
    confirmation, coerce, strip, default

register_builtins() installs all of them on a ValidatorRegistry.
"""

from __future__ import annotations

import re
from collections.abc import Sized
from functools import lru_cache
from typing import TYPE_CHECKING, Any, Callable, Optional

from formnest.registry.validator_registry import ValidatorRegistry

if TYPE_CHECKING:
    from formnest.validation.field import Field

# Containers `match` tests membership in
MEMBERSHIP_TYPES = (list, tuple, set, frozenset, range, dict)


@lru_cache(maxsize=256)
def compile_pattern(pattern: str, anchor: bool = True) -> re.Pattern[str]:
    """Compile `pattern`, anchored to the whole string unless anchor=False."""
    if anchor:
        return re.compile(rf"\A(?:{pattern})\Z")
    return re.compile(pattern)


def _within(size: int, min: Optional[int], max: Optional[int]) -> bool:
    return (min is None or size >= min) and (max is None or size <= max)


# ---------------------------------------------------------------------------
# Presence
# ---------------------------------------------------------------------------


def required(field: Field, value: Any) -> bool:
    """Value must be present and non-empty."""
    if value is None or value is False:
        return False
    if isinstance(value, str) and field.form.config.presence.strip_whitespace:
        value = value.strip()
    if isinstance(value, Sized):
        return len(value) > 0
    return True


# ---------------------------------------------------------------------------
# Length
# ---------------------------------------------------------------------------


def length(
    field: Field,
    value: Any,
    min: Optional[int] = None,
    max: Optional[int] = None,
) -> bool:
    """len(value) must lie within [min, max]; either bound may be None."""
    if not isinstance(value, Sized):
        return False
    return _within(len(value), min, max)


def count(
    field: Field,
    values: Any,
    min: Optional[int] = None,
    max: Optional[int] = None,
) -> bool:
    """The number of values must lie within [min, max]."""
    return _within(len(values), min, max)


# ---------------------------------------------------------------------------
# Format
# ---------------------------------------------------------------------------


def regexp(field: Field, value: Any, pattern: str) -> bool:
    """String must match `pattern` (the whole string unless configured off)."""
    if not isinstance(value, str):
        return False
    compiled = compile_pattern(pattern, field.form.config.patterns.anchor)
    return compiled.search(value) is not None


def email(field: Field, value: Any) -> bool:
    """Value must look like an email address (structure only)."""
    if not isinstance(value, str):
        return False
    return compile_pattern(field.form.config.patterns.email).search(value) is not None


def url(field: Field, value: Any) -> bool:
    """Value must be an http(s) URL."""
    if not isinstance(value, str):
        return False
    compiled = compile_pattern(field.form.config.patterns.url)
    return compiled.search(value.lower()) is not None


def match(field: Field, value: Any, matcher: Any) -> bool:
    """
    Case-style match against `matcher`.

    A type (or tuple of types) checks isinstance, a compiled pattern
    searches a string, a container checks membership, any other callable
    is called with the value, and anything else compares equal.
    """
    if isinstance(matcher, type) or (
        isinstance(matcher, tuple) and matcher and all(isinstance(m, type) for m in matcher)
    ):
        return isinstance(value, matcher)
    if isinstance(matcher, re.Pattern):
        return isinstance(value, str) and matcher.search(value) is not None
    if isinstance(matcher, MEMBERSHIP_TYPES):
        try:
            return value in matcher
        except TypeError:
            # unhashable value against a set
            return False
    if callable(matcher):
        return bool(matcher(value))
    return value == matcher


# ---------------------------------------------------------------------------
# Choice
# ---------------------------------------------------------------------------


def one_of(field: Field, value: Any, *choices: Any) -> bool:
    """Value must be one of the given choices."""
    return value in choices


def equal(field: Field, values: Any) -> bool:
    """Every value in the set must be equal (use with Form.group)."""
    return all(item == values[0] for item in values[1:])


# ---------------------------------------------------------------------------
# Type coercion
# ---------------------------------------------------------------------------


def _converts(converter: Callable[[Any], Any]) -> Callable[[Any], bool]:
    def check(value: Any) -> bool:
        try:
            converter(value)
        except (ValueError, TypeError, ArithmeticError):
            return False
        return True

    return check


def integer(field: Field, value: Any) -> bool:
    """Value must convert to int."""
    return not isinstance(value, bool) and _converts(int)(value)


def number(field: Field, value: Any) -> bool:
    """Value must convert to float."""
    return not isinstance(value, bool) and _converts(float)(value)


def coerce(
    field: Field,
    converter: Callable[[Any], Any],
    message: Any = None,
) -> None:
    """
    Convert every value with `converter`.

    Reports ("coerce", <converter name>) at each value the converter
    rejects with ValueError/TypeError; values are only replaced when all
    of them convert.
    """
    if message is None:
        message = ("coerce", getattr(converter, "__name__", repr(converter)))
    field.validate(message, _converts(converter)).map(converter)


def strip(field: Field, chars: Optional[str] = None) -> None:
    """Strip surrounding whitespace (or `chars`) from string values."""
    field.map(lambda value: value.strip(chars) if isinstance(value, str) else value)


def default(field: Field, fallback: Any) -> None:
    """Replace None values with `fallback`."""
    field.map(lambda value: fallback if value is None else value)


# ---------------------------------------------------------------------------
# Cross-field
# ---------------------------------------------------------------------------


def confirmation(field: Field, other: Field, message: Any = None) -> None:
    """
    Every value must equal `other.value`.

    Passes when the other value is None or False (not sent, or an
    unchecked box). Any other value, the empty string included, must match.
    """
    expected = other.value
    field.validate(
        message if message is not None else ("confirmation",),
        lambda value: expected is None or expected is False or expected == value,
    )


# ---------------------------------------------------------------------------
# Registration
# ---------------------------------------------------------------------------

VALUE_VALIDATIONS = {
    "required": required,
    "length": length,
    "regexp": regexp,
    "match": match,
    "one_of": one_of,
    "email": email,
    "url": url,
    "integer": integer,
    "number": number,
}

SET_VALIDATIONS = {
    "count": count,
    "equal": equal,
}

HELPERS = {
    "confirmation": confirmation,
    "coerce": coerce,
    "strip": strip,
    "default": default,
}


def register_builtins(registry: ValidatorRegistry) -> None:
    """Install every built-in validator and helper on `registry`."""
    for name, func in VALUE_VALIDATIONS.items():
        registry.register_validation(name, func)
    for name, func in SET_VALIDATIONS.items():
        registry.register_set_validation(name, func)
    for name, func in HELPERS.items():
        registry.register_helper(name, func)
