"""
Field - One Declared Value and Its Validation Chain.

A Field wraps the value (or, for fieldsets, formsets and groups, the list
of values) extracted for one declared name. Every chain operation returns
the field and does nothing once the field is invalid, so

    form.field("name").required().length(3, 20).map(str.title)

stops at the first failing check.

Design Notes:
    - Validity lives in the owning form's error map, keyed by `key`
    - `name` is only the output name; as_() never moves errors
    - Registered validators are resolved by name through the form's registry
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable, ClassVar, FrozenSet, Hashable, Optional

from formnest.domain.exceptions import NotASetError, UnknownValidatorError
from formnest.registry.validator_registry import ValidatorInfo, ValidatorKind

if TYPE_CHECKING:
    from formnest.validation.form import Form

logger = logging.getLogger(__name__)


class Field:
    """A declared, chainable, named value-holder."""

    # Set per instance in __init__, so invisible to hasattr(Field, ...)
    instance_attributes: ClassVar[FrozenSet[str]] = frozenset({"name", "value"})

    @classmethod
    def is_reserved(cls, name: str) -> bool:
        """True if `name` can never reach a registered validator."""
        return name.startswith("_") or name in cls.instance_attributes or hasattr(cls, name)

    def __init__(
        self,
        form: Form,
        key: Hashable,
        value: Any,
        multiple: bool = False,
    ) -> None:
        """
        Initialize field.

        Args:
            form: Owning form, receives every error report
            key: Declaration-time name, used for error lookup
            value: Raw value, or an iterable of raw values if multiple
            multiple: Whether the field holds a list of values
        """
        self._form = form
        self._key = key
        self._multiple = multiple
        self._ignored = False
        self.name: Hashable = key
        self.value: Any = list(value) if multiple else value

    @property
    def form(self) -> Form:
        """Form this field reports into."""
        return self._form

    @property
    def key(self) -> Hashable:
        """Declaration-time name."""
        return self._key

    @property
    def is_multiple(self) -> bool:
        return self._multiple

    @property
    def is_ignored(self) -> bool:
        return self._ignored

    @property
    def is_valid(self) -> bool:
        """True while no error is stored under this field's key."""
        return self._key not in self._form.errors

    def as_(self, name: Hashable) -> Field:
        """Rename the field in the form's output."""
        self.name = name
        return self

    def ignore(self) -> Field:
        """Leave the field out of the form's output."""
        self._ignored = True
        return self

    def report_error(self, message: Any, index: Optional[int] = None) -> None:
        """
        Report an error for this field.

        Args:
            message: Any object; a zero-argument callable is invoked first
            index: Position of the failing value, for multiple fields
        """
        if callable(message):
            message = message()
        self._form.report_error(self._key, message, index)

    def validate(self, message: Any, predicate: Callable[[Any], Any]) -> Field:
        """
        Check every value with `predicate`.

        A single field reports `message` once. A multiple field checks
        every element, also after a failure, and reports at each failing
        position.
        """
        if not self.is_valid:
            return self

        if not self._multiple:
            if not predicate(self.value):
                self.report_error(message)
            return self

        for index, item in enumerate(self.value):
            if not predicate(item):
                self.report_error(message, index)
        return self

    def validate_set(self, message: Any, predicate: Callable[[Any], Any]) -> Field:
        """
        Check the list of values as a whole.

        Raises:
            NotASetError: If the field is single-valued
        """
        if not self._multiple:
            logger.error(f"validate_set called on single-valued field {self._key!r}")
            raise NotASetError(self._key)
        if not self.is_valid:
            return self

        if not predicate(self.value):
            self.report_error(message)
        return self

    def map(self, transform: Callable[[Any], Any]) -> Field:
        """Replace the value (or each value, in place) with transform(value)."""
        if not self.is_valid:
            return self

        if self._multiple:
            for index, item in enumerate(self.value):
                self.value[index] = transform(item)
        else:
            self.value = transform(self.value)
        return self

    def each(self, visitor: Callable[[Any], Any]) -> Field:
        """Call visitor once per value."""
        if not self.is_valid:
            return self

        if self._multiple:
            for item in self.value:
                visitor(item)
        else:
            visitor(self.value)
        return self

    def __getattr__(self, name: str) -> Callable[..., Field]:
        # Only reached for names Field itself does not define
        if name.startswith("_"):
            raise AttributeError(name)
        registry = self._form.validators
        info = registry.lookup(name)
        if info is None:
            raise UnknownValidatorError(name, registry.owner)
        return self._bind(info)

    def _bind(self, info: ValidatorInfo) -> Callable[..., Field]:
        """Turn a registered function into a chainable call on this field."""
        func = info.func

        if info.kind is ValidatorKind.HELPER:
            def helper(*args: Any, **kwargs: Any) -> Field:
                func(self, *args, **kwargs)
                return self

            helper.__name__ = info.name
            return helper

        def check(*args: Any, message: Any = None, **kwargs: Any) -> Field:
            if message is None:
                message = (info.name, *args, *kwargs.values())
            if info.kind is ValidatorKind.SET:
                return self.validate_set(
                    message, lambda values: func(self, values, *args, **kwargs)
                )
            return self.validate(message, lambda value: func(self, value, *args, **kwargs))

        check.__name__ = info.name
        return check

    def __repr__(self) -> str:
        kind = "multiple" if self._multiple else "single"
        return f"Field({self._key!r}, {kind}, value={self.value!r})"
