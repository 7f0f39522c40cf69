"""
Form - Validator Node for One (Sub)Structure of Input.

A Form wraps raw input, lets the caller declare fields, fieldsets and
nested forms on it, collects the errors those declarations report and
produces an output dict holding only what was declared.

Usage:
    form = Form({"name": "Ada", "pictures": [{"title": ""}]})
    form.field("name").required().length(2, 40)
    pictures = form.formset("pictures")
    for picture in pictures.value:
        picture.field("title").required()

    form.is_valid        # False
    form.errors          # {"pictures": IndexedErrors({0: {"title": ("required",)}})}

Design Notes:
    - Errors in a nested form reach the parent the moment they happen
    - Each Form subclass owns a ValidatorRegistry chained to its base's
    - Input is only read through the extract_* methods
"""

from __future__ import annotations

import logging
from typing import Any, Callable, ClassVar, Dict, Hashable, Optional, Set, Type, TypeVar

from formnest.adapters.mapping_extractor import MappingExtractor
from formnest.config.models import FormConfig
from formnest.domain.exceptions import (
    DuplicateFieldError,
    MapperAlreadyDefined,
    SchemaError,
    UnknownFieldError,
)
from formnest.domain.value_objects import ErrorMap, ErrorPropagation, IndexedErrors
from formnest.interfaces.input_extractor import InputExtractor
from formnest.registry.validator_registry import ValidatorKind, ValidatorRegistry
from formnest.validation.builtins import register_builtins
from formnest.validation.field import Field

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

Mapper = Callable[[Dict[Hashable, Any]], Any]


class Form:
    """
    One validator node.

    Class attributes (override in subclasses):
        validators: Registry of chainable field operations
        extractor: InputExtractor used by the extract_* methods
        config: FormConfig read by the built-in validators
    """

    validators: ClassVar[ValidatorRegistry] = ValidatorRegistry(owner="Form")
    extractor: ClassVar[InputExtractor] = MappingExtractor()
    config: ClassVar[FormConfig] = FormConfig()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        base = super(cls, cls).validators
        cls.validators = base.child(owner=cls.__qualname__)

    def __init__(
        self,
        input: Any,
        propagation: Optional[ErrorPropagation] = None,
    ) -> None:
        """
        Initialize form.

        Args:
            input: Raw input, never mutated
            propagation: Where to report the first error, for nested forms
        """
        self.input = input
        self.fields: Dict[Hashable, Field] = {}
        self.forms: Dict[Hashable, Form] = {}
        self.formsets: Dict[Hashable, Field] = {}
        self.errors: ErrorMap = {}
        self._seen: Set[Hashable] = set()
        self._mapper: Optional[Mapper] = None
        self._propagation = propagation
        self._propagated = False

    # -------------------------------------------------------------------------
    # Validator registration
    # -------------------------------------------------------------------------

    @classmethod
    def _define(cls, name: str, kind: ValidatorKind, func: F) -> F:
        if Field.is_reserved(name):
            logger.error(f"{cls.__qualname__}: validator name {name!r} is reserved")
            raise SchemaError(f"{name!r} clashes with a Field attribute")
        cls.validators.register(name, func, kind)
        return func

    @classmethod
    def define_validation(cls, name: str) -> Callable[[F], F]:
        """
        Register a per-value validation on this class (and its subclasses).

        Example:
            >>> @SignupForm.define_validation("lowercase")
            ... def lowercase(field, value):
            ...     return value == value.lower()
        """
        def decorator(func: F) -> F:
            return cls._define(name, ValidatorKind.VALUE, func)
        return decorator

    @classmethod
    def define_set_validation(cls, name: str) -> Callable[[F], F]:
        """Register a validation receiving the whole list of values."""
        def decorator(func: F) -> F:
            return cls._define(name, ValidatorKind.SET, func)
        return decorator

    @classmethod
    def define_helper(cls, name: str) -> Callable[[F], F]:
        """Register a free-form chainable helper, called as func(field, ...)."""
        def decorator(func: F) -> F:
            return cls._define(name, ValidatorKind.HELPER, func)
        return decorator

    # -------------------------------------------------------------------------
    # Extraction (override to support other input shapes)
    # -------------------------------------------------------------------------

    def extract_value(self, name: Hashable) -> Any:
        return self.extractor.extract_value(self.input, name)

    def extract_value_set(self, name: Hashable) -> Any:
        return self.extractor.extract_value_set(self.input, name)

    def extract_form(self, name: Hashable) -> Any:
        return self.extractor.extract_form(self.input, name)

    def extract_formset(self, name: Hashable) -> Any:
        return self.extractor.extract_formset(self.input, name)

    # -------------------------------------------------------------------------
    # Declarations
    # -------------------------------------------------------------------------

    def _unique(self, name: Hashable) -> None:
        if name in self._seen:
            logger.error(f"{type(self).__name__}: duplicate field {name!r}")
            raise DuplicateFieldError(name)
        self._seen.add(name)

    def field(self, name: Hashable) -> Field:
        """Declare a single-valued field."""
        self._unique(name)
        value = self.extract_value(name)
        field = self.fields[name] = Field(self, name, value)
        return field

    def fieldset(self, name: Hashable) -> Field:
        """Declare a field holding every value stored under `name`."""
        self._unique(name)
        values = self.extract_value_set(name) or []
        field = self.fields[name] = Field(self, name, values, multiple=True)
        return field

    def group(self, *names: Hashable) -> Field:
        """
        View the current values of declared fields as one multiple field.

        Errors are reported under the first name. The group is not a
        declaration: it stays out of the output and may be built again.

        Raises:
            SchemaError: If no names are given
            UnknownFieldError: If a name was not declared with field/fieldset
        """
        if not names:
            raise SchemaError("group() needs at least one field name")
        missing = [name for name in names if name not in self.fields]
        if missing:
            logger.error(f"{type(self).__name__}: group over undeclared {missing!r}")
            raise UnknownFieldError(missing[0])

        values = [self.fields[name].value for name in names]
        return Field(self, names[0], values, multiple=True)

    def _build_form(
        self,
        name: Hashable,
        input: Any,
        form_class: Type[Form],
        index: Optional[int] = None,
    ) -> Form:
        """Build a nested form that reports its errors into this one."""
        return form_class(input, propagation=ErrorPropagation.to(self, name, index))

    def form(self, name: Hashable, form_class: Optional[Type[Form]] = None) -> Form:
        """
        Declare a nested form over the sub-structure under `name`.

        Args:
            name: Field name
            form_class: Form subclass for the child, defaults to this class

        Returns:
            The child form, ready for declarations
        """
        self._unique(name)
        child = self._build_form(name, self.extract_form(name), form_class or type(self))
        self.forms[name] = child
        return child

    def formset(self, name: Hashable, form_class: Optional[Type[Form]] = None) -> Field:
        """
        Declare a list of nested forms, one per sub-structure under `name`.

        Returns:
            Multiple field whose value is the list of child forms
        """
        self._unique(name)
        form_class = form_class or type(self)
        inputs = self.extract_formset(name) or []
        children = [
            self._build_form(name, item, form_class, index)
            for index, item in enumerate(inputs)
        ]
        formset = self.formsets[name] = Field(self, name, children, multiple=True)
        return formset

    # -------------------------------------------------------------------------
    # Errors
    # -------------------------------------------------------------------------

    def report_error(
        self,
        name: Hashable,
        message: Any,
        index: Optional[int] = None,
    ) -> None:
        """
        Store an error under `name`, at position `index` if given.

        The first error reported on a nested form also reaches its parent.
        """
        if index is not None:
            messages = self.errors.get(name)
            if not isinstance(messages, IndexedErrors):
                messages = self.errors[name] = IndexedErrors()
            messages[index] = message
        else:
            self.errors[name] = message

        logger.debug(f"{type(self).__name__}: error on {name!r}[{index}]: {message!r}")
        self._notify_parent()

    def _notify_parent(self) -> None:
        if self._propagation is None or self._propagated:
            return
        self._propagated = True

        parent = self._propagation.parent
        if parent is None:
            logger.debug(f"{type(self).__name__}: parent form is gone, error not propagated")
            return
        # The live error map is shared, later errors show up in the parent too
        parent.report_error(self._propagation.name, self.errors, self._propagation.index)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def has_errors(self) -> bool:
        return not self.is_valid

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    def map(self, mapper: Mapper) -> Mapper:
        """
        Register the output mapper. Usable as a decorator.

        Raises:
            MapperAlreadyDefined: If a mapper was registered before
        """
        if self._mapper is not None:
            logger.error(f"{type(self).__name__}: second output mapper")
            raise MapperAlreadyDefined("Another mapper is already defined")
        self._mapper = mapper
        return mapper

    def output(self) -> Any:
        """
        Build the output from every declared field and nested form.

        Returns:
            Dict of output name to value, or whatever the mapper returns
        """
        result: Dict[Hashable, Any] = {}
        for field in self.fields.values():
            # Fields can be both renamed and ignored
            if not field.is_ignored:
                result[field.name] = list(field.value) if field.is_multiple else field.value
        for name, child in self.forms.items():
            result[name] = child.output()
        for name, formset in self.formsets.items():
            if not formset.is_ignored:
                result[name] = [child.output() for child in formset.value]

        if self._mapper is not None:
            result = self._mapper(result)
        return result

    def __repr__(self) -> str:
        state = "valid" if self.is_valid else f"{len(self.errors)} errors"
        return f"{type(self).__name__}({len(self._seen)} declared, {state})"


register_builtins(Form.validators)
