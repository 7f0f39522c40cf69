"""
Validator Registry - Named Validations and Helpers.

This module provides a thread-safe registry mapping a name to a
validation or helper function. Every Form class owns one registry,
chained to the registry of its base class, so a subclass sees every
validator its base has and can add more without touching the base.

Usage:
    base = ValidatorRegistry(owner="Form")
    base.register_validation("required", required)

    child = base.child(owner="SignupForm")
    child.register_validation("username", username_rule)

    child.lookup("required")   # found through the parent
    base.lookup("username")    # None, registration is one-way
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from threading import RLock
from typing import Any, Callable, Dict, Iterator, List, Optional

logger = logging.getLogger(__name__)


class ValidatorKind(str, Enum):
    """How a registered function is applied to a field."""

    VALUE = "value"    # func(field, value, *args), once per value
    SET = "set"        # func(field, values, *args), once per field
    HELPER = "helper"  # func(field, *args, **kwargs), free-form


@dataclass(frozen=True)
class ValidatorInfo:
    """Metadata about a registered validator or helper."""

    name: str
    kind: ValidatorKind
    func: Callable[..., Any]
    owner: str = ""
    description: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "name": self.name,
            "kind": self.kind.value,
            "owner": self.owner,
            "description": self.description,
        }


class ValidatorRegistry:
    """
    Thread-safe, chainable registry of validators and helpers.

    Supports:
        - Value, set and helper registration
        - Lookup falling back to the parent registry
        - Overriding a parent's entry in a child registry
    """

    def __init__(
        self,
        parent: Optional[ValidatorRegistry] = None,
        owner: str = "",
    ) -> None:
        """
        Initialize empty registry.

        Args:
            parent: Registry consulted when a name is not found here
            owner: Label used in logs and errors (usually a class name)
        """
        self._parent = parent
        self._owner = owner
        self._validators: Dict[str, ValidatorInfo] = {}
        self._lock = RLock()

    @property
    def parent(self) -> Optional[ValidatorRegistry]:
        """Registry this one falls back to."""
        return self._parent

    @property
    def owner(self) -> str:
        """Label of the class owning this registry."""
        return self._owner

    def register(
        self,
        name: str,
        func: Callable[..., Any],
        kind: ValidatorKind,
        description: str = "",
    ) -> ValidatorInfo:
        """
        Register a function under `name`.

        Args:
            name: Name the function is reachable under on a Field
            func: The validation or helper function
            kind: How the function is applied
            description: Optional description

        Returns:
            The stored ValidatorInfo

        Raises:
            ValueError: If `name` is already registered on this registry
        """
        with self._lock:
            if name in self._validators:
                raise ValueError(
                    f"Validator '{name}' is already registered on "
                    f"{self._owner or 'this registry'}."
                )

            if self._parent is not None and name in self._parent:
                logger.debug(f"{self._owner}: '{name}' overrides inherited validator")

            info = ValidatorInfo(
                name=name,
                kind=kind,
                func=func,
                owner=self._owner,
                description=description or (func.__doc__ or "").strip(),
            )
            self._validators[name] = info
            logger.debug(f"Registered {kind.value} validator: {self._owner}.{name}")
            return info

    def register_validation(
        self,
        name: str,
        func: Callable[..., Any],
        description: str = "",
    ) -> ValidatorInfo:
        """Register a per-value validation."""
        return self.register(name, func, ValidatorKind.VALUE, description)

    def register_set_validation(
        self,
        name: str,
        func: Callable[..., Any],
        description: str = "",
    ) -> ValidatorInfo:
        """Register a whole-set validation."""
        return self.register(name, func, ValidatorKind.SET, description)

    def register_helper(
        self,
        name: str,
        func: Callable[..., Any],
        description: str = "",
    ) -> ValidatorInfo:
        """Register a free-form chainable helper."""
        return self.register(name, func, ValidatorKind.HELPER, description)

    def unregister(self, name: str) -> bool:
        """
        Unregister a validator from this registry only.

        Args:
            name: Name of the validator to remove

        Returns:
            True if it was removed, False if not registered here
        """
        with self._lock:
            if name not in self._validators:
                logger.warning(f"Cannot unregister: validator '{name}' not found on {self._owner}")
                return False

            del self._validators[name]
            logger.debug(f"Unregistered validator: {self._owner}.{name}")
            return True

    def lookup(self, name: str) -> Optional[ValidatorInfo]:
        """
        Find a validator here or in any ancestor registry.

        Returns:
            ValidatorInfo or None if no registry in the chain has it
        """
        registry: Optional[ValidatorRegistry] = self
        while registry is not None:
            with registry._lock:
                info = registry._validators.get(name)
            if info is not None:
                return info
            registry = registry._parent
        return None

    def child(self, owner: str = "") -> ValidatorRegistry:
        """Create an empty registry chained to this one."""
        return ValidatorRegistry(parent=self, owner=owner)

    def list_own(self) -> Dict[str, ValidatorInfo]:
        """Validators registered directly on this registry."""
        with self._lock:
            return dict(self._validators)

    def list_all(self) -> Dict[str, ValidatorInfo]:
        """Every visible validator; entries here shadow inherited ones."""
        visible = self._parent.list_all() if self._parent is not None else {}
        visible.update(self.list_own())
        return visible

    def names(self) -> List[str]:
        """Sorted names of every visible validator."""
        return sorted(self.list_all())

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.lookup(name) is not None

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    @property
    def registered_count(self) -> int:
        """Number of validators registered directly on this registry."""
        with self._lock:
            return len(self._validators)

    def __repr__(self) -> str:
        return f"ValidatorRegistry(owner={self._owner!r}, own={self.registered_count})"
