"""
Value Objects for Domain Layer.

Error payloads and the propagation record that wires a child form to its
parent. A payload stored in Form.errors is one of:
    - a single message (any object, usually a tuple tag like ("required",))
    - IndexedErrors, for multi-valued fields and formsets
    - a nested error mapping, for a child form
"""

from __future__ import annotations

import weakref
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Hashable, List, Optional

if TYPE_CHECKING:
    from formnest.validation.form import Form


# =============================================================================
# Type Aliases for improved readability
# =============================================================================

# Field name -> error payload
ErrorMap = Dict[Hashable, Any]

# Dotted path -> leaf message
FlatErrors = Dict[str, Any]


class IndexedErrors(Dict[int, Any]):
    """
    Sparse mapping of element position to message.

    Only failing positions are stored, so a fieldset with thousands of
    values and one bad element holds a single entry.
    """

    def to_list(self) -> List[Any]:
        """Dense list with None in the gaps, sized to the highest index."""
        if not self:
            return []
        dense: List[Any] = [None] * (max(self) + 1)
        for index, message in self.items():
            dense[index] = message
        return dense

    def __repr__(self) -> str:
        return f"IndexedErrors({dict.__repr__(self)})"


@dataclass(frozen=True)
class ErrorPropagation:
    """
    Where a child form reports its errors in its parent.

    The parent is held through a weak reference: the parent owns the
    child, never the other way around.
    """

    parent_ref: "weakref.ReferenceType[Form]"
    name: Hashable
    index: Optional[int] = None

    @classmethod
    def to(
        cls,
        parent: Form,
        name: Hashable,
        index: Optional[int] = None,
    ) -> ErrorPropagation:
        """Build a record pointing at `parent`."""
        return cls(weakref.ref(parent), name, index)

    @property
    def parent(self) -> Optional[Form]:
        """The parent form, or None once it has been collected."""
        return self.parent_ref()


def flatten_errors(errors: ErrorMap, prefix: str = "") -> FlatErrors:
    """
    Flatten a nested error map into dotted paths.

    Example:
        >>> flatten_errors({"pictures": IndexedErrors({1: {"title": ("required",)}})})
        {'pictures.1.title': ('required',)}

    Args:
        errors: Error map as found in Form.errors
        prefix: Path prefix used while recursing

    Returns:
        Dict of dotted path to leaf message
    """
    flat: FlatErrors = {}
    for key, payload in errors.items():
        path = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(payload, IndexedErrors):
            for index in sorted(payload):
                item = payload[index]
                item_path = f"{path}.{index}"
                if isinstance(item, dict):
                    flat.update(flatten_errors(item, item_path))
                else:
                    flat[item_path] = item
        elif isinstance(payload, dict):
            flat.update(flatten_errors(payload, path))
        else:
            flat[path] = payload
    return flat
