"""
Input Extractor Protocol.

Defines the interface a form uses to pull raw values out of its input.
A form never reads its input directly; every declaration goes through
one of these four operations, so a different input shape only needs a
different extractor.

The extractor is responsible for:
    - Looking up a single raw value by name
    - Looking up all raw values stored under a name
    - Looking up a raw nested structure by name
    - Looking up all raw nested structures stored under a name

Design Notes:
    - Uses typing.Protocol for structural subtyping
    - Extractors are stateless (the input is passed on every call)
    - The *_set operations never raise: absent means an empty list
"""

from __future__ import annotations

from typing import Any, Hashable, List, Protocol, runtime_checkable


@runtime_checkable
class InputExtractor(Protocol):
    """Abstract interface for reading raw values out of form input."""

    def extract_value(self, data: Any, name: Hashable) -> Any:
        """
        Get one raw value.

        Args:
            data: The form's raw input
            name: Field name

        Returns:
            The raw value, or None when absent
        """
        ...

    def extract_value_set(self, data: Any, name: Hashable) -> List[Any]:
        """
        Get every raw value stored under `name`.

        Returns:
            A new list, empty when absent
        """
        ...

    def extract_form(self, data: Any, name: Hashable) -> Any:
        """
        Get one raw nested structure.

        Returns:
            The raw sub-structure, or None when absent
        """
        ...

    def extract_formset(self, data: Any, name: Hashable) -> List[Any]:
        """
        Get every raw nested structure stored under `name`.

        Returns:
            A new list, empty when absent
        """
        ...
