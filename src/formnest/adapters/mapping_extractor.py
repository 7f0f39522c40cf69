"""
Mapping Extractor.

The default extractor: input is a keyed mapping (a parsed JSON object, a
plain dict) and every lookup is a direct key lookup.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Hashable, List

logger = logging.getLogger(__name__)

# Containers that ensure_sequence unpacks; everything else is one value
SEQUENCE_TYPES = (list, tuple, set, frozenset)


def ensure_sequence(value: Any) -> List[Any]:
    """
    Coerce a raw value into a new list.

    None becomes [], lists/tuples/sets are copied into a list, and any
    other value (strings and mappings included) is wrapped as [value].
    """
    if value is None:
        return []
    if isinstance(value, SEQUENCE_TYPES):
        return list(value)
    return [value]


class MappingExtractor:
    """Extracts values from Mapping input by key."""

    def extract_value(self, data: Any, name: Hashable) -> Any:
        """Get `data[name]`, or None."""
        return self._lookup(data, name)

    def extract_value_set(self, data: Any, name: Hashable) -> List[Any]:
        """Get `data[name]` as a list."""
        return ensure_sequence(self._lookup(data, name))

    def extract_form(self, data: Any, name: Hashable) -> Any:
        """Get the nested structure under `name`, or None."""
        return self._lookup(data, name)

    def extract_formset(self, data: Any, name: Hashable) -> List[Any]:
        """Get the nested structures under `name` as a list."""
        return ensure_sequence(self._lookup(data, name))

    def _lookup(self, data: Any, name: Hashable) -> Any:
        """Key lookup that treats None and non-mapping input as empty."""
        if isinstance(data, Mapping):
            return data.get(name)
        if data is not None:
            logger.debug(
                f"Input is {type(data).__name__}, not a mapping; "
                f"{name!r} treated as absent"
            )
        return None
