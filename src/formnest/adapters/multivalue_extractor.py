"""
Multi-Value Extractor.

Extractor for input where every key may carry several values: query
strings and form posts. Understands:
    - multi-dicts exposing getlist() (werkzeug/Django), get_list() or
      getall() (multidict/aiohttp)
    - plain dicts of lists, as produced by urllib.parse.parse_qs

A single field takes the first value; a fieldset takes all of them.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Hashable, List

from formnest.adapters.mapping_extractor import MappingExtractor, ensure_sequence

# Probed in order on the input object
MULTI_GETTERS = ("getlist", "get_list", "getall")


class MultiValueExtractor(MappingExtractor):
    """Extracts values from multi-valued mappings."""

    def extract_value(self, data: Any, name: Hashable) -> Any:
        """Get the first value stored under `name`, or None."""
        values = self._get_all(data, name)
        return values[0] if values else None

    def extract_value_set(self, data: Any, name: Hashable) -> List[Any]:
        """Get every value stored under `name`."""
        return self._get_all(data, name)

    def _get_all(self, data: Any, name: Hashable) -> List[Any]:
        """All values for `name`, preferring the input's own multi-getter."""
        for attr in MULTI_GETTERS:
            getter = getattr(data, attr, None)
            if callable(getter):
                if attr == "getall":
                    return list(getter(name, []))
                return list(getter(name))
        if isinstance(data, Mapping):
            return ensure_sequence(data.get(name))
        return []
