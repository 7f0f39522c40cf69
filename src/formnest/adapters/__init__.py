"""
Adapters Package - InputExtractor Implementations.

Components:
    - MappingExtractor: Default, direct key lookup on dict-like input
    - MultiValueExtractor: Query strings, form posts and other multi-dicts
    - ensure_sequence: Coerce a raw value into a list
"""

from formnest.adapters.mapping_extractor import MappingExtractor, ensure_sequence
from formnest.adapters.multivalue_extractor import MultiValueExtractor

__all__ = [
    "MappingExtractor",
    "MultiValueExtractor",
    "ensure_sequence",
]
