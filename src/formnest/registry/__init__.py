"""
Registry Module - Named Validator Management.

This module provides the registry behind Field's open set of chainable
operations. Each Form class owns one registry chained to its base's.

Components:
    - ValidatorRegistry: Chainable registry of validators and helpers
    - ValidatorInfo: Metadata about a registered function
    - ValidatorKind: Value, set or helper
"""

from formnest.registry.validator_registry import (
    ValidatorInfo,
    ValidatorKind,
    ValidatorRegistry,
)

__all__ = [
    "ValidatorInfo",
    "ValidatorKind",
    "ValidatorRegistry",
]
