"""
Unit Tests - Testing Individual Components in Isolation.

Unit tests should be fast, deterministic, and focused.

Test Files:
    - test_field.py: Field chaining, mapping and error reporting
    - test_form.py: Declarations, validity, output and extension
    - test_builtins.py: Built-in validators and helpers
    - test_validator_registry.py: Registry inheritance and thread safety
    - test_extractors.py: Mapping and multi-value extractors
    - test_value_objects.py: IndexedErrors, flatten_errors, propagation
    - test_config_loader.py: Configuration loading/validation
    - test_logging.py: configure_logging
"""
