"""
Integration Tests - Nested Form Declarations.

These tests run complete declaration passes over nested input and
check error propagation and output across form levels.

Test Files:
    - test_nested_forms.py: Propagation and a full signup schema
"""
